"""Request body for the email provider's send endpoint."""

from pydantic import BaseModel, ConfigDict, Field


class SendEmailRequest(BaseModel):
    """A single outbound message.

    Field names on the wire are fixed by the provider; dump with ``by_alias=True``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_: str = Field(..., alias="From")
    to: str = Field(..., alias="To")
    subject: str = Field(..., alias="Subject")
    html_body: str = Field(..., alias="HtmlBody")
    text_body: str = Field(..., alias="TextBody")
