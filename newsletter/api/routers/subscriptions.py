from fastapi import APIRouter, Depends, Form, Response, status
from sqlalchemy.orm import Session

from newsletter.api.deps import get_db
from newsletter.services.subscription import subscribe

router = APIRouter(prefix="/subscriptions", tags=["subscriptions"])


@router.post("")
def create_subscription(
    name: str | None = Form(None),
    email: str | None = Form(None),
    db: Session = Depends(get_db),
):
    """
    Subscribe to the newsletter.

    Returns 400 when a field is missing or invalid and 500 when the
    subscription could not be stored. No confirmation email is sent.
    """
    subscribe(db, name=name, email=email)
    return Response(status_code=status.HTTP_200_OK)
