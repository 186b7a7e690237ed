from __future__ import annotations

from dataclasses import dataclass

from newsletter.domain.subscriber_email import SubscriberEmail
from newsletter.domain.subscriber_name import SubscriberName


@dataclass(frozen=True, slots=True)
class NewSubscriber:
    """A subscription submission whose fields have both been validated."""

    email: SubscriberEmail
    name: SubscriberName

    @classmethod
    def parse(cls, *, name: str, email: str) -> NewSubscriber:
        """Parse both fields; the first failure propagates unchanged."""
        return cls(
            email=SubscriberEmail.parse(email),
            name=SubscriberName.parse(name),
        )
