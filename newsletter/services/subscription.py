"""Subscription intake: validate a submission, then record it."""

import logging
from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

import newsletter.repositories.subscription as subscription_repo
from newsletter.db.models.subscription import Subscription as SubscriptionModel
from newsletter.domain import NewSubscriber
from newsletter.errors import MissingFieldError, PersistenceError

logger = logging.getLogger(__name__)


def subscribe(db: Session, name: str | None, email: str | None) -> SubscriptionModel:
    """
    Validate the raw form fields and persist a new subscription.

    Raises:
        MissingFieldError: If name or email was not submitted.
        InvalidNameError: If the name fails validation.
        InvalidEmailError: If the email fails validation.
        PersistenceError: If the insert fails.
    """
    if email is None:
        raise MissingFieldError("email")
    if name is None:
        raise MissingFieldError("name")

    logger.info("Adding a new subscriber: email=%r name=%r", email, name)
    new_subscriber = NewSubscriber.parse(name=name, email=email)

    try:
        subscription = subscription_repo.insert_subscription(
            db,
            id=uuid4(),
            email=new_subscriber.email.value,
            name=new_subscriber.name.value,
            subscribed_at=datetime.now(timezone.utc),
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to save new subscriber")
        raise PersistenceError("Failed to save new subscriber") from e

    logger.info("New subscriber saved: id=%s", subscription.id)
    return subscription
