from datetime import datetime
from uuid import UUID

from sqlalchemy.orm import Session

from newsletter.db.models.subscription import Subscription as SubscriptionModel


def insert_subscription(
    db: Session,
    id: UUID,
    email: str,
    name: str,
    subscribed_at: datetime,
) -> SubscriptionModel:
    """Insert a new subscription row. Pure data access - no business logic."""
    db_subscription = SubscriptionModel(
        id=id,
        email=email,
        name=name,
        subscribed_at=subscribed_at,
    )
    db.add(db_subscription)
    db.commit()
    db.refresh(db_subscription)
    return db_subscription
