from sqlalchemy import Column, DateTime, String, Uuid

from newsletter.db.base import Base


class Subscription(Base):
    __tablename__ = "subscriptions"

    id = Column(Uuid, primary_key=True)
    email = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False)
    subscribed_at = Column(DateTime(timezone=True), nullable=False)
