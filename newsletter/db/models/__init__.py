from newsletter.db.models.subscription import Subscription

__all__ = ["Subscription"]
