"""Domain value objects.

Every value here is constructed through a ``parse`` classmethod that enforces
its invariants once; instances are immutable afterwards.
"""

from newsletter.domain.new_subscriber import NewSubscriber
from newsletter.domain.subscriber_email import SubscriberEmail
from newsletter.domain.subscriber_name import SubscriberName

__all__ = ["NewSubscriber", "SubscriberEmail", "SubscriberName"]
