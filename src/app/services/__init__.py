from .unit_of_work import UnitOfWork
from .usage_service import UsageService, UsageSnapshot, SubscriptionSnapshot
from .usage_meter import UsageMeter

__all__ = [
    "UnitOfWork",
    "UsageService",
    "UsageSnapshot",
    "SubscriptionSnapshot",
    "UsageMeter",
]
