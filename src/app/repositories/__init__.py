from .document_repository import DocumentRepository
from .document_item_repository import DocumentItemRepository
from .company_repository import CompanyRepository
from .customer_repository import CustomerRepository
from .subscription_repository import SubscriptionRepository
from .usage_counter_repository import UsageCounterRepository

__all__ = [
    "DocumentRepository",
    "DocumentItemRepository",
    "CompanyRepository",
    "CustomerRepository",
    "SubscriptionRepository",
    "UsageCounterRepository",
]
