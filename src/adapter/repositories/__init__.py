from .document_repository import (
    SqlAlchemyDocumentRepository,
    SqlAlchemyInvoiceRepository,
    SqlAlchemyQuotationRepository,
)
from .document_item_repository import (
    SqlAlchemyDocumentItemRepository,
    SqlAlchemyInvoiceItemRepository,
    SqlAlchemyQuotationItemRepository,
)
from .company_repository import SqlAlchemyCompanyRepository
from .customer_repository import SqlAlchemyCustomerRepository
from .subscription_repository import SqlAlchemySubscriptionRepository
from .usage_counter_repository import SqlAlchemyUsageCounterRepository

__all__ = [
    "SqlAlchemyDocumentRepository",
    "SqlAlchemyInvoiceRepository",
    "SqlAlchemyQuotationRepository",
    "SqlAlchemyDocumentItemRepository",
    "SqlAlchemyInvoiceItemRepository",
    "SqlAlchemyQuotationItemRepository",
    "SqlAlchemyCompanyRepository",
    "SqlAlchemyCustomerRepository",
    "SqlAlchemySubscriptionRepository",
    "SqlAlchemyUsageCounterRepository",
]
