from .base import BaseModel, generate_uuid
from .document import DocumentKind, DocumentStatus, DiscountType
from .invoice import Invoice, InvoiceItem
from .quotation import Quotation, QuotationItem
from .customer import Customer, CustomerType
from .company import Company
from .subscription import Plan, Subscription, SubscriptionStatus
from .usage_counter import UsageCounter
from .errors import ErrorCode

__all__ = [
    "BaseModel",
    "generate_uuid",
    "DocumentKind",
    "DocumentStatus",
    "DiscountType",
    "Invoice",
    "InvoiceItem",
    "Quotation",
    "QuotationItem",
    "Customer",
    "CustomerType",
    "Company",
    "Plan",
    "Subscription",
    "SubscriptionStatus",
    "UsageCounter",
    "ErrorCode",
]
