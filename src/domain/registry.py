"""Table models per document kind"""

from typing import Tuple, Type
from src.domain.document import DocumentKind
from src.domain.invoice import Invoice, InvoiceItem
from src.domain.quotation import Quotation, QuotationItem

DOCUMENT_MODELS = {
    DocumentKind.INVOICE: (Invoice, InvoiceItem),
    DocumentKind.QUOTATION: (Quotation, QuotationItem),
}


def models_for(kind: DocumentKind) -> Tuple[Type, Type]:
    """Return (header model, item model) for a document kind"""
    return DOCUMENT_MODELS[kind]
