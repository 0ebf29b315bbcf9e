"""Invoice API Routes

Tax invoices: draft -> issued -> cancelled.
"""

from src.api.routes.documents import build_document_router
from src.domain.document import DocumentKind

router = build_document_router(DocumentKind.INVOICE, prefix="/invoices", tags=["Invoices"])
