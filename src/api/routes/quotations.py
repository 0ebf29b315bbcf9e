"""Quotation API Routes

Quotations: draft -> pending|sent -> cancelled.
"""

from src.api.routes.documents import build_document_router
from src.domain.document import DocumentKind

router = build_document_router(DocumentKind.QUOTATION, prefix="/quotations", tags=["Quotations"])
