"""Quotation and invoice use cases"""
from .create_document import CreateDocument
from .update_document import UpdateDocument
from .cancel_document import CancelDocument
from .delete_document import DeleteDocument
from .get_document import GetDocument
from .list_documents import ListDocuments
from .dtos import (
    LineItemDTO,
    DocumentFormDTO,
    SaveDocumentCommandDTO,
    LineItemResponseDTO,
    DocumentResponseDTO,
    DocumentStatusResponseDTO,
    ListDocumentsResponseDTO,
)

__all__ = [
    "CreateDocument",
    "UpdateDocument",
    "CancelDocument",
    "DeleteDocument",
    "GetDocument",
    "ListDocuments",
    "LineItemDTO",
    "DocumentFormDTO",
    "SaveDocumentCommandDTO",
    "LineItemResponseDTO",
    "DocumentResponseDTO",
    "DocumentStatusResponseDTO",
    "ListDocumentsResponseDTO",
]
