"""Request schemas for Document API

Pydantic models for validating incoming HTTP requests.
"""

from enum import Enum
from typing import Optional
from pydantic import Field
from src.app.use_cases.documents.dtos import DocumentFormDTO
from src.domain.document import DocumentKind, DocumentStatus
from src.domain.lifecycle import KIND_RULES


class SaveAction(str, Enum):
    """Editor buttons: keep as draft, or issue/send"""
    SAVE = "save"
    SEND = "send"


class SaveDocumentRequestSchema(DocumentFormDTO):
    """
    Request schema for creating or updating a quotation or invoice

    Used for POST /invoices, PUT /invoices/{id} and the quotation
    equivalents. status wins over action when both are given.
    """

    company_id: str = Field(
        ...,
        min_length=1,
        description="Owning company (required, non-empty)"
    )

    action: SaveAction = Field(
        default=SaveAction.SAVE,
        description="save keeps the document as draft, send issues it"
    )

    status: Optional[DocumentStatus] = Field(
        default=None,
        description="Explicit target status (e.g. sent for quotations)"
    )

    def target_status(self, kind: DocumentKind) -> DocumentStatus:
        if self.status is not None:
            return self.status
        if self.action == SaveAction.SEND:
            return KIND_RULES[kind].issue_statuses[0]
        return DocumentStatus.DRAFT

    def to_form(self) -> DocumentFormDTO:
        return DocumentFormDTO(
            **self.model_dump(exclude={"company_id", "action", "status"})
        )
