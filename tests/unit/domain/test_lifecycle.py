"""Unit tests for the document lifecycle guards"""

import pytest
from datetime import date
from src.app.use_cases.documents.dtos import DocumentFormDTO, LineItemDTO
from src.domain.document import DocumentKind, DocumentStatus
from src.domain.errors import ErrorCode
from src.domain.lifecycle import (
    guard_cancel,
    guard_delete,
    guard_save_status,
    guard_update,
    validate_for_issue,
)


class TestSaveStatus:

    @pytest.mark.parametrize(
        "kind,status",
        [
            (DocumentKind.INVOICE, DocumentStatus.DRAFT),
            (DocumentKind.INVOICE, DocumentStatus.ISSUED),
            (DocumentKind.QUOTATION, DocumentStatus.DRAFT),
            (DocumentKind.QUOTATION, DocumentStatus.PENDING),
            (DocumentKind.QUOTATION, DocumentStatus.SENT),
        ],
    )
    def test_allowed_targets(self, kind, status):
        assert guard_save_status(kind, status) is None

    @pytest.mark.parametrize(
        "kind,status",
        [
            (DocumentKind.INVOICE, DocumentStatus.PENDING),
            (DocumentKind.INVOICE, DocumentStatus.CANCELLED),
            (DocumentKind.QUOTATION, DocumentStatus.ISSUED),
            (DocumentKind.QUOTATION, DocumentStatus.CONVERTED),
        ],
    )
    def test_rejected_targets(self, kind, status):
        error = guard_save_status(kind, status)

        assert error.code == ErrorCode.INVALID_STATUS_TRANSITION.value
        assert "allowed=" in error.reason


class TestTransitions:

    def test_cancel_draft_is_rejected(self):
        assert guard_cancel(DocumentStatus.DRAFT).code == ErrorCode.CANNOT_CANCEL_DRAFT.value

    def test_cancel_cancelled_is_rejected(self):
        assert guard_cancel(DocumentStatus.CANCELLED).code == ErrorCode.ALREADY_CANCELLED.value

    @pytest.mark.parametrize(
        "status", [DocumentStatus.ISSUED, DocumentStatus.PENDING, DocumentStatus.SENT]
    )
    def test_cancel_issued_is_allowed(self, status):
        assert guard_cancel(status) is None

    @pytest.mark.parametrize(
        "status", [DocumentStatus.ISSUED, DocumentStatus.SENT, DocumentStatus.CANCELLED]
    )
    def test_delete_non_draft_is_rejected(self, status):
        assert guard_delete(status).code == ErrorCode.CANNOT_DELETE_ISSUED.value

    def test_delete_draft_is_allowed(self):
        assert guard_delete(DocumentStatus.DRAFT) is None

    @pytest.mark.parametrize(
        "status", [DocumentStatus.ISSUED, DocumentStatus.PENDING, DocumentStatus.CANCELLED]
    )
    def test_update_non_draft_is_rejected(self, status):
        assert guard_update(status).code == ErrorCode.DOCUMENT_IMMUTABLE.value

    def test_update_draft_is_allowed(self):
        assert guard_update(DocumentStatus.DRAFT) is None


class TestValidateForIssue:

    def test_complete_form_passes(self, complete_form):
        assert validate_for_issue(complete_form) is None

    def test_missing_fields_are_listed(self):
        form = DocumentFormDTO(
            customer_name="  ",
            issue_date=date(2026, 2, 5),
            items=[LineItemDTO(description="", unit_price=100)],
        )

        error = validate_for_issue(form)

        assert error.code == ErrorCode.VALIDATION_ERROR.value
        assert error.reason == "missing=customer_name,customer_address,items"

    def test_no_items(self, complete_form):
        form = complete_form.model_copy(update={"items": []})

        assert validate_for_issue(form).reason == "missing=items"
