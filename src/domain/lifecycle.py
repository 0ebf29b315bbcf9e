"""Document Lifecycle State Machine

Quotation: draft -> pending|sent -> cancelled (pending|sent -> converted elsewhere)
Invoice:   draft -> issued -> cancelled

Drafts are freely editable and deletable. Anything past draft is history:
it can only be cancelled, and cancellation is terminal.

Guards return an Error describing why an operation is illegal, or None.
"""

from typing import NamedTuple, Optional, Tuple
from libs.result import Error
from src.domain.document import DocumentKind, DocumentStatus
from src.domain.errors import ErrorCode


class KindRules(NamedTuple):
    issue_statuses: Tuple[DocumentStatus, ...]
    statuses: Tuple[DocumentStatus, ...]
    second_date_field: str
    default_prefix: str
    label: str


KIND_RULES = {
    DocumentKind.INVOICE: KindRules(
        issue_statuses=(DocumentStatus.ISSUED,),
        statuses=(
            DocumentStatus.DRAFT,
            DocumentStatus.ISSUED,
            DocumentStatus.CANCELLED,
        ),
        second_date_field="due_date",
        default_prefix="IV",
        label="Invoice",
    ),
    DocumentKind.QUOTATION: KindRules(
        issue_statuses=(DocumentStatus.PENDING, DocumentStatus.SENT),
        statuses=(
            DocumentStatus.DRAFT,
            DocumentStatus.PENDING,
            DocumentStatus.SENT,
            DocumentStatus.CONVERTED,
            DocumentStatus.CANCELLED,
        ),
        second_date_field="valid_until",
        default_prefix="QT",
        label="Quotation",
    ),
}


def is_draft(status: DocumentStatus) -> bool:
    return status == DocumentStatus.DRAFT


def guard_save_status(kind: DocumentKind, status: DocumentStatus) -> Optional[Error]:
    """A save may keep a document in draft or move it to one of the kind's issue statuses"""
    rules = KIND_RULES[kind]
    if status == DocumentStatus.DRAFT or status in rules.issue_statuses:
        return None
    allowed = ", ".join(s.value for s in (DocumentStatus.DRAFT,) + rules.issue_statuses)
    return Error(
        code=ErrorCode.INVALID_STATUS_TRANSITION.value,
        message=f"{rules.label} cannot be saved with status '{status.value}'",
        reason=f"allowed={allowed}",
    )


def guard_update(status: DocumentStatus) -> Optional[Error]:
    if is_draft(status):
        return None
    return Error(
        code=ErrorCode.DOCUMENT_IMMUTABLE.value,
        message="Only draft documents can be edited",
        reason=f"status={status.value}",
    )


def guard_cancel(status: DocumentStatus) -> Optional[Error]:
    if is_draft(status):
        return Error(
            code=ErrorCode.CANNOT_CANCEL_DRAFT.value,
            message="Draft documents cannot be cancelled, delete the draft instead",
            reason=f"status={status.value}",
        )
    if status == DocumentStatus.CANCELLED:
        return Error(
            code=ErrorCode.ALREADY_CANCELLED.value,
            message="Document is already cancelled",
            reason=f"status={status.value}",
        )
    return None


def guard_delete(status: DocumentStatus) -> Optional[Error]:
    if is_draft(status):
        return None
    return Error(
        code=ErrorCode.CANNOT_DELETE_ISSUED.value,
        message="Only draft documents can be deleted, cancel the document instead",
        reason=f"status={status.value}",
    )


def validate_for_issue(form) -> Optional[Error]:
    """
    Check the fields a tax document must carry before it leaves draft

    Args:
        form: Document form with customer_name, customer_address and items

    Returns:
        VALIDATION_ERROR describing the first missing field, or None
    """
    missing = []
    if not (form.customer_name or "").strip():
        missing.append("customer_name")
    if not (form.customer_address or "").strip():
        missing.append("customer_address")
    if not any((item.description or "").strip() for item in form.items):
        missing.append("items")

    if missing:
        return Error(
            code=ErrorCode.VALIDATION_ERROR.value,
            message="Customer name, customer address and at least one item are required to issue a document",
            reason=f"missing={','.join(missing)}",
        )
    return None
