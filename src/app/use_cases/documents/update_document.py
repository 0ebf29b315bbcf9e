"""UpdateDocument Use Case

Saves a draft again, optionally issuing it.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.usage_meter import UsageMeter
from src.app.repositories.company_repository import CompanyRepository
from src.app.repositories.document_repository import DocumentRepository
from src.app.repositories.document_item_repository import DocumentItemRepository
from src.domain.base import utc_now
from src.domain.document_number import allocate_number, needs_renumber, number_segment
from src.domain.errors import ErrorCode
from src.domain.lifecycle import (
    KIND_RULES,
    guard_save_status,
    guard_update,
    is_draft,
    validate_for_issue,
)
from .assembly import apply_form, build_items, to_response, totals_for
from .dtos import SaveDocumentCommandDTO, DocumentResponseDTO

logger = logging.getLogger(__name__)


class UpdateDocument:
    """
    Use Case: Replace the content of a draft document

    Business Rules:
    1. Only drafts can be updated; anything else fails DOCUMENT_IMMUTABLE
    2. Totals are recomputed and the whole item set is replaced
    3. Number is re-allocated when the issue date changed, and on the save
       that takes the document out of draft; the document never counts itself
    4. Leaving draft requires validation and a passing usage check
    5. Usage is counted after the commit, only on the draft -> issued save

    Flow:
    1. Load document (company scoped)
    2. Reject non-draft documents
    3. Validate requested status
    4. Validate form and check usage (when leaving draft)
    5. Compute totals
    6. Re-allocate number when needed
    7. Update header, replace items, commit
    8. Increment usage (best-effort)
    9. Return response
    """

    def __init__(
        self,
        uow: UnitOfWork,
        document_repo: DocumentRepository,
        item_repo: DocumentItemRepository,
        company_repo: CompanyRepository,
        usage_meter: UsageMeter,
    ):
        self.uow = uow
        self.document_repo = document_repo
        self.item_repo = item_repo
        self.company_repo = company_repo
        self.usage_meter = usage_meter
        self.kind = document_repo.kind

    async def execute(
        self, document_id: str, command: SaveDocumentCommandDTO
    ) -> Result[DocumentResponseDTO]:
        """
        Execute document update

        Args:
            document_id: Document to update
            command: SaveDocumentCommandDTO with company_id, target status and form

        Returns:
            Result[DocumentResponseDTO]: Updated document with items or error
        """
        form = command.form

        try:
            # Step 1: Load current state
            document = await self.document_repo.get_by_id(document_id, command.company_id)
            if not document:
                return Return.err(
                    Error(
                        code=ErrorCode.DOCUMENT_NOT_FOUND.value,
                        message=f"{KIND_RULES[self.kind].label} {document_id} not found",
                    )
                )

            # Step 2: Issued history is append-only
            immutable_error = guard_update(document.status)
            if immutable_error:
                return Return.err(immutable_error)

            # Step 3: Validate requested status
            status_error = guard_save_status(self.kind, command.status)
            if status_error:
                return Return.err(status_error)

            leaving_draft = not is_draft(command.status)

            # Step 4: Issue checks
            if leaving_draft:
                validation_error = validate_for_issue(form)
                if validation_error:
                    return Return.err(validation_error)

                usage_error = await self.usage_meter.check(command.company_id, self.kind)
                if usage_error:
                    return Return.err(usage_error)

            # Step 5: Compute totals
            totals = totals_for(form)

            # Step 6: Renumber drafts whose date moved, and at issue time
            company = await self.company_repo.get_by_id(command.company_id)
            if not company:
                return Return.err(
                    Error(
                        code=ErrorCode.COMPANY_NOT_FOUND.value,
                        message=f"Company {command.company_id} not found",
                    )
                )
            prefix = company.prefix_for(self.kind) or KIND_RULES[self.kind].default_prefix

            if needs_renumber(document.document_number, prefix, form.issue_date, leaving_draft):
                existing = await self.document_repo.count_by_number_segment(
                    command.company_id,
                    number_segment(prefix, form.issue_date),
                    exclude_id=document.id,
                )
                new_number = allocate_number(prefix, form.issue_date, existing)
                if new_number != document.document_number:
                    logger.info(
                        f"Renumbered {self.kind.value} {document.document_number} -> {new_number}"
                    )
                document.document_number = new_number

            # Step 7: Persist header and the full item set
            now = utc_now()
            apply_form(document, self.kind, form, totals)
            document.status = command.status
            document.updated_at = now
            if leaving_draft:
                document.issued_at = now

            updated = await self.document_repo.update(document)
            items = await self.item_repo.replace_all(
                updated.id, build_items(self.kind, updated.id, form)
            )

            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to update {self.kind.value} {document_id}: {e}")
            return Return.err(
                Error(
                    code=ErrorCode.SAVE_DOCUMENT_FAILED.value,
                    message=f"Failed to update {self.kind.value}",
                    reason=str(e),
                )
            )

        # Step 8: Count usage only for the save that issued the document
        if leaving_draft:
            await self.usage_meter.increment(command.company_id, self.kind)

        # Step 9: Build response
        return Return.ok(to_response(self.kind, updated, items))
