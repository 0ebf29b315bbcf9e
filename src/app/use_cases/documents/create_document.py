"""CreateDocument Use Case

Creates a quotation or invoice, either as a draft or issued straight away.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.usage_meter import UsageMeter
from src.app.repositories.company_repository import CompanyRepository
from src.app.repositories.document_repository import DocumentRepository
from src.app.repositories.document_item_repository import DocumentItemRepository
from src.domain.base import utc_now
from src.domain.document_number import allocate_number, number_segment
from src.domain.errors import ErrorCode
from src.domain.lifecycle import KIND_RULES, guard_save_status, is_draft, validate_for_issue
from src.domain.registry import models_for
from .assembly import apply_form, build_items, to_response, totals_for
from .dtos import SaveDocumentCommandDTO, DocumentResponseDTO

logger = logging.getLogger(__name__)


class CreateDocument:
    """
    Use Case: Create a document with its line items

    Business Rules:
    1. New documents start as draft unless the save issues them directly
    2. Issuing requires customer name, address and items, and a usable
       subscription with quota left this month
    3. Number is allocated from the issue date: {PREFIX}-{YYYYMMDD}-{NNNN}
    4. Header and items are written in one transaction
    5. Usage is counted after the commit, only for non-draft documents

    Flow:
    1. Validate requested status
    2. Validate form and check usage (non-draft only)
    3. Resolve company prefix
    4. Compute totals
    5. Count same-day documents and allocate number
    6. Insert header and items, commit
    7. Increment usage (best-effort)
    8. Return response
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

    async def execute(self, command: SaveDocumentCommandDTO) -> Result[DocumentResponseDTO]:
        """
        Execute document creation

        Args:
            command: SaveDocumentCommandDTO with company_id, target status and form

        Returns:
            Result[DocumentResponseDTO]: Created document with items or error
        """
        form = command.form

        # Step 1: Validate requested status
        status_error = guard_save_status(self.kind, command.status)
        if status_error:
            return Return.err(status_error)

        issuing = not is_draft(command.status)

        try:
            # Step 2: Issue checks happen before anything is written
            if issuing:
                validation_error = validate_for_issue(form)
                if validation_error:
                    return Return.err(validation_error)

                usage_error = await self.usage_meter.check(command.company_id, self.kind)
                if usage_error:
                    return Return.err(usage_error)

            # Step 3: Resolve prefix
            company = await self.company_repo.get_by_id(command.company_id)
            if not company:
                return Return.err(
                    Error(
                        code=ErrorCode.COMPANY_NOT_FOUND.value,
                        message=f"Company {command.company_id} not found",
                        reason="Company settings must exist before creating documents",
                    )
                )
            prefix = company.prefix_for(self.kind) or KIND_RULES[self.kind].default_prefix

            # Step 4: Compute totals
            totals = totals_for(form)

            # Step 5: Allocate number
            existing = await self.document_repo.count_by_number_segment(
                command.company_id, number_segment(prefix, form.issue_date)
            )
            document_number = allocate_number(prefix, form.issue_date, existing)

            # Step 6: Persist header and items
            document_model, _ = models_for(self.kind)
            now = utc_now()
            document = document_model(
                company_id=command.company_id,
                document_number=document_number,
                issue_date=form.issue_date,
                status=command.status,
                issued_at=now if issuing else None,
                created_at=now,
                updated_at=now,
            )
            apply_form(document, self.kind, form, totals)

            created = await self.document_repo.create(document)
            items = await self.item_repo.replace_all(
                created.id, build_items(self.kind, created.id, form)
            )

            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to create {self.kind.value} for company {command.company_id}: {e}")
            return Return.err(
                Error(
                    code=ErrorCode.SAVE_DOCUMENT_FAILED.value,
                    message=f"Failed to create {self.kind.value}",
                    reason=str(e),
                )
            )

        # Step 7: Count usage only once the document is safely stored
        if issuing:
            await self.usage_meter.increment(command.company_id, self.kind)

        logger.info(
            f"Created {self.kind.value} {created.document_number} "
            f"({created.status.value}) for company {command.company_id}"
        )

        # Step 8: Build response
        return Return.ok(to_response(self.kind, created, items))
