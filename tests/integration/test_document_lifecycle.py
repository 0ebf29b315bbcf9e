"""Integration tests for the document use cases on a real database"""

import pytest
from datetime import date
from sqlmodel import select

from src.adapter.repositories.company_repository import SqlAlchemyCompanyRepository
from src.adapter.repositories.document_item_repository import (
    SqlAlchemyInvoiceItemRepository,
    SqlAlchemyQuotationItemRepository,
)
from src.adapter.repositories.document_repository import (
    SqlAlchemyInvoiceRepository,
    SqlAlchemyQuotationRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.adapter.services.usage_service import SqlAlchemyUsageService
from src.app.services.usage_meter import UsageMeter
from src.app.use_cases.documents import (
    CancelDocument,
    CreateDocument,
    DeleteDocument,
    DocumentFormDTO,
    GetDocument,
    LineItemDTO,
    SaveDocumentCommandDTO,
    UpdateDocument,
)
from src.domain.base import as_utc, utc_now
from src.domain.document import DocumentStatus
from src.domain.errors import ErrorCode
from src.domain.invoice import InvoiceItem
from src.domain.usage_counter import UsageCounter
from tests.integration.seed import seed_company


def invoice_form(issue_date=date(2026, 2, 5), address="99 Sukhumvit Rd, Bangkok"):
    return DocumentFormDTO(
        customer_name="บริษัท ตัวอย่าง จำกัด",
        customer_address=address,
        issue_date=issue_date,
        items=[
            LineItemDTO(description="Design", quantity=2, unit="hr", unit_price=500),
            LineItemDTO(description="Hosting", quantity=1, unit="mo", unit_price=107, price_includes_vat=True),
        ],
    )


def use_cases(session, repo_class=SqlAlchemyInvoiceRepository, item_class=SqlAlchemyInvoiceItemRepository):
    uow = SqlAlchemyUnitOfWork(session)
    document_repo = repo_class(session)
    item_repo = item_class(session)
    company_repo = SqlAlchemyCompanyRepository(session)
    meter = UsageMeter(SqlAlchemyUsageService(session))
    return {
        "create": CreateDocument(uow, document_repo, item_repo, company_repo, meter),
        "update": UpdateDocument(uow, document_repo, item_repo, company_repo, meter),
        "cancel": CancelDocument(uow, document_repo),
        "delete": DeleteDocument(uow, document_repo, item_repo),
        "get": GetDocument(document_repo, item_repo),
    }


async def invoice_count(session, company_id="company_1"):
    statement = (
        select(UsageCounter)
        .where(UsageCounter.company_id == company_id)
        .execution_options(populate_existing=True)
    )
    counter = (await session.execute(statement)).scalar_one_or_none()
    return counter.invoice_count if counter else 0


class TestDocumentLifecycle:
    """Draft -> issued -> cancelled against SQLite"""

    @pytest.mark.asyncio
    async def test_full_invoice_lifecycle(self, db_session, company):
        cases = use_cases(db_session)

        # Create draft
        created = await cases["create"].execute(
            SaveDocumentCommandDTO(company_id="company_1", form=invoice_form(date(2026, 1, 1)))
        )
        assert created.is_ok()
        invoice_id = created.value.id
        assert created.value.document_number == "IV-20260101-0001"
        assert await invoice_count(db_session) == 0

        # Change the date while still a draft
        updated = await cases["update"].execute(
            invoice_id,
            SaveDocumentCommandDTO(company_id="company_1", form=invoice_form(date(2026, 2, 5))),
        )
        assert updated.value.document_number == "IV-20260205-0001"

        # Issue
        issued = await cases["update"].execute(
            invoice_id,
            SaveDocumentCommandDTO(
                company_id="company_1", status=DocumentStatus.ISSUED, form=invoice_form()
            ),
        )
        assert issued.is_ok()
        assert issued.value.status == DocumentStatus.ISSUED
        assert issued.value.document_number == "IV-20260205-0001"
        assert issued.value.total_amount == pytest.approx(1000 * 1.07 + 107)
        assert await invoice_count(db_session) == 1

        # Issued documents are history
        edit = await cases["update"].execute(
            invoice_id, SaveDocumentCommandDTO(company_id="company_1", form=invoice_form())
        )
        assert edit.error.code == ErrorCode.DOCUMENT_IMMUTABLE.value
        delete = await cases["delete"].execute("company_1", invoice_id)
        assert delete.error.code == ErrorCode.CANNOT_DELETE_ISSUED.value

        # Cancel once
        cancelled = await cases["cancel"].execute("company_1", invoice_id)
        assert cancelled.value.status == DocumentStatus.CANCELLED
        again = await cases["cancel"].execute("company_1", invoice_id)
        assert again.error.code == ErrorCode.ALREADY_CANCELLED.value

        # Totals and items survive cancellation; usage is not given back
        stored = await cases["get"].execute("company_1", invoice_id)
        assert stored.value.status == DocumentStatus.CANCELLED
        assert stored.value.total_amount == pytest.approx(issued.value.total_amount)
        assert [item.description for item in stored.value.items] == ["Design", "Hosting"]
        assert await invoice_count(db_session) == 1

    @pytest.mark.asyncio
    async def test_same_day_numbers_increase(self, db_session, company):
        cases = use_cases(db_session)
        command = SaveDocumentCommandDTO(company_id="company_1", form=invoice_form())

        first = await cases["create"].execute(command)
        second = await cases["create"].execute(command)
        other_day = await cases["create"].execute(
            SaveDocumentCommandDTO(company_id="company_1", form=invoice_form(date(2026, 2, 6)))
        )

        assert first.value.document_number == "IV-20260205-0001"
        assert second.value.document_number == "IV-20260205-0002"
        assert other_day.value.document_number == "IV-20260206-0001"

    @pytest.mark.asyncio
    async def test_repeated_draft_saves_keep_number(self, db_session, company):
        cases = use_cases(db_session)
        created = await cases["create"].execute(
            SaveDocumentCommandDTO(company_id="company_1", form=invoice_form())
        )

        for _ in range(3):
            saved = await cases["update"].execute(
                created.value.id,
                SaveDocumentCommandDTO(company_id="company_1", form=invoice_form()),
            )

        assert saved.value.document_number == "IV-20260205-0001"

    @pytest.mark.asyncio
    async def test_update_replaces_whole_item_set(self, db_session, company):
        cases = use_cases(db_session)
        created = await cases["create"].execute(
            SaveDocumentCommandDTO(company_id="company_1", form=invoice_form())
        )
        form = invoice_form().model_copy(
            update={"items": [LineItemDTO(description="Only line", unit_price=10)]}
        )

        await cases["update"].execute(
            created.value.id, SaveDocumentCommandDTO(company_id="company_1", form=form)
        )

        rows = (
            await db_session.execute(
                select(InvoiceItem).where(InvoiceItem.document_id == created.value.id)
            )
        ).scalars().all()
        assert [(row.item_order, row.description) for row in rows] == [(1, "Only line")]

    @pytest.mark.asyncio
    async def test_delete_draft(self, db_session, company):
        cases = use_cases(db_session)
        created = await cases["create"].execute(
            SaveDocumentCommandDTO(company_id="company_1", form=invoice_form())
        )

        deleted = await cases["delete"].execute("company_1", created.value.id)

        assert deleted.is_ok()
        missing = await cases["get"].execute("company_1", created.value.id)
        assert missing.error.code == ErrorCode.DOCUMENT_NOT_FOUND.value
        rows = (await db_session.execute(select(InvoiceItem))).scalars().all()
        assert rows == []

    @pytest.mark.asyncio
    async def test_documents_are_company_scoped(self, db_session, company):
        cases = use_cases(db_session)
        created = await cases["create"].execute(
            SaveDocumentCommandDTO(company_id="company_1", form=invoice_form())
        )

        result = await cases["get"].execute("company_2", created.value.id)

        assert result.error.code == ErrorCode.DOCUMENT_NOT_FOUND.value

    @pytest.mark.asyncio
    async def test_limit_blocks_issue_and_keeps_draft(self, db_session):
        await seed_company(db_session, invoice_limit=1)
        cases = use_cases(db_session)
        issue = SaveDocumentCommandDTO(
            company_id="company_1", status=DocumentStatus.ISSUED, form=invoice_form()
        )

        first = await cases["create"].execute(issue)
        draft = await cases["create"].execute(
            SaveDocumentCommandDTO(company_id="company_1", form=invoice_form())
        )
        blocked = await cases["update"].execute(draft.value.id, issue)

        assert first.is_ok()
        assert blocked.error.code == ErrorCode.LIMIT_EXCEEDED.value
        stored = await cases["get"].execute("company_1", draft.value.id)
        assert stored.value.status == DocumentStatus.DRAFT
        assert await invoice_count(db_session) == 1

    @pytest.mark.asyncio
    async def test_quotation_numbers_are_separate(self, db_session, company):
        invoices = use_cases(db_session)
        quotations = use_cases(
            db_session, SqlAlchemyQuotationRepository, SqlAlchemyQuotationItemRepository
        )
        command = SaveDocumentCommandDTO(company_id="company_1", form=invoice_form())

        await invoices["create"].execute(command)
        quotation = await quotations["create"].execute(
            SaveDocumentCommandDTO(
                company_id="company_1", status=DocumentStatus.SENT, form=invoice_form()
            )
        )

        assert quotation.value.document_number == "QT-20260205-0001"
        assert quotation.value.status == DocumentStatus.SENT

    @pytest.mark.asyncio
    async def test_prefix_wildcards_are_literal(self, db_session, company):
        # Arrange: one invoice numbered under prefix IX
        cases = use_cases(db_session)
        command = SaveDocumentCommandDTO(company_id="company_1", form=invoice_form())
        company.invoice_prefix = "IX"
        await db_session.commit()
        await cases["create"].execute(command)

        # Act: "_" must not match the X of the earlier number
        company.invoice_prefix = "I_"
        await db_session.commit()
        result = await cases["create"].execute(command)

        # Assert
        assert result.value.document_number == "I_-20260205-0001"

    @pytest.mark.asyncio
    async def test_timestamps_are_stored_as_utc(self, db_session, company):
        cases = use_cases(db_session)
        before = utc_now()

        issued = await cases["create"].execute(
            SaveDocumentCommandDTO(
                company_id="company_1", status=DocumentStatus.ISSUED, form=invoice_form()
            )
        )
        db_session.expunge_all()
        stored = await cases["get"].execute("company_1", issued.value.id)

        assert issued.value.created_at.tzinfo is not None
        assert as_utc(stored.value.issued_at) >= before.replace(microsecond=0)
        assert await invoice_count(db_session) == 1
