"""Unit tests for GetDocument and ListDocuments use cases"""

import pytest
from datetime import date
from unittest.mock import AsyncMock

from src.app.use_cases.documents.get_document import GetDocument
from src.app.use_cases.documents.list_documents import ListDocuments
from src.domain.document import DocumentKind, DocumentStatus
from src.domain.errors import ErrorCode
from src.domain.invoice import Invoice, InvoiceItem


def invoice(number, status=DocumentStatus.DRAFT):
    return Invoice(
        id=f"id_{number}",
        company_id="company_1",
        document_number=number,
        issue_date=date(2026, 2, 5),
        status=status,
        total_amount=1500.25,
    )


def line(order, description):
    return InvoiceItem(
        document_id="id_IV-20260205-0001",
        item_order=order,
        description=description,
        quantity=1,
        unit_price=10,
        amount=10,
    )


@pytest.fixture
def mock_document_repo():
    repo = AsyncMock()
    repo.kind = DocumentKind.INVOICE
    return repo


@pytest.fixture
def mock_item_repo():
    return AsyncMock()


class TestGetDocument:

    @pytest.mark.asyncio
    async def test_items_are_ordered(self, mock_document_repo, mock_item_repo):
        # Arrange
        mock_document_repo.get_by_id.return_value = invoice("IV-20260205-0001")
        mock_item_repo.get_by_document_id.return_value = [line(2, "second"), line(1, "first")]
        use_case = GetDocument(mock_document_repo, mock_item_repo)

        # Act
        result = await use_case.execute("company_1", "id_IV-20260205-0001")

        # Assert
        assert result.is_ok()
        assert [item.description for item in result.value.items] == ["first", "second"]
        assert result.value.total_amount_text == "หนึ่งพันห้าร้อยบาทยี่สิบห้าสตางค์"

    @pytest.mark.asyncio
    async def test_other_company_sees_not_found(self, mock_document_repo, mock_item_repo):
        # Arrange
        mock_document_repo.get_by_id.return_value = None
        use_case = GetDocument(mock_document_repo, mock_item_repo)

        # Act
        result = await use_case.execute("company_2", "id_IV-20260205-0001")

        # Assert
        assert result.error.code == ErrorCode.DOCUMENT_NOT_FOUND.value
        mock_document_repo.get_by_id.assert_called_once_with("id_IV-20260205-0001", "company_2")
        mock_item_repo.get_by_document_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_repository_error(self, mock_document_repo, mock_item_repo):
        # Arrange
        mock_document_repo.get_by_id.side_effect = Exception("boom")
        use_case = GetDocument(mock_document_repo, mock_item_repo)

        # Act
        result = await use_case.execute("company_1", "x")

        # Assert
        assert result.error.code == ErrorCode.GET_DOCUMENT_FAILED.value


class TestListDocuments:

    @pytest.mark.asyncio
    async def test_list_passes_filters(self, mock_document_repo):
        # Arrange
        mock_document_repo.list_by_company.return_value = [
            invoice("IV-20260205-0002", DocumentStatus.ISSUED),
            invoice("IV-20260205-0001", DocumentStatus.ISSUED),
        ]
        use_case = ListDocuments(mock_document_repo)

        # Act
        result = await use_case.execute("company_1", DocumentStatus.ISSUED, limit=10, offset=5)

        # Assert
        assert result.is_ok()
        assert [d.document_number for d in result.value.documents] == [
            "IV-20260205-0002",
            "IV-20260205-0001",
        ]
        assert result.value.limit == 10
        assert result.value.offset == 5
        mock_document_repo.list_by_company.assert_called_once_with(
            "company_1", status=DocumentStatus.ISSUED, limit=10, offset=5
        )

    @pytest.mark.asyncio
    async def test_list_failure(self, mock_document_repo):
        # Arrange
        mock_document_repo.list_by_company.side_effect = Exception("boom")
        use_case = ListDocuments(mock_document_repo)

        # Act
        result = await use_case.execute("company_1")

        # Assert
        assert result.error.code == ErrorCode.LIST_DOCUMENTS_FAILED.value
