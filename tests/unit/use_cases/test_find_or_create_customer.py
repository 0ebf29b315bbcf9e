"""Unit tests for FindOrCreateCustomer use case"""

import pytest
from unittest.mock import AsyncMock

from src.app.use_cases.customers.dtos import CustomerSnapshotDTO
from src.app.use_cases.customers.find_or_create_customer import FindOrCreateCustomer
from src.domain.customer import Customer
from src.domain.errors import ErrorCode


def existing_customer(**overrides):
    values = dict(
        id="cust_1",
        company_id="company_1",
        name="บริษัท ตัวอย่าง จำกัด",
        tax_id="0105551234567",
        branch_code="00000",
        address="Bangkok",
        contact_name="Somchai",
        phone="021234567",
        email="ap@example.co.th",
    )
    values.update(overrides)
    return Customer(**values)


@pytest.fixture
def mock_customer_repo():
    repo = AsyncMock()
    repo.find_by_tax_id.return_value = None
    repo.find_by_name.return_value = None
    repo.create.side_effect = lambda customer: customer
    repo.update.side_effect = lambda customer: customer
    return repo


@pytest.fixture
def use_case(mock_uow, mock_customer_repo):
    return FindOrCreateCustomer(uow=mock_uow, customer_repo=mock_customer_repo)


class TestFindOrCreateCustomer:
    """Test suite for FindOrCreateCustomer use case"""

    @pytest.mark.asyncio
    async def test_blank_name_is_rejected(self, use_case, mock_customer_repo):
        # Act
        result = await use_case.execute("company_1", CustomerSnapshotDTO(name="  "))

        # Assert
        assert result.error.code == ErrorCode.VALIDATION_ERROR.value
        mock_customer_repo.find_by_name.assert_not_called()

    @pytest.mark.asyncio
    async def test_creates_new_customer(self, use_case, mock_customer_repo, mock_uow):
        # Arrange
        snapshot = CustomerSnapshotDTO(name="New Co", tax_id="0105559999999", address="Chiang Mai")

        # Act
        result = await use_case.execute("company_1", snapshot)

        # Assert
        assert result.is_ok()
        assert result.value.created is True
        assert result.value.branch_code == "00000"
        mock_customer_repo.find_by_tax_id.assert_called_once_with(
            "company_1", "0105559999999", "00000"
        )
        mock_customer_repo.find_by_name.assert_called_once_with("company_1", "New Co", "00000")
        mock_customer_repo.create.assert_called_once()
        mock_uow.commit.assert_called_once()

    @pytest.mark.asyncio
    async def test_unchanged_tax_match_is_not_written(self, use_case, mock_customer_repo, mock_uow):
        # Arrange
        mock_customer_repo.find_by_tax_id.return_value = existing_customer()
        snapshot = CustomerSnapshotDTO(
            name="บริษัท ตัวอย่าง จำกัด ",
            tax_id="0105551234567",
            address="Bangkok",
            contact_name="Somchai",
            phone="021234567",
            email="ap@example.co.th",
        )

        # Act
        result = await use_case.execute("company_1", snapshot)

        # Assert
        assert result.is_ok()
        assert result.value.created is False
        assert result.value.updated is False
        mock_customer_repo.update.assert_not_called()
        mock_uow.commit.assert_not_called()

    @pytest.mark.asyncio
    async def test_tax_match_takes_new_contact_data(self, use_case, mock_customer_repo):
        # Arrange
        mock_customer_repo.find_by_tax_id.return_value = existing_customer()
        snapshot = CustomerSnapshotDTO(
            name="บริษัท ตัวอย่าง จำกัด (มหาชน)",
            tax_id="0105551234567",
            address="Bangkok",
            phone="029999999",
        )

        # Act
        result = await use_case.execute("company_1", snapshot)

        # Assert
        assert result.value.updated is True
        assert result.value.name == "บริษัท ตัวอย่าง จำกัด (มหาชน)"
        assert result.value.phone == "029999999"
        # Tax id matches overwrite blanks too
        assert result.value.contact_name is None
        mock_customer_repo.find_by_name.assert_not_called()

    @pytest.mark.asyncio
    async def test_other_branch_is_a_different_customer(self, use_case, mock_customer_repo):
        # Arrange
        snapshot = CustomerSnapshotDTO(
            name="บริษัท ตัวอย่าง จำกัด", tax_id="0105551234567", branch_code="00001"
        )

        # Act
        result = await use_case.execute("company_1", snapshot)

        # Assert
        mock_customer_repo.find_by_tax_id.assert_called_once_with(
            "company_1", "0105551234567", "00001"
        )
        assert result.value.created is True
        assert result.value.branch_code == "00001"

    @pytest.mark.asyncio
    async def test_name_match_merges_blank_fields(self, use_case, mock_customer_repo):
        # Arrange
        mock_customer_repo.find_by_name.return_value = existing_customer(tax_id=None)
        snapshot = CustomerSnapshotDTO(
            name="บริษัท ตัวอย่าง จำกัด", tax_id="0105551234567", address="Nonthaburi"
        )

        # Act
        result = await use_case.execute("company_1", snapshot)

        # Assert
        assert result.value.updated is True
        assert result.value.tax_id == "0105551234567"
        assert result.value.address == "Nonthaburi"
        assert result.value.email == "ap@example.co.th"
        assert result.value.contact_name == "Somchai"

    @pytest.mark.asyncio
    async def test_repository_failure(self, use_case, mock_customer_repo, mock_uow):
        # Arrange
        mock_customer_repo.create.side_effect = Exception("unique violation")

        # Act
        result = await use_case.execute("company_1", CustomerSnapshotDTO(name="X"))

        # Assert
        assert result.error.code == ErrorCode.SYNC_CUSTOMER_FAILED.value
        mock_uow.rollback.assert_called_once()
