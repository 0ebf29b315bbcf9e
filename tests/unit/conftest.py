import pytest
from datetime import date
from unittest.mock import AsyncMock

from src.app.use_cases.documents.dtos import DocumentFormDTO, LineItemDTO


@pytest.fixture
def mock_uow():
    """Unit of work whose commit/rollback can be asserted"""
    return AsyncMock()


@pytest.fixture
def complete_form():
    """Form that satisfies every issue-time requirement"""
    return DocumentFormDTO(
        customer_name="บริษัท ตัวอย่าง จำกัด",
        customer_address="99 ถนนสุขุมวิท กรุงเทพฯ 10110",
        customer_tax_id="0105551234567",
        issue_date=date(2026, 2, 5),
        items=[
            LineItemDTO(description="Consulting", quantity=1, unit="job", unit_price=100),
        ],
        vat_rate=7,
    )
