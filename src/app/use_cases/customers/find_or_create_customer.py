"""FindOrCreateCustomer Use Case

Keeps the customer directory in step with the customer data typed into
documents.
"""

import logging
from typing import Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.base import utc_now
from src.domain.customer import Customer
from src.domain.errors import ErrorCode
from .dtos import CustomerSnapshotDTO, CustomerResponseDTO

logger = logging.getLogger(__name__)

# branch_code is part of the lookup key and never rewritten
_TAX_MATCH_FIELDS = ("name", "address", "contact_name", "phone", "email")
_NAME_MATCH_FIELDS = ("tax_id", "address", "contact_name", "phone", "email")


def _normalize(value: Optional[str]) -> str:
    return (value or "").strip()


def _changed_fields(customer: Customer, values: dict) -> dict:
    return {
        field: value
        for field, value in values.items()
        if _normalize(getattr(customer, field)) != _normalize(value)
    }


class FindOrCreateCustomer:
    """
    Use Case: Upsert a directory entry from a document's customer snapshot

    Business Rules:
    1. Same tax id with a different branch is a different customer
    2. Match by tax id + branch first; its name and contact data win
    3. Otherwise match by exact name + branch; blank snapshot fields keep
       what the directory already has
    4. Existing entries are written only when something actually changed
    5. No match creates a new entry
    """

    def __init__(self, uow: UnitOfWork, customer_repo: CustomerRepository):
        self.uow = uow
        self.customer_repo = customer_repo

    async def execute(
        self, company_id: str, snapshot: CustomerSnapshotDTO
    ) -> Result[CustomerResponseDTO]:
        """
        Execute find-or-create

        Args:
            company_id: Owning company
            snapshot: Customer fields taken from a document

        Returns:
            Result[CustomerResponseDTO]: Matched, updated or created entry
        """
        name = _normalize(snapshot.name)
        if not name:
            return Return.err(
                Error(
                    code=ErrorCode.VALIDATION_ERROR.value,
                    message="Customer name is required",
                )
            )
        branch_code = _normalize(snapshot.branch_code) or "00000"
        tax_id = _normalize(snapshot.tax_id)

        try:
            if tax_id:
                existing = await self.customer_repo.find_by_tax_id(company_id, tax_id, branch_code)
                if existing:
                    values = {field: getattr(snapshot, field) for field in _TAX_MATCH_FIELDS}
                    values["name"] = name
                    return await self._refresh(existing, values)

            existing = await self.customer_repo.find_by_name(company_id, name, branch_code)
            if existing:
                merged = {
                    field: getattr(snapshot, field) or getattr(existing, field)
                    for field in _NAME_MATCH_FIELDS
                }
                return await self._refresh(existing, merged)

            customer = Customer(
                company_id=company_id,
                customer_type=snapshot.customer_type,
                name=name,
                tax_id=tax_id or None,
                branch_code=branch_code,
                address=snapshot.address,
                contact_name=snapshot.contact_name,
                phone=snapshot.phone,
                email=snapshot.email,
            )
            created = await self.customer_repo.create(customer)
            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to sync customer '{name}' for company {company_id}: {e}")
            return Return.err(
                Error(
                    code=ErrorCode.SYNC_CUSTOMER_FAILED.value,
                    message="Failed to save customer",
                    reason=str(e),
                )
            )

        logger.info(f"Added customer '{created.name}' ({created.branch_code}) for company {company_id}")
        return Return.ok(self._to_response(created, created=True))

    async def _refresh(self, customer: Customer, values: dict) -> Result[CustomerResponseDTO]:
        changes = _changed_fields(customer, values)
        if not changes:
            return Return.ok(self._to_response(customer))

        for field, value in changes.items():
            setattr(customer, field, value or None)
        customer.updated_at = utc_now()

        updated = await self.customer_repo.update(customer)
        await self.uow.commit()
        logger.info(f"Updated customer {updated.id}: {', '.join(sorted(changes))}")
        return Return.ok(self._to_response(updated, updated=True))

    @staticmethod
    def _to_response(customer: Customer, created: bool = False, updated: bool = False) -> CustomerResponseDTO:
        return CustomerResponseDTO(
            id=customer.id,
            company_id=customer.company_id,
            customer_type=customer.customer_type,
            name=customer.name,
            tax_id=customer.tax_id,
            branch_code=customer.branch_code,
            address=customer.address,
            contact_name=customer.contact_name,
            phone=customer.phone,
            email=customer.email,
            created=created,
            updated=updated,
        )
