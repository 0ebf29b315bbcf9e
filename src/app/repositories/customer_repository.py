"""Customer Repository Interface

Defines the contract for the customer directory lookups used by
find-or-create.
"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.customer import Customer


class CustomerRepository(ABC):
    """
    Repository interface for Customer persistence

    Lookups only return active customers.
    """

    @abstractmethod
    async def find_by_tax_id(
        self, company_id: str, tax_id: str, branch_code: str
    ) -> Optional[Customer]:
        """
        Find an active customer by tax id and branch code

        Args:
            company_id: Owning company
            tax_id: Customer tax identification number
            branch_code: Branch code (00000 = head office)

        Returns:
            Customer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_name(
        self, company_id: str, name: str, branch_code: str
    ) -> Optional[Customer]:
        """
        Find an active customer by exact name and branch code

        Args:
            company_id: Owning company
            name: Customer name
            branch_code: Branch code (00000 = head office)

        Returns:
            Customer if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, customer: Customer) -> Customer:
        pass

    @abstractmethod
    async def update(self, customer: Customer) -> Customer:
        pass
