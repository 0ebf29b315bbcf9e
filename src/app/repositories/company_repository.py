"""Company Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.company import Company


class CompanyRepository(ABC):

    @abstractmethod
    async def get_by_id(self, company_id: str) -> Optional[Company]:
        """
        Retrieve company by ID

        Args:
            company_id: Company identifier

        Returns:
            Company if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, company: Company) -> Company:
        pass
