"""Usage Counter Repository Interface

Defines the contract for per-period document counters.
"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.document import DocumentKind
from src.domain.usage_counter import UsageCounter


class UsageCounterRepository(ABC):
    """
    Repository interface for UsageCounter persistence
    """

    @abstractmethod
    async def get(self, company_id: str, month_year: str) -> Optional[UsageCounter]:
        """
        Retrieve the counter row of a billing period

        Args:
            company_id: Company identifier
            month_year: Billing period (YYYY-MM)

        Returns:
            UsageCounter if the period has any usage, None otherwise
        """
        pass

    @abstractmethod
    async def increment(self, company_id: str, month_year: str, kind: DocumentKind) -> None:
        """
        Atomically add one to the kind's counter, creating the row if needed

        Args:
            company_id: Company identifier
            month_year: Billing period (YYYY-MM)
            kind: Which counter to bump
        """
        pass
