"""Subscription Repository Interface

Defines the contract for subscription and plan lookups.
"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.subscription import Plan, Subscription


class SubscriptionRepository(ABC):
    """
    Repository interface for Subscription persistence
    """

    @abstractmethod
    async def get_by_company_id(self, company_id: str) -> Optional[Subscription]:
        """
        Retrieve a company's subscription

        Args:
            company_id: Company identifier

        Returns:
            Subscription if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_plan(self, plan_id: str) -> Optional[Plan]:
        """
        Retrieve plan by ID

        Args:
            plan_id: Plan identifier

        Returns:
            Plan if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, subscription: Subscription) -> Subscription:
        pass

    @abstractmethod
    async def create_plan(self, plan: Plan) -> Plan:
        pass
