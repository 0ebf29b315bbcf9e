"""Get Usage Use Case

Reports a company's document usage for the current month.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.usage_meter import UsageMeter
from src.domain.document import DocumentKind
from src.domain.errors import ErrorCode
from .dtos import UsageResponseDTO

logger = logging.getLogger(__name__)


class GetUsage:
    """
    Get Usage Use Case

    Read-only: counters, plan limits, subscription state and whether each
    document kind may be issued right now.
    """

    def __init__(self, usage_meter: UsageMeter):
        self.usage_meter = usage_meter

    async def execute(self, company_id: str) -> Result[UsageResponseDTO]:
        """
        Execute get usage operation

        Args:
            company_id: Company identifier

        Returns:
            Result[UsageResponseDTO]: Usage report or error
        """
        try:
            subscription = await self.usage_meter.usage_service.get_subscription_status(company_id)
            usage = await self.usage_meter.current_usage(company_id)
            can_invoice = await self.usage_meter.can_create(company_id, DocumentKind.INVOICE)
            can_quote = await self.usage_meter.can_create(company_id, DocumentKind.QUOTATION)
        except Exception as e:
            logger.error(f"Failed to read usage for company {company_id}: {e}")
            return Return.err(
                Error(
                    code=ErrorCode.GET_USAGE_FAILED.value,
                    message="Failed to read usage",
                    reason=str(e),
                )
            )

        return Return.ok(
            UsageResponseDTO(
                company_id=company_id,
                month_year=usage.month_year,
                invoice_count=usage.invoice_count,
                quotation_count=usage.quotation_count,
                invoice_limit=usage.invoice_limit,
                quotation_limit=usage.quotation_limit,
                subscription_status=subscription.status if subscription else None,
                plan_name=subscription.plan_name if subscription else None,
                trial_days_remaining=self.usage_meter.trial_days_remaining(subscription),
                can_create_invoice=can_invoice,
                can_create_quotation=can_quote,
            )
        )
