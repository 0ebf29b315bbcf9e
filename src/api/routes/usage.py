"""Usage API Routes

Current-month document usage against the company's plan.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.usage_service import SqlAlchemyUsageService
from src.api.error import ClientError
from src.app.services.usage_meter import UsageMeter
from src.app.use_cases.usage import GetUsage, UsageResponseDTO
from src.depends import get_session

router = APIRouter(prefix="/billing/usage", tags=["Usage"])


@router.get(
    "/{company_id}",
    response_model=UsageResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def get_usage(company_id: str, session: AsyncSession = Depends(get_session)):
    """
    Get the company's usage for the current month.

    **Example response:**
    ```json
    {
      "company_id": "c0a8012e-7f3b-4d6e-9a51-2b9f8e1d4c77",
      "month_year": "2026-02",
      "invoice_count": 12,
      "quotation_count": 4,
      "invoice_limit": 50,
      "quotation_limit": null,
      "subscription_status": "trial",
      "plan_name": "starter",
      "trial_days_remaining": 9,
      "can_create_invoice": true,
      "can_create_quotation": true
    }
    ```

    **Returns:**
    - 200: Usage report (null limit = unlimited)
    """
    use_case = GetUsage(UsageMeter(SqlAlchemyUsageService(session)))
    result = await use_case.execute(company_id)

    if result.is_err():
        raise ClientError(result.error)
    return result.value
