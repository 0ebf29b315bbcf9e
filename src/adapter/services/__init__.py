from .unit_of_work import SqlAlchemyUnitOfWork
from .usage_service import SqlAlchemyUsageService

__all__ = [
    "SqlAlchemyUnitOfWork",
    "SqlAlchemyUsageService",
]
