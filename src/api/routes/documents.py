"""Document API Routes

FastAPI routes shared by invoices and quotations. build_document_router
returns one router per document kind with identical endpoints.
"""

import logging
from typing import Optional
from fastapi import APIRouter, BackgroundTasks, Depends, Query, Response, status
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.company_repository import SqlAlchemyCompanyRepository
from src.adapter.repositories.customer_repository import SqlAlchemyCustomerRepository
from src.adapter.repositories.document_item_repository import (
    SqlAlchemyInvoiceItemRepository,
    SqlAlchemyQuotationItemRepository,
)
from src.adapter.repositories.document_repository import (
    SqlAlchemyInvoiceRepository,
    SqlAlchemyQuotationRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.adapter.services.usage_service import SqlAlchemyUsageService
from src.api.error import ClientError
from src.api.schemas.document_request import SaveDocumentRequestSchema
from src.app.services.usage_meter import UsageMeter
from src.app.use_cases.customers import CustomerSnapshotDTO, FindOrCreateCustomer
from src.app.use_cases.documents import (
    CancelDocument,
    CreateDocument,
    DeleteDocument,
    DocumentResponseDTO,
    DocumentStatusResponseDTO,
    GetDocument,
    ListDocuments,
    ListDocumentsResponseDTO,
    SaveDocumentCommandDTO,
    UpdateDocument,
)
from src.depends import get_session, get_session_factory
from src.domain.document import DocumentKind, DocumentStatus
from src.domain.lifecycle import KIND_RULES

logger = logging.getLogger(__name__)

REPOSITORIES = {
    DocumentKind.INVOICE: (SqlAlchemyInvoiceRepository, SqlAlchemyInvoiceItemRepository),
    DocumentKind.QUOTATION: (SqlAlchemyQuotationRepository, SqlAlchemyQuotationItemRepository),
}


async def sync_customer(
    session_factory: sessionmaker, company_id: str, snapshot: CustomerSnapshotDTO
) -> None:
    """Background task: upsert the customer directory after a document save"""
    async with session_factory() as session:
        use_case = FindOrCreateCustomer(
            SqlAlchemyUnitOfWork(session), SqlAlchemyCustomerRepository(session)
        )
        result = await use_case.execute(company_id, snapshot)

    if result.is_err():
        logger.warning(
            f"Customer sync for company {company_id} failed: "
            f"{result.error.code} {result.error.reason or ''}"
        )


def build_document_router(kind: DocumentKind, prefix: str, tags: list) -> APIRouter:
    """
    Create the CRUD + lifecycle router of a document kind

    Args:
        kind: Document kind served by the router
        prefix: URL prefix (e.g. /invoices)
        tags: OpenAPI tags

    Returns:
        APIRouter with create, list, get, update, cancel and delete
    """
    router = APIRouter(prefix=prefix, tags=tags)
    label = KIND_RULES[kind].label
    document_repo_class, item_repo_class = REPOSITORIES[kind]

    def save_use_case(use_case_class, session: AsyncSession):
        return use_case_class(
            SqlAlchemyUnitOfWork(session),
            document_repo_class(session),
            item_repo_class(session),
            SqlAlchemyCompanyRepository(session),
            UsageMeter(SqlAlchemyUsageService(session)),
        )

    def schedule_customer_sync(
        background_tasks: BackgroundTasks,
        session_factory: sessionmaker,
        request: SaveDocumentRequestSchema,
    ) -> None:
        if not request.customer_name.strip():
            return
        background_tasks.add_task(
            sync_customer,
            session_factory,
            request.company_id,
            CustomerSnapshotDTO.from_form(request.to_form()),
        )

    @router.post(
        "",
        response_model=DocumentResponseDTO,
        status_code=status.HTTP_201_CREATED,
        summary=f"Create {label.lower()}",
        responses={
            402: {"description": "Monthly plan limit reached"},
            403: {"description": "Subscription is not active"},
            404: {"description": "Company not found"},
        },
    )
    async def create_document(
        request: SaveDocumentRequestSchema,
        background_tasks: BackgroundTasks,
        session: AsyncSession = Depends(get_session),
        session_factory: sessionmaker = Depends(get_session_factory),
    ):
        """
        Create a document as draft (action=save) or issue it directly (action=send).

        Issuing requires customer name, customer address and at least one
        described item, and a subscription with quota left this month.
        """
        command = SaveDocumentCommandDTO(
            company_id=request.company_id,
            status=request.target_status(kind),
            form=request.to_form(),
        )
        result = await save_use_case(CreateDocument, session).execute(command)

        if result.is_err():
            raise ClientError(result.error)

        schedule_customer_sync(background_tasks, session_factory, request)
        return result.value

    @router.get(
        "",
        response_model=ListDocumentsResponseDTO,
        status_code=status.HTTP_200_OK,
        summary=f"List {label.lower()}s",
    )
    async def list_documents(
        company_id: str = Query(..., min_length=1, description="Owning company"),
        status_filter: Optional[DocumentStatus] = Query(None, alias="status"),
        limit: int = Query(20, ge=1, le=100),
        offset: int = Query(0, ge=0),
        session: AsyncSession = Depends(get_session),
    ):
        """List a company's documents, newest first. Items are not included."""
        use_case = ListDocuments(document_repo_class(session))
        result = await use_case.execute(company_id, status_filter, limit, offset)

        if result.is_err():
            raise ClientError(result.error)
        return result.value

    @router.get(
        "/{document_id}",
        response_model=DocumentResponseDTO,
        status_code=status.HTTP_200_OK,
        summary=f"Get {label.lower()}",
        responses={404: {"description": f"{label} not found"}},
    )
    async def get_document(
        document_id: str,
        company_id: str = Query(..., min_length=1, description="Owning company"),
        session: AsyncSession = Depends(get_session),
    ):
        """Get a document with its items ordered by item_order."""
        use_case = GetDocument(document_repo_class(session), item_repo_class(session))
        result = await use_case.execute(company_id, document_id)

        if result.is_err():
            raise ClientError(result.error)
        return result.value

    @router.put(
        "/{document_id}",
        response_model=DocumentResponseDTO,
        status_code=status.HTTP_200_OK,
        summary=f"Update {label.lower()}",
        responses={
            404: {"description": f"{label} not found"},
            409: {"description": "Document is no longer a draft"},
        },
    )
    async def update_document(
        document_id: str,
        request: SaveDocumentRequestSchema,
        background_tasks: BackgroundTasks,
        session: AsyncSession = Depends(get_session),
        session_factory: sessionmaker = Depends(get_session_factory),
    ):
        """
        Replace a draft's content and items, optionally issuing it.

        Non-draft documents are immutable and return 409.
        """
        command = SaveDocumentCommandDTO(
            company_id=request.company_id,
            status=request.target_status(kind),
            form=request.to_form(),
        )
        result = await save_use_case(UpdateDocument, session).execute(document_id, command)

        if result.is_err():
            raise ClientError(result.error)

        schedule_customer_sync(background_tasks, session_factory, request)
        return result.value

    @router.post(
        "/{document_id}/cancel",
        response_model=DocumentStatusResponseDTO,
        status_code=status.HTTP_200_OK,
        summary=f"Cancel {label.lower()}",
        responses={
            404: {"description": f"{label} not found"},
            409: {"description": "Draft or already cancelled"},
        },
    )
    async def cancel_document(
        document_id: str,
        company_id: str = Query(..., min_length=1, description="Owning company"),
        session: AsyncSession = Depends(get_session),
    ):
        """Cancel an issued document. Drafts are deleted instead."""
        use_case = CancelDocument(SqlAlchemyUnitOfWork(session), document_repo_class(session))
        result = await use_case.execute(company_id, document_id)

        if result.is_err():
            raise ClientError(result.error)
        return result.value

    @router.delete(
        "/{document_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        summary=f"Delete draft {label.lower()}",
        responses={
            404: {"description": f"{label} not found"},
            409: {"description": "Document is no longer a draft"},
        },
    )
    async def delete_document(
        document_id: str,
        company_id: str = Query(..., min_length=1, description="Owning company"),
        session: AsyncSession = Depends(get_session),
    ):
        """Delete a draft and its items. Issued documents must be cancelled."""
        use_case = DeleteDocument(
            SqlAlchemyUnitOfWork(session),
            document_repo_class(session),
            item_repo_class(session),
        )
        result = await use_case.execute(company_id, document_id)

        if result.is_err():
            raise ClientError(result.error)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
