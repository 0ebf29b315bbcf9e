"""Draft Auto-Saver

Debounced background saving for a document being edited, with a
single-flight guard so the first save of a new document creates exactly
one draft no matter how auto-save and submit interleave.
"""

import asyncio
import logging
from typing import Optional
from config import ApplicationConfig
from libs.result import Result
from src.app.use_cases.documents.create_document import CreateDocument
from src.app.use_cases.documents.update_document import UpdateDocument
from src.app.use_cases.documents.dtos import (
    DocumentFormDTO,
    DocumentResponseDTO,
    SaveDocumentCommandDTO,
)
from src.domain.document import DocumentStatus

logger = logging.getLogger(__name__)


def is_autosavable(form: DocumentFormDTO) -> bool:
    """Auto-save only kicks in once a customer name and a described item exist"""
    if not (form.customer_name or "").strip():
        return False
    return any((item.description or "").strip() for item in form.items)


class DraftAutoSaver:
    """
    One editing session of one document

    Business Rules:
    1. schedule() restarts the quiet period on every edit
    2. submit() cancels the pending auto-save before saving
    3. Saves run one at a time: while no document id is known, a second
       caller waits for the first create and then updates that document
    4. A save that already started is never abandoned half-way, so the id
       it produces is always recorded

    Usage:
        saver = DraftAutoSaver(create_document, update_document, company_id)
        saver.schedule(form)             # on every edit
        result = await saver.submit(form, DocumentStatus.ISSUED)
    """

    def __init__(
        self,
        create_document: CreateDocument,
        update_document: UpdateDocument,
        company_id: str,
        document_id: Optional[str] = None,
        quiet_period: Optional[float] = None,
    ):
        self.create_document = create_document
        self.update_document = update_document
        self.company_id = company_id
        self.document_id = document_id
        self.quiet_period = (
            quiet_period
            if quiet_period is not None
            else ApplicationConfig.AUTOSAVE_QUIET_PERIOD_SECONDS
        )
        self.last_result: Optional[Result[DocumentResponseDTO]] = None
        self._lock = asyncio.Lock()
        self._pending: Optional[asyncio.Task] = None

    @property
    def has_pending(self) -> bool:
        return self._pending is not None and not self._pending.done()

    def schedule(self, form: DocumentFormDTO) -> bool:
        """
        Restart the quiet period with the latest form content

        Returns:
            True if an auto-save was scheduled, False if the form is not
            complete enough to be saved yet
        """
        self._cancel_timer()
        if not is_autosavable(form):
            return False
        self._pending = asyncio.create_task(self._save_after_quiet_period(form))
        return True

    async def submit(
        self, form: DocumentFormDTO, status: DocumentStatus = DocumentStatus.DRAFT
    ) -> Result[DocumentResponseDTO]:
        """Explicit save: drop the pending auto-save, then save with the requested status"""
        await self.cancel_pending()
        return await self.save(form, status)

    async def save(
        self, form: DocumentFormDTO, status: DocumentStatus = DocumentStatus.DRAFT
    ) -> Result[DocumentResponseDTO]:
        """
        Create the document on first save, update it afterwards

        Args:
            form: Current form content
            status: Status the document should have after the save

        Returns:
            Result of the create or update use case
        """
        async with self._lock:
            command = SaveDocumentCommandDTO(
                company_id=self.company_id, status=status, form=form
            )
            if self.document_id is None:
                result = await self.create_document.execute(command)
                if result.is_ok():
                    self.document_id = result.value.id
                    logger.debug(f"Auto-saver created document {self.document_id}")
            else:
                result = await self.update_document.execute(self.document_id, command)

            if result.is_err():
                logger.warning(
                    f"Save of document {self.document_id or '(new)'} failed: {result.error.code}"
                )
            self.last_result = result
            return result

    async def cancel_pending(self) -> None:
        """Cancel a waiting auto-save; one already writing is left to finish under the lock"""
        task = self._pending
        self._pending = None
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    async def wait_idle(self) -> None:
        """Wait for the pending auto-save (if any) and any save still holding the lock"""
        if self._pending is not None:
            try:
                await self._pending
            except asyncio.CancelledError:
                pass
        async with self._lock:
            pass

    def _cancel_timer(self) -> None:
        if self.has_pending:
            self._pending.cancel()
        self._pending = None

    async def _save_after_quiet_period(self, form: DocumentFormDTO) -> None:
        await asyncio.sleep(self.quiet_period)
        await asyncio.shield(self.save(form, DocumentStatus.DRAFT))
