"""Fire-and-forget recording of comment views."""

import asyncio
from contextlib import AbstractAsyncContextManager
from datetime import datetime, timedelta
from typing import Optional, Protocol, Sequence
from uuid import uuid4

import logfire

from roost.config import CommentSettings
from roost.domain.model import CommentInteraction
from roost.domain.repository import InteractionRepository
from roost.domain.value import CommentId, InteractionId, InteractionType, UserId
from roost.domain.value.common import ValueObject


class InteractionRepositoryFactory(Protocol):
    """Opens a short-lived interaction repository."""

    def __call__(self) -> AbstractAsyncContextManager[InteractionRepository]: ...


class ViewerIdentity(ValueObject):
    """Who is looking at a comment thread."""

    user_id: Optional[UserId] = None
    session_id: str
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None


class ViewTracker:
    """Records views in background tasks that outlive the request.

    The request never waits for, or hears about, the outcome. Each comment
    is recorded with its own repository context, because the request's
    database session is closed by the time a task runs.
    """

    def __init__(
        self,
        repository_factory: InteractionRepositoryFactory,
        settings: CommentSettings,
    ) -> None:
        """Initialize view tracker.

        Args:
            repository_factory: Opens a short-lived interaction repository
            settings: Comment settings (deduplication window)
        """
        self.repository_factory = repository_factory
        self.settings = settings
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        """Number of dispatched tasks that have not finished."""
        return len(self._tasks)

    def dispatch(self, comment_ids: Sequence[CommentId], viewer: ViewerIdentity) -> None:
        """Schedule view recording and return immediately.

        Args:
            comment_ids: Comments that were shown
            viewer: Who saw them
        """
        if not comment_ids:
            return
        task = asyncio.create_task(self._record_views(list(comment_ids), viewer))
        # Keep a strong reference until the task is done
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def drain(self) -> None:
        """Wait for every dispatched task to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def _record_views(
        self, comment_ids: list[CommentId], viewer: ViewerIdentity
    ) -> None:
        with logfire.span("view_tracker.record_views", comments=len(comment_ids)):
            recorded = 0
            for comment_id in comment_ids:
                try:
                    if await self._record_view(comment_id, viewer):
                        recorded += 1
                except Exception as e:
                    logfire.error(
                        "Failed to track comment view",
                        comment_id=str(comment_id),
                        error=str(e),
                    )
            logfire.info(
                "Comment views tracked",
                requested=len(comment_ids),
                recorded=recorded,
            )

    async def _record_view(self, comment_id: CommentId, viewer: ViewerIdentity) -> bool:
        now = datetime.now()
        since = now - timedelta(minutes=self.settings.view_dedup_minutes)
        async with self.repository_factory() as repository:
            if await repository.has_recent_view(
                comment_id,
                since,
                user_id=viewer.user_id,
                session_id=viewer.session_id,
                ip_address=viewer.ip_address,
            ):
                return False
            await repository.save(
                CommentInteraction(
                    id=InteractionId(uuid4()),
                    comment_id=comment_id,
                    interaction_type=InteractionType.VIEW,
                    user_id=viewer.user_id,
                    session_id=viewer.session_id,
                    ip_address=viewer.ip_address,
                    user_agent=viewer.user_agent,
                    created_at=now,
                )
            )
            return True
