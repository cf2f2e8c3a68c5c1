"""Breadth-first expansion of reply threads."""

import asyncio
from dataclasses import dataclass
from typing import Sequence

import logfire

from roost.config import CommentSettings
from roost.domain.error import QueryTimeoutError
from roost.domain.model import Comment
from roost.domain.repository import CommentRepository
from roost.domain.value import CommentId

from .base import Service


@dataclass(frozen=True)
class ThreadRow:
    """A fetched comment tagged with its nesting level in the result.

    Top-level comments are at depth 0; each reply is one level below the
    comment it answers.
    """

    comment: Comment
    depth: int


class ReplyExpansionService(Service):
    """Fetches the replies below a set of comments, level by level.

    Each level is one batched query over the current frontier, so the
    number of queries is bounded by the depth reached, never by the number
    of comments.
    """

    def __init__(
        self, comment_repository: CommentRepository, settings: CommentSettings
    ) -> None:
        """Initialize reply expansion service.

        Args:
            comment_repository: Comment repository
            settings: Comment settings (depth cap and time budget)
        """
        self.comment_repository = comment_repository
        self.settings = settings

    def deepest_level(
        self, max_depth: int | None = None, load_all_replies: bool = False
    ) -> int:
        """Deepest reply level an expansion may reach.

        ``max_depth`` counts levels including the top-level comment, so
        ``max_depth=2`` yields one level of replies. Direct replies are
        always included, and nothing below the retrieval cap is fetched.

        Args:
            max_depth: Requested depth, or None for the configured default
            load_all_replies: Ignore ``max_depth`` and expand to the cap

        Returns:
            Deepest level to fetch (1 means direct replies only)
        """
        cap = self.settings.retrieval_depth_cap
        if load_all_replies:
            return cap
        if max_depth is None:
            max_depth = self.settings.default_max_depth
        return min(max(1, max_depth - 1), cap)

    async def expand(
        self,
        top_level_ids: Sequence[CommentId],
        max_depth: int | None = None,
        load_all_replies: bool = False,
    ) -> list[ThreadRow]:
        """Fetch replies below the given comments.

        Expansion stops early, keeping what was already fetched, once the
        configured time budget is spent. The deadline is checked between
        levels and the time left is passed to the store as the limit for the
        next query; a query that hits it ends the expansion.

        Args:
            top_level_ids: Comments whose replies to fetch
            max_depth: Requested depth (see ``deepest_level``)
            load_all_replies: Expand to the retrieval cap

        Returns:
            Replies in fetch order: level by level, oldest first per level
        """
        if not top_level_ids:
            return []

        deepest = self.deepest_level(max_depth, load_all_replies)

        with logfire.span(
            "reply_expansion.expand",
            roots=len(top_level_ids),
            deepest_level=deepest,
            load_all_replies=load_all_replies,
        ):
            loop = asyncio.get_running_loop()
            deadline = loop.time() + self.settings.expansion_timeout_seconds

            rows: list[ThreadRow] = []
            seen: set[CommentId] = set(top_level_ids)
            frontier: list[CommentId] = list(dict.fromkeys(top_level_ids))
            level = 0

            while frontier and level < deepest:
                remaining = deadline - loop.time()
                if remaining <= 0:
                    self._warn_timeout(level, len(rows))
                    break
                try:
                    # The running query is bounded by the store, never cancelled
                    children = await self.comment_repository.find_children(
                        frontier, timeout=remaining
                    )
                except QueryTimeoutError:
                    self._warn_timeout(level, len(rows))
                    break

                level += 1
                next_frontier: list[CommentId] = []
                for child in children:
                    # A comment is never expanded twice
                    if child.id in seen:
                        continue
                    seen.add(child.id)
                    rows.append(ThreadRow(comment=child, depth=level))
                    next_frontier.append(child.id)
                frontier = next_frontier

            logfire.info(
                "Replies expanded", count=len(rows), levels=level, deepest=deepest
            )
            return rows

    def _warn_timeout(self, level: int, fetched: int) -> None:
        logfire.warn(
            "Reply expansion timed out, returning partial tree",
            levels_fetched=level,
            replies_fetched=fetched,
            timeout_seconds=self.settings.expansion_timeout_seconds,
        )
