"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .comment_tree import CommentNode, build_comment_tree, sort_replies, walk
from .interaction_service import InteractionService
from .jwt_service import JWTService
from .metrics_service import MetricsService
from .notification_service import NotificationService
from .pagination import Pagination, page_offset, paginate
from .ranking import OrderingRule, select_ordering
from .reaction_service import ReactionService
from .reply_expansion import ReplyExpansionService, ThreadRow
from .user_service import UserService
from .view_tracking import ViewerIdentity, ViewTracker

__all__ = [
    "CommentNode",
    "CommentService",
    "InteractionService",
    "JWTService",
    "MetricsService",
    "NotificationService",
    "OrderingRule",
    "Pagination",
    "ReactionService",
    "ReplyExpansionService",
    "Service",
    "ThreadRow",
    "UserService",
    "ViewTracker",
    "ViewerIdentity",
    "build_comment_tree",
    "page_offset",
    "paginate",
    "select_ordering",
    "sort_replies",
    "walk",
]
