"""Comment use cases."""

from .common import AuthorItem, CommentItem, MetricsItem, ReactionCountItem
from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comment import GetCommentRequest, GetCommentUseCase
from .get_comments import GetCommentsRequest, GetCommentsResponse, GetCommentsUseCase
from .get_hierarchical_comments import (
    AlgorithmMetadata,
    GetHierarchicalCommentsRequest,
    GetHierarchicalCommentsResponse,
    GetHierarchicalCommentsUseCase,
)
from .get_replies import GetRepliesRequest, GetRepliesResponse, GetRepliesUseCase
from .track_interaction import (
    TrackInteractionRequest,
    TrackInteractionResponse,
    TrackInteractionUseCase,
)
from .update_comment import (
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)

__all__ = [
    "AlgorithmMetadata",
    "AuthorItem",
    "CommentItem",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentRequest",
    "GetCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "GetHierarchicalCommentsRequest",
    "GetHierarchicalCommentsResponse",
    "GetHierarchicalCommentsUseCase",
    "GetRepliesRequest",
    "GetRepliesResponse",
    "GetRepliesUseCase",
    "MetricsItem",
    "ReactionCountItem",
    "TrackInteractionRequest",
    "TrackInteractionResponse",
    "TrackInteractionUseCase",
    "UpdateCommentRequest",
    "UpdateCommentResponse",
    "UpdateCommentUseCase",
]
