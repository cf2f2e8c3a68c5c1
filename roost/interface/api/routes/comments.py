"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, Request, status
from pydantic import BaseModel, Field

from roost.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    GetCommentUseCase,
    GetHierarchicalCommentsRequest,
    GetHierarchicalCommentsResponse,
    GetHierarchicalCommentsUseCase,
    GetRepliesRequest,
    GetRepliesResponse,
    GetRepliesUseCase,
    TrackInteractionRequest,
    TrackInteractionResponse,
    TrackInteractionUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from roost.application.usecase.comment.common import CommentContent
from roost.domain.error import DomainError
from roost.domain.service import JWTService
from roost.domain.value import ChronologicalSort, CommentSort, InteractionType
from roost.interface.api.identity import resolve_viewer
from roost.interface.error import internal_error, to_http_exception, unauthorized
from roost.util.jwt import TokenPayload

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


def _require_user(jwt_service: JWTService, auth_token: str | None, action: str) -> TokenPayload:
    payload = jwt_service.get_payload_from_token(auth_token)
    if payload is None:
        raise unauthorized(f"Authentication required to {action} comments")
    return payload


@router.get("/post/{post_id}", response_model=GetCommentsResponse)
async def get_comments(
    post_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    sort: ChronologicalSort = Query(default=ChronologicalSort.OLDEST),
    limit: int = Query(default=10, ge=1, le=100),
    page: int = Query(default=1, ge=1),
) -> GetCommentsResponse:
    """Get a page of top-level comments with their full reply threads.

    Replies are sorted recursively in the same direction as the top level.

    Args:
        post_id: Post UUID
        get_comments_use_case: Get comments use case from DI
        sort: newest or oldest
        limit: Top-level comments per page
        page: Page number (1-based)

    Returns:
        Threaded comments with pagination metadata
    """
    try:
        request = GetCommentsRequest(post_id=post_id, sort=sort, limit=limit, page=page)
        return await get_comments_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error fetching comments", post_id=post_id, error=str(e))
        raise internal_error("Failed to fetch comments", e)


@router.get(
    "/post/{post_id}/hierarchical", response_model=GetHierarchicalCommentsResponse
)
async def get_hierarchical_comments(
    post_id: str,
    request: Request,
    get_hierarchical_comments_use_case: FromDishka[GetHierarchicalCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    sort: CommentSort = Query(default=CommentSort.OLDEST),
    limit: int = Query(default=10, ge=1, le=50),
    page: int = Query(default=1, ge=1),
    max_depth: int = Query(default=5, ge=1, le=10),
    load_all_replies: bool = Query(default=False),
    auth_token: str | None = Cookie(default=None),
    session_id: str | None = Cookie(default=None),
) -> GetHierarchicalCommentsResponse:
    """Get ranked comments with engagement metrics.

    Every returned comment is recorded as viewed in the background.

    Args:
        post_id: Post UUID
        request: Incoming request (viewer address and user agent)
        get_hierarchical_comments_use_case: Use case from DI
        jwt_service: JWT service for the optional auth cookie
        sort: newest, oldest, hot, trending or best
        limit: Top-level comments per page
        page: Page number (1-based)
        max_depth: Reply levels to expand
        load_all_replies: Expand to the retrieval cap instead of max_depth
        auth_token: JWT token from cookie (optional)
        session_id: Session token from cookie (optional)

    Returns:
        Threaded comments with metrics and algorithm metadata
    """
    try:
        use_case_request = GetHierarchicalCommentsRequest(
            post_id=post_id,
            sort=sort,
            limit=limit,
            page=page,
            max_depth=max_depth,
            load_all_replies=load_all_replies,
            viewer=resolve_viewer(request, jwt_service, auth_token, session_id),
        )
        return await get_hierarchical_comments_use_case.execute(use_case_request)
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        logfire.error(
            "Unexpected error fetching hierarchical comments",
            post_id=post_id,
            error=str(e),
        )
        raise internal_error("Failed to fetch comments", e)


class TrackInteractionAPIRequest(BaseModel):
    """API request for tracking an interaction."""

    comment_id: str
    interaction_type: InteractionType
    metadata: dict = Field(default_factory=dict)


@router.post("/track-interaction", response_model=TrackInteractionResponse)
async def track_interaction(
    body: TrackInteractionAPIRequest,
    request: Request,
    track_interaction_use_case: FromDishka[TrackInteractionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    session_id: str | None = Cookie(default=None),
) -> TrackInteractionResponse:
    """Record an explicit interaction with a comment.

    Anonymous viewers are allowed.
    """
    try:
        use_case_request = TrackInteractionRequest(
            comment_id=body.comment_id,
            interaction_type=body.interaction_type,
            metadata=body.metadata,
            viewer=resolve_viewer(request, jwt_service, auth_token, session_id),
        )
        return await track_interaction_use_case.execute(use_case_request)
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        logfire.error(
            "Unexpected error tracking interaction",
            comment_id=body.comment_id,
            error=str(e),
        )
        raise internal_error("Failed to track interaction", e)


@router.get("/{comment_id}/replies", response_model=GetRepliesResponse)
async def get_replies(
    comment_id: str,
    get_replies_use_case: FromDishka[GetRepliesUseCase],
    sort: ChronologicalSort = Query(default=ChronologicalSort.OLDEST),
    limit: int = Query(default=20, ge=1, le=50),
) -> GetRepliesResponse:
    """Get the direct replies of a comment, without nesting.

    Args:
        comment_id: Parent comment UUID
        get_replies_use_case: Get replies use case from DI
        sort: newest or oldest
        limit: Maximum number of replies

    Returns:
        Direct replies of the comment
    """
    try:
        request = GetRepliesRequest(comment_id=comment_id, sort=sort, limit=limit)
        return await get_replies_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error fetching replies", comment_id=comment_id, error=str(e))
        raise internal_error("Failed to fetch replies", e)


@router.get("/{comment_id}", response_model=CommentItem)
async def get_comment(
    comment_id: str,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> CommentItem:
    """Get a single comment with its direct replies."""
    try:
        return await get_comment_use_case.execute(GetCommentRequest(comment_id=comment_id))
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error fetching comment", comment_id=comment_id, error=str(e))
        raise internal_error("Failed to fetch comment", e)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    post_id: str
    content: CommentContent
    parent_id: str | None = None  # Parent comment ID for replies


@router.post(
    "",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Create a comment on a post or reply to another comment.

    Requires authentication.

    Args:
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created comment details

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    payload = _require_user(jwt_service, auth_token, "create")

    try:
        use_case_request = CreateCommentRequest(
            post_id=request.post_id,
            content=request.content,
            author_id=payload.user_id,
            author_username=payload.username,
            parent_id=request.parent_id,
        )
        return await create_comment_use_case.execute(use_case_request)
    except DomainError as e:
        logfire.warn("Comment creation rejected", error=str(e), kind=e.kind.value)
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error creating comment", error=str(e))
        raise internal_error("Failed to create comment", e)


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: CommentContent


@router.put("/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateCommentResponse:
    """Update a comment's content.

    Only the comment author can edit.

    Raises:
        HTTPException: If not authenticated, not authorized, or validation fails
    """
    payload = _require_user(jwt_service, auth_token, "edit")

    try:
        use_case_request = UpdateCommentRequest(
            comment_id=comment_id,
            user_id=payload.user_id,
            content=request.content,
        )
        return await update_comment_use_case.execute(use_case_request)
    except DomainError as e:
        logfire.warn("Comment update rejected", error=str(e), kind=e.kind.value)
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error updating comment", error=str(e))
        raise internal_error("Failed to update comment", e)


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment together with all of its replies.

    Only the comment author can delete.
    """
    payload = _require_user(jwt_service, auth_token, "delete")

    try:
        use_case_request = DeleteCommentRequest(
            comment_id=comment_id, user_id=payload.user_id
        )
        return await delete_comment_use_case.execute(use_case_request)
    except DomainError as e:
        logfire.warn("Comment deletion rejected", error=str(e), kind=e.kind.value)
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error deleting comment", error=str(e))
        raise internal_error("Failed to delete comment", e)
