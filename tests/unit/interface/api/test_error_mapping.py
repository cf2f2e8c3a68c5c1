"""Unit tests for mapping domain errors onto HTTP responses."""

from uuid import uuid4

import pytest

from roost.domain.error import (
    DomainError,
    InvalidParentError,
    MaxDepthExceededError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from roost.interface.error import internal_error, to_http_exception, unauthorized


class TestToHttpException:
    """Tests for to_http_exception."""

    @pytest.mark.parametrize(
        "error, status_code, kind",
        [
            (NotFoundError("Post", "abc"), 404, "NOT_FOUND"),
            (InvalidParentError("p", "q"), 400, "INVALID_PARENT"),
            (MaxDepthExceededError(5), 400, "MAX_DEPTH_EXCEEDED"),
            (ValidationError("post_id must be a valid UUID"), 400, "VALIDATION_ERROR"),
            (NotAuthorizedError("comment", "c", "u"), 403, "FORBIDDEN"),
            (DomainError("boom"), 500, "INTERNAL_ERROR"),
        ],
    )
    def test_status_and_type(self, error, status_code, kind):
        exc = to_http_exception(error)

        assert exc.status_code == status_code
        assert exc.detail["type"] == kind
        assert exc.detail["message"] == str(error)
        assert "details" not in exc.detail

    def test_max_depth_message_names_the_limit(self):
        exc = to_http_exception(MaxDepthExceededError(5))

        assert exc.detail["message"] == "Maximum comment depth of 5 exceeded"

    def test_not_found_message(self):
        post_id = str(uuid4())

        exc = to_http_exception(NotFoundError("Post", post_id))

        assert exc.detail["message"] == f"Post not found: {post_id}"


class TestOtherResponses:
    def test_internal_error_carries_details(self):
        exc = internal_error("Failed to fetch comments", RuntimeError("db down"))

        assert exc.status_code == 500
        assert exc.detail == {
            "message": "Failed to fetch comments",
            "type": "INTERNAL_ERROR",
            "details": "db down",
        }

    def test_unauthorized(self):
        exc = unauthorized("Authentication required to create comments")

        assert exc.status_code == 401
        assert exc.detail == "Authentication required to create comments"
