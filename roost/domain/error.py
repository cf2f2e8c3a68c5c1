"""Domain layer errors."""

from enum import Enum


class ErrorKind(str, Enum):
    """Machine readable error categories returned to API clients."""

    NOT_FOUND = "NOT_FOUND"
    INVALID_PARENT = "INVALID_PARENT"
    MAX_DEPTH_EXCEEDED = "MAX_DEPTH_EXCEEDED"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    FORBIDDEN = "FORBIDDEN"


class DomainError(Exception):
    """Base domain error."""

    kind: ErrorKind = ErrorKind.INTERNAL_ERROR


class ValidationError(DomainError):
    """Domain validation error."""

    kind = ErrorKind.VALIDATION_ERROR


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidParentError(DomainError):
    """Raised when a reply targets a comment on a different post."""

    kind = ErrorKind.INVALID_PARENT

    def __init__(self, parent_id: str, post_id: str):
        self.parent_id = parent_id
        self.post_id = post_id
        super().__init__("Parent comment does not belong to this post")


class MaxDepthExceededError(DomainError):
    """Raised when a reply would be nested deeper than allowed."""

    kind = ErrorKind.MAX_DEPTH_EXCEEDED

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Maximum comment depth of {max_depth} exceeded")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    kind = ErrorKind.FORBIDDEN

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class QueryTimeoutError(DomainError):
    """Raised when the store gives up on a query that ran past its time limit."""

    def __init__(self, operation: str, timeout_seconds: float):
        self.operation = operation
        self.timeout_seconds = timeout_seconds
        super().__init__(f"{operation} exceeded {timeout_seconds:.3f}s")
