"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Orchestrates domain services for one comment operation.

    Requests carry raw client values (UUID strings, enums); use cases parse
    them and let domain errors propagate to the interface layer.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
