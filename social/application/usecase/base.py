"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One application operation: a validated request in, an emitted shape out."""

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        """Run the operation.

        Raises:
            DomainError: Subclasses document the concrete errors
        """
        pass
