"""
Base use case class.

A use case wraps one business operation behind a request/response contract
and knows nothing about HTTP; routes translate requests and schedule work.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class UseCase(ABC, Generic[RequestT, ResponseT]):

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        """
        Execute the use case and return a response.

        Raises:
            Domain exceptions (InvalidScriptError, ProjectNotFoundError, ...).
            Routes convert them to HTTP responses.
        """
        pass
