"""Response envelopes shared by the routes."""

from typing import Generic, TypeVar

from pydantic import BaseModel

from prompthub.domain.value import Pagination

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """Successful response body, the payload sits under ``data``."""

    data: T


class MessageResponse(BaseModel):
    """Body for operations that only acknowledge success."""

    message: str


class PageResponse(BaseModel, Generic[T]):
    """One page of a listing with its pagination window."""

    data: list[T]
    pagination: Pagination
