"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Zerotrust SDK, a product of Garudex Labs

Standard response envelope.

Every API response is wrapped as
``{success, errors[], messages[], result, result_info?}``. Bindings decode
the envelope for their expected result type and surface ``result``; paged
endpoints also surface ``result_info``.
"""

from typing import Any, ClassVar, Dict, FrozenSet, Generic, List, Optional, Type, TypeVar, Union

from pydantic import Field, ValidationError

from zerotrust.exceptions import DecodeError
from zerotrust.models.base import WireModel

T = TypeVar("T")
M = TypeVar("M", bound=WireModel)

UNMARSHAL_ERROR = "error unmarshalling the JSON response"
UNMARSHAL_ERROR_BODY = "error unmarshalling the JSON response error body"


def decode_record(model: Type[M], raw: Union[bytes, str]) -> M:
    """
    Parse a raw body that is a bare record rather than an envelope.

    Raises:
        DecodeError: If the body is not JSON or does not match the record
    """
    try:
        return model.model_validate_json(raw)
    except ValidationError as e:
        raise DecodeError(f"{UNMARSHAL_ERROR}: {e}", cause=e) from e


class ResponseInfo(WireModel):
    """A single error or informational entry of an envelope."""

    code: int = 0
    message: str = ""


class ResultInfo(WireModel):
    """
    Paging metadata of a list response.

    Also used as the paging request of list operations: ``page`` and
    ``per_page`` become query parameters.
    """

    page: int = 0
    per_page: int = 0
    total_pages: int = 0
    count: int = 0
    total: int = Field(0, alias="total_count")
    cursor: str = ""

    omit_if_empty: ClassVar[FrozenSet[str]] = frozenset({"total_pages", "cursor"})

    def next_page(self) -> "ResultInfo":
        """Return the paging request for the page after this one."""
        return ResultInfo(page=self.page + 1, per_page=self.per_page)

    @property
    def done(self) -> bool:
        """Whether this page is the last one."""
        if self.total_pages > 0:
            return self.page >= self.total_pages
        if self.per_page > 0 and self.total > 0:
            return self.page * self.per_page >= self.total
        return self.count == 0 or self.count < self.per_page

    def as_params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        if self.page > 0:
            params["page"] = self.page
        if self.per_page > 0:
            params["per_page"] = self.per_page
        return params


class Envelope(WireModel, Generic[T]):
    """
    Response envelope parameterised by its result type.

    Example::

        envelope = Envelope[TeamsRule].decode(raw_bytes)
        rule = envelope.result
    """

    success: bool = False
    errors: List[ResponseInfo] = Field(default_factory=list)
    messages: List[ResponseInfo] = Field(default_factory=list)
    result: Optional[T] = None
    result_info: Optional[ResultInfo] = None

    omit_if_unset: ClassVar[FrozenSet[str]] = frozenset({"result_info"})

    @classmethod
    def decode(cls, raw: Union[bytes, str]) -> "Envelope[T]":
        """
        Parse a raw response body.

        Raises:
            DecodeError: If the body is not JSON or does not match the envelope
        """
        return decode_record(cls, raw)
