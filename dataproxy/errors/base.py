"""Base error class for dataset proxies and their configuration."""

from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Optional, Type, TypeVar

from loguru import logger
from pydantic import BaseModel, Field


class ErrorContext(BaseModel):
    """Details attached to a data-proxy error."""

    technical_details: Dict[str, Any] = Field(default_factory=dict)
    suggestions: List[str] = Field(default_factory=list)
    cause: Optional[str] = None


T = TypeVar("T", bound="DataProxyError")


class DataProxyError(Exception):
    """Base exception for data-proxy.

    Keyword arguments other than ``error_code`` and ``cause`` are recorded as
    technical details; ``None`` values are left out. Every error is logged
    once, when it is created.
    """

    default_code: ClassVar[str] = "DATA_PROXY"
    log_level: ClassVar[str] = "ERROR"

    def __init__(
        self,
        message: str,
        *,
        error_code: Optional[str] = None,
        cause: Optional[BaseException] = None,
        **details: Any,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_code
        self.cause = cause
        self.context = ErrorContext(
            technical_details={key: value for key, value in details.items() if value is not None},
            cause=f"{type(cause).__name__}: {cause}" if cause is not None else None,
        )

        logger.bind(error_code=self.error_code).log(self.log_level, message)

    @classmethod
    def from_exception(
        cls: Type[T],
        exc: BaseException,
        message: Optional[str] = None,
        **details: Any,
    ) -> T:
        """Wrap another exception, keeping it as the cause."""
        return cls(message or str(exc), cause=exc, **details)

    def with_context(self: T, **details: Any) -> T:
        """Record more technical details."""
        self.context.technical_details.update(details)
        return self

    def with_suggestion(self: T, suggestion: str) -> T:
        """Add a hint on how to resolve the error."""
        self.context.suggestions.append(suggestion)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for serialization."""
        return {
            "error_type": type(self).__name__,
            "error_code": self.error_code,
            "message": self.message,
            **self.context.model_dump(mode="json"),
        }
