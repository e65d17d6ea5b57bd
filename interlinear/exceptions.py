"""
Custom exceptions for the interlinear library.

All exceptions inherit from InterlinearError for easy catching of library-specific errors.
None of them are meant to reach the rendering pipeline: the hook recovers from
each one by returning the original content.
"""

from typing import Any


class InterlinearError(Exception):
    """Base exception for all interlinear errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


class ResolutionError(InterlinearError):
    """Raised when no annotation locator can be derived for a document."""

    def __init__(
        self,
        message: str,
        locator: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if locator:
            ctx["locator"] = locator
        super().__init__(message, ctx)
        self.locator = locator


class FetchError(InterlinearError):
    """Raised when an annotation resource cannot be fetched."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if url:
            ctx["url"] = url
        if status_code is not None:
            ctx["status"] = status_code
        super().__init__(message, ctx)
        self.url = url
        self.status_code = status_code

    @property
    def is_not_found(self) -> bool:
        """Whether the resource legitimately does not exist."""
        return self.status_code == 404


class MergeError(InterlinearError):
    """Raised when annotation content cannot be merged into a document."""

    def __init__(
        self,
        message: str,
        document_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if document_id:
            ctx["document"] = document_id
        super().__init__(message, ctx)
        self.document_id = document_id


class ConfigurationError(InterlinearError):
    """Raised when configuration is invalid."""

    def __init__(
        self,
        message: str,
        setting_name: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if setting_name:
            ctx["setting"] = setting_name
        super().__init__(message, ctx)
        self.setting_name = setting_name
