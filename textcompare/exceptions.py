"""
Custom exceptions for the textcompare library.

All exceptions inherit from TextCompareError for easy catching of library-specific errors.
"""

from typing import Any


class TextCompareError(Exception):
    """Base exception for all textcompare errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


class AlignmentError(TextCompareError):
    """Raised when an alignment path contains a step that is not a match, insertion or deletion."""

    def __init__(
        self,
        message: str,
        previous: tuple[int, int] | None = None,
        current: tuple[int, int] | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if previous is not None:
            ctx["previous"] = previous
        if current is not None:
            ctx["current"] = current
        super().__init__(message, ctx)
        self.previous = previous
        self.current = current


class MetricError(TextCompareError):
    """Raised when an evaluation metric is undefined for the given inputs."""

    def __init__(
        self,
        message: str = "undefined rate: empty reference",
        metric: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if metric:
            ctx["metric"] = metric
        super().__init__(message, ctx)
        self.metric = metric


class ConfigurationError(TextCompareError):
    """Raised when configuration or an argument is invalid."""

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
