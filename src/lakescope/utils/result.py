"""Explicit success-or-error values for upstream fetches.

Every source returns a FetchResult instead of raising, so callers decide
where the fallback happens and tests can see which path was taken.

Example:
    >>> result = FetchResult.failure("open-meteo", "timed out")
    >>> result.ok
    False
    >>> result.unwrap_or({"fallback": True})
    {'fallback': True}
"""

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class FetchError:
    """Why an upstream fetch failed.

    Attributes:
        source: Upstream name ("usgs", "open-meteo", "overpass")
        message: Human-readable failure description
        status_code: HTTP status returned by upstream, if any
    """

    source: str
    message: str
    status_code: Optional[int] = None

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.source}: {self.message} (HTTP {self.status_code})"
        return f"{self.source}: {self.message}"


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Result of a fetch: either a value or a FetchError, never both."""

    value: Optional[T] = None
    error: Optional[FetchError] = None

    def __post_init__(self):
        if (self.value is None) == (self.error is None):
            raise ValueError("FetchResult needs exactly one of value or error")

    @classmethod
    def success(cls, value: T) -> "FetchResult[T]":
        return cls(value=value)

    @classmethod
    def failure(
        cls, source: str, message: str, status_code: Optional[int] = None
    ) -> "FetchResult[T]":
        return cls(error=FetchError(source, message, status_code))

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value or raise RuntimeError with the fetch error."""
        if self.error is not None:
            raise RuntimeError(str(self.error))
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Return the value, or the caller-supplied default on error."""
        return self.value if self.error is None else default

    def map(self, func: Callable[[T], U]) -> "FetchResult[U]":
        """Apply func to the value; exceptions become a FetchError.

        The source name of the error is "parse" since the failure happened
        after the upstream call succeeded.
        """
        if self.error is not None:
            return FetchResult(error=self.error)
        try:
            return FetchResult(value=func(self.value))
        except (KeyError, IndexError, TypeError, ValueError) as e:
            return FetchResult.failure("parse", f"Unexpected upstream shape: {e}")
