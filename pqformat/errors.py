"""Exception types raised while reading and writing parquet data."""

from __future__ import annotations

__all__ = ["ParquetError", "OutOfSpecError", "ExternalError", "from_external_error"]


class ParquetError(Exception):
    """General parquet error."""


class OutOfSpecError(ParquetError):
    """Raised when the data is known to be out of the parquet specification."""


class ExternalError(ParquetError):
    """An error that originated in a consumer or a dependency."""

    def __init__(self, message: str, error: BaseException) -> None:
        super().__init__(message)
        self.message = message
        self.error = error

    def __str__(self) -> str:
        return f"{self.message}: {self.error}"


def from_external_error(error: BaseException) -> ExternalError:
    """Wrap an external error in an :class:`ExternalError` with an empty message."""
    return ExternalError("", error)