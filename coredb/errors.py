"""Exceptions raised by the database helpers."""

from __future__ import annotations

from typing import Any


class CoreDBError(Exception):
    """Base class for every error raised by this package."""


class AvoidInsertError(CoreDBError):
    """An insert statement affected no row."""

    def __init__(self, message: str = "ErrAvoidInsertion") -> None:
        super().__init__(message)


class AvoidUpdateError(CoreDBError):
    """An update statement affected no row."""

    def __init__(self, message: str = "ErrAvoidUpdate") -> None:
        super().__init__(message)


class InvalidScanError(CoreDBError, TypeError):
    """An invalid target was given to a scan or column lookup."""

    def __init__(self, target_type: Any) -> None:
        self.target_type = target_type
        if target_type is None:
            message = "coredb: target is nil"
        else:
            name = getattr(target_type, "__qualname__", None) or repr(target_type)
            message = f"coredb: target must be a model class or instance, got {name}"
        super().__init__(message)