"""Typed errors raised by the Pessoa query layer.

Two failure modes reach callers:
- InvalidArgument: the caller passed an out-of-contract value; raised before
  any storage access and never worth retrying.
- StorageUnavailable: the database could not be reached; the original driver
  exception is chained as ``__cause__``. Retrying is up to the caller.
"""
from __future__ import annotations

from typing import Any


class PessoaError(Exception):
    """Base exception for the Pessoa query layer."""

    code = "PESSOA_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message}


class InvalidArgument(PessoaError, ValueError):
    """Raised when a paging parameter, sort or identifier is out of contract."""

    code = "INVALID_ARGUMENT"

    def __init__(self, message: str, field: str, value: Any = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["field"] = self.field
        return data


class StorageUnavailable(PessoaError):
    """Raised when the underlying database connection cannot be used."""

    code = "STORAGE_UNAVAILABLE"
