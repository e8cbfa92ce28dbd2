# -*- coding: utf-8 -*-
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Generic, List, Optional, TypeVar

from support.services.changeset import Changeset

T = TypeVar("T")


class ErrorCode(str, Enum):
    """Non-exceptional failure variants returned by the store."""
    VALIDATION_FAILED = "validation_failed"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T] = None
    error: Optional[ErrorCode] = None
    changeset: Optional[Changeset] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def errors(self) -> Dict[str, List[str]]:
        return self.changeset.errors if self.changeset is not None else {}

    @classmethod
    def success(cls, value: T, changeset: Optional[Changeset] = None) -> "Result[T]":
        return cls(value=value, changeset=changeset)

    @classmethod
    def invalid(cls, changeset: Changeset) -> "Result[T]":
        return cls(error=ErrorCode.VALIDATION_FAILED, changeset=changeset)

    @classmethod
    def not_found(cls) -> "Result[T]":
        return cls(error=ErrorCode.NOT_FOUND)
