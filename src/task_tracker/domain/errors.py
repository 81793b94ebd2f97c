from __future__ import annotations
from enum import Enum


class ValidationErrorKind(str, Enum):
    missing_title = "missing_title"
    invalid_date = "invalid_date"


class TaskValidationError(Exception):
    """
    Raised by the editor when raw input cannot become a Task.

    Nothing has been constructed or mutated when this is raised; the caller
    re-prompts with `message`.
    """

    def __init__(self, kind: ValidationErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"TaskValidationError(kind={self.kind.value!r}, message={self.message!r})"
