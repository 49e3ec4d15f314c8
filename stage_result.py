from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    NOT_FOUND = "NotFound"
    SCHEMA = "SchemaError"
    MALFORMED_ROW = "MalformedRow"
    IO = "IOError"


class StageError:
    def __init__(self, kind: ErrorKind, message: str, detail: str = ""):
        self.kind = kind
        self.message = message
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"

    def __repr__(self) -> str:
        return f"StageError({self.kind}, {self.message!r})"


class StageResult:
    """
    Outcome of one pipeline stage (read, filter, write).

    Holds either the stage's value or a StageError, never both.
    """

    def __init__(self, value: Any = None, error: Optional[StageError] = None):
        self.value = value
        self.error = error

    @classmethod
    def success(cls, value: Any) -> "StageResult":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str, detail: str = "") -> "StageResult":
        return cls(error=StageError(kind, message, detail))

    @property
    def ok(self) -> bool:
        return self.error is None

    def __repr__(self) -> str:
        if self.ok:
            return f"StageResult.success({type(self.value).__name__})"
        return f"StageResult.failure({self.error!r})"
