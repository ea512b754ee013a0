from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

@dataclass(frozen=True)
class Result(Generic[T]):
    """Tagged outcome of a call to the remote notifications api."""

    success: bool
    data: T
    error: str | None = None

    @classmethod
    def ok(cls, data: T) -> "Result[T]":
        return cls(success=True, data=data, error=None)

    @classmethod
    def fail(cls, error: BaseException | str, data: T = None) -> "Result[T]":  # type: ignore[assignment]
        msg = str(error).strip() or error.__class__.__name__
        return cls(success=False, data=data, error=msg)
