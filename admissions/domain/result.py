"""Tagged result type returned by the pricing services.

Services report unknown references as values rather than raising, so callers
branch on `is_ok` (or match on `Ok`/`Err`) instead of catching exceptions.
`unwrap()` is there for callers that would rather have the exception.
"""

from dataclasses import dataclass
from typing import Generic, Literal, NoReturn, TypeVar, Union

from admissions.domain.errors import DomainError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying the computed value."""

    value: T

    @property
    def is_ok(self) -> Literal[True]:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying the domain error."""

    error: DomainError

    @property
    def is_ok(self) -> Literal[False]:
        return False

    @property
    def message(self) -> str:
        return self.error.message

    def unwrap(self) -> NoReturn:
        raise self.error


Result = Union[Ok[T], Err]
