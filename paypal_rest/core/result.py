from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

from paypal_rest.core.errors import PayPalError

T = TypeVar("T")
D = TypeVar("D")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful call; ``value`` is the decoded JSON document."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: D) -> Union[T, D]:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed call; ``reason`` describes what went wrong and is never raised for you."""

    reason: PayPalError

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise self.reason

    def unwrap_or(self, default: D) -> D:
        return default


ApiResult = Union[Ok[T], Err]
