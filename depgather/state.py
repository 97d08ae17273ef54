from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, Literal, TypeVar, Union

if TYPE_CHECKING:  # pragma: no cover
    from typing import Any

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Running:
    status: Literal["running"] = field(default="running", init=False)


@dataclass(kw_only=True, frozen=True, slots=True)
class Fulfilled(Generic[T]):
    """Settlement of a task whose unit returned `value`."""

    value: T
    status: Literal["fulfilled"] = field(default="fulfilled", init=False)

    def as_dict(self) -> dict[str, "Any"]:
        return {"status": self.status, "value": self.value}


@dataclass(kw_only=True, frozen=True, slots=True)
class Rejected:
    """Settlement of a task whose unit raised `reason`."""

    reason: Exception
    status: Literal["rejected"] = field(default="rejected", init=False)

    def as_dict(self) -> dict[str, "Any"]:
        return {"status": self.status, "reason": self.reason}


RUNNING = Running()

Settled = Union[Fulfilled, Rejected]
TaskState = Union[Running, Fulfilled, Rejected]
