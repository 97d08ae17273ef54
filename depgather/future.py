from typing import TYPE_CHECKING, Generic, TypeVar

import anyio

from .state import RUNNING, Fulfilled, Rejected, Running

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Generator
    from typing import Any

    from .state import Settled, TaskState

T = TypeVar("T")


class TaskFuture(Generic[T]):
    """
    The eventual outcome of a single task, as observed by one waiter.

    A future is either created already settled, or pending and settled exactly once
    when its task's resolver queue is drained. Awaiting a settled future never
    suspends. Awaiting it more than once yields the same value or raises the same
    exception instance.
    """

    def __init__(self, name: str, state: "TaskState" = RUNNING) -> None:
        self.name = name
        self._state: "TaskState" = state
        self._event: anyio.Event | None = None if self.done() else anyio.Event()

    @classmethod
    def rejected(cls, name: str, reason: Exception) -> "TaskFuture[Any]":
        return cls(name, Rejected(reason=reason))

    def done(self) -> bool:
        return not isinstance(self._state, Running)

    @property
    def state(self) -> "TaskState":
        return self._state

    def settle(self, state: "Settled") -> None:
        if self.done():
            raise RuntimeError(f"Future for task '{self.name}' is already settled.")

        self._state = state
        self._event.set()

    def result(self) -> T:
        if isinstance(self._state, Fulfilled):
            return self._state.value
        elif isinstance(self._state, Rejected):
            raise self._state.reason

        raise RuntimeError(f"Task '{self.name}' has not settled yet.")

    async def wait(self) -> T:
        if self._event is not None:
            await self._event.wait()

        return self.result()

    def __await__(self) -> "Generator[Any, None, T]":
        return self.wait().__await__()

    def __repr__(self) -> str:
        return f"<TaskFuture name={self.name!r} status={self._state.status!r}>"
