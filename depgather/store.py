import logging
from typing import TYPE_CHECKING

from .future import TaskFuture
from .state import RUNNING

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterator
    from typing import Any

    from .state import Settled, TaskState

logger = logging.getLogger(__name__)


class StateStore:
    """
    Per-run settlement state and resolver queues, keyed by task name.

    Entries are created lazily on first reference. A task with no entry is running.
    Settling a task stores its outcome permanently and drains its resolver queue in
    registration order, in the same step.
    """

    def __init__(self) -> None:
        self._states: dict[str, "Settled"] = {}
        self._resolvers: dict[str, list[TaskFuture["Any"]]] = {}

    def state(self, name: str) -> "TaskState":
        return self._states.get(name, RUNNING)

    def subscribe(self, name: str) -> TaskFuture["Any"]:
        if settled := self._states.get(name):
            return TaskFuture(name, settled)

        future: TaskFuture["Any"] = TaskFuture(name)
        self._resolvers.setdefault(name, []).append(future)
        return future

    def pending(self, name: str) -> int:
        return len(self._resolvers.get(name, ()))

    def settle(self, name: str, state: "Settled") -> None:
        if name in self._states:
            raise RuntimeError(f"Task '{name}' has already settled.")

        self._states[name] = state
        waiters = self._resolvers.pop(name, [])

        logger.debug(
            "Task '%s' %s; notifying %d waiter(s).", name, state.status, len(waiters)
        )

        for future in waiters:
            future.settle(state)

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> "Iterator[str]":
        return iter(self._states)
