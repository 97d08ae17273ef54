import logging
from typing import TYPE_CHECKING

from .exceptions import (
    CircularDependencyError,
    SelfDependencyError,
    UnknownDependencyError,
)
from .future import TaskFuture

if TYPE_CHECKING:  # pragma: no cover
    from typing import Any

    from .executor.base import Executor

logger = logging.getLogger(__name__)


class Deps:
    """
    The dependency handle given to a single running task. It is bound to that task
    as the caller of every access.

    ```python
    async def total(deps: Deps) -> int:
        return await deps.get("price") * await deps.get("quantity")
    ```

    Accessing a dependency never raises directly. Invalid accesses return an
    already-rejected future, so the error surfaces where the result is awaited.
    """

    def __init__(self, caller: str, executor: "Executor") -> None:
        self.caller = caller
        self._executor = executor

    @property
    def names(self) -> frozenset[str]:
        return frozenset(self._executor.tasks)

    def get(self, name: str) -> TaskFuture["Any"]:
        if name not in self._executor.tasks:
            return TaskFuture.rejected(name, UnknownDependencyError(name))
        elif name == self.caller:
            return TaskFuture.rejected(name, SelfDependencyError(name))

        graph = self._executor.graph
        if graph.would_cycle(self.caller, name):
            return TaskFuture.rejected(
                name, CircularDependencyError(graph.cycle_path(self.caller, name))
            )

        if graph.add(self.caller, name):
            logger.debug("Task '%s' is waiting on '%s'.", self.caller, name)

        return self._executor.store.subscribe(name)

    def __getitem__(self, name: str) -> TaskFuture["Any"]:
        return self.get(name)

    def __repr__(self) -> str:
        return f"<Deps caller={self.caller!r}>"
