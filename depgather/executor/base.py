import inspect
import logging
import warnings
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import anyio

from depgather.config import Config
from depgather.deps import Deps
from depgather.exceptions import NotCallableError
from depgather.graph import WaitGraph
from depgather.state import Fulfilled, Rejected
from depgather.store import StateStore

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Awaitable, Callable, Mapping
    from typing import Any

    from anyio.abc import TaskGroup

    from depgather.state import Settled

    TaskFn = Callable[..., Awaitable[Any] | Any]

logger = logging.getLogger(__name__)

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def _accepts_deps(fn: "TaskFn") -> bool:
    try:
        parameters = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        return False

    return any(
        param.kind is inspect.Parameter.VAR_POSITIONAL
        or (param.kind in _POSITIONAL and param.default is inspect.Parameter.empty)
        for param in parameters
    )


class Executor(ABC):
    """
    Runs one set of tasks to completion. Every task is launched at once, each with its
    own `Deps` handle, and its outcome is memoized in the `StateStore`. Subclasses
    decide when the run has an answer and what that answer is.

    An executor is single-use; all of its state is discarded with it.
    """

    def __init__(
        self, tasks: "Mapping[str, TaskFn]", config: "Config | None" = None
    ) -> None:
        self.tasks: dict[str, "TaskFn"] = dict(tasks)
        self.config = config or Config()
        self.store = StateStore()
        self.graph = WaitGraph()
        self._decided: anyio.Event | None = None

    @property
    def complete(self) -> bool:
        return len(self.store) == len(self.tasks)

    async def execute(self, task_group: "TaskGroup | None" = None) -> "Any":
        """
        Launch every task and wait for the aggregation policy to reach a result.

        Without a task group, the run owns its units and only returns once all of them
        have finished. Given a running task group, units are dispatched into it and
        this returns as soon as the result is known; units still running finish
        in the caller's group.
        """
        if self._decided is not None:
            raise RuntimeError("Executors cannot be reused across runs.")

        self._decided = anyio.Event()
        if not self.tasks:
            return self.result()

        if task_group is not None:
            self._dispatch(task_group)
            await self._decided.wait()

            if running := len(self.tasks) - len(self.store):
                logger.debug("Returning with %d task(s) still running.", running)

                if self.config.warn_detached:
                    warnings.warn(
                        f"{running} task(s) are still running in the supplied task"
                        " group and their results will be discarded.",
                        stacklevel=2,
                    )
        else:
            async with anyio.create_task_group() as tg:
                self._dispatch(tg)

        if self.config.log_wait_graph:
            logger.debug("Wait graph:\n%s", self.graph)

        return self.result()

    def _dispatch(self, tg: "TaskGroup") -> None:
        for name in self.tasks:
            tg.start_soon(self._run_task, name, name=f"depgather:{name}")

    async def _run_task(self, name: str) -> None:
        fn = self.tasks[name]
        logger.debug("Starting task '%s'.", name)

        try:
            if not callable(fn):
                raise NotCallableError(name)

            value = fn(Deps(name, self)) if _accepts_deps(fn) else fn()
            if inspect.isawaitable(value):
                value = await value
        except Exception as e:
            state: "Settled" = Rejected(reason=e)
        else:
            state = Fulfilled(value=value)

        self.store.settle(name, state)
        self.on_settled(name, state)

    def decide(self) -> None:
        self._decided.set()

    @abstractmethod
    def on_settled(self, name: str, state: "Settled") -> None:
        """Called once per task, right after it settles."""
        raise NotImplementedError()

    @abstractmethod
    def result(self) -> "Any":
        """Build the run's result, or raise the run's error."""
        raise NotImplementedError()
