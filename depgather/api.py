from typing import TYPE_CHECKING

import anyio
import sniffio

from .config import Config
from .executor import FailFastExecutor, SettleAllExecutor

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Mapping
    from typing import Any

    from anyio.abc import TaskGroup

    from .executor.base import TaskFn
    from .state import Settled


async def gather(
    tasks: "Mapping[str, TaskFn]",
    *,
    task_group: "TaskGroup | None" = None,
    **settings: "Any",
) -> dict[str, "Any"]:
    """
    Run every task concurrently and return their values by name, raising the error of
    the first task to fail.

    Each task is a callable taking either nothing or a `Deps` handle, through which it
    may await the outcome of any other task in the set:

    ```python
    results = await gather(
        {
            "a": lambda: 1,
            "b": some_coroutine_function,
            "c": lambda deps: deps.get("a"),
        }
    )
    ```

    Tasks are never cancelled, so by default a failure is only raised once every
    task has finished. Pass a running `task_group` to raise as soon as the first
    task fails and let the rest finish in that group.
    """
    return await FailFastExecutor(tasks, Config(**settings)).execute(task_group)


async def gather_settled(
    tasks: "Mapping[str, TaskFn]",
    *,
    task_group: "TaskGroup | None" = None,
    **settings: "Any",
) -> dict[str, "Settled"]:
    """
    Run every task concurrently and return each task's `Fulfilled` or `Rejected`
    settlement by name. Never raises a task's error.
    """
    return await SettleAllExecutor(tasks, Config(**settings)).execute(task_group)


def run(
    tasks: "Mapping[str, TaskFn]", *, settled: bool = False, **settings: "Any"
) -> dict[str, "Any"]:
    """Blocking variant of `gather` (or `gather_settled`) for synchronous callers."""
    config = Config(**settings)
    executor = (SettleAllExecutor if settled else FailFastExecutor)(tasks, config)

    try:
        sniffio.current_async_library()
        raise RuntimeError(
            "Calling `run` within an event loop is forbidden as it starts its own."
            " Await `gather` or `gather_settled` instead."
        )
    except sniffio.AsyncLibraryNotFoundError:
        return anyio.run(
            executor.execute,
            backend=config.backend,
            backend_options=config.backend_options or None,
        )
