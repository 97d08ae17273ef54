from typing import TYPE_CHECKING

from .base import Executor

if TYPE_CHECKING:  # pragma: no cover
    from depgather.state import Settled


class SettleAllExecutor(Executor):
    """
    Resolves, once every task has settled, to a mapping of task name to its
    `Fulfilled` or `Rejected` descriptor. Never raises a task's error.
    """

    def on_settled(self, name: str, state: "Settled") -> None:
        if self.complete:
            self.decide()

    def result(self) -> dict[str, "Settled"]:
        return {name: self.store.state(name) for name in self.tasks}
