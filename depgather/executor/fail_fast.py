import logging
from typing import TYPE_CHECKING

from depgather.state import Rejected

from .base import Executor

if TYPE_CHECKING:  # pragma: no cover
    from typing import Any

    from depgather.state import Settled

logger = logging.getLogger(__name__)


class FailFastExecutor(Executor):
    """
    Resolves to a mapping of task name to value once every task has fulfilled, or
    raises the error of the first task to settle as rejected. Errors of tasks that
    fail afterwards are discarded.
    """

    def __init__(self, *args: "Any", **kwargs: "Any") -> None:
        super().__init__(*args, **kwargs)
        self.failure: "tuple[str, Exception] | None" = None

    def on_settled(self, name: str, state: "Settled") -> None:
        if isinstance(state, Rejected):
            if self.failure is None:
                self.failure = (name, state.reason)
                self.decide()
            else:
                logger.debug(
                    "Discarding failure of task '%s' after '%s' already failed: %r",
                    name,
                    self.failure[0],
                    state.reason,
                )
        elif self.complete:
            self.decide()

    def result(self) -> dict[str, "Any"]:
        if self.failure is not None:
            raise self.failure[1]

        return {name: self.store.state(name).value for name in self.tasks}
