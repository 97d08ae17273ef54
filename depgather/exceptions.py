from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence
    from typing import Any


class ErrorKind(str, Enum):
    UNKNOWN_DEPENDENCY = "unknown_dependency"
    SELF_DEPENDENCY = "self_dependency"
    CIRCULAR_DEPENDENCY = "circular_dependency"
    NOT_CALLABLE = "not_callable"


class DepgatherError(Exception):
    kind: "ErrorKind | None" = None

    def __init__(self, *args: "Any", **kwargs: "Any") -> None:
        super().__init__(*args, **kwargs)


##
## DEPENDENCY ACCESS
##


class DependencyError(DepgatherError):
    def __init__(self, message: str) -> None:
        super().__init__(message)


class UnknownDependencyError(DependencyError):
    kind = ErrorKind.UNKNOWN_DEPENDENCY

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'Unknown task "{name}".')


class CircularDependencyError(DependencyError):
    kind = ErrorKind.CIRCULAR_DEPENDENCY

    def __init__(self, path: "Sequence[str]") -> None:
        self.path: tuple[str, ...] = tuple(path)
        super().__init__(
            f"Tasks cannot wait on each other in a cycle. Offending cycle:\n"
            f"  {' -> '.join(self.path)}"
        )


class SelfDependencyError(CircularDependencyError):
    kind = ErrorKind.SELF_DEPENDENCY

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__((name, name))


##
## TASK DEFINITION
##


class TaskDefinitionError(DepgatherError):
    def __init__(self, message: str) -> None:
        super().__init__(message)


class NotCallableError(TaskDefinitionError):
    kind = ErrorKind.NOT_CALLABLE

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'Task "{name}" is not callable.')
