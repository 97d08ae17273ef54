from .api import gather, gather_settled, run
from .config import Config
from .deps import Deps
from .exceptions import (
    CircularDependencyError,
    DepgatherError,
    ErrorKind,
    NotCallableError,
    SelfDependencyError,
    UnknownDependencyError,
)
from .future import TaskFuture
from .settle import settle_and_collect
from .state import Fulfilled, Rejected

__all__ = [
    "gather",
    "gather_settled",
    "run",
    "settle_and_collect",
    "Config",
    "Deps",
    "TaskFuture",
    "Fulfilled",
    "Rejected",
    "ErrorKind",
    "DepgatherError",
    "UnknownDependencyError",
    "SelfDependencyError",
    "CircularDependencyError",
    "NotCallableError",
]
