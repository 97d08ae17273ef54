from .base import Executor
from .fail_fast import FailFastExecutor
from .settle_all import SettleAllExecutor

__all__ = ["Executor", "FailFastExecutor", "SettleAllExecutor"]
