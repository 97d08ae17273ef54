from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="DEPGATHER_", extra="forbid")

    backend: Literal["asyncio", "trio"] = "asyncio"
    """Async backend used by the blocking `run` entrypoint."""

    backend_options: dict[str, Any] = Field(default_factory=dict)
    """Extra options passed to `anyio.run` alongside the backend."""

    log_wait_graph: bool = False
    """Log the rendered wait graph at DEBUG once a run completes."""

    warn_detached: bool = False
    """
    Warn when a fail-fast run returns early while units are still running in a
    caller-supplied task group.
    """
