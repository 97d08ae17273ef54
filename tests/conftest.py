import anyio
import pytest


@pytest.fixture(
    params=[
        pytest.param(("asyncio", {"use_uvloop": False}), id="asyncio"),
        pytest.param(
            ("trio", {"restrict_keyboard_interrupt_to_checkpoints": True}), id="trio"
        ),
    ],
    scope="session",
)
def anyio_backend(request):
    return request.param


@pytest.fixture
def sleeper():
    """Build a task that sleeps for `delay` seconds and returns `value`."""

    def _sleeper(delay: float, value):
        async def _task():
            await anyio.sleep(delay)
            return value

        return _task

    return _sleeper
