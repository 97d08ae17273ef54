from typing import TYPE_CHECKING

import anyio

from .state import Fulfilled, Rejected

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Awaitable, Callable, Sequence
    from typing import Any

    from .state import Settled


async def settle_and_collect(
    awaitables: "Sequence[Awaitable[Any]]",
    on_rejected: "Callable[[Rejected], None] | None" = None,
) -> list["Any"]:
    """
    Await every awaitable concurrently and return their values in order, but only
    after all of them have settled. If any failed, `on_rejected` is called for each
    failure in input order and an `ExceptionGroup` of every failure is raised.
    """
    outcomes: list["Settled | None"] = [None] * len(awaitables)

    async def _settle(index: int, awaitable: "Awaitable[Any]") -> None:
        try:
            outcomes[index] = Fulfilled(value=await awaitable)
        except Exception as e:
            outcomes[index] = Rejected(reason=e)

    async with anyio.create_task_group() as tg:
        for index, awaitable in enumerate(awaitables):
            tg.start_soon(_settle, index, awaitable)

    if rejected := [outcome for outcome in outcomes if isinstance(outcome, Rejected)]:
        if on_rejected is not None:
            for outcome in rejected:
                on_rejected(outcome)

        raise ExceptionGroup(
            "Awaitable rejection", [outcome.reason for outcome in rejected]
        )

    return [outcome.value for outcome in outcomes]
