import anyio
import pytest

from depgather import Deps, gather


@pytest.mark.anyio
async def test_empty():
    assert await gather({}) == {}


@pytest.mark.anyio
async def test_sync_and_async_tasks(sleeper):
    result = await gather({"a": lambda: 1, "b": sleeper(0.01, 2), "c": lambda: 3})

    assert result == {"a": 1, "b": 2, "c": 3}


@pytest.mark.anyio
async def test_result_keeps_declaration_order(sleeper):
    result = await gather(
        {"slow": sleeper(0.05, "s"), "fast": sleeper(0.0, "f"), "mid": sleeper(0.02, "m")}
    )

    assert list(result) == ["slow", "fast", "mid"]


@pytest.mark.anyio
async def test_independent_tasks_run_in_parallel(sleeper):
    start = anyio.current_time()
    result = await gather({name: sleeper(0.1, name) for name in ("a", "b", "c")})
    elapsed = anyio.current_time() - start

    assert result == {"a": "a", "b": "b", "c": "c"}
    assert elapsed < 0.25


@pytest.mark.anyio
async def test_single_dependency():
    order: list[str] = []

    async def a():
        order.append("a")
        return 1

    async def b(deps: Deps):
        value = await deps.get("a")
        order.append("b")
        return value + 10

    assert await gather({"a": a, "b": b}) == {"a": 1, "b": 11}
    assert order == ["a", "b"]


@pytest.mark.anyio
async def test_chained_dependencies():
    order: list[str] = []

    async def a():
        order.append("a")
        return 1

    async def b(deps: Deps):
        value = await deps.get("a")
        order.append("b")
        return value + 10

    async def c(deps: Deps):
        value = await deps["b"]
        order.append("c")
        return value + 100

    # declared in reverse so the dependents start waiting first
    assert await gather({"c": c, "b": b, "a": a}) == {"c": 111, "b": 11, "a": 1}
    assert order == ["a", "b", "c"]


@pytest.mark.anyio
async def test_dependent_does_not_block_independent_tasks(sleeper):
    async def c(deps: Deps):
        return await deps.get("a") + 10

    start = anyio.current_time()
    result = await gather({"a": sleeper(0.1, 1), "b": sleeper(0.3, 2), "c": c})
    elapsed = anyio.current_time() - start

    assert result == {"a": 1, "b": 2, "c": 11}
    # bounded by the slowest independent task, not a + b
    assert elapsed < 0.38


@pytest.mark.anyio
async def test_slowest_independent_task_bounds_wall_time(sleeper):
    async def c(deps: Deps):
        return await deps.get("a") + 10

    with anyio.fail_after(0.5):
        result = await gather({"a": sleeper(0.01, 1), "b": sleeper(0.05, 2), "c": c})

    assert result == {"a": 1, "b": 2, "c": 11}


@pytest.mark.anyio
async def test_shared_dependency_runs_once():
    calls = {"a": 0}
    shared = {"payload": [1, 2, 3]}

    async def a():
        calls["a"] += 1
        await anyio.sleep(0.01)
        return shared

    async def dependent(deps: Deps):
        return await deps.get("a")

    result = await gather({"a": a, "b": dependent, "c": dependent, "d": dependent})

    assert calls["a"] == 1
    assert result["b"] is result["c"] is result["d"] is shared


@pytest.mark.anyio
async def test_repeated_access_runs_dependency_once():
    calls = {"a": 0}

    async def a():
        calls["a"] += 1
        await anyio.sleep(0.01)
        return 5

    async def b(deps: Deps):
        first = await deps.get("a")
        second = await deps.get("a")
        third = await deps.get("a")
        return first + second + third

    assert await gather({"a": a, "b": b}) == {"a": 5, "b": 15}
    assert calls["a"] == 1


@pytest.mark.anyio
async def test_sync_task_may_return_dependency_future():
    result = await gather({"a": lambda: "value", "b": lambda deps: deps.get("a")})

    assert result == {"a": "value", "b": "value"}


@pytest.mark.anyio
async def test_complex_graph(sleeper):
    async def d(deps: Deps):
        return await deps.get("b") + await deps.get("c")

    async def b(deps: Deps):
        return await deps.get("a") * 2

    async def c(deps: Deps):
        return await deps.get("a") * 3

    async def e(deps: Deps):
        return (await deps.get("d"), await deps.get("a"))

    result = await gather({"e": e, "d": d, "c": c, "b": b, "a": sleeper(0.01, 1)})

    assert result == {"e": (5, 1), "d": 5, "c": 3, "b": 2, "a": 1}


@pytest.mark.anyio
async def test_various_return_values():
    sentinel = object()

    result = await gather(
        {
            "none": lambda: None,
            "list": lambda: [1, 2],
            "dict": lambda: {"k": "v"},
            "object": lambda: sentinel,
        }
    )

    assert result == {
        "none": None,
        "list": [1, 2],
        "dict": {"k": "v"},
        "object": sentinel,
    }
    assert result["object"] is sentinel


@pytest.mark.anyio
async def test_names_with_special_characters():
    async def dependent(deps: Deps):
        return await deps.get("task with spaces") + await deps.get("task-with-dashes")

    result = await gather(
        {
            "task with spaces": lambda: 1,
            "task-with-dashes": lambda: 2,
            "$pecial.name": dependent,
        }
    )

    assert result == {"task with spaces": 1, "task-with-dashes": 2, "$pecial.name": 3}


@pytest.mark.anyio
async def test_deps_names():
    async def a(deps: Deps):
        return deps.names

    result = await gather({"a": a, "b": lambda: None})

    assert result["a"] == frozenset({"a", "b"})
