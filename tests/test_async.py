"""Tests for async adapters: AsyncResult, match_async, aggregate_async, choose_async."""

import asyncio

import pytest

from polaris import Failure, Nothing, Result, Some, Success, init, safe_async
from polaris.async_ import (
    AsyncResult,
    aggregate_async,
    bind_async,
    choose_async,
    choose_iter,
    map_async,
    match_async,
    match_void_async,
    resolve_all,
    to_optional_async,
)


async def resolved(result: Result[int]) -> Result[int]:
    await asyncio.sleep(0)
    return result


class TestFreeAdapters:
    """Tests for the free-function adapters."""

    @pytest.mark.asyncio
    async def test_match_async_success(self):
        """match_async dispatches to the success branch."""
        assert await match_async(resolved(Success(2)), lambda v: v * 10, lambda e: -1) == 20

    @pytest.mark.asyncio
    async def test_match_async_failure(self):
        """match_async dispatches to the failure branch with the message."""
        assert await match_async(resolved(Failure('e')), lambda v: 'ok', lambda e: f'failed: {e}') == 'failed: e'

    @pytest.mark.asyncio
    async def test_match_void_async(self):
        """match_void_async runs exactly one branch."""
        seen = []
        assert await match_void_async(resolved(Failure('e')), seen.append, seen.append) is None
        await match_void_async(resolved(Success(1)), seen.append, seen.append)
        assert seen == ['e', 1]

    @pytest.mark.asyncio
    async def test_bind_async_success(self):
        """bind_async chains a Result-returning function."""
        assert await bind_async(resolved(Success(3)), lambda v: Success(v + 1)) == Success(4)

    @pytest.mark.asyncio
    async def test_bind_async_short_circuits(self):
        """bind_async never calls the binder on Failure."""
        calls = []
        result = await bind_async(resolved(Failure('e')), lambda v: calls.append(v) or Success(v))
        assert result == Failure('e')
        assert calls == []

    @pytest.mark.asyncio
    async def test_map_async(self):
        """map_async transforms the value."""
        assert await map_async(resolved(Success(3)), str) == Success('3')
        assert await map_async(resolved(Failure('e')), str) == Failure('e')

    @pytest.mark.asyncio
    async def test_map_async_does_not_catch(self):
        """Exceptions from the mapper propagate out of the await."""
        with pytest.raises(ZeroDivisionError):
            await map_async(resolved(Success(1)), lambda v: v / 0)

    @pytest.mark.asyncio
    async def test_to_optional_async(self):
        """to_optional_async converts after resolving."""
        assert await to_optional_async(resolved(Success(1))) == Some(1)
        assert await to_optional_async(resolved(Failure('e'))) is Nothing

    @pytest.mark.asyncio
    async def test_accepts_tasks(self):
        """Any awaitable works as a deferred computation."""
        task = asyncio.ensure_future(resolved(Success(5)))
        assert await match_async(task, lambda v: v, lambda e: 0) == 5


class TestAsyncResult:
    """Tests for the AsyncResult wrapper."""

    @pytest.mark.asyncio
    async def test_await(self):
        """Awaiting an AsyncResult gives the underlying Result."""
        assert await AsyncResult(resolved(Success(42))) == Success(42)

    @pytest.mark.asyncio
    async def test_constructors(self):
        """from_success, from_failure and from_result wrap values."""
        assert await AsyncResult.from_success(1) == Success(1)
        assert await AsyncResult.from_failure('e') == Failure('e')
        assert await AsyncResult.from_result(Failure('x')) == Failure('x')

    @pytest.mark.asyncio
    async def test_chain(self):
        """Methods chain and run only when awaited."""

        def validate(x: int) -> Result[int]:
            return Success(x) if x > 0 else Failure('not positive')

        assert await AsyncResult.from_success(5).abind(validate).amap(lambda x: x * 2) == Success(10)
        assert await AsyncResult.from_success(-5).abind(validate).amap(lambda x: x * 2) == Failure('not positive')

    @pytest.mark.asyncio
    async def test_amap_async(self):
        """amap_async awaits the mapper on Success only."""

        async def double(x: int) -> int:
            await asyncio.sleep(0)
            return x * 2

        assert await AsyncResult.from_success(5).amap_async(double) == Success(10)
        assert await AsyncResult.from_failure('e').amap_async(double) == Failure('e')

    @pytest.mark.asyncio
    async def test_abind_async(self):
        """abind_async awaits the binder on Success only."""
        calls = []

        async def fetch(x: int) -> Result[str]:
            calls.append(x)
            return Success(f'item-{x}')

        assert await AsyncResult.from_success(5).abind_async(fetch) == Success('item-5')
        assert await AsyncResult.from_failure('e').abind_async(fetch) == Failure('e')
        assert calls == [5]

    @pytest.mark.asyncio
    async def test_amatch(self):
        """amatch and amatch_void dispatch once resolved."""
        seen = []
        assert await AsyncResult.from_failure('e').amatch(lambda v: v, lambda e: e.upper()) == 'E'
        await AsyncResult.from_success(1).amatch_void(seen.append, seen.append)
        assert seen == [1]

    @pytest.mark.asyncio
    async def test_ato_optional_and_default(self):
        """ato_optional and aget_value_or_default resolve to plain values."""
        assert await AsyncResult.from_success(1).ato_optional() == Some(1)
        assert await AsyncResult.from_failure('e').aget_value_or_default(7) == 7

    @pytest.mark.asyncio
    async def test_single_shot_coroutine(self):
        """A coroutine-backed AsyncResult cannot be awaited twice."""
        wrapped = AsyncResult(resolved(Success(1)))
        await wrapped
        with pytest.raises(RuntimeError):
            await wrapped

    def test_repr(self):
        """repr shows the wrapped awaitable."""
        coro = resolved(Success(1))
        assert repr(AsyncResult(coro)).startswith('AsyncResult(')
        coro.close()


class TestAggregateAsync:
    """Tests for aggregate_async and resolve_all."""

    @pytest.mark.asyncio
    async def test_all_success(self):
        """All successes give a Success of the values in order."""
        result = await aggregate_async([resolved(Success(1)), resolved(Success(2)), resolved(Success(3))])
        assert result == Success([1, 2, 3])

    @pytest.mark.asyncio
    async def test_output_order_ignores_completion_order(self):
        """Results come back in input order even when they finish in reverse."""
        completed = []

        async def delayed(value: int, delay: float) -> Result[int]:
            await asyncio.sleep(delay)
            completed.append(value)
            return Success(value)

        result = await aggregate_async([delayed(1, 0.06), delayed(2, 0.04), delayed(3, 0.02)])
        assert completed == [3, 2, 1]
        assert result == Success([1, 2, 3])

    @pytest.mark.asyncio
    async def test_failure_messages_in_input_order(self):
        """Failure messages are joined in input order, not completion order."""

        async def delayed(result: Result[int], delay: float) -> Result[int]:
            await asyncio.sleep(delay)
            return result

        result = await aggregate_async(
            [delayed(Failure('first'), 0.05), delayed(Success(1), 0.0), delayed(Failure('second'), 0.01)],
            '; ',
        )
        assert result == Failure('first; second')

    @pytest.mark.asyncio
    async def test_every_input_is_resolved(self):
        """A failure does not stop the remaining computations."""
        ran = []

        async def track(i: int) -> Result[int]:
            ran.append(i)
            return Failure(f'e{i}') if i == 0 else Success(i)

        result = await aggregate_async([track(i) for i in range(4)])
        assert sorted(ran) == [0, 1, 2, 3]
        assert result == Failure('e0')

    @pytest.mark.asyncio
    async def test_limit_bounds_concurrency(self):
        """No more than `limit` computations run at once."""
        running = 0
        peak = 0

        async def work(i: int) -> Result[int]:
            nonlocal running, peak
            running += 1
            peak = max(peak, running)
            await asyncio.sleep(0.01)
            running -= 1
            return Success(i)

        result = await aggregate_async([work(i) for i in range(6)], limit=2)
        assert result == Success(list(range(6)))
        assert peak <= 2

    @pytest.mark.asyncio
    async def test_configured_limit(self):
        """The configured async_limit applies when no limit is passed."""
        init(async_limit=1)
        running = 0
        peak = 0

        async def work(i: int) -> Result[int]:
            nonlocal running, peak
            running += 1
            peak = max(peak, running)
            await asyncio.sleep(0.005)
            running -= 1
            return Success(i)

        await aggregate_async([work(i) for i in range(4)])
        assert peak == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize('limit', [0, -1])
    async def test_rejects_non_positive_limit(self, limit):
        """A limit below 1 raises instead of blocking forever."""
        pending = resolved(Success(1))
        with pytest.raises(ValueError, match='at least 1'):
            await asyncio.wait_for(aggregate_async([pending], limit=limit), 1.0)
        pending.close()

    @pytest.mark.asyncio
    async def test_choose_async_rejects_zero_limit(self):
        """choose_async validates its limit the same way."""
        pending = resolved(Success(1))
        with pytest.raises(ValueError):
            await choose_async([pending], lambda m: None, limit=0)
        pending.close()

    @pytest.mark.asyncio
    async def test_resolve_all_ignores_configured_limit(self):
        """resolve_all without a limit runs everything at once."""
        init(async_limit=1)
        running = 0
        peak = 0

        async def work(i: int) -> Result[int]:
            nonlocal running, peak
            running += 1
            peak = max(peak, running)
            await asyncio.sleep(0.005)
            running -= 1
            return Success(i)

        assert await resolve_all([work(i) for i in range(3)]) == [Success(0), Success(1), Success(2)]
        assert peak == 3

    @pytest.mark.asyncio
    async def test_exception_propagates(self):
        """An exception raised by a computation propagates out of the task group."""

        async def boom() -> Result[int]:
            raise ValueError('boom')

        with pytest.raises(BaseExceptionGroup) as exc_info:
            await aggregate_async([resolved(Success(1)), boom()])
        assert exc_info.group_contains(ValueError)

    @pytest.mark.asyncio
    async def test_with_safe_async(self):
        """safe_async-decorated functions plug in as deferred computations."""

        @safe_async
        async def parse(raw: str) -> int:
            await asyncio.sleep(0)
            return int(raw)

        assert await aggregate_async([parse('1'), parse('2')]) == Success([1, 2])
        result = await aggregate_async([parse('1'), parse('x')])
        assert result.is_failure()
        assert 'x' in result.message

    @pytest.mark.asyncio
    async def test_resolve_all_empty(self):
        """Resolving nothing gives an empty list."""
        assert await resolve_all([]) == []


class TestChooseAsync:
    """Tests for choose_async and choose_iter."""

    @pytest.mark.asyncio
    async def test_choose_async(self):
        """choose_async resolves everything, then filters lazily in input order."""

        async def delayed(result: Result[int], delay: float) -> Result[int]:
            await asyncio.sleep(delay)
            return result

        seen = []
        chosen = await choose_async(
            [delayed(Failure('a'), 0.03), delayed(Success(1), 0.02), delayed(Failure('b'), 0.0)],
            seen.append,
        )
        assert seen == []
        assert list(chosen) == [Success(1)]
        assert seen == ['a', 'b']

    @pytest.mark.asyncio
    async def test_choose_iter(self):
        """choose_iter yields successes from an async stream."""

        async def generate():
            yield Success(1)
            yield Failure('skip')
            yield Success(2)

        seen = []
        kept = [r.value async for r in choose_iter(generate(), seen.append)]
        assert kept == [1, 2]
        assert seen == ['skip']
