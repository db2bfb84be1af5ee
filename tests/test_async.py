"""Tests for the awaitable bridges of Result."""

import asyncio

import pytest

from optres import Err, ErrValueError, Ok, from_awaitable, from_promise, result


async def _value(value):
    await asyncio.sleep(0)
    return value


async def _fail(exc):
    await asyncio.sleep(0)
    raise exc


class TestFromAwaitable:
    """Tests for from_awaitable / from_promise."""

    @pytest.mark.asyncio
    async def test_success(self):
        assert await from_awaitable(_value(1)) == Ok(1)

    @pytest.mark.asyncio
    async def test_failure_becomes_err(self):
        res = await from_awaitable(_fail(ValueError('boom')))
        assert res.is_err()
        assert isinstance(res.error, ValueError)
        assert str(res.error) == 'boom'

    @pytest.mark.asyncio
    async def test_future(self):
        future = asyncio.get_running_loop().create_future()
        future.set_result('done')
        assert await from_awaitable(future) == Ok('done')

    @pytest.mark.asyncio
    async def test_explicit_exceptions(self):
        """Exceptions outside the given tuple propagate."""
        res = await from_awaitable(_fail(KeyError('k')), exceptions=(KeyError,))
        assert res.is_err()
        with pytest.raises(TypeError):
            await from_awaitable(_fail(TypeError('t')), exceptions=(KeyError,))

    @pytest.mark.asyncio
    async def test_alias(self):
        assert from_promise is from_awaitable
        assert result.from_promise is result.from_awaitable
        assert await from_promise(_value(2)) == Ok(2)


class TestToAwaitable:
    """Tests for to_awaitable / to_promise."""

    @pytest.mark.asyncio
    async def test_ok_resolves(self):
        assert await Ok(1).to_awaitable() == 1
        assert await Ok(1).to_promise() == 1

    @pytest.mark.asyncio
    async def test_err_exception_raised(self):
        with pytest.raises(ValueError, match='boom'):
            await Err(ValueError('boom')).to_awaitable()

    @pytest.mark.asyncio
    async def test_err_exception_class_raised(self):
        with pytest.raises(ValueError):
            await Err(ValueError).to_awaitable()

    @pytest.mark.asyncio
    async def test_err_payload_wrapped(self):
        with pytest.raises(ErrValueError) as exc_info:
            await Err('boom').to_promise()
        assert exc_info.value.error == 'boom'

    @pytest.mark.asyncio
    async def test_round_trip_through_awaitable(self):
        """from_awaitable(r.to_awaitable()) restores an exception Err."""
        error = ValueError('boom')
        assert await from_awaitable(Err(error).to_awaitable()) == Err(error)
        assert await from_awaitable(Ok(3).to_awaitable()) == Ok(3)

    @pytest.mark.asyncio
    async def test_round_trip_restores_plain_payload(self):
        """A non-exception payload survives to_promise and from_promise."""
        assert await from_promise(Err('boom').to_promise()) == Err('boom')
        assert await from_awaitable(Err({'code': 404}).to_awaitable()) == Err({'code': 404})

    @pytest.mark.asyncio
    async def test_rejected_with_err_value_error(self):
        assert await from_awaitable(_fail(ErrValueError('boom'))) == Err('boom')
