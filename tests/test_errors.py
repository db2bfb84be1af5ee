"""Tests for the optres exception hierarchy."""

import pytest

from optres import (
    Err,
    ErrValueError,
    ExpectationError,
    MissingErrorValueError,
    MissingValueError,
    Nothing,
    Ok,
    OptresError,
    UnwrapError,
)


class TestOptresError:
    """Tests for the base error."""

    def test_message_and_code(self):
        error = OptresError('failed', code='custom')
        assert error.message == 'failed'
        assert error.code == 'custom'
        assert str(error) == 'failed'

    def test_repr(self):
        assert repr(OptresError('failed')) == "OptresError('failed')"
        assert repr(OptresError('failed', code='x')) == "OptresError('failed', code='x')"


class TestHierarchy:
    """Every terminal failure is an UnwrapError and a RuntimeError."""

    @pytest.mark.parametrize(
        'error',
        [
            MissingValueError(),
            MissingErrorValueError(),
            ExpectationError('value should exist'),
            ErrValueError('payload'),
        ],
    )
    def test_subclassing(self, error):
        assert isinstance(error, UnwrapError)
        assert isinstance(error, OptresError)
        assert isinstance(error, RuntimeError)

    def test_codes(self):
        assert MissingValueError().code == 'missing_value'
        assert MissingErrorValueError().code == 'missing_error'
        assert ExpectationError('m').code == 'expectation'
        assert ErrValueError(1).code == 'err_value'

    def test_default_messages(self):
        assert str(MissingValueError()) == 'Missing Option value.'
        assert str(MissingErrorValueError()) == 'Missing error value.'

    def test_err_value_error_payload(self):
        error = ErrValueError({'code': 404})
        assert error.error == {'code': 404}
        assert str(error) == "Err value: {'code': 404}"


class TestRaisedBy:
    """Which terminal operation raises which error."""

    def test_nothing_unwrap(self):
        with pytest.raises(MissingValueError):
            Nothing.unwrap()

    def test_ok_unwrap_err(self):
        with pytest.raises(MissingErrorValueError):
            Ok(1).unwrap_err()

    def test_expect(self):
        with pytest.raises(ExpectationError, match='^value should exist$'):
            Nothing.expect('value should exist')

    def test_err_unwrap_payload(self):
        with pytest.raises(ErrValueError):
            Err('boom').unwrap()

    def test_catch_all_as_unwrap_error(self):
        for failing in (Nothing.unwrap, Ok(1).unwrap_err, Err('x').unwrap):
            with pytest.raises(UnwrapError):
                failing()
