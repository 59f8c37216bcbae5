"""Tests for the action wrapper."""
import asyncio
import io
from unittest.mock import MagicMock

import pytest

from projecthub.core.exceptions import AppError, NotFoundError, ValidationError
from projecthub.core.logger import StructuredLogger
from projecthub.utils.action import action, is_action_success, resolve_action_name, wrap_action


@pytest.fixture
def logger():
    return MagicMock(spec=StructuredLogger)


async def double(value):
    return value * 2


class TestWrapAction:
    """Result conversion"""

    @pytest.mark.asyncio
    async def test_success(self, logger):
        wrapped = wrap_action(double, logger)

        result = await wrapped(21)

        assert is_action_success(result)
        assert result.to_dict() == {"success": True, "data": 42}
        logger.debug.assert_called_once_with("[double] Success")
        logger.error.assert_not_called()

    @pytest.mark.asyncio
    async def test_validation_failure(self, logger):
        async def register(data):
            raise ValidationError("Invalid email", field="email")

        result = await wrap_action(register, logger)({"email": "nope"})

        assert not is_action_success(result)
        assert result.to_dict() == {
            "success": False,
            "error": {"message": "Invalid email", "code": "VALIDATION_ERROR", "field": "email"},
        }

    @pytest.mark.asyncio
    async def test_plain_failure_has_no_code(self, logger):
        async def explode(_):
            raise RuntimeError("connection reset")

        result = await wrap_action(explode, logger)(None)

        assert result.to_dict() == {"success": False, "error": {"message": "connection reset"}}

    @pytest.mark.asyncio
    async def test_failure_without_message_keeps_empty_message(self, logger):
        async def explode(_):
            raise RuntimeError()

        result = await wrap_action(explode, logger)(None)

        assert result.error.message == ""
        assert result.error.code is None

    @pytest.mark.asyncio
    async def test_failure_is_logged(self, logger):
        error = NotFoundError("Project")

        async def lookup(_):
            raise error

        result = await wrap_action(lookup, logger, action_name="get_project")({"id": "p1"})

        assert result.error.code == "NOT_FOUND"
        logger.error.assert_called_once_with("[get_project] Error", error, None)
        logger.debug.assert_not_called()

    @pytest.mark.asyncio
    async def test_input_logged_only_when_enabled(self, logger):
        async def explode(_):
            raise AppError("failed", code="BROKEN")

        await wrap_action(explode, logger, action_name="op", log_input=True)({"secret": "x"})

        logger.debug.assert_called_once_with("[op] Input", {"input": {"secret": "x"}})
        args = logger.error.call_args[0]
        assert args[0] == "[op] Error"
        assert args[2] == {"input": {"secret": "x"}}

    @pytest.mark.asyncio
    async def test_success_with_input_logging(self, logger):
        result = await wrap_action(double, logger, log_input=True)(2)

        assert result.data == 4
        assert [c.args[0] for c in logger.debug.call_args_list] == ["[double] Input", "[double] Success"]

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self, logger):
        async def cancelled(_):
            raise asyncio.CancelledError()

        with pytest.raises(asyncio.CancelledError):
            await wrap_action(cancelled, logger)(None)

    @pytest.mark.asyncio
    async def test_no_retry(self, logger):
        calls = []

        async def flaky(_):
            calls.append(1)
            raise RuntimeError("flaky")

        await wrap_action(flaky, logger)(None)
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_decorator_form(self, logger):
        @action(logger, action_name="triple")
        async def triple(value):
            return value * 3

        result = await triple(3)

        assert result.data == 9
        assert triple.action_name == "triple"

    @pytest.mark.asyncio
    async def test_with_real_logger_in_production_mode(self):
        out, err = io.StringIO(), io.StringIO()
        logger = StructuredLogger(development=False, stdout=out, stderr=err)

        async def explode(_):
            raise ValueError("bad input")

        await wrap_action(double, logger)(1)
        await wrap_action(explode, logger, action_name="explode")(1)

        assert out.getvalue() == ""
        assert "[ERROR] [explode] Error" in err.getvalue()
        assert '"name": "ValueError"' in err.getvalue()

    @pytest.mark.asyncio
    async def test_unprintable_exception_does_not_escape(self):
        class BrokenStr(Exception):
            def __str__(self):
                raise RuntimeError("str failed")

        out, err = io.StringIO(), io.StringIO()
        logger = StructuredLogger(development=False, stdout=out, stderr=err)

        async def explode(_):
            raise BrokenStr()

        result = await wrap_action(explode, logger, action_name="explode")(None)

        assert result.to_dict() == {"success": False, "error": {"message": "<unprintable BrokenStr>"}}
        assert "<unprintable BrokenStr>" in err.getvalue()


class TestActionName:
    """Name resolution for logs"""

    def test_explicit_label(self):
        assert resolve_action_name(double, "doubler") == "doubler"

    def test_handler_name(self):
        assert resolve_action_name(double) == "double"

    def test_lambda_falls_back(self):
        assert resolve_action_name(lambda x: x) == "anonymous-action"

    def test_nameless_callable_falls_back(self):
        class Handler:
            async def __call__(self, value):
                return value

        assert resolve_action_name(Handler()) == "anonymous-action"
