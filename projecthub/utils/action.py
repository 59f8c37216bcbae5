"""Action wrapper: uniform results and logging around async handlers.

Usage::

    create_project = wrap_action(use_case.execute, logger, action_name="create_project")
    result = await create_project({"user_id": uid, "name": "Roadmap"})
    if is_action_success(result):
        ...
"""

from functools import wraps
from typing import Any, Awaitable, Callable, Optional, TypeVar

from projecthub.core.exceptions import ActionResult, ActionSuccess, to_action_error
from projecthub.core.logger import StructuredLogger

TInput = TypeVar("TInput")
TOutput = TypeVar("TOutput")

ANONYMOUS_ACTION = "anonymous-action"

Handler = Callable[[TInput], Awaitable[TOutput]]
WrappedAction = Callable[[TInput], Awaitable[ActionResult]]


def resolve_action_name(handler: Callable[..., Any], action_name: Optional[str] = None) -> str:
    """Explicit label, then the handler's own name, then a placeholder."""
    if action_name:
        return action_name
    name = getattr(handler, "__name__", None)
    if name and name != "<lambda>":
        return name
    return ANONYMOUS_ACTION


def wrap_action(
    handler: Handler,
    logger: StructuredLogger,
    *,
    action_name: Optional[str] = None,
    log_input: bool = False,
) -> WrappedAction:
    """Wrap ``handler`` so it returns an ``ActionResult`` instead of raising.

    Input is only logged when ``log_input`` is set. Any ``Exception`` is
    logged at error level and converted with ``to_action_error``; there are
    no retries.
    """
    name = resolve_action_name(handler, action_name)

    @wraps(handler)
    async def wrapped(data: Any = None) -> ActionResult:
        try:
            if log_input:
                logger.debug(f"[{name}] Input", {"input": data})

            result = await handler(data)

            logger.debug(f"[{name}] Success")
            return ActionSuccess(result)
        except Exception as exc:
            logger.error(f"[{name}] Error", exc, {"input": data} if log_input else None)
            return to_action_error(exc)

    wrapped.action_name = name
    return wrapped


def action(
    logger: StructuredLogger,
    *,
    action_name: Optional[str] = None,
    log_input: bool = False,
) -> Callable[[Handler], WrappedAction]:
    """Decorator form of ``wrap_action``."""

    def decorator(handler: Handler) -> WrappedAction:
        return wrap_action(handler, logger, action_name=action_name, log_input=log_input)

    return decorator


def is_action_success(result: ActionResult) -> bool:
    """True for the success variant."""
    return result.success is True
