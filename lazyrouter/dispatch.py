"""Route one decoded key to a handler and report the outcome."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from enum import Enum

from .context.base import BaseContext
from .context.stack import ContextStack
from .controllers.registry import ControllerRegistry
from .errors import HandlerError
from .keys import ENTER, ESC, normalize_key
from .popup import PopupHandler

logger = logging.getLogger(__name__)


class DispatchResult(str, Enum):
    HANDLED = "handled"
    UNBOUND = "unbound"
    FAILED = "failed"


def _run(handler: Callable[[], None], popup: PopupHandler, key: str) -> DispatchResult:
    try:
        handler()
    except HandlerError as exc:
        logger.warning("handler for key %r failed: %s", key, exc)
        popup.error(str(exc))
        return DispatchResult.FAILED
    return DispatchResult.HANDLED


def dispatch_key(
    registry: ControllerRegistry,
    stack: ContextStack,
    key: str,
    popup: PopupHandler,
    global_context: BaseContext | None = None,
) -> DispatchResult:
    """Resolve ``key`` against the focused context and run its handler.

    A pending confirmation or prompt takes every key first: Enter accepts,
    Esc dismisses, anything else edits the prompt text. Otherwise the focused
    context is consulted, then ``global_context``. Handler errors are logged,
    reported through ``popup.error`` and turned into ``FAILED``.
    """
    key = normalize_key(key)
    if popup.has_pending():
        if key == ENTER:
            return _run(lambda: popup.answer(True), popup, key)
        if key == ESC:
            popup.answer(False)
        else:
            popup.edit_prompt(key)
        return DispatchResult.HANDLED

    current = stack.current()
    binding = registry.resolve_binding(current, key)
    if binding is None and global_context is not None and global_context is not current:
        binding = registry.resolve_binding(global_context, key)
    if binding is None:
        logger.debug("no binding for %r in %s", key, current.key)
        return DispatchResult.UNBOUND
    return _run(binding.handler, popup, key)


def run_event_loop(
    keys: Iterable[str],
    dispatch: Callable[[str], DispatchResult],
    should_quit: Callable[[], bool] = lambda: False,
) -> list[DispatchResult]:
    """Feed ``keys`` through ``dispatch`` until exhausted or ``should_quit``."""
    results: list[DispatchResult] = []
    for key in keys:
        results.append(dispatch(key))
        if should_quit():
            break
    return results
