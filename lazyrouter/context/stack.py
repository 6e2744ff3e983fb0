"""Focus stack deciding which context receives key input."""

from __future__ import annotations

import logging

from .base import BaseContext

logger = logging.getLogger(__name__)


class ContextStack:
    """Stack of focused contexts; the bottom entry is never popped."""

    def __init__(self, initial: BaseContext) -> None:
        self._stack: list[BaseContext] = [initial]

    def current(self) -> BaseContext:
        return self._stack[-1]

    def previous(self) -> BaseContext | None:
        if len(self._stack) < 2:
            return None
        return self._stack[-2]

    def depth(self) -> int:
        return len(self._stack)

    def push(self, context: BaseContext) -> None:
        """Focus ``context``; pushing the current context again is a no-op."""
        if context is self.current():
            return
        self.current().handle_focus_lost()
        if context in self._stack:
            self._stack.remove(context)
        self._stack.append(context)
        logger.debug("focus %s", context.key)
        context.handle_focus()

    def replace(self, context: BaseContext) -> None:
        """Swap the current context for ``context`` at the same depth."""
        if context is self.current():
            return
        self.current().handle_focus_lost()
        if context in self._stack:
            self._stack.remove(context)
        self._stack[-1] = context
        logger.debug("focus %s (replace)", context.key)
        context.handle_focus()

    def pop(self) -> bool:
        """Return focus to the previous context; ``False`` at the bottom."""
        if len(self._stack) < 2:
            return False
        leaving = self._stack.pop()
        leaving.handle_focus_lost()
        self.current().handle_focus()
        logger.debug("focus %s (pop from %s)", self.current().key, leaving.key)
        return True
