"""Popups raised by handlers: errors, toasts, confirmations, prompts, menus.

Drawing is someone else's job. This handler only records what should be shown
in :class:`~lazyrouter.state.GuiState` and runs the confirmation callback once
the dispatcher reports the user's answer.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .models import MenuItem
from .state import GuiState, Model, Popup

logger = logging.getLogger(__name__)


class PopupHandler:
    def __init__(self, gui_state: GuiState, model: Model, open_menu: Callable[[], None]) -> None:
        self.gui_state = gui_state
        self.model = model
        self._open_menu = open_menu

    def error(self, message: str) -> None:
        logger.debug("error popup: %s", message)
        self.gui_state.error_log.append(message)
        self.gui_state.status_message = message

    def toast(self, message: str) -> None:
        self.gui_state.status_message = message

    def confirm(self, title: str, body: str, on_confirm: Callable[[], None]) -> None:
        self.gui_state.pending_popup = Popup(kind="confirm", title=title, body=body, on_confirm=on_confirm)

    def prompt(self, title: str, on_confirm: Callable[[str], None], initial: str = "") -> None:
        self.gui_state.pending_popup = Popup(
            kind="prompt",
            title=title,
            initial=initial,
            body=initial,
            on_confirm=on_confirm,
        )

    def menu(self, title: str, items: list[MenuItem]) -> None:
        self.model.menu_title = title
        self.model.menu_items = list(items)
        self._open_menu()

    def has_pending(self) -> bool:
        return self.gui_state.pending_popup is not None

    def edit_prompt(self, key: str) -> None:
        """Apply a typed key to a pending prompt's text buffer."""
        popup = self.gui_state.pending_popup
        if popup is None or popup.kind != "prompt":
            return
        if key == "BACKSPACE":
            popup.body = popup.body[:-1]
        elif len(key) == 1 and key.isprintable():
            popup.body += key

    def answer(self, accepted: bool) -> None:
        """Close the pending popup and run its callback when accepted.

        The callback runs after the popup is cleared, so a callback that opens
        a follow-up popup keeps it. Callback errors propagate to the caller.
        """
        popup = self.gui_state.pending_popup
        if popup is None:
            return
        self.gui_state.pending_popup = None
        if not accepted or popup.on_confirm is None:
            return
        if popup.kind == "prompt":
            popup.on_confirm(popup.body)
        else:
            popup.on_confirm()
