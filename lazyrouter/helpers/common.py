"""Shared services handed to every helper and controller."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, fields

from ..config import UserConfig
from ..context.stack import ContextStack
from ..errors import MissingDependencyError
from ..popup import PopupHandler
from ..refresh import RefreshScope
from ..state import GuiState


@dataclass(frozen=True)
class HelperCommon:
    """UI-facing services: popups, focus, refresh and session settings."""

    popup: PopupHandler
    context_stack: ContextStack
    refresh: Callable[[Iterable[RefreshScope] | None], None]
    user_config: UserConfig
    gui_state: GuiState

    def __post_init__(self) -> None:
        require_fields(self)


def require_fields(bundle: object) -> None:
    """Raise ``MissingDependencyError`` for any dataclass field left ``None``."""
    for f in fields(bundle):  # type: ignore[arg-type]
        if getattr(bundle, f.name) is None:
            raise MissingDependencyError(type(bundle).__name__, f.name)
