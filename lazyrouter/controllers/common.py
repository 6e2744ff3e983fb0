"""Dependency container injected into every controller."""

from __future__ import annotations

from dataclasses import dataclass

from ..commands.git import GitCommand
from ..commands.oscommands import OSCommand
from ..context.contexts import ContextTree
from ..helpers import HelperCommon, Helpers
from ..helpers.common import require_fields
from ..state import Model, Modes


@dataclass(frozen=True)
class ControllerCommon:
    """Built once at startup; every field is required."""

    c: HelperCommon
    os: OSCommand
    git: GitCommand
    helpers: Helpers
    model: Model
    contexts: ContextTree
    modes: Modes

    def __post_init__(self) -> None:
        require_fields(self)
