"""Attachment registry binding ordered controller lists to contexts.

Resolution rule: a key resolves against the context's non-fallback
controllers in reverse attachment order (last attached wins), then against its
fallback controllers, also last-attached-first. Within one ``attach_controllers``
call the arguments count as attached left to right, so the last argument wins.

The registry has two phases. During setup controllers are attached; after
:meth:`ControllerRegistry.freeze` the registry is read-only and any attach
raises :class:`~lazyrouter.errors.RegistryFrozenError`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

from ..bindings import Binding
from ..context.base import BaseContext, Capability
from ..errors import (
    CapabilityMismatchError,
    RegistryFrozenError,
    UnattachedContextError,
    UnknownContextError,
)
from ..keys import normalize_key
from .base import BaseController

logger = logging.getLogger(__name__)

C = TypeVar("C")


class ControllerRegistry:
    def __init__(self, contexts: Iterable[BaseContext]) -> None:
        self._contexts: dict[str, BaseContext] = {}
        for context in contexts:
            self._contexts[context.key] = context
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def contexts(self) -> list[BaseContext]:
        return list(self._contexts.values())

    def _require_known(self, context: BaseContext) -> None:
        if self._contexts.get(context.key) is not context:
            raise UnknownContextError(context.key)

    def attach_controllers(self, context: BaseContext, *controllers: BaseController) -> None:
        """Append ``controllers`` to ``context`` in argument order.

        Repeated calls accumulate; attaching the same controller twice leaves
        two entries.
        """
        if self._frozen:
            raise RegistryFrozenError(context.key)
        self._require_known(context)
        for controller in controllers:
            context._append_controller(controller)
            logger.debug("attached %s to %s", controller.name, context.key)

    def attach_for_capability(
        self,
        capability: Capability,
        contexts: Sequence[C],
        make_controller: Callable[[C], BaseController],
    ) -> None:
        """Attach one generic controller per enumerated context.

        ``contexts`` is the explicit enumeration for ``capability``. It must
        name exactly the registered contexts declaring the capability;
        otherwise setup fails instead of silently skipping a context.
        """
        enumerated = {context.key for context in contexts}  # type: ignore[attr-defined]
        declared = {
            context.key for context in self._contexts.values() if context.has_capability(capability)
        }
        missing = sorted(declared - enumerated)
        unexpected = sorted(enumerated - declared)
        if missing or unexpected:
            raise CapabilityMismatchError(capability.value, missing, unexpected)
        for context in contexts:
            self.attach_controllers(context, make_controller(context))  # type: ignore[arg-type]

    def resolution_order(self, context: BaseContext) -> list[BaseController]:
        """Controllers of ``context`` in the order key lookup consults them."""
        attached = list(reversed(context.controllers))
        primary = [controller for controller in attached if not controller.fallback]
        fallback = [controller for controller in attached if controller.fallback]
        return primary + fallback

    def resolve(self, context: BaseContext, key: str) -> BaseController | None:
        """Return the controller that handles ``key`` on ``context``, if any."""
        for controller in self.resolution_order(context):
            if key in controller.bindings:
                return controller
        return None

    def resolve_binding(self, context: BaseContext, key: str) -> Binding | None:
        controller = self.resolve(context, key)
        if controller is None:
            return None
        return controller.bindings.get(key)

    def effective_bindings(self, context: BaseContext) -> list[Binding]:
        """Bindings reachable on ``context``, shadowed duplicates removed."""
        seen: set[str] = set()
        out: list[Binding] = []
        for controller in self.resolution_order(context):
            for binding in controller.bindings:
                key = normalize_key(binding.key)
                if key in seen:
                    continue
                seen.add(key)
                out.append(binding)
        return out

    def validate(self) -> None:
        unattached = [key for key, context in self._contexts.items() if not context.controllers]
        if unattached:
            raise UnattachedContextError(unattached)

    def freeze(self) -> None:
        """Validate and switch to the read-only run phase."""
        self.validate()
        self._frozen = True
        logger.debug("controller registry frozen with %d contexts", len(self._contexts))
