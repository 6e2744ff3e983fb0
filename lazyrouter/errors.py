"""Error hierarchy shared by setup wiring and key handlers.

``ConfigurationError`` and its subclasses are startup-fatal: nothing catches
them, so a half-wired registry never reaches the event loop. ``HandlerError``
subclasses are recoverable and are reported by the dispatcher.
"""

from __future__ import annotations


class ConfigurationError(Exception):
    """Controller wiring is inconsistent; startup must abort."""


class UnknownContextError(ConfigurationError):
    def __init__(self, context_key: str) -> None:
        super().__init__(f"cannot attach controllers to unregistered context {context_key!r}")
        self.context_key = context_key


class RegistryFrozenError(ConfigurationError):
    def __init__(self, context_key: str) -> None:
        super().__init__(f"controller registry is frozen; cannot attach to {context_key!r}")
        self.context_key = context_key


class UnattachedContextError(ConfigurationError):
    def __init__(self, context_keys: list[str]) -> None:
        joined = ", ".join(context_keys)
        super().__init__(f"contexts without controllers: {joined}")
        self.context_keys = context_keys


class CapabilityMismatchError(ConfigurationError):
    """Explicit capability enumeration disagrees with declared capabilities."""

    def __init__(self, capability: str, missing: list[str], unexpected: list[str]) -> None:
        details: list[str] = []
        if missing:
            details.append(f"declared but not enumerated: {', '.join(missing)}")
        if unexpected:
            details.append(f"enumerated but not declared: {', '.join(unexpected)}")
        super().__init__(f"capability {capability!r}: " + "; ".join(details))
        self.capability = capability
        self.missing = missing
        self.unexpected = unexpected


class MissingDependencyError(ConfigurationError):
    def __init__(self, owner: str, dependency: str) -> None:
        super().__init__(f"{owner} requires {dependency!r}")
        self.owner = owner
        self.dependency = dependency


class HandlerError(Exception):
    """Recoverable failure raised by a key handler."""


class GitCommandError(HandlerError):
    def __init__(self, args: list[str], returncode: int, stderr: str) -> None:
        message = stderr.strip() or f"git {' '.join(args)} exited with {returncode}"
        super().__init__(message)
        self.git_args = args
        self.returncode = returncode
        self.stderr = stderr


class ActionUnavailableError(HandlerError):
    """Action refused in the current working-tree or mode state."""


__all__ = [
    "ConfigurationError",
    "UnknownContextError",
    "RegistryFrozenError",
    "UnattachedContextError",
    "CapabilityMismatchError",
    "MissingDependencyError",
    "HandlerError",
    "GitCommandError",
    "ActionUnavailableError",
]
