"""Collaborators wrapping the git executable and the operating system."""

from .git import GitCommand
from .oscommands import OSCommand

__all__ = ["GitCommand", "OSCommand"]
