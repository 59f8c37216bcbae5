"""Ports (interfaces) for ProjectHub."""

from .repository import ProjectRepository

__all__ = ["ProjectRepository"]
