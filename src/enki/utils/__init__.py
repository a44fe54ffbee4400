"""Utility helpers."""
from .importing import resolve_target

__all__ = ["resolve_target"]
