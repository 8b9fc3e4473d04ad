"""Batch operations over groups of paths."""

from .engine import default_for, delete_multi, exists_all, exists_any, get_multi, set_multi


__all__ = ["default_for", "delete_multi", "exists_all", "exists_any", "get_multi", "set_multi"]
