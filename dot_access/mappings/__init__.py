"""Mapping facades."""

from .dot import DotNotation


__all__ = ["DotNotation"]
