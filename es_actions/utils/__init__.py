"""Utility helpers."""

from .path import escape, extract_params, is_blank, listify, pathify

__all__ = ["escape", "extract_params", "is_blank", "listify", "pathify"]
