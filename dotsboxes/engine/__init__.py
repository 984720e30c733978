"""Engine package exposing rules and board modules."""

from . import rules  # re-export for convenience

__all__ = ["rules"]
