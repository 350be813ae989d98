"""Factory helpers for assembling marble draw components."""

from .marble_factory import MarbleFactory

__all__ = ["MarbleFactory"]
