"""Decorators: safe."""

from result_option.decorators.safe import safe

__all__ = ["safe"]
