"""Diagnostic helpers."""

from .gradcheck import gradient_check, numerical_gradient

__all__ = ["gradient_check", "numerical_gradient"]
