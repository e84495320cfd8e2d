"""
Security module for Sidecar.

Provides the sanitizers that every field name and value passes through before
it is embedded in clause text.
"""

from .input_sanitizer import InputSanitizer

__all__ = ["InputSanitizer"]
