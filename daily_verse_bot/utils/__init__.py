"""Utility modules for text handling."""

from .text_utils import chop_text

__all__ = ["chop_text"]
