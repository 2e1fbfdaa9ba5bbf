"""
Description generation (OpenAI chat completions).
"""

from .generate import DescriptionGenerator

__all__ = ["DescriptionGenerator"]
