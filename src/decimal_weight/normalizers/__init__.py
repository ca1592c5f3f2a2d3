"""Text normalization for weight strings."""

from .text import TextNormalizer
from .numbers import NumberNormalizer

__all__ = ["TextNormalizer", "NumberNormalizer"]
