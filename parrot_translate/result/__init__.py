"""
Result normalization and display sectioning.
"""

from parrot_translate.result.display import build_display_sections
from parrot_translate.result.formatter import format_translate_result

__all__ = ["build_display_sections", "format_translate_result"]
