"""Shared utilities for razorgen."""

from razorgen.utils.escaping import escape_for_debug, escape_markup_content, is_identifier

__all__ = ["escape_for_debug", "escape_markup_content", "is_identifier"]
