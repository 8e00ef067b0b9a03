"""
Output formatters for the GMN check character library.
"""

from .json_formatter import (
    FormatOptions,
    gmn_result_to_dict,
    format_gmn_result_json,
)

__all__ = [
    "FormatOptions",
    "gmn_result_to_dict",
    "format_gmn_result_json",
]
