"""
Custom Jinja2 filters for StateCU file formatting.

This module provides the formatting filters used by the header templates
and by the fixed-column writers.
"""

from __future__ import annotations

from typing import Any

from pystatecu.core.data import is_missing


# =============================================================================
# Number Formatting
# =============================================================================


def fortran_float(value: float | None, width: int = 8, decimals: int = 2) -> str:
    """
    Format a float in Fortran style (right-aligned, fixed width).

    Missing values (``None``, NaN or the -999 sentinel) are written blank.

    Args:
        value: Float value to format
        width: Total field width
        decimals: Number of decimal places

    Returns:
        Formatted string
    """
    if value is None or is_missing(float(value)):
        return " " * width
    return f"{float(value):{width}.{decimals}f}"


# =============================================================================
# StateCU Comment Formatting
# =============================================================================


def statecu_comment(text: str, prefix: str = "#") -> str:
    """
    Format text as a StateCU comment line.

    Args:
        text: Comment text
        prefix: Comment prefix (``#`` for user comments, ``#>`` for
            the documented header)

    Returns:
        ``"# text"``, or just the prefix for blank text
    """
    if not text or not str(text).strip():
        return prefix
    return f"{prefix} {text}"


def register_all_filters(env: Any) -> None:
    """
    Register all custom filters with a Jinja2 environment.

    Args:
        env: Jinja2 Environment instance
    """
    env.filters["fortran_float"] = fortran_float
    env.filters["statecu_comment"] = statecu_comment
