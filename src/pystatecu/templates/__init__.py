"""Jinja2 template engine for StateCU file generation."""

from __future__ import annotations

from pystatecu.templates.engine import (
    TEMPLATES_DIR,
    TemplateEngine,
    get_engine,
)
from pystatecu.templates.filters import (
    fortran_float,
    register_all_filters,
    statecu_comment,
)

__all__ = [
    # Engine
    "TemplateEngine",
    "TEMPLATES_DIR",
    "get_engine",
    # Number formatting
    "fortran_float",
    # StateCU formatting
    "statecu_comment",
    # Registration
    "register_all_filters",
]
