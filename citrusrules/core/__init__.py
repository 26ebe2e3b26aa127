"""
Core application engine for installing templates.

This package contains the primary logic. The resolver maps requested identifiers
to canonical template names, and the `TemplateInstaller` drives the fetch and
write of each one.
"""

from .installer import TemplateInstaller
from .resolver import TEMPLATE_ALIASES, TEMPLATE_CATALOG, resolve_template_name

__all__ = [
    "TEMPLATE_ALIASES",
    "TEMPLATE_CATALOG",
    "TemplateInstaller",
    "resolve_template_name",
]
