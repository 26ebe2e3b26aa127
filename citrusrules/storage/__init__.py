"""
Storage Layer.

This package handles everything that touches the local disk: the optional
configuration file and the rules directory that templates are written into.
"""

from .config_manager import ConfigManager
from .writer import TemplateWriter

__all__ = ["ConfigManager", "TemplateWriter"]
