"""
Data Models Layer.

This package contains the Pydantic configuration model and the dataclasses
that describe the outcome of an install session.
"""

from .config import FetchConfig
from .report import InstallReport, OutcomeState, TemplateOutcome

__all__ = ["FetchConfig", "InstallReport", "OutcomeState", "TemplateOutcome"]
