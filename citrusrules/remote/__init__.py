"""
Remote Template Layer.

This package handles all communication with the remote template source.
"""

from .fetcher import TemplateFetcher, build_session

__all__ = ["TemplateFetcher", "build_session"]
