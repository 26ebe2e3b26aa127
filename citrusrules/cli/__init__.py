"""
Command-line Layer.

This package holds the Typer application, the Rich output helpers and the
live progress display.
"""
