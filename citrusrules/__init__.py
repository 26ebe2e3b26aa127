"""
citrusrules: fetch curated .mdc rule templates into a project's .cursor/rules.
"""

__version__ = "1.8.1"
