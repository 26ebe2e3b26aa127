"""
The template catalog and the mapping from user-facing identifiers to canonical
template names.
"""

from dataclasses import dataclass

from citrusrules.exceptions import ResolutionError
from citrusrules.utils.path import is_safe_segment


@dataclass(frozen=True)
class TemplateInfo:
    """A template the CLI exposes as a flag."""

    name: str
    short_flag: str
    description: str


TEMPLATE_CATALOG: tuple[TemplateInfo, ...] = (
    TemplateInfo("development-workflow", "-d", "Development workflow conventions"),
    TemplateInfo("error-handling", "-e", "Error handling patterns"),
    TemplateInfo("playwright-testing", "-p", "Playwright end-to-end testing"),
    TemplateInfo("security", "-s", "Security practices"),
    TemplateInfo("api-design", "-a", "API design guidelines"),
    TemplateInfo("component-standards", "-c", "UI component standards"),
    TemplateInfo("db-best-practices", "-b", "Database best practices"),
    TemplateInfo("devops-ci-cd", "-o", "DevOps and CI/CD pipelines"),
    TemplateInfo("mobile-standards", "-m", "Mobile development standards"),
    TemplateInfo("TODO-tracking", "-t", "TODO tracking conventions"),
    TemplateInfo("testing-strategy", "-r", "Testing strategy"),
    TemplateInfo("uv-python-projects", "-u", "Python projects managed with uv"),
)

# Shorthand identifier -> canonical name. Anything not listed maps to itself.
TEMPLATE_ALIASES: dict[str, str] = {
    "dev-workflow": "development-workflow",
    "todo": "TODO-tracking",
    "todo-tracking": "TODO-tracking",
    "db": "db-best-practices",
    "ci-cd": "devops-ci-cd",
    "playwright": "playwright-testing",
    "uv": "uv-python-projects",
    "components": "component-standards",
}


def known_identifiers() -> list[str]:
    """All identifiers the CLI accepts: catalog names followed by aliases."""
    return [t.name for t in TEMPLATE_CATALOG] + list(TEMPLATE_ALIASES)


def resolve_template_name(identifier: str) -> str:
    """
    Resolves a template identifier to its canonical name.

    Aliases are looked up in TEMPLATE_ALIASES; every other identifier is its own
    canonical name.

    Raises:
        ResolutionError: If the resulting name is not usable as a single path
        segment for both the remote URL and the local file.
    """
    name = TEMPLATE_ALIASES.get(identifier, identifier)
    if not is_safe_segment(name):
        raise ResolutionError(f"'{identifier}' is not a valid template name.")
    return name
