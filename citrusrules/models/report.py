"""
Dataclasses describing the per-template outcome of an install session.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class OutcomeState(str, Enum):
    """Terminal state reached by a single requested template."""

    WRITTEN = "written"
    FETCH_FAILED = "fetch_failed"
    WRITE_FAILED = "write_failed"


@dataclass
class TemplateOutcome:
    """The result of resolving, fetching and writing one requested template."""

    identifier: str
    name: str
    state: OutcomeState
    error: str | None = None
    path: Path | None = None
    size_bytes: int = 0

    @property
    def filename(self) -> str:
        return f"{self.name}.mdc"

    @property
    def succeeded(self) -> bool:
        return self.state is OutcomeState.WRITTEN


@dataclass
class InstallReport:
    """Outcomes of an install session, in the order the templates were requested."""

    outcomes: list[TemplateOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> list[TemplateOutcome]:
        return [o for o in self.outcomes if o.succeeded]

    @property
    def failed(self) -> list[TemplateOutcome]:
        return [o for o in self.outcomes if not o.succeeded]

    @property
    def ok(self) -> bool:
        """True when every requested template was written."""
        return not self.failed

    @property
    def total_bytes(self) -> int:
        return sum(o.size_bytes for o in self.succeeded)
