"""
The orchestrator that resolves requested templates, fetches them and writes them
into the rules directory.
"""

import asyncio
import logging
from collections.abc import Sequence

from citrusrules.cli.progress_manager import ProgressManager
from citrusrules.exceptions import FetchError, WriteError
from citrusrules.models.report import InstallReport, OutcomeState, TemplateOutcome
from citrusrules.remote.fetcher import TemplateFetcher
from citrusrules.storage.writer import TemplateWriter

from .resolver import resolve_template_name

log = logging.getLogger(__name__)


class TemplateInstaller:
    """
    Orchestrates the fetch-then-write pipeline for a set of requested templates.

    Distinct templates are processed concurrently, up to `max_workers` at a time.
    Repeated requests for the same canonical name run one after another in request
    order, so the last successful fetch is the one left on disk. A failure for one
    template never stops the others; it is recorded in that template's outcome.
    """

    def __init__(
        self,
        fetcher: TemplateFetcher,
        writer: TemplateWriter,
        max_workers: int = 4,
        progress_manager: ProgressManager | None = None,
    ):
        self.fetcher = fetcher
        self.writer = writer
        self.max_workers = max_workers
        self.progress_manager = progress_manager

    async def install(self, identifiers: Sequence[str]) -> InstallReport:
        """
        Installs every requested template and returns the outcomes in request
        order.

        Raises:
            ResolutionError: If any identifier does not resolve to a usable name.
                Nothing is fetched or written in that case.
        """
        if not identifiers:
            log.debug("No templates requested. Nothing to do.")
            return InstallReport()

        resolved = [(ident, resolve_template_name(ident)) for ident in identifiers]
        name_locks = {name: asyncio.Lock() for _, name in resolved}
        semaphore = asyncio.Semaphore(self.max_workers)

        tasks = [
            self._install_one(ident, name, name_locks[name], semaphore)
            for ident, name in resolved
        ]
        outcomes = await asyncio.gather(*tasks)
        return InstallReport(list(outcomes))

    async def _install_one(
        self,
        identifier: str,
        name: str,
        name_lock: asyncio.Lock,
        semaphore: asyncio.Semaphore,
    ) -> TemplateOutcome:
        """Runs the pipeline for a single template and records where it ended."""
        async with name_lock, semaphore:
            if self.progress_manager:
                self.progress_manager.template_started(name)
            outcome = await self._fetch_and_write(identifier, name)
            if self.progress_manager:
                self.progress_manager.template_finished(name, outcome.succeeded)
        return outcome

    async def _fetch_and_write(self, identifier: str, name: str) -> TemplateOutcome:
        try:
            content = await self.fetcher.fetch(name)
        except FetchError as e:
            log.debug(f"Fetch failed for '{name}': {e.message}")
            return TemplateOutcome(
                identifier, name, OutcomeState.FETCH_FAILED, error=e.message
            )

        try:
            path = await self.writer.write(name, content)
        except WriteError as e:
            log.debug(f"Write failed for '{name}': {e.message}")
            return TemplateOutcome(
                identifier, name, OutcomeState.WRITE_FAILED, error=e.message
            )

        log.debug(f"Installed '{identifier}' as {path}")
        return TemplateOutcome(
            identifier,
            name,
            OutcomeState.WRITTEN,
            path=path,
            size_bytes=len(content),
        )
