"""
Writes fetched templates into the local rules directory.
"""

import asyncio
import logging
from pathlib import Path

import aiofiles

from citrusrules.exceptions import WriteError
from citrusrules.utils.path import create_dir, template_filename

log = logging.getLogger(__name__)


class TemplateWriter:
    """Persists template content under a destination directory."""

    def __init__(self, destination: Path):
        self.destination = Path(destination)

    def path_for(self, name: str) -> Path:
        return self.destination / template_filename(name)

    async def write(self, name: str, content: bytes) -> Path:
        """
        Writes the content to `<destination>/<name>.mdc`, replacing any existing
        file. The destination directory is created first if it is missing.

        The write is not atomic: a failure part-way leaves the target truncated.

        Raises:
            WriteError: If the directory or the file cannot be written.
        """
        target = self.path_for(name)
        try:
            await asyncio.to_thread(create_dir, self.destination)
            async with aiofiles.open(target, "wb") as f:
                await f.write(content)
        except OSError as e:
            raise WriteError(name, e.strerror or str(e)) from e

        log.debug(f"Wrote {len(content)} bytes to {target}")
        return target
