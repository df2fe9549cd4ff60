# ==============================================================================
# Log File Event Source
# ==============================================================================
"""
Event sources backed by access log files on disk.

Provides:
- LogFileSource: one file, re-read from the top on every events() call
- discover_sources(): expands a mix of files and directories into sources
"""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from sessiontop.base.source import EventSource
from sessiontop.core.errors import SourceNotFoundError
from sessiontop.core.models import PageViewEvent
from sessiontop.sources.line_parser import LineParser

logger = logging.getLogger(__name__)


class LogFileSource(EventSource):
    """
    Page-view events read from one access log file.

    Attributes:
        path: Path to the log file
        parser: Parser used by the most recent events() call
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self.parser = LineParser()

    @property
    def name(self) -> str:
        return str(self.path)

    def events(self) -> Iterator[PageViewEvent]:
        self.parser = LineParser()
        with self.path.open(encoding="utf-8", errors="replace") as fh:
            for line_number, line in enumerate(fh, start=1):
                event = self.parser.parse(line)
                if event is None:
                    logger.debug("%s %d: ignoring %s", self.name, line_number, line.rstrip("\n"))
                    continue
                yield event

    def __repr__(self) -> str:
        return f"LogFileSource({self.name!r})"


def discover_sources(paths: Iterable[Path | str]) -> list[LogFileSource]:
    """
    Build a source for every file named or contained in the given paths.

    Directories contribute their regular files (not recursive), sorted by
    name. Order between the given paths is preserved.

    Args:
        paths: Files and/or directories

    Returns:
        One LogFileSource per file

    Raises:
        SourceNotFoundError: If a path does not exist
    """
    sources: list[LogFileSource] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            files = sorted(p for p in path.iterdir() if p.is_file())
            logger.debug("Found %d files in %s", len(files), path)
            sources.extend(LogFileSource(p) for p in files)
        elif path.is_file():
            sources.append(LogFileSource(path))
        else:
            raise SourceNotFoundError(path)
    return sources
