"""Local filesystem collection of markdown documents.

This module implements :class:`LocalMarkdownCollector`, which parses
every file under a directory tree with
:func:`~mdfolio_core.parse_markdown_text` and partitions the outcomes
into successes and failures.

Per-file reads are independent.  :meth:`LocalMarkdownCollector.collect`
walks the tree and starts one task per file, runs the directory walk and
the blocking reads in worker threads via :func:`asyncio.to_thread`, and
waits for all of them.  Outcomes are
appended on the event loop as each task finishes, so the order of
``successful`` and ``failed`` follows completion, not directory order.

Nothing here raises for a bad file or a missing directory: unreadable
files, oversize files and malformed frontmatter become
:class:`~mdfolio_core.ParseFailure` entries, and a missing root yields an
empty :class:`~mdfolio_core.BatchResult`.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from mdfolio_core import (
    BatchResult,
    Console,
    Document,
    MarkdownWriteError,
    MdFolioError,
    ParseFailure,
    ParseOutcome,
    parse_markdown_text,
    render_markdown,
)
from mdfolio_core.console import default_console

from mdfolio_fs.config import DEFAULT_MAX_FILE_BYTES, CollectorConfig

_logger = logging.getLogger(__name__)


class LocalMarkdownCollector:
    """Parse every markdown file under a local directory.

    Expected layout::

        root/
        ├── 2025/
        │   ├── first-post.md     # YAML frontmatter + markdown body
        │   └── second-post.md
        └── drafts/
            └── idea.md

    Directories are walked recursively; only regular files are parsed.

    Args:
        root: Directory to scan.  It does not have to exist; a missing
            root is reported through *console* and collects nothing.
        suffixes: Only parse files whose suffix (case-insensitive) is in
            this list.  ``None`` parses every file.
        encoding: Text encoding for reads and writes.
        max_file_bytes: Files larger than this are reported as failures
            without being read.  Defaults to 10 MB.
        max_concurrency: Maximum number of files read at once.  ``None``
            (the default) starts every read immediately.
        console: Receives progress messages and date warnings.  Defaults
            to this module's logger.

    Example::

        collector = LocalMarkdownCollector(Path("./notes"), suffixes=[".md"])
        result = await collector.collect()
        for failure in result.failed:
            print(f"{failure.path}: {failure.error}")
    """

    def __init__(
        self,
        root: Path,
        *,
        suffixes: list[str] | None = None,
        encoding: str = "utf-8",
        max_file_bytes: int = DEFAULT_MAX_FILE_BYTES,
        max_concurrency: int | None = None,
        console: Console | None = None,
    ) -> None:
        if max_concurrency is not None and max_concurrency < 1:
            raise ValueError("max_concurrency must be a positive integer")
        self._root = Path(root)
        self._suffixes = {s.lower() for s in suffixes} if suffixes is not None else None
        self._encoding = encoding
        self._max_file_bytes = max_file_bytes
        self._max_concurrency = max_concurrency
        self._console = console or default_console(__name__)

    @classmethod
    def from_config(
        cls, config: CollectorConfig, *, console: Console | None = None
    ) -> LocalMarkdownCollector:
        """Build a collector from a :class:`~mdfolio_fs.CollectorConfig`."""
        return cls(
            config.root,
            suffixes=config.suffixes,
            encoding=config.encoding,
            max_file_bytes=config.max_file_bytes,
            max_concurrency=config.max_concurrency,
            console=console,
        )

    def __repr__(self) -> str:
        return f"LocalMarkdownCollector({str(self._root)!r})"

    @property
    def root(self) -> Path:
        return self._root

    # ------------------------------------------------------------------
    # Enumeration
    # ------------------------------------------------------------------

    def list_files(self) -> list[Path]:
        """Return every regular file under the root, recursively.

        Directories are descended into but never returned.  The list is
        sorted by path.

        Returns:
            File paths, or ``[]`` if the root does not exist.
        """
        if not self._root.is_dir():
            self._console.warn(f"Directory does not exist: {self._root}")
            return []

        return sorted(
            path
            for path in self._root.rglob("*")
            if path.is_file() and self._wants(path)
        )

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    async def parse_file(self, path: Path) -> ParseOutcome:
        """Read and parse a single file.

        Read errors, undecodable text and oversize files are returned as
        :class:`~mdfolio_core.ParseFailure` rather than raised.

        Args:
            path: File to parse.

        Returns:
            The parse outcome for *path*.
        """
        path = Path(path)
        try:
            raw = await asyncio.to_thread(self._read_text, path)
        except (OSError, UnicodeDecodeError, MdFolioError) as exc:
            _logger.debug("Failed to read %s: %s", path, exc)
            return ParseFailure(path=path, error=str(exc))
        return parse_markdown_text(raw, path, console=self._console)

    async def collect(self) -> BatchResult:
        """Parse every file under the root concurrently.

        One failing file never stops the others.  There is no retry and
        no timeout; every read runs to completion or failure.

        Returns:
            A :class:`~mdfolio_core.BatchResult` with outcomes in
            completion order.
        """
        files = await asyncio.to_thread(self.list_files)
        result = BatchResult()
        semaphore = asyncio.Semaphore(self._max_concurrency) if self._max_concurrency else None

        async def _run(path: Path) -> None:
            if semaphore is None:
                outcome = await self.parse_file(path)
            else:
                async with semaphore:
                    outcome = await self.parse_file(path)
            result.add(outcome)

        await asyncio.gather(*(_run(path) for path in files))

        self._console.info(
            f"Parsed {len(result.successful)} of {len(files)} files under {self._root}"
            + (f" ({len(result.failed)} failed)" if result.failed else "")
        )
        return result

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    async def write(self, document: Document, path: Path | None = None) -> Path:
        """Write *document* back to disk.

        Args:
            document: The document to render.
            path: Destination.  Relative paths are resolved against the
                root.  Defaults to ``document.path``.

        Returns:
            The path written.

        Raises:
            ValueError: If neither *path* nor ``document.path`` is set.
            MarkdownWriteError: If the file cannot be written.
        """
        target = Path(path) if path is not None else document.path
        if target is None:
            raise ValueError("No destination: pass a path or set document.path")
        if not target.is_absolute() and not target.is_relative_to(self._root):
            target = self._root / target
        await write_markdown_file(
            document, target, encoding=self._encoding, console=self._console
        )
        return target

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _wants(self, path: Path) -> bool:
        return self._suffixes is None or path.suffix.lower() in self._suffixes

    def _read_text(self, path: Path) -> str:
        size = path.stat().st_size
        if size > self._max_file_bytes:
            raise MdFolioError(
                f"File exceeds maximum size ({self._max_file_bytes} bytes): {path}"
            )
        # newline="" keeps \r\n intact; the splitter handles both endings.
        with open(path, encoding=self._encoding, newline="") as f:
            return f.read()


async def write_markdown_file(
    document: Document,
    path: Path,
    *,
    encoding: str = "utf-8",
    console: Console | None = None,
) -> None:
    """Render *document* with :func:`~mdfolio_core.render_markdown` and write it.

    The parent directory must already exist.

    Raises:
        MarkdownWriteError: If the file cannot be written.
    """
    console = console or default_console(__name__)
    text = render_markdown(document)
    try:
        await asyncio.to_thread(_write_text, Path(path), text, encoding)
    except OSError as exc:
        raise MarkdownWriteError(f"Failed to write markdown file {path}: {exc}") from exc
    console.success(f"Successfully wrote markdown file: {path}")


def _write_text(path: Path, text: str, encoding: str) -> None:
    with open(path, "w", encoding=encoding, newline="") as f:
        f.write(text)
