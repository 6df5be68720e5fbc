"""Core model for markdown documents with YAML frontmatter.

This package provides the I/O-free parts of mdfolio:

* :func:`parse_markdown_text` -- split, decode and date-coerce one file's
  text into a :class:`ParseSuccess` or :class:`ParseFailure`.
* :func:`split_frontmatter`, :func:`decode_frontmatter`,
  :func:`convert_date_strings` -- the individual pipeline stages.
* :func:`validate_documents` -- run a :class:`SchemaValidator` (e.g.
  :class:`PydanticSchemaValidator`) over parsed documents.
* :func:`render_markdown` -- serialize a :class:`Document` back to text.
* :class:`Pager` and :func:`sort_records` -- helpers for listing
  documents.
* :class:`Console` -- injectable reporting service, with
  :class:`LoggingConsole` and :class:`ColorConsole` implementations.
* :class:`MdFolioError` -- base class for all library exceptions.

Filesystem access lives in :mod:`mdfolio_fs`.
"""

from mdfolio_core.console import ColorConsole, Console, LoggingConsole
from mdfolio_core.dates import convert_date_strings, format_date_yyyy_mm_dd, parse_yyyy_mm_dd
from mdfolio_core.document import (
    BatchResult,
    Document,
    ParseFailure,
    ParseOutcome,
    ParseSuccess,
    SplitResult,
    ValidatedDocument,
    ValidationOutcome,
)
from mdfolio_core.exceptions import (
    FrontmatterFormatError,
    FrontmatterSyntaxError,
    InvalidDateError,
    MarkdownWriteError,
    MdFolioError,
)
from mdfolio_core.paging import Page, Pager
from mdfolio_core.parsing import decode_frontmatter, parse_markdown_text, split_frontmatter
from mdfolio_core.schema import (
    PydanticSchemaValidator,
    SchemaFailure,
    SchemaIssue,
    SchemaSuccess,
    SchemaValidator,
)
from mdfolio_core.sorting import sort_records
from mdfolio_core.validation import validate_documents
from mdfolio_core.writing import dump_frontmatter, render_markdown

__all__ = [
    "BatchResult",
    "ColorConsole",
    "Console",
    "Document",
    "FrontmatterFormatError",
    "FrontmatterSyntaxError",
    "InvalidDateError",
    "LoggingConsole",
    "MarkdownWriteError",
    "MdFolioError",
    "Page",
    "Pager",
    "ParseFailure",
    "ParseOutcome",
    "ParseSuccess",
    "PydanticSchemaValidator",
    "SchemaFailure",
    "SchemaIssue",
    "SchemaSuccess",
    "SchemaValidator",
    "SplitResult",
    "ValidatedDocument",
    "ValidationOutcome",
    "convert_date_strings",
    "decode_frontmatter",
    "dump_frontmatter",
    "format_date_yyyy_mm_dd",
    "parse_markdown_text",
    "parse_yyyy_mm_dd",
    "render_markdown",
    "sort_records",
    "split_frontmatter",
    "validate_documents",
]
