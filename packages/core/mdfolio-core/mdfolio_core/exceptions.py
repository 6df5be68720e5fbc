"""Exception hierarchy for mdfolio.

All exceptions raised by :mod:`mdfolio_core` (and by :mod:`mdfolio_fs`)
inherit from :class:`MdFolioError`, allowing callers to catch the entire
family with a single ``except`` clause.

The parse pipeline itself never lets these escape: format and syntax
errors are caught by :func:`~mdfolio_core.parse_markdown_text` and turned
into :class:`~mdfolio_core.ParseFailure` outcomes.  They are raised
directly only by the lower-level helpers (:func:`decode_frontmatter`,
:func:`parse_yyyy_mm_dd`, :func:`write_markdown_file`).

Each concrete error also inherits from the matching built-in
(:class:`ValueError` or :class:`OSError`) so that it can be caught
idiomatically without importing this module.
"""


class MdFolioError(Exception):
    """Base exception for all mdfolio errors."""


class FrontmatterFormatError(MdFolioError, ValueError):
    """No closed, non-empty frontmatter block was found.

    Example::

        try:
            decode_frontmatter("")
        except FrontmatterFormatError as exc:
            print(exc)  # Failed to parse frontmatter
    """


class FrontmatterSyntaxError(MdFolioError, ValueError):
    """The frontmatter block is not valid YAML.

    The message is the one supplied by the YAML decoder.
    """


class InvalidDateError(MdFolioError, ValueError):
    """A string could not be parsed into a calendar date."""


class MarkdownWriteError(MdFolioError, OSError):
    """A markdown document could not be written to disk."""
