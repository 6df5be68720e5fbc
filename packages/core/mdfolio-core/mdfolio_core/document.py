"""Value types produced and consumed by the markdown pipeline.

A :class:`Document` is the unit of work: the parsed frontmatter mapping
of one file plus its body text.  Parsing a single file yields a
:data:`ParseOutcome` -- either a :class:`ParseSuccess` wrapping the
document or a :class:`ParseFailure` naming the file and the reason.
A directory sweep aggregates outcomes into a :class:`BatchResult`, and a
schema run over the successful documents produces a
:class:`ValidationOutcome`.

All types are frozen dataclasses.  Deriving a new document (coerced
dates, validated frontmatter) always builds a new value with
:func:`dataclasses.replace` rather than mutating the original.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Generic, Literal, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Document:
    """Parsed frontmatter and markdown body of one file.

    Attributes:
        path: Source location, or ``None`` for text parsed in memory.
        front_matter: Top-level frontmatter keys in file order.
        content: Body text after the closing ``---`` delimiter.
    """

    path: Path | None = None
    front_matter: dict[str, Any] = field(default_factory=dict)
    content: str = ""


@dataclass(frozen=True)
class ValidatedDocument(Generic[T]):
    """A document whose frontmatter passed a schema.

    *front_matter* holds whatever the schema engine returned -- for
    :class:`~mdfolio_core.PydanticSchemaValidator` this is an instance
    of the model class.
    """

    path: Path | None
    front_matter: T
    content: str


@dataclass(frozen=True)
class ParseSuccess:
    document: Document
    ok: Literal[True] = True


@dataclass(frozen=True)
class ParseFailure:
    path: Path | None
    error: str
    ok: Literal[False] = False


ParseOutcome = Union[ParseSuccess, ParseFailure]


@dataclass(frozen=True)
class SplitResult:
    """Raw output of :func:`~mdfolio_core.split_frontmatter`."""

    front_matter_text: str
    body: str
    delimiter_count: int = 0

    @property
    def closed(self) -> bool:
        """Whether an opening and a closing delimiter were both seen."""
        return self.delimiter_count >= 2


@dataclass
class BatchResult:
    """Outcomes of a directory-wide parse, in completion order."""

    successful: list[Document] = field(default_factory=list)
    failed: list[ParseFailure] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.successful) + len(self.failed)

    def add(self, outcome: ParseOutcome) -> None:
        if isinstance(outcome, ParseSuccess):
            self.successful.append(outcome.document)
        else:
            self.failed.append(outcome)


@dataclass
class ValidationOutcome(Generic[T]):
    """Aggregate result of validating documents against a schema.

    Attributes:
        files_found: Number of documents handed to the validator.
        files_valid: Number that passed.
        validation_errors: Formatted report lines.  When non-empty the
            first line is a dated header, followed by a ``Filename:``
            line per failing file and one ``Error:`` line per issue.
        validated_documents: The documents that passed, re-typed to the
            schema's shape.
    """

    files_found: int = 0
    files_valid: int = 0
    validation_errors: list[str] = field(default_factory=list)
    validated_documents: list[ValidatedDocument[T]] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        """Number of per-field error lines, excluding headers."""
        return sum(1 for line in self.validation_errors if line.lstrip().startswith("Error:"))
