"""Validate parsed documents against a frontmatter schema.

The primary entry-point is :func:`validate_documents`, which runs a
:class:`~mdfolio_core.SchemaValidator` over the successful documents of a
batch and returns a :class:`~mdfolio_core.ValidationOutcome`.

Failures are rendered as a plain-text report::

    Frontmatter Validation Errors  2025-11-15 14:02:11
    Filename: notes/bad.md
        Error: date: Input should be a valid date
        Error: tags.0: Input should be a valid string

Example::

    result = await LocalMarkdownCollector(Path("./notes")).collect()
    outcome = validate_documents(result.successful, PydanticSchemaValidator(Note))
    if outcome.validation_errors:
        Path("errors.txt").write_text("\\n".join(outcome.validation_errors))
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime
from typing import TypeVar

from mdfolio_core.dates import format_date_yyyy_mm_dd
from mdfolio_core.document import Document, ValidatedDocument, ValidationOutcome
from mdfolio_core.schema import SchemaFailure, SchemaValidator

_logger = logging.getLogger(__name__)

T = TypeVar("T")


def validate_documents(
    documents: Iterable[Document],
    validator: SchemaValidator[T],
    *,
    now: datetime | None = None,
) -> ValidationOutcome[T]:
    """Validate every document's frontmatter against *validator*.

    Passing documents are counted and copied into
    ``validated_documents`` with their frontmatter replaced by the
    schema's typed value.  For each failing document a ``Filename:``
    line is written once, followed by one ``Error:`` line per issue.
    If any errors were collected a dated header line is prepended.

    Args:
        documents: Documents to check, typically
            :attr:`BatchResult.successful <mdfolio_core.BatchResult.successful>`.
        validator: The schema backend.
        now: Timestamp for the report header.  Defaults to the current
            local time.

    Returns:
        A :class:`~mdfolio_core.ValidationOutcome`.  ``files_found``
        always equals the number of documents passed in.
    """
    outcome: ValidationOutcome[T] = ValidationOutcome()

    for document in documents:
        outcome.files_found += 1
        result = validator.validate(document.front_matter)

        if isinstance(result, SchemaFailure):
            outcome.validation_errors.append(f"Filename: {document.path}")
            for issue in result.issues:
                outcome.validation_errors.append(f"    Error: {issue.field_path}: {issue.message}")
            continue

        outcome.files_valid += 1
        outcome.validated_documents.append(
            ValidatedDocument(path=document.path, front_matter=result.data, content=document.content)
        )

    if outcome.validation_errors:
        now = now or datetime.now()
        outcome.validation_errors.insert(
            0,
            f"Frontmatter Validation Errors  {format_date_yyyy_mm_dd(now)} {now:%H:%M:%S}",
        )
        _logger.debug(
            "%d of %d documents failed validation",
            outcome.files_found - outcome.files_valid,
            outcome.files_found,
        )

    return outcome
