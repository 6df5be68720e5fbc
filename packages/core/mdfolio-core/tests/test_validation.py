"""Tests for schema validation of parsed documents."""

import datetime as dt
from pathlib import Path

import pytest
from pydantic import BaseModel

from mdfolio_core import (
    Document,
    PydanticSchemaValidator,
    SchemaFailure,
    SchemaIssue,
    SchemaSuccess,
    SchemaValidator,
    validate_documents,
)


class Note(BaseModel):
    title: str
    date: dt.date
    tags: list[str] = []


def _doc(name: str = "note.md", **front_matter) -> Document:
    fm = {"title": "A note", "date": dt.date(2025, 11, 15), "tags": ["python"]}
    fm.update(front_matter)
    return Document(path=Path("notes") / name, front_matter=fm, content="Body")


NOW = dt.datetime(2025, 11, 15, 14, 2, 11)


class TestPydanticSchemaValidator:
    def test_valid(self):
        outcome = PydanticSchemaValidator(Note).validate(_doc().front_matter)
        assert isinstance(outcome, SchemaSuccess)
        assert outcome.ok
        assert isinstance(outcome.data, Note)
        assert outcome.data.title == "A note"

    def test_invalid_reports_field_paths(self):
        outcome = PydanticSchemaValidator(Note).validate({"date": "nope", "tags": [1.5]})
        assert isinstance(outcome, SchemaFailure)
        assert not outcome.ok
        paths = {issue.path for issue in outcome.issues}
        assert ("title",) in paths
        assert ("date",) in paths
        assert ("tags", 0) in paths

    def test_issue_field_path(self):
        assert SchemaIssue(path=("tags", 0), message="bad").field_path == "tags.0"
        assert SchemaIssue(path=(), message="bad").field_path == ""

    def test_input_not_mutated(self):
        fm = {"title": "x", "date": "2025-11-15"}
        PydanticSchemaValidator(Note).validate(fm)
        assert fm == {"title": "x", "date": "2025-11-15"}

    def test_rejects_non_model(self):
        with pytest.raises(TypeError):
            PydanticSchemaValidator(dict)  # type: ignore[type-var]

    def test_repr(self):
        assert repr(PydanticSchemaValidator(Note)) == "PydanticSchemaValidator(Note)"


class TestValidateDocuments:
    def test_all_valid(self):
        docs = [_doc(f"{i}.md") for i in range(4)]
        outcome = validate_documents(docs, PydanticSchemaValidator(Note), now=NOW)
        assert outcome.files_found == 4
        assert outcome.files_valid == 4
        assert outcome.validation_errors == []
        assert outcome.error_count == 0
        assert len(outcome.validated_documents) == 4

    def test_one_invalid(self):
        docs = [_doc("a.md"), _doc("b.md", date="not a date"), _doc("c.md"), _doc("d.md")]
        outcome = validate_documents(docs, PydanticSchemaValidator(Note), now=NOW)
        assert outcome.files_found == 4
        assert outcome.files_valid == 3
        assert any(str(Path("notes/b.md")) in line for line in outcome.validation_errors)
        assert outcome.error_count == 1

    def test_report_layout(self):
        docs = [_doc("bad.md", date="nope", tags=[1.5])]
        outcome = validate_documents(docs, PydanticSchemaValidator(Note), now=NOW)
        lines = outcome.validation_errors
        assert lines[0] == "Frontmatter Validation Errors  2025-11-15 14:02:11"
        assert lines[1] == f"Filename: {Path('notes/bad.md')}"
        assert lines[2].startswith("    Error: date: ")
        assert lines[3].startswith("    Error: tags.0: ")
        assert len(lines) == 4

    def test_filename_printed_once_per_file(self):
        docs = [_doc("x.md", title=None, date=None), _doc("y.md", title=None)]
        outcome = validate_documents(docs, PydanticSchemaValidator(Note), now=NOW)
        headers = [line for line in outcome.validation_errors if line.startswith("Filename:")]
        assert headers == [f"Filename: {Path('notes/x.md')}", f"Filename: {Path('notes/y.md')}"]
        assert outcome.error_count == 3

    def test_single_dated_header(self):
        docs = [_doc("x.md", title=None), _doc("y.md", title=None)]
        outcome = validate_documents(docs, PydanticSchemaValidator(Note), now=NOW)
        dated = [line for line in outcome.validation_errors if line.startswith("Frontmatter Validation")]
        assert len(dated) == 1

    def test_validated_documents_are_typed_copies(self):
        doc = _doc()
        outcome = validate_documents([doc], PydanticSchemaValidator(Note))
        validated = outcome.validated_documents[0]
        assert isinstance(validated.front_matter, Note)
        assert validated.path == doc.path
        assert validated.content == "Body"
        assert isinstance(doc.front_matter, dict)

    def test_empty_input(self):
        outcome = validate_documents([], PydanticSchemaValidator(Note))
        assert outcome.files_found == 0
        assert outcome.files_valid == 0
        assert outcome.validation_errors == []

    def test_custom_validator(self):
        class RequiresTitle(SchemaValidator[dict]):
            def validate(self, value):
                if "title" not in value:
                    return SchemaFailure([SchemaIssue(("title",), "Required")])
                return SchemaSuccess(dict(value))

        docs = [Document(front_matter={"title": "x"}), Document(path=Path("n.md"))]
        outcome = validate_documents(docs, RequiresTitle(), now=NOW)
        assert outcome.files_valid == 1
        assert outcome.validation_errors[1:] == [
            f"Filename: {Path('n.md')}",
            "    Error: title: Required",
        ]
