"""Collect, validate and list a folder of markdown notes.

This script demonstrates the full mdfolio pipeline against the sample
notes in ``examples/notes``.

Flow:
    1. Collect every ``.md`` file with a LocalMarkdownCollector
    2. Validate the frontmatter against a pydantic model
    3. Sort and page through the valid notes
    4. Write the validation report next to the notes

Requirements:
    pip install -e .

Usage:
    python examples/validate_notes.py [NOTES_DIR]
"""

import asyncio
import datetime as dt
import sys
from pathlib import Path

from pydantic import BaseModel

from mdfolio_core import ColorConsole, Pager, PydanticSchemaValidator, sort_records, validate_documents
from mdfolio_fs import LocalMarkdownCollector


class Note(BaseModel):
    title: str
    date: dt.date
    tags: list[str] = []
    draft: bool = False


async def main() -> None:
    console = ColorConsole()
    notes_root = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(__file__).parent / "notes"

    # ------------------------------------------------------------------
    # 1. Collect
    # ------------------------------------------------------------------
    collector = LocalMarkdownCollector(notes_root, suffixes=[".md"], console=console)
    result = await collector.collect()
    for failure in result.failed:
        console.error(f"{failure.path}: {failure.error}")

    # ------------------------------------------------------------------
    # 2. Validate
    # ------------------------------------------------------------------
    outcome = validate_documents(result.successful, PydanticSchemaValidator(Note))
    console.info(f"{outcome.files_valid} of {outcome.files_found} notes are valid")
    for line in outcome.validation_errors:
        console.warn(line)

    # ------------------------------------------------------------------
    # 3. Sort and page
    # ------------------------------------------------------------------
    rows = [
        {"title": v.front_matter.title, "date": v.front_matter.date, "path": v.path}
        for v in outcome.validated_documents
        if not v.front_matter.draft
    ]
    pager = Pager(sort_records(rows, ["date", "title"], ["desc", "asc"]), page_size=10)
    for page in pager.get_all_pages():
        console.info(f"--- page {page.current_page} of {page.total_pages} ---")
        for row in page.rows:
            print(f"  {row['date']}  {row['title']}")

    # ------------------------------------------------------------------
    # 4. Report
    # ------------------------------------------------------------------
    if outcome.validation_errors:
        report = notes_root / "validation-errors.txt"
        report.write_text("\n".join(outcome.validation_errors), encoding="utf-8")
        console.success(f"Wrote {report}")


if __name__ == "__main__":
    asyncio.run(main())
