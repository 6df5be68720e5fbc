"""Local filesystem collection and write-back for mdfolio.

This package provides :class:`LocalMarkdownCollector`, which parses
every markdown file under a directory tree into
:class:`~mdfolio_core.Document` objects, and :func:`write_markdown_file`
for writing documents back to disk.  :class:`CollectorConfig` describes
a collector declaratively and can be loaded from JSON or YAML with
:func:`load_collector_config`.
"""

from mdfolio_fs.config import CollectorConfig, load_collector_config
from mdfolio_fs.local import LocalMarkdownCollector, write_markdown_file

__all__ = [
    "CollectorConfig",
    "LocalMarkdownCollector",
    "load_collector_config",
    "write_markdown_file",
]
