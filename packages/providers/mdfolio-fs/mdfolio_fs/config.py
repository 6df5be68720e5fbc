"""Pydantic configuration model for the local markdown collector.

A collector can be configured in code or from a JSON/YAML file::

    # collector.yaml
    root: ${NOTES_DIR}/published
    suffixes: [".md"]
    max_concurrency: 32

String values may contain ``${VAR}`` placeholders that are resolved
from environment variables at load time.  Unset variables resolve to
an empty string and emit a warning.
"""

from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

_logger = logging.getLogger(__name__)

#: Default maximum file size in bytes (10 MB).
DEFAULT_MAX_FILE_BYTES: int = 10 * 1024 * 1024


class CollectorConfig(BaseModel):
    """Settings for :class:`~mdfolio_fs.LocalMarkdownCollector`.

    Attributes:
        root: Directory to scan recursively.
        suffixes: Only collect files with one of these suffixes
            (e.g. ``[".md"]``).  ``None`` collects every file.
        encoding: Text encoding used to read and write files.
        max_file_bytes: Files larger than this are reported as failures
            instead of being read.
        max_concurrency: Upper bound on files read at once.  ``None``
            starts every read immediately.
    """

    root: Path = Field(..., description="Directory to scan recursively")
    suffixes: list[str] | None = Field(None, description="File suffixes to include")
    encoding: str = Field("utf-8", description="Text encoding for reads and writes")
    max_file_bytes: int = Field(DEFAULT_MAX_FILE_BYTES, gt=0, description="Per-file size limit")
    max_concurrency: int | None = Field(None, ge=1, description="Concurrent read limit")


def load_collector_config(path: Path) -> CollectorConfig:
    """Load a :class:`CollectorConfig` from a JSON or YAML file.

    ``.yaml`` and ``.yml`` files are parsed with PyYAML; anything else is
    parsed as JSON.  ``${VAR}`` placeholders are resolved before
    validation.

    Raises:
        FileNotFoundError: If *path* does not exist.
        pydantic.ValidationError: If the data does not match the model.
    """
    config_path = Path(path)
    raw = config_path.read_text(encoding="utf-8")
    if config_path.suffix in (".yaml", ".yml"):
        data = yaml.safe_load(raw)
    else:
        data = json.loads(raw)
    return CollectorConfig.model_validate(resolve_env_vars(data or {}))


# ------------------------------------------------------------------
# Environment variable resolution
# ------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)\}")


def resolve_env_vars(data: Any) -> Any:
    """Recursively resolve ``${VAR}`` placeholders in config data.

    Walks dicts, lists, and strings.  Other values are returned as-is.
    """
    if isinstance(data, str):
        return _ENV_VAR_RE.sub(_replace_env_var, data)
    if isinstance(data, dict):
        return {k: resolve_env_vars(v) for k, v in data.items()}
    if isinstance(data, list):
        return [resolve_env_vars(item) for item in data]
    return data


def _replace_env_var(match: re.Match[str]) -> str:
    var_name = match.group(1)
    env_value = os.environ.get(var_name, "")
    if not env_value:
        _logger.warning("Environment variable '%s' is not set or empty", var_name)
    return env_value
