"""Build validated ``RuleOptions`` from config files, environment and CLI.

Precedence (later wins): JSON config file, environment, explicit overrides.
``I18N_LINT_IGNORE_ATTRIBUTES`` (comma separated) is appended to
``ignoreAttributes`` rather than replacing it.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping

from dotenv import load_dotenv

from i18n_lint.models import RuleOptions

LOGGER = logging.getLogger(__name__)

ENV_PREFIX = "I18N_LINT"
IGNORE_ATTRIBUTES_ENV = f"{ENV_PREFIX}_IGNORE_ATTRIBUTES"
CONFIG_PATH_ENV = f"{ENV_PREFIX}_CONFIG"


def _split_names(value: str | None) -> list[str]:
    if not value:
        return []
    return [chunk.strip() for chunk in value.split(",") if chunk.strip()]


def read_config_file(config_path: Path) -> dict[str, Any]:
    """Read a JSON options object from ``config_path``.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid JSON or not an object
    """
    if not config_path.is_file():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in config file {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a JSON object")
    return data


def load_rule_options(
    config_path: Path | None = None,
    *,
    dotenv_path: str | Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> RuleOptions:
    """Resolve the rule options for a run.

    Args:
        config_path: Optional JSON config (``checkId``, ``checkText``,
            ``checkAttributes``, ``ignoreAttributes``). Falls back to
            ``I18N_LINT_CONFIG`` when not given.
        dotenv_path: Optional ``.env`` file loaded before reading the
            environment; existing variables are not overridden.
        overrides: Values that win over the file (e.g. from CLI flags).
            ``ignoreAttributes`` here is appended, not replaced.

    Raises:
        FileNotFoundError: If a config file was requested but is missing
        ValueError: On invalid JSON or invalid option values (pydantic
            ``ValidationError`` is a ``ValueError``)
    """
    if dotenv_path is not None:
        load_dotenv(dotenv_path=Path(dotenv_path))

    if config_path is None and os.environ.get(CONFIG_PATH_ENV):
        config_path = Path(os.environ[CONFIG_PATH_ENV])

    raw: dict[str, Any] = {}
    if config_path is not None:
        raw.update(read_config_file(config_path))
        LOGGER.info("Loaded i18n options from %s", config_path)

    # Validate the file on its own first so errors point at the file keys
    base = RuleOptions.model_validate(raw)

    ignore_attributes = list(base.ignore_attributes)
    env_names = _split_names(os.environ.get(IGNORE_ATTRIBUTES_ENV))
    if env_names:
        LOGGER.debug("Adding %d ignored attribute(s) from %s", len(env_names), IGNORE_ATTRIBUTES_ENV)
        ignore_attributes.extend(env_names)

    aliases = {name: field.alias or name for name, field in RuleOptions.model_fields.items()}
    merged = base.model_dump(by_alias=True)
    for key, value in (overrides or {}).items():
        key = aliases.get(key, key)
        if key == "ignoreAttributes":
            extra = RuleOptions.model_validate({"ignoreAttributes": value})
            ignore_attributes.extend(extra.ignore_attributes)
            continue
        merged[key] = value
    merged["ignoreAttributes"] = ignore_attributes
    return RuleOptions.model_validate(merged)
