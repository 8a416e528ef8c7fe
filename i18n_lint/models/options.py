"""Validated options for the i18n rule.

Keys follow the lint configuration (camelCase, e.g. ``checkId``); the
snake_case field names are accepted as well. Unknown keys are rejected.
"""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RuleOptions(BaseModel):
    """Options resolved once per run.

    - check_id: report i18n markers without a custom ``@@id``
    - check_text: report text-bearing nodes without an i18n marker
    - check_attributes: report attributes without an ``i18n-<name>`` marker
    - ignore_attributes: attribute names added to the built-in ignore list
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    check_id: bool = Field(default=True, alias="checkId")
    check_text: bool = Field(default=True, alias="checkText")
    check_attributes: bool = Field(default=True, alias="checkAttributes")
    ignore_attributes: Tuple[str, ...] = Field(default=(), alias="ignoreAttributes")

    @field_validator("ignore_attributes", mode="before")
    def _normalise_ignore_attributes(cls, value: object) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            # allow a single attribute name as a bare string
            return (value,)
        if isinstance(value, (list, tuple, set, frozenset)):
            names: list[str] = []
            for item in value:
                if not isinstance(item, str):
                    raise ValueError(
                        f"ignoreAttributes entries must be strings, got {item!r}"
                    )
                names.append(item)
            return tuple(names)
        raise ValueError("ignoreAttributes must be a list of strings")

    def to_config(self) -> dict[str, object]:
        """Return the options keyed the way the lint configuration spells them."""
        return self.model_dump(by_alias=True, mode="json")
