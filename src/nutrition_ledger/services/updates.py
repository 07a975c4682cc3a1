"""Partial updates for frozen domain dataclasses."""

from collections.abc import Mapping
from dataclasses import MISSING, fields


def partial_changes(
    model: type, updates: Mapping[str, object], managed: set[str]
) -> dict[str, object]:
    """Return the updates that may be applied to ``model``.

    Unknown keys and ``managed`` fields are dropped. A null value is kept only
    for fields that default to None; required fields keep their current value.
    """
    required = {
        item.name
        for item in fields(model)
        if item.default is MISSING and item.default_factory is MISSING
    }
    allowed = {item.name for item in fields(model)} - managed
    return {
        key: value
        for key, value in updates.items()
        if key in allowed and not (value is None and key in required)
    }
