import copy
from collections.abc import Mapping
from typing import Any


def deep_merge(base: dict[str, Any], fragment: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge ``fragment`` into ``base`` in place; fragment values win on conflicts.

    Nested mappings are merged key by key. Any other value, lists included,
    replaces what ``base`` holds.
    """
    if not fragment:
        return base
    for key, value in fragment.items():
        current = base.get(key)
        if isinstance(value, Mapping):
            if not isinstance(current, dict):
                current = base[key] = {}
            deep_merge(current, value)
        else:
            base[key] = copy.deepcopy(value)
    return base
