"""Depth-limited merging of theme documents."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from scopetint.builder import PALETTE_KEY

# Scope entries are replaced wholesale, palette colors one level deeper
THEME_MERGE_DEPTH = 1
PALETTE_MERGE_DEPTH = 2


def _item_name(value: object) -> str | None:
    if isinstance(value, Mapping):
        name = value.get("name")
        if isinstance(name, str):
            return name
    return None


def merge_documents(left: Any, right: Any, depth: int) -> Any:
    """Merge ``right`` over ``left`` down to ``depth`` levels of nesting.

    Tables are merged key by key while ``depth`` is positive. Arrays are
    merged by matching items on their ``name`` key; unnamed items are
    appended. Below the merge depth, or when the two values have different
    types, ``right`` replaces ``left``. Neither input is modified.

    Args:
        left: The base value.
        right: The overriding value.
        depth: Number of nesting levels to merge.

    Returns:
        The merged value.
    """
    if depth > 0 and isinstance(left, Mapping) and isinstance(right, Mapping):
        merged = {key: copy.deepcopy(value) for key, value in left.items()}
        for key, value in right.items():
            if key in merged:
                merged[key] = merge_documents(merged[key], value, depth - 1)
            else:
                merged[key] = copy.deepcopy(value)
        return merged

    if depth > 0 and isinstance(left, list) and isinstance(right, list):
        items = copy.deepcopy(left)
        for value in right:
            name = _item_name(value)
            position = next(
                (i for i, item in enumerate(items) if name is not None and _item_name(item) == name),
                None,
            )
            if position is None:
                items.append(copy.deepcopy(value))
            else:
                items.append(merge_documents(items.pop(position), value, depth - 1))
        return items

    return copy.deepcopy(right)


def merge_themes(parent: Mapping[str, Any], child: Mapping[str, Any]) -> dict[str, Any]:
    """Merge a child theme document over its parent.

    The ``palette`` table is merged one level deeper than the rest of the
    document, so a child can redefine a single palette color while keeping
    the others. Every other top-level entry of the child replaces the
    parent's entry of the same name.

    Args:
        parent: The parent theme document.
        child: The inheriting theme document.

    Returns:
        A new merged document.
    """
    parent_palette = parent.get(PALETTE_KEY)
    child_palette = child.get(PALETTE_KEY)
    if parent_palette is not None and child_palette is not None:
        palette = merge_documents(parent_palette, child_palette, PALETTE_MERGE_DEPTH)
    elif parent_palette is not None:
        palette = copy.deepcopy(parent_palette)
    elif child_palette is not None:
        palette = copy.deepcopy(child_palette)
    else:
        palette = {}

    merged = merge_documents(parent, child, THEME_MERGE_DEPTH)
    merged[PALETTE_KEY] = palette
    return merged
