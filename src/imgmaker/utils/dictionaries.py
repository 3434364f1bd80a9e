"""Helpers for nested settings dictionaries using dot-notation keys.

Examples
--------
>>> flatten_dictionary({"image": {"size": [2, 2]}})
{'image.size': [2, 2]}

>>> expand_dictionary({"image.size": [2, 2]})
{'image': {'size': [2, 2]}}
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "flatten_dictionary",
    "expand_dictionary",
    "merge_dictionaries",
]


def flatten_dictionary(
    nested_dict: dict[str, Any], parent_key_prefix: str = ""
) -> dict[str, Any]:
    """Flatten a nested dictionary using dot-notation keys.

    Only dictionaries are descended into; lists are kept as values.
    """
    flat_dict: dict[str, Any] = {}
    for key, value in nested_dict.items():
        full_key = f"{parent_key_prefix}.{key}" if parent_key_prefix else key
        if isinstance(value, dict):
            flat_dict.update(
                flatten_dictionary(value, parent_key_prefix=full_key)
            )
        else:
            flat_dict[full_key] = value
    return flat_dict


def expand_dictionary(flat_dict: dict[str, Any]) -> dict[str, Any]:
    """Expand dot-notated keys into a nested dictionary."""
    nested_dict: dict[str, Any] = {}
    for key, value in flat_dict.items():
        parts = key.split(".")
        node = nested_dict
        for part in parts[:-1]:
            node = node.setdefault(part, {})
        node[parts[-1]] = value
    return nested_dict


def merge_dictionaries(
    base: dict[str, Any], overrides: dict[str, Any]
) -> dict[str, Any]:
    """Deep-merge `overrides` into a copy of `base`.

    Leaves present in `overrides` win; everything else in `base` is kept.

    Examples
    --------
    >>> merge_dictionaries(
    ...     {"image": {"dimension": 3, "size": [4, 4, 4]}},
    ...     {"image": {"dimension": 2, "size": [4, 4]}},
    ... )
    {'image': {'dimension': 2, 'size': [4, 4]}}
    """
    flat = flatten_dictionary(base)
    flat.update(flatten_dictionary(overrides))
    return expand_dictionary(flat)
