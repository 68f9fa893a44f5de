# pyright: reportAny=false, reportExplicitAny=false, reportUnknownVariableType=false
# pyright: reportUnknownArgumentType=false
"""Merging of configuration mappings and ``SPOX_`` environment overrides."""

import json
import os
from collections.abc import Mapping
from typing import Any, Final

ENV_PREFIX: Final = "SPOX_"
_SECTION_SEPARATOR: Final = "__"


def _copy(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _copy(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_copy(item) for item in value]
    return value


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``base`` with ``override`` layered on top.

    Dictionaries present on both sides merge key by key; anything else from
    ``override`` wins outright, lists included. The result shares no mutable
    state with either input.
    """
    merged: dict[str, Any] = {key: _copy(value) for key, value in base.items()}
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = _copy(value)
    return merged


def set_nested_key(d: dict[str, Any], key_path: str, value: Any) -> None:
    """Set a value at a dotted key path in a nested dictionary.

    Missing levels are created; a non-dict value in the way is replaced.

    Example:
        >>> d = {}
        >>> set_nested_key(d, "search.top_k", 5)
        >>> d
        {'search': {'top_k': 5}}
    """
    *sections, leaf = key_path.split(".")
    target = d
    for section in sections:
        child = target.get(section)
        if not isinstance(child, dict):
            child = target[section] = {}
        target = child
    target[leaf] = value


def _coerce(raw: str) -> Any:
    """Infer a typed value from an environment string.

    Tried in order: ``true``/``false`` in any case, an integer, a float
    written with a decimal point, a JSON list or object. Anything else stays
    a string.
    """
    if raw.lower() in ("true", "false"):
        return raw.lower() == "true"
    try:
        return int(raw)
    except ValueError:
        pass
    if "." in raw:
        try:
            return float(raw)
        except ValueError:
            pass
    if raw[:1] + raw[-1:] in ("[]", "{}"):
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            pass
    return raw


def parse_env_vars(
    prefix: str = ENV_PREFIX,
    environ: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Collect ``SPOX_SECTION__KEY`` variables into a nested mapping.

    The prefix is dropped, ``__`` separates path segments and names are
    lowercased, so ``SPOX_SEARCH__TOP_K=5`` yields ``{"search": {"top_k": 5}}``.
    Names without a ``__`` (``SPOX_DEBUG``, ``SPOX_LOG_LEVEL``) are logging
    switches and are skipped.

    Args:
        prefix: Variable name prefix.
        environ: Mapping to read instead of ``os.environ``.
    """
    overrides: dict[str, Any] = {}
    source = os.environ if environ is None else environ
    for name, raw in source.items():
        if not name.startswith(prefix):
            continue
        key = name.removeprefix(prefix)
        if _SECTION_SEPARATOR not in key:
            continue
        set_nested_key(overrides, key.replace(_SECTION_SEPARATOR, ".").lower(), _coerce(raw))
    return overrides
