"""Builds selectable options for argument widgets.

Option lists come from outside the document: token lists (and similar
address books) are supplied by the caller as a mapping from a source-path
suffix to a zero-argument accessor, e.g.

    getters = create_token_getters({"sepolia-tokens.tokenlist.json": tokens})
    build_options_from_ui(ui, getters)

An argument whose `sourcePath` ends with one of the mapping keys reads its
entries from that accessor.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel

from contractlist.types import ArgSource, ArgumentUI, FieldArg, LiteralArg, TokenlistLabelField

logger = logging.getLogger(__name__)

TokenGetters = Dict[str, Callable[[], List[Dict[str, Any]]]]

_UNSUPPORTED_SOURCES = ("contractFunction", "contractlist")


def create_token_getters(token_map: Mapping[str, List[Dict[str, Any]]]) -> TokenGetters:
    """Wraps static token lists into the accessor mapping used for lookups."""
    return {key: (lambda entries=entries: entries) for key, entries in token_map.items()}


def _find_getter(path: str, token_getters: Optional[TokenGetters]) -> Optional[Callable[[], List[Dict[str, Any]]]]:
    if not token_getters:
        return None
    return next((getter for key, getter in token_getters.items() if path.endswith(key)), None)


def normalize_arg_source(source: Union[ArgSource, Mapping[str, Any]]) -> Union[FieldArg, LiteralArg]:
    """Normalizes an argument source: a bare string names a form field."""
    if isinstance(source, str):
        return FieldArg(field=source)
    if isinstance(source, LiteralArg):
        return source
    return LiteralArg.model_validate(source)


def normalize_label_field(label_field: Any) -> Optional[Union[str, TokenlistLabelField]]:
    """Normalizes a `labelField`: either a key name or a token-list lookup."""
    if label_field is None or isinstance(label_field, (str, TokenlistLabelField)):
        return label_field
    return TokenlistLabelField.model_validate(label_field)


def resolve_label(value: str, label_field: Any, token_getters: Optional[TokenGetters] = None) -> str:
    """Resolves the display label of a value.

    Only token-list lookups resolve anything: the value is matched
    case-insensitively against the entries' `address`. In every other case,
    and when nothing matches, the value itself is returned.

    Args:
        value: The raw value, usually an address.
        label_field: The argument's `labelField`.
        token_getters: Token-list accessors.

    Returns:
        The label.
    """
    ref = normalize_label_field(label_field)
    if not isinstance(ref, TokenlistLabelField):
        return value

    getter = _find_getter(ref.tokenlistPath, token_getters)
    if getter is None:
        return value

    target = value.lower()
    token = next((t for t in getter() if str(t.get("address") or "").lower() == target), None)
    if token is None:
        return value
    return token.get(ref.labelField) or value


def build_options_from_ui(
    ui: Union[ArgumentUI, Mapping[str, Any], None],
    token_getters: Optional[TokenGetters] = None,
) -> List[Dict[str, Any]]:
    """Builds the `{value, label}` options of a select-like widget.

    "static" sources return their literal options unchanged. "tokenlist"
    sources read the matching token list, keep the entries matching every
    `filters` item, and project `valueField` (default "address") and
    `labelField` (default "symbol"). "contractFunction" and "contractlist"
    sources are not supported and yield no options.

    Args:
        ui: The argument's UI configuration.
        token_getters: Token-list accessors.

    Returns:
        The options, possibly empty.
    """
    if ui is None:
        return []
    if isinstance(ui, ArgumentUI) and ui.source == "static" and ui.options is not None:
        return [option.model_dump(mode="json") for option in ui.options]
    if isinstance(ui, BaseModel):
        ui = ui.model_dump(mode="json", exclude_none=True)

    source = ui.get("source")
    if source == "static" and ui.get("options") is not None:
        return list(ui["options"])

    if source == "tokenlist":
        getter = _find_getter(ui.get("sourcePath") or "", token_getters)
        entries = getter() if getter is not None else []

        filters = ui.get("filters") or {}
        if filters:
            entries = [e for e in entries if all(e.get(k) == v for k, v in filters.items())]

        value_key = ui.get("valueField") or "address"
        label_field = ui.get("labelField")
        label_key = label_field if isinstance(label_field, str) else "symbol"
        return [{"value": e.get(value_key), "label": e.get(label_key) or e.get(value_key)} for e in entries]

    if source in _UNSUPPORTED_SOURCES:
        logger.warning("%s source not implemented; returning empty options", source)
    return []
