"""Heuristic widget inference and per-widget UI configuration.

Both steps are keyword cascades over the lower-cased parameter name. The
cascades are kept as ordered rule tables evaluated top to bottom, first match
wins, so the precedence is visible in one place: money vocabulary is checked
before time vocabulary, which is checked before percentage vocabulary. A name
like "withdrawDeadline" therefore gets a token amount input, not a date picker.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Tuple

from contractlist.generator.humanize import humanize

NUMERIC_TYPES = ("uint256", "uint8")

# (keywords, widget) for numeric parameters, in priority order.
NUMERIC_WIDGET_RULES: List[Tuple[Tuple[str, ...], str]] = [
    (("amount", "balance", "value", "deposit", "withdraw"), "tokenAmount"),
    (("deadline", "timestamp", "time", "expir", "until", "start", "end"), "datetime"),
    (("slippage", "percent", "ratio", "fee", "bps", "basis"), "slider"),
]

# (predicate(name_lower, type), widget), in priority order.
WIDGET_RULES: List[Tuple[Callable[[str, str], bool], Optional[str]]] = [
    (lambda name, type_: type_ == "address", "address"),
    (lambda name, type_: type_ == "bool", "checkbox"),
    (lambda name, type_: type_ in NUMERIC_TYPES, None),
    (lambda name, type_: type_ == "address[]", "multiselect"),
]

DEFAULT_WIDGET = "text"

_RECIPIENT_KEYWORDS = ("recipient", "receiver", "beneficiary")

# (keywords, offset) for datetime parameters; the first match overrides the default.
DATETIME_OFFSET_RULES: List[Tuple[Tuple[str, ...], str]] = [
    (("start",), "+1h"),
    (("end", "expir"), "+7d"),
]

DEFAULT_DATETIME_OFFSET = "+30m"


def _contains_any(name: str, keywords: Tuple[str, ...]) -> bool:
    return any(keyword in name for keyword in keywords)


def _infer_numeric_widget(name: str) -> str:
    for keywords, widget in NUMERIC_WIDGET_RULES:
        if _contains_any(name, keywords):
            return widget
    return DEFAULT_WIDGET


def infer_widget(name: str, value_type: str) -> str:
    """Picks the widget for a parameter from its name and value type.

    Array types other than `address[]` get a plain text input, since a
    selection widget needs an option source the ABI cannot provide.

    Args:
        name: The ABI parameter name.
        value_type: The mapped value type (see `map_abi_type`).

    Returns:
        One of "address", "checkbox", "tokenAmount", "datetime", "slider",
        "multiselect" or "text".
    """
    name_lower = (name or "").lower()
    for predicate, widget in WIDGET_RULES:
        if predicate(name_lower, value_type):
            return widget if widget is not None else _infer_numeric_widget(name_lower)
    return DEFAULT_WIDGET


def guess_token_from(name: str) -> str:
    """Guesses which sibling field holds the token of an amount field.

    Two-sided pools name their amounts "amountA"/"amountB", so a name with an
    "a" and no "b" points at "tokenA". Note that any name containing the
    letter "a" (including "amount" itself) qualifies.
    """
    name_lower = name.lower()
    if "a" in name_lower and "b" not in name_lower:
        return "tokenA"
    if "b" in name_lower:
        return "tokenB"
    return "token"


def _address_config(name: str) -> Dict[str, Any]:
    if name == "to" or _contains_any(name, _RECIPIENT_KEYWORDS):
        return {"addressBook": True, "placeholder": "0x... or select from address book"}
    if "token" in name:
        return {"helpText": "Token contract address"}
    return {"placeholder": "0x..."}


def _token_amount_config(name: str, raw_name: str) -> Dict[str, Any]:
    return {
        "tokenAmountConfig": {
            "showBalance": True,
            "showMaxButton": True,
            "tokenFrom": guess_token_from(name),
        },
        "helpText": f"Enter the {humanize(raw_name).lower()}",
    }


def _datetime_config(name: str, raw_name: str) -> Dict[str, Any]:
    offset = DEFAULT_DATETIME_OFFSET
    for keywords, rule_offset in DATETIME_OFFSET_RULES:
        if _contains_any(name, keywords):
            offset = rule_offset
            break
    return {
        "datetimeConfig": {
            "format": "relative",
            "minDate": "now",
            "defaultOffset": offset,
        }
    }


def _slider_config(name: str, raw_name: str) -> Dict[str, Any]:
    config: Dict[str, Any] = {
        # basis points
        "validation": {"min": 0, "max": 10000, "step": 1},
        "display": {"unit": "bps", "unitLabel": "basis points", "decimals": 0},
    }
    if "slippage" in name:
        config["validation"]["max"] = 1000
        config["helpText"] = "Maximum slippage tolerance"
    return config


WIDGET_CONFIG_BUILDERS: Dict[str, Callable[[str, str], Dict[str, Any]]] = {
    "tokenAmount": _token_amount_config,
    "datetime": _datetime_config,
    "slider": _slider_config,
}


def infer_ui_config(name: str, value_type: str, widget: str) -> Dict[str, Any]:
    """Builds the widget-specific part of a parameter's UI configuration.

    Args:
        name: The ABI parameter name.
        value_type: The mapped value type.
        widget: The widget chosen by `infer_widget`.

    Returns:
        A dict of `ArgumentUI` keys, without `widget`. Empty when the widget
        needs no extra configuration.
    """
    name_lower = (name or "").lower()
    config: Dict[str, Any] = {}
    if value_type == "address":
        config.update(_address_config(name_lower))

    builder = WIDGET_CONFIG_BUILDERS.get(widget)
    if builder is not None:
        config.update(builder(name_lower, name or ""))
    return config
