import re

_RUN_START = re.compile(r"(?<![A-Z])([A-Z])")
_UNDERSCORE_WORD = re.compile(r"_+(\w?)")
_SPACES = re.compile(r"\s+")


def humanize(name: str) -> str:
    """Turns a camelCase or snake_case identifier into a display label.

    "myTokenAddress" becomes "My Token Address" and "max_slippage_bps"
    becomes "Max Slippage Bps". An uppercase run such as "USDC" stays one word.
    """
    spaced = _RUN_START.sub(r" \1", name)
    spaced = _UNDERSCORE_WORD.sub(lambda m: " " + m.group(1).upper(), spaced)
    spaced = _SPACES.sub(" ", spaced).strip()
    return spaced[:1].upper() + spaced[1:]
