"""MAC address normalisation down to the OUI search key."""
from __future__ import annotations

from oui.errors import InvalidLength

MIN_MAC_LENGTH = 12
MAX_MAC_LENGTH = 17
OUI_LENGTH = 6
SEPARATORS = "-:. "

_STRIP = str.maketrans("", "", SEPARATORS)


def strip_separators(text: str) -> str:
    return text.translate(_STRIP).upper()


def normalize(raw: str) -> str:
    """Return the uppercase 6 character OUI of ``raw``.

    Separators may appear in any mix and position. The remaining characters
    are not checked for hex digits; whatever leads the cleaned string is the
    search key.
    """
    length = len(raw)
    if length < MIN_MAC_LENGTH or length > MAX_MAC_LENGTH:
        raise InvalidLength(
            f"invalid MAC address {raw!r}: expected {MIN_MAC_LENGTH}-{MAX_MAC_LENGTH} "
            f"characters, got {length}"
        )
    cleaned = strip_separators(raw)
    if len(cleaned) < OUI_LENGTH:
        raise InvalidLength(f"invalid MAC address {raw!r}: too few digits")
    return cleaned[:OUI_LENGTH]
