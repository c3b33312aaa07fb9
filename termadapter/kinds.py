"""
Identifiers for the adapter and charset variants.

AdapterKind and CharsetKind are independent axes: any adapter can be paired with
any charset. The values double as the bare names accepted by overrides, so
`get_adapter(force_adapter="Posix")` and `get_adapter(force_adapter=AdapterKind.POSIX)`
mean the same thing.

Adding a variant takes two steps: a new member here, and a registration in the
ADAPTERS (adapters.py) or CHARSETS (charsets.py) mapping.
"""

from enum import Enum


class AdapterKind(str, Enum):
    POSIX = "Posix"
    WINDOWS = "Windows"
    WINDOWS_ANSICON = "WindowsAnsicon"


class CharsetKind(str, Enum):
    ASCII = "Ascii"
    ASCII_EXTENDED = "AsciiExtended"
    DEC_SPECIAL_GRAPHICS = "DECSpecialGraphics"
    UTF8 = "Utf8"
    UTF8_HEAVY = "Utf8Heavy"


def kind_from_name(kind_enum: type[Enum], name: str) -> Enum | None:
    """Look up a bare name by enum value, then by member name.

    Returns None when the name matches neither.
    """
    for member in kind_enum:
        if member.value == name:
            return member
    return kind_enum.__members__.get(name.upper())
