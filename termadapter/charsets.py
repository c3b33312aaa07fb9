"""
Charsets: the glyphs an adapter uses for line drawing.

Each charset is a plain class with class-level glyph attributes. They carry no
state, so default construction is all the resolver ever needs.
"""

from .kinds import CharsetKind


class Charset:
    """Base charset. Subclasses override the glyphs they support."""

    line_horizontal = "-"
    line_vertical = "|"
    corner_top_left = "+"
    corner_top_right = "+"
    corner_bottom_left = "+"
    corner_bottom_right = "+"

    # Escape sequences switching the terminal in and out of this charset.
    activate = ""
    deactivate = ""

    def glyphs(self) -> dict[str, str]:
        return {
            "line_horizontal": self.line_horizontal,
            "line_vertical": self.line_vertical,
            "corner_top_left": self.corner_top_left,
            "corner_top_right": self.corner_top_right,
            "corner_bottom_left": self.corner_bottom_left,
            "corner_bottom_right": self.corner_bottom_right,
        }

    def __repr__(self):
        return f"{self.__class__.__name__}()"


class Ascii(Charset):
    pass


class AsciiExtended(Charset):
    """Box drawing restricted to glyphs code page 437 can encode (0xC4, 0xB3, 0xDA...)."""

    line_horizontal = "─"
    line_vertical = "│"
    corner_top_left = "┌"
    corner_top_right = "┐"
    corner_bottom_left = "└"
    corner_bottom_right = "┘"


class DECSpecialGraphics(Charset):
    """VT100 line drawing set, selected with ESC ( 0 and released with ESC ( B."""

    line_horizontal = "q"
    line_vertical = "x"
    corner_top_left = "l"
    corner_top_right = "k"
    corner_bottom_left = "m"
    corner_bottom_right = "j"

    activate = "\x1b(0"
    deactivate = "\x1b(B"


class Utf8(Charset):
    line_horizontal = "─"
    line_vertical = "│"
    corner_top_left = "┌"
    corner_top_right = "┐"
    corner_bottom_left = "└"
    corner_bottom_right = "┘"


class Utf8Heavy(Charset):
    line_horizontal = "━"
    line_vertical = "┃"
    corner_top_left = "┏"
    corner_top_right = "┓"
    corner_bottom_left = "┗"
    corner_bottom_right = "┛"


CHARSETS: dict[CharsetKind, type[Charset]] = {
    CharsetKind.ASCII: Ascii,
    CharsetKind.ASCII_EXTENDED: AsciiExtended,
    CharsetKind.DEC_SPECIAL_GRAPHICS: DECSpecialGraphics,
    CharsetKind.UTF8: Utf8,
    CharsetKind.UTF8_HEAVY: Utf8Heavy,
}
