"""
Terminal adapters: one per terminal family.

An adapter wraps a Rich Console configured for its terminal and holds the
charset used for line drawing. The operation set here is the capability
interface the resolver forwards to; anything fancier (boxes, prompts, colour
palettes) is built on top by the caller.

Rich already knows how to talk to each family:
  - POSIX terminals get automatic colour detection.
  - The plain Windows console gets Rich's legacy Windows renderer, which drives
    the console API instead of emitting ANSI codes.
  - Under ANSICON the console understands ANSI escapes, so the legacy renderer
    is switched off and output is limited to the 16 standard colours.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import IO

from rich.console import Console

from .charsets import Ascii, AsciiExtended, Charset, Utf8
from .kinds import AdapterKind


class Adapter(ABC):
    """Capability interface shared by all adapters.

    Adapters must be constructible without arguments. `file` exists so tests
    and embedding code can capture output.
    """

    def __init__(self, file: IO[str] | None = None):
        self.console = self._make_console(file)
        self._charset: Charset | None = None

    @abstractmethod
    def _make_console(self, file: IO[str] | None) -> Console:
        raise NotImplementedError(f"{self.__class__.__name__} must implement _make_console()")

    @abstractmethod
    def get_default_charset(self) -> Charset:
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement get_default_charset()"
        )

    @property
    def charset(self) -> Charset:
        return self.get_charset()

    def set_charset(self, charset: Charset) -> None:
        self._charset = charset

    def get_charset(self) -> Charset:
        """Return the assigned charset, picking the default on first use."""
        if self._charset is None:
            self._charset = self.get_default_charset()
        return self._charset

    def write(self, text: str) -> None:
        self.console.out(text, end="", highlight=False)

    def write_line(self, text: str = "") -> None:
        self.console.out(text, highlight=False)

    def clear(self) -> None:
        self.console.clear()

    def get_width(self) -> int:
        return self.console.size.width

    def get_height(self) -> int:
        return self.console.size.height

    def is_utf8(self) -> bool:
        return self.console.encoding.replace("-", "").startswith("utf8")


class PosixAdapter(Adapter):
    def _make_console(self, file):
        return Console(file=file)

    def get_default_charset(self):
        return Utf8() if self.is_utf8() else Ascii()


class WindowsAdapter(Adapter):
    def _make_console(self, file):
        return Console(file=file, legacy_windows=True, color_system="windows")

    def get_default_charset(self):
        return AsciiExtended()


class WindowsAnsiconAdapter(Adapter):
    def _make_console(self, file):
        return Console(file=file, legacy_windows=False, color_system="standard")

    def get_default_charset(self):
        return AsciiExtended()


ADAPTERS: dict[AdapterKind, type[Adapter]] = {
    AdapterKind.POSIX: PosixAdapter,
    AdapterKind.WINDOWS: WindowsAdapter,
    AdapterKind.WINDOWS_ANSICON: WindowsAnsiconAdapter,
}
