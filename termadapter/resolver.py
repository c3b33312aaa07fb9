"""
Adapter resolution and the process-wide adapter singleton.

The resolver answers one question: which adapter should this process talk to
its terminal through? It probes the environment, picks an AdapterKind, builds
the adapter once and hands the same instance back on every later call.

Decision order (first match wins):
  1. Not attached to a terminal      -> no adapter (NoAdapterAvailableError)
  2. Windows host running ANSICON    -> WindowsAnsiconAdapter
  3. Windows host                    -> WindowsAdapter
  4. Anything else                   -> PosixAdapter

Overrides skip the decision entirely. They accept an enum member, a variant
class, or a string in one of three forms:
  - "Posix"                          bare name, looked up in the registry
  - "adapters.PosixAdapter"          dotted, relative to the termadapter package,
                                     falling back to an absolute import
  - "my_pkg.terminals:FancyAdapter"  entry-point style, imported verbatim

Overrides only matter for the call that creates the singleton. Once an adapter
is cached it is returned as-is, whatever arguments later calls pass.
"""

from __future__ import annotations

import importlib
import inspect
import os
import sys
import threading
from enum import Enum
from typing import Any, Union

from .adapters import ADAPTERS, Adapter
from .charsets import CHARSETS, Charset
from .exceptions import NoAdapterAvailableError, UnknownAdapterError, UnknownCharsetError
from .kinds import AdapterKind, CharsetKind, kind_from_name

# "termadapter" - the root partially-qualified names are resolved against
PACKAGE_ROOT = __name__.rpartition(".")[0]

AdapterOverride = Union[AdapterKind, type[Adapter], str]
CharsetOverride = Union[CharsetKind, type[Charset], str]


def _import_variant(module_path: str, attr_name: str, base: type, identifier: str, error_cls):
    try:
        module = importlib.import_module(module_path)
    except (ImportError, ValueError) as e:
        raise error_cls(identifier) from e

    target = getattr(module, attr_name, None)
    if not (isinstance(target, type) and issubclass(target, base) and not inspect.isabstract(target)):
        raise error_cls(identifier)
    return target


def _resolve_variant(
    identifier: Any,
    kind_enum: type[Enum],
    registry: dict,
    base: type,
    error_cls: type[Exception],
) -> type:
    """Turn an override into a constructible class.

    Enum members and bare names go through the static registry. Dotted and
    colon forms are imported, and whatever they point at must subclass `base`.
    """
    if isinstance(identifier, kind_enum):
        return registry[identifier]

    if isinstance(identifier, type):
        if issubclass(identifier, base) and not inspect.isabstract(identifier):
            return identifier
        raise error_cls(identifier.__qualname__)

    if not isinstance(identifier, str) or not identifier.strip():
        raise error_cls(repr(identifier))

    name = identifier.strip()

    if ":" in name:
        module_path, _, attr_name = name.partition(":")
        return _import_variant(module_path, attr_name, base, name, error_cls)

    if "." in name:
        module_path, _, attr_name = name.lstrip(".").rpartition(".")
        try:
            return _import_variant(
                f"{PACKAGE_ROOT}.{module_path}", attr_name, base, name, error_cls
            )
        except error_cls as e:
            if not isinstance(e.__cause__, ModuleNotFoundError):
                raise
        # Not a termadapter submodule: try it as an absolute dotted path
        return _import_variant(module_path, attr_name, base, name, error_cls)

    kind = kind_from_name(kind_enum, name)
    if kind is not None:
        return registry[kind]

    # Class names work too ("PosixAdapter", "Utf8Heavy")
    for cls in registry.values():
        if cls.__name__ == name:
            return cls

    raise error_cls(name)


def resolve_adapter_class(identifier: AdapterOverride) -> type[Adapter]:
    return _resolve_variant(identifier, AdapterKind, ADAPTERS, Adapter, UnknownAdapterError)


def resolve_charset_class(identifier: CharsetOverride) -> type[Charset]:
    return _resolve_variant(identifier, CharsetKind, CHARSETS, Charset, UnknownCharsetError)


class AdapterResolver:
    """Owns one lazily-created adapter for the lifetime of the process.

    Pass the resolver around (or use `termadapter.default_resolver`) instead of
    holding the adapter itself; attribute access on the resolver is forwarded
    to the adapter, resolving it on first use:

        resolver.write_line("hello")   # same as resolver.get_adapter().write_line("hello")

    `default_adapter` and `default_charset` are configured fallbacks, used only
    when `get_adapter()` is called without the matching override.
    """

    def __init__(
        self,
        default_adapter: AdapterOverride | None = None,
        default_charset: CharsetOverride | None = None,
    ):
        self.default_adapter = default_adapter
        self.default_charset = default_charset
        self._instance: Adapter | None = None
        self._lock = threading.Lock()

    @property
    def instance(self) -> Adapter | None:
        """The cached adapter, or None if nothing has been resolved yet."""
        return self._instance

    @staticmethod
    def is_interactive_session() -> bool:
        """True when stdout is attached to a terminal."""
        stream = sys.stdout
        if stream is None:
            return False
        try:
            return stream.isatty()
        except (AttributeError, ValueError):
            # Closed or replaced streams
            return False

    @staticmethod
    def is_host_windows() -> bool:
        if sys.platform.lower().startswith("win"):
            return True
        os_name = os.environ.get("OS")
        return os_name is not None and os_name.lower().startswith("windows")

    @staticmethod
    def has_terminal_emulation_wrapper() -> bool:
        """True when running under ANSICON. Presence of the variable is the signal."""
        return "ANSICON" in os.environ

    def select_adapter_kind(self) -> AdapterKind | None:
        if not self.is_interactive_session():
            return None

        if self.is_host_windows():
            if self.has_terminal_emulation_wrapper():
                return AdapterKind.WINDOWS_ANSICON
            return AdapterKind.WINDOWS

        return AdapterKind.POSIX

    def get_adapter(
        self,
        force_adapter: AdapterOverride | None = None,
        force_charset: CharsetOverride | None = None,
    ) -> Adapter:
        """Return the process adapter, creating it on the first call.

        Args:
            force_adapter: Adapter to build instead of the detected one.
            force_charset: Charset to assign to the new adapter.

        Both overrides are ignored once an adapter has been cached.

        Raises:
            UnknownAdapterError: force_adapter names no adapter class.
            UnknownCharsetError: force_charset names no charset class.
            NoAdapterAvailableError: no override and not running in a terminal.
        """
        instance = self._instance
        if isinstance(instance, Adapter):
            return instance

        with self._lock:
            # Another thread may have won the race while we waited
            if isinstance(self._instance, Adapter):
                return self._instance

            if force_adapter is None:
                force_adapter = self.default_adapter
            if force_charset is None:
                force_charset = self.default_charset

            if force_adapter is not None:
                adapter_cls = resolve_adapter_class(force_adapter)
            else:
                kind = self.select_adapter_kind()
                if kind is None:
                    raise NoAdapterAvailableError()
                adapter_cls = ADAPTERS[kind]

            adapter = adapter_cls()

            if force_charset is not None:
                charset_cls = resolve_charset_class(force_charset)
                adapter.set_charset(charset_cls())

            self._instance = adapter
            return adapter

    def call(self, name: str, *args, **kwargs):
        """Call adapter operation `name` with the given arguments."""
        return getattr(self.get_adapter(), name)(*args, **kwargs)

    def __getattr__(self, name):
        # Only reached for names the resolver itself lacks
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self.get_adapter(), name)

    def __repr__(self):
        state = type(self._instance).__name__ if self._instance is not None else "unresolved"
        return f"<AdapterResolver {state}>"
