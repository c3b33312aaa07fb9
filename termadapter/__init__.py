"""termadapter - pick the right terminal adapter for the running environment"""

from .adapters import ADAPTERS, Adapter, PosixAdapter, WindowsAdapter, WindowsAnsiconAdapter
from .charsets import (
    CHARSETS,
    Ascii,
    AsciiExtended,
    Charset,
    DECSpecialGraphics,
    Utf8,
    Utf8Heavy,
)
from .config import ADAPTER, CHARSET, CONFIG_FILE, get_setting, load_config, save_config
from .console import console
from .exceptions import (
    NoAdapterAvailableError,
    ResolverError,
    UnknownAdapterError,
    UnknownCharsetError,
)
from .kinds import AdapterKind, CharsetKind
from .resolver import AdapterResolver, resolve_adapter_class, resolve_charset_class

# The process-wide resolver. Configured overrides apply when callers pass none.
default_resolver = AdapterResolver(default_adapter=ADAPTER, default_charset=CHARSET)

is_interactive_session = AdapterResolver.is_interactive_session
is_host_windows = AdapterResolver.is_host_windows
has_terminal_emulation_wrapper = AdapterResolver.has_terminal_emulation_wrapper


def select_adapter_kind():
    return default_resolver.select_adapter_kind()


def get_adapter(force_adapter=None, force_charset=None):
    return default_resolver.get_adapter(force_adapter, force_charset)


def call(name, *args, **kwargs):
    return default_resolver.call(name, *args, **kwargs)


__all__ = [
    # Adapters
    "ADAPTERS",
    "Adapter",
    "PosixAdapter",
    "WindowsAdapter",
    "WindowsAnsiconAdapter",
    # Charsets
    "CHARSETS",
    "Ascii",
    "AsciiExtended",
    "Charset",
    "DECSpecialGraphics",
    "Utf8",
    "Utf8Heavy",
    # Config
    "ADAPTER",
    "CHARSET",
    "CONFIG_FILE",
    "get_setting",
    "load_config",
    "save_config",
    # Console
    "console",
    # Errors
    "NoAdapterAvailableError",
    "ResolverError",
    "UnknownAdapterError",
    "UnknownCharsetError",
    # Kinds
    "AdapterKind",
    "CharsetKind",
    # Resolution
    "AdapterResolver",
    "call",
    "get_adapter",
    "has_terminal_emulation_wrapper",
    "is_host_windows",
    "is_interactive_session",
    "resolve_adapter_class",
    "resolve_charset_class",
    "default_resolver",
    "select_adapter_kind",
]
