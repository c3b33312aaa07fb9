import json
import os
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .console import console
from .kinds import AdapterKind, CharsetKind, kind_from_name

# Load environment variables from .env file
load_dotenv()

# Configuration Defaults (empty means "detect")
DEFAULT_CONFIG = {
    "TERMADAPTER_ADAPTER": "",
    "TERMADAPTER_CHARSET": "",
}

# File Paths
TERMADAPTER_DIR = Path(os.getenv("TERMADAPTER_DIR", str(Path.home() / ".termadapter")))
CONFIG_FILE = Path(os.getenv("TERMADAPTER_CONFIG_FILE", str(TERMADAPTER_DIR / "config.json")))


def ensure_config_dir():
    """Ensure the termadapter storage directory exists"""
    if not TERMADAPTER_DIR.exists():
        try:
            TERMADAPTER_DIR.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            console.print(f"[yellow]Warning: Could not create directory {TERMADAPTER_DIR}: {e}[/yellow]")


def load_config(config_file: Path = CONFIG_FILE) -> dict[str, Any]:
    """Load configuration from file"""
    if config_file.exists():
        try:
            with open(config_file) as f:
                config: dict[str, Any] = json.load(f)
                return config
        except (OSError, ValueError) as e:
            console.print(f"[yellow]Warning: Could not load config file: {e}[/yellow]")
    return {}


def save_config(config: dict[str, Any], config_file: Path = CONFIG_FILE) -> bool:
    """Save configuration to file"""
    try:
        if config_file == CONFIG_FILE:
            ensure_config_dir()
        with open(config_file, "w") as f:
            json.dump(config, f, indent=2)
        return True
    except OSError as e:
        console.print(f"[red]Error saving config file: {e}[/red]")
        return False


def get_setting(key: str, default: str, config_file: Path = CONFIG_FILE) -> str:
    """Get setting with priority: Env Var > Config File > Default"""
    # 1. Environment Variable
    env_val = os.getenv(key)
    if env_val:
        return env_val

    # 2. Config File
    config = load_config(config_file)
    if key in config:
        return str(config[key])

    # 3. Default
    return default


def validate_override(value: str, kind_enum: type[Enum]) -> str | None:
    """Check a configured adapter/charset override before it reaches the resolver.

    Dotted ("adapters.PosixAdapter") and entry-point ("pkg.mod:Class") forms are
    passed through untouched; they can only be checked by importing them, which
    the resolver does. Bare names must match a known kind. Unknown names produce
    a warning and fall back to detection (None).
    """
    value = value.strip()
    if not value:
        return None
    if ":" in value or "." in value:
        return value
    if kind_from_name(kind_enum, value) is not None:
        return value
    # Registered class names, e.g. "PosixAdapter"
    stem = value.removesuffix("Adapter")
    if stem != value and kind_from_name(kind_enum, stem) is not None:
        return value

    known = ", ".join(member.value for member in kind_enum)
    console.print(
        f"[yellow]Warning: Unknown {kind_enum.__name__} '{value}' (expected one of: {known}), "
        "using auto-detection[/yellow]"
    )
    return None


# Initialize Configuration
ADAPTER = validate_override(
    get_setting("TERMADAPTER_ADAPTER", DEFAULT_CONFIG["TERMADAPTER_ADAPTER"]), AdapterKind
)
CHARSET = validate_override(
    get_setting("TERMADAPTER_CHARSET", DEFAULT_CONFIG["TERMADAPTER_CHARSET"]), CharsetKind
)
