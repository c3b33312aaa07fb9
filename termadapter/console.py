"""
Shared Rich Console for diagnostics output.

Adapters own their own consoles because each one targets a different terminal
family. Everything else in termadapter that needs to tell the user something
(configuration warnings, CLI errors, the environment report) goes through this
single instance instead.

The console is bound to stderr so diagnostics never interleave with whatever an
adapter writes to stdout. Tests can patch `termadapter.console.console` (or the
name imported into a module) in one place.

Usage:
    from .console import console
    console.print("[yellow]Warning: ...[/yellow]")
"""

from rich.console import Console

console = Console(stderr=True)
