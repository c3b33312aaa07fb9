"""
Command-line environment report: `termadapter` or `python -m termadapter`.

Shows what the resolver sees (probe results, the adapter kind it would pick)
and, unless --probe-only is given, resolves the adapter and writes a sample
line through it. Useful for answering "why do I get the Windows adapter?"
without reading code.
"""

import argparse

from rich import box
from rich.panel import Panel

from .config import ADAPTER, CHARSET, CONFIG_FILE, load_config, save_config
from .console import console
from .exceptions import ResolverError
from .kinds import AdapterKind, CharsetKind
from .resolver import AdapterResolver, resolve_adapter_class, resolve_charset_class


def yes_no(value: bool) -> str:
    return "[green]yes[/green]" if value else "[red]no[/red]"


def build_report(resolver: AdapterResolver, resolve: bool = True) -> Panel:
    """Build the environment report panel.

    When `resolve` is true the adapter is resolved (and cached) so its class,
    charset and terminal size can be shown. Resolution errors propagate.
    """
    kind = resolver.select_adapter_kind()
    lines = [
        f"[bold]Interactive session:[/bold]  {yes_no(resolver.is_interactive_session())}",
        f"[bold]Windows host:[/bold]         {yes_no(resolver.is_host_windows())}",
        f"[bold]ANSICON wrapper:[/bold]      {yes_no(resolver.has_terminal_emulation_wrapper())}",
        f"[bold]Detected kind:[/bold]        {kind.value if kind else '[dim]none[/dim]'}",
    ]

    if resolve:
        adapter = resolver.get_adapter()
        charset = adapter.get_charset()
        lines += [
            "",
            f"[bold]Adapter:[/bold]  [cyan]{type(adapter).__name__}[/cyan]",
            f"[bold]Charset:[/bold]  [cyan]{type(charset).__name__}[/cyan]",
            f"[bold]Size:[/bold]     {adapter.get_width()}x{adapter.get_height()}",
            f"[bold]UTF-8:[/bold]    {yes_no(adapter.is_utf8())}",
        ]

    return Panel("\n".join(lines), title="termadapter", box=box.ROUNDED, expand=False)


def write_sample(resolver: AdapterResolver):
    """Draw a small frame through the adapter using its charset."""
    charset = resolver.get_charset()
    width = 24
    resolver.write(charset.activate)
    resolver.write_line(
        charset.corner_top_left + charset.line_horizontal * width + charset.corner_top_right
    )
    resolver.write_line(
        charset.corner_bottom_left + charset.line_horizontal * width + charset.corner_bottom_right
    )
    resolver.write(charset.deactivate)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="termadapter", description="Report the terminal adapter selected for this environment."
    )
    parser.add_argument(
        "--adapter",
        help=f"Adapter override ({', '.join(k.value for k in AdapterKind)}, "
        "adapters.<Class>, or module:Class)",
    )
    parser.add_argument(
        "--charset",
        help=f"Charset override ({', '.join(k.value for k in CharsetKind)}, "
        "charsets.<Class>, or module:Class)",
    )
    parser.add_argument(
        "--probe-only", action="store_true", help="Only run the environment probes"
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help=f"Store the given --adapter/--charset as defaults in {CONFIG_FILE}",
    )
    return parser.parse_args(argv)


def save_overrides(adapter: str | None, charset: str | None) -> bool:
    config = load_config()
    if adapter:
        config["TERMADAPTER_ADAPTER"] = adapter
    if charset:
        config["TERMADAPTER_CHARSET"] = charset
    if save_config(config):
        console.print(f"[green]✓ Saved defaults to {CONFIG_FILE}[/green]")
        return True
    return False


def main(argv=None) -> int:
    args = parse_args(argv)

    adapter = args.adapter.strip() if args.adapter else None
    charset = args.charset.strip() if args.charset else None

    # Explicit flags must resolve; only configured defaults fall back to detection
    try:
        if adapter:
            resolve_adapter_class(adapter)
        if charset:
            resolve_charset_class(charset)
    except ResolverError as e:
        console.print(f"[bold red]✗ {e}[/bold red]")
        return 1

    if args.save and not save_overrides(adapter, charset):
        return 1

    resolver = AdapterResolver(
        default_adapter=adapter or ADAPTER,
        default_charset=charset or CHARSET,
    )

    try:
        console.print(build_report(resolver, resolve=not args.probe_only))
        if not args.probe_only:
            write_sample(resolver)
    except ResolverError as e:
        console.print(f"[bold red]✗ {e}[/bold red]")
        return 1

    return 0
