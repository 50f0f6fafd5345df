"""
Command-Line Interface

CLI commands for browsing a vSphere inventory as a filesystem.

Commands:
    vsphere-fs ls    - List the children of a path
    vsphere-fs show  - Show the summary line of one path
    vsphere-fs kinds - Display the registered entity kinds

Usage:
    # Live vCenter (self-signed certificate)
    vsphere-fs --host vcenter.lab.local --user admin --insecure ls Datacenters/dc1/host

    # Offline snapshot
    vsphere-fs --snapshot ./inventory.json ls Datacenters/dc1/host/esx01/vms

    # Settings from a file (and .env / environment)
    vsphere-fs --config ./vsphere-fs.toml show Datacenters/dc1
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Optional, TypeVar

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from vsphere_fs.errors import VSphereFSError

__all__ = ["main", "app"]

T = TypeVar("T")

app = typer.Typer(
    name="vsphere-fs",
    help="Browse a vSphere inventory like a filesystem",
    no_args_is_help=True,
)
console = Console()


def _fail(message: str) -> typer.Exit:
    console.print(f"[red]Error:[/] {escape(message)}")
    return typer.Exit(code=1)


def _run_browser(ctx: typer.Context, action: Callable[..., Awaitable[T]]) -> T:
    """Run ``action(browser)`` against a browser built from the CLI config."""
    from vsphere_fs.api.browser import InventoryBrowser

    async def _run() -> T:
        browser = InventoryBrowser(config=ctx.obj)
        try:
            return await action(browser)
        finally:
            await browser.close()

    try:
        return asyncio.run(_run())
    except VSphereFSError as e:
        raise _fail(str(e)) from None


@app.callback()
def configure(
    ctx: typer.Context,
    host: Optional[str] = typer.Option(
        None,
        "--host", "-H",
        help="vCenter or ESX host (default: $VSPHERE_HOST)",
    ),
    user: Optional[str] = typer.Option(
        None,
        "--user", "-u",
        help="Login user (default: $VSPHERE_USER)",
    ),
    password: Optional[str] = typer.Option(
        None,
        "--password", "-p",
        help="Login password (default: $VSPHERE_PASSWORD)",
    ),
    port: Optional[int] = typer.Option(
        None,
        "--port",
        help="HTTPS port",
    ),
    insecure: bool = typer.Option(
        False,
        "--insecure", "-k",
        help="Skip TLS certificate verification",
    ),
    snapshot: Optional[Path] = typer.Option(
        None,
        "--snapshot", "-s",
        help="Browse a JSON inventory snapshot instead of a live host",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="TOML configuration file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Log property batches and resolution steps",
    ),
) -> None:
    """Browse a vSphere inventory like a filesystem."""
    from vsphere_fs.config import NavConfig

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    try:
        base = NavConfig.from_file(config) if config else NavConfig()
        ctx.obj = base.with_overrides(
            host=host,
            user=user,
            password=password,
            port=port,
            verify_ssl=False if insecure else None,
            snapshot_path=str(snapshot) if snapshot else None,
        )
    except (FileNotFoundError, ValueError) as e:
        raise _fail(str(e)) from None


@app.command()
def ls(
    ctx: typer.Context,
    path: str = typer.Argument(
        "",
        help="Slash-separated inventory path (default: root)",
    ),
) -> None:
    """List the children of a path."""
    lines = _run_browser(ctx, lambda browser: browser.ls(path))

    if not lines:
        console.print(f"[dim]{escape(path or '/')} is empty[/]")
        return

    table = Table(title=path or "/")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Summary")

    for line in lines:
        if line.error:
            table.add_row(escape(line.name), f"[red]{escape(line.error)}[/]")
        elif line.is_group:
            table.add_row(f"[bold]{escape(line.name)}/[/]", "[dim]group[/]")
        else:
            table.add_row(escape(line.name), escape(line.text))

    console.print(table)


@app.command()
def show(
    ctx: typer.Context,
    path: str = typer.Argument(
        ...,
        help="Slash-separated inventory path",
    ),
) -> None:
    """Show the summary line of one path."""
    line = _run_browser(ctx, lambda browser: browser.show(path))

    if line.error:
        console.print(Panel(f"[red]{escape(line.error)}[/]", title=escape(line.name)))
        raise typer.Exit(code=1)

    body = escape(line.text)
    if line.kind:
        body += f"\n\n[dim]kind: {escape(line.kind)}[/]"
    console.print(Panel(body, title=escape(line.name)))


@app.command()
def kinds() -> None:
    """Display the registered entity kinds."""
    from vsphere_fs.kinds import default_registry

    registry = default_registry()

    table = Table(title="Registered kinds")
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Properties", justify="right", style="green")
    table.add_column("Children")

    for kind in registry.kinds():
        descriptor = registry.descriptor(kind)
        children = []
        if descriptor.children_lister is not None:
            children.append("real")
        children.extend(f"{name}/" for name in descriptor.group_names)
        table.add_row(
            kind,
            str(len(descriptor.required_properties)),
            ", ".join(children) if children else "[dim]leaf[/]",
        )

    console.print(table)


def main() -> None:
    """Entry point for the CLI."""
    load_dotenv()
    app()
