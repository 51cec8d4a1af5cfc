#!/usr/bin/env python3
"""
FileKit - inspection console

Shows the effective configuration and the audit log of file operations.
File operations themselves are a library API and are not exposed here.
"""

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from core import FileOpsConfig, AuditLogger, __version__
from modules.file_ops import SystemDesktopOpener


console = Console()


def get_config(config_path: str) -> FileOpsConfig:
    """Load configuration, exiting with a message if it is invalid."""
    try:
        return FileOpsConfig.load(config_path)
    except (TypeError, ValueError) as e:
        raise click.ClickException(f"Invalid configuration in {config_path}: {e}")


@click.group()
@click.version_option(version=__version__, prog_name="FileKit")
@click.option("--config", "config_path", default="config.yaml", show_default=True,
              help="Path to the YAML configuration file.")
@click.pass_context
def filekit(ctx, config_path: str):
    """
    FileKit - soft-failing file operations.

    Inspect the configuration and audit log used by the library.
    """
    ctx.obj = {"config_path": config_path}


@filekit.command()
@click.pass_context
def status(ctx):
    """Show the effective configuration."""
    config = get_config(ctx.obj["config_path"])

    console.print(Panel.fit(
        "[bold blue]FileKit[/bold blue]\n"
        f"[dim]Version {__version__}[/dim]",
        title="Status"
    ))

    table = Table(title="Configuration")
    table.add_column("Setting", style="dim")
    table.add_column("Value")
    for key, value in config.to_dict().items():
        table.add_row(key, repr(value))
    console.print(table)

    opener = SystemDesktopOpener()
    if opener.is_supported():
        console.print("\n[green]Desktop open is available[/green]")
    else:
        console.print("\n[yellow]Desktop open is not available on this host[/yellow]")


@filekit.command()
@click.option("--limit", default=20, show_default=True, help="Number of entries to show.")
@click.option("--failed", is_flag=True, help="Show failed operations only.")
@click.option("--export", "export_format", type=click.Choice(["json", "csv"]),
              help="Dump the whole log in this format instead of a table.")
@click.pass_context
def audit(ctx, limit: int, failed: bool, export_format):
    """View the audit log."""
    config = get_config(ctx.obj["config_path"])

    if not config.audit_log:
        console.print("[dim]Auditing is disabled (set fileops.audit_log in the config).[/dim]")
        return

    logger = AuditLogger(config.audit_log)

    if export_format:
        click.echo(logger.export(format=export_format))
        return

    entries = logger.get_failed_actions(limit=limit) if failed else logger.get_recent(limit=limit)

    if not entries:
        console.print("[dim]No audit entries found.[/dim]")
        return

    table = Table(title="Recent Audit Log")
    table.add_column("Time", style="dim")
    table.add_column("Type")
    table.add_column("Action")
    table.add_column("Status")

    for entry in entries:
        time_str = entry.timestamp.split("T")[1].split(".")[0] if "T" in entry.timestamp else entry.timestamp

        status_str = entry.status
        if entry.status == "executed":
            status_str = f"[green]{entry.status}[/green]"
        elif entry.status == "failed":
            status_str = f"[red]{entry.status}[/red]"

        table.add_row(
            time_str,
            entry.action_type,
            entry.action_description[:50] + "..." if len(entry.action_description) > 50 else entry.action_description,
            status_str
        )

    console.print(table)


if __name__ == "__main__":
    filekit()
