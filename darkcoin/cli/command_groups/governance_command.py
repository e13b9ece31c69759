"""Governance and masternode command group."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from darkcoin.cli.shared.rpc_utils import run_rpc
from darkcoin.rpc.params import ABSENT


def register_governance_commands(app: typer.Typer, console: Console) -> None:
    """Register governance command group."""
    gov_app = typer.Typer(help="Governance: parameters, objects, masternodes")
    app.add_typer(gov_app, name="gov")

    @gov_app.command("info")
    def gov_info() -> None:
        """Show governance parameters (getgovernanceinfo)."""
        info = run_rpc(console, lambda client: client.get_governance_info()) or {}
        table = Table(title="Governance")
        table.add_column("Parameter", style="dim")
        table.add_column("Value", style="cyan")
        for key in sorted(info):
            table.add_row(escape(key), escape(str(info[key])))
        console.print(table)

    @gov_app.command("objects")
    def gov_objects(
        signal: str = typer.Option(None, "--signal", help="valid | funding | delete | endorsed | all"),
        object_type: str = typer.Option(None, "--type", help="proposals | triggers | watchdogs | all"),
    ) -> None:
        """List governance objects (gobject list)."""
        if object_type is not None and signal is None:
            signal = "all"
        args = (
            ABSENT if signal is None else signal,
            ABSENT if object_type is None else object_type,
        )
        objects = run_rpc(console, lambda client: client.list_governance_objects(*args)) or {}
        if not objects:
            console.print("[yellow]No governance objects[/yellow]")
            return
        table = Table(title=f"Governance objects ({len(objects)})")
        table.add_column("Hash", style="dim")
        table.add_column("Type")
        table.add_column("Yes", justify="right")
        table.add_column("No", justify="right")
        table.add_column("Abstain", justify="right")
        table.add_column("Funding")
        for obj_hash, obj in objects.items():
            table.add_row(
                escape(obj_hash[:16]),
                escape(str(obj.get("ObjectType", ""))),
                escape(str(obj.get("YesCount", ""))),
                escape(str(obj.get("NoCount", ""))),
                escape(str(obj.get("AbstainCount", ""))),
                "[green]yes[/green]" if obj.get("fCachedFunding") else "no",
            )
        console.print(table)

    @gov_app.command("masternodes")
    def gov_masternodes(
        filter_text: str = typer.Option(None, "--filter", help="Only entries matching this text"),
    ) -> None:
        """List masternodes (masternodelist json)."""
        nodes = run_rpc(
            console,
            lambda client: client.list_masternodes("json", ABSENT if filter_text is None else filter_text),
        ) or {}
        if not nodes:
            console.print("[yellow]No masternodes[/yellow]")
            return
        table = Table(title=f"Masternodes ({len(nodes)})")
        table.add_column("Outpoint", style="dim")
        table.add_column("Address", style="cyan")
        table.add_column("Status")
        table.add_column("Last paid block", justify="right")
        for outpoint, node in nodes.items():
            table.add_row(
                escape(outpoint),
                escape(str(node.get("address", ""))),
                escape(str(node.get("status", ""))),
                escape(str(node.get("lastpaidblock", ""))),
            )
        console.print(table)
