"""Wallet command group."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from darkcoin.cli.shared.rpc_utils import run_rpc

_WALLET_FIELDS = (
    ("walletversion", "Wallet version"),
    ("balance", "Balance (DASH)"),
    ("privatesend_balance", "PrivateSend balance"),
    ("unconfirmed_balance", "Unconfirmed"),
    ("immature_balance", "Immature"),
    ("txcount", "Transactions"),
    ("keypoolsize", "Keypool size"),
    ("keys_left", "Keys left"),
    ("paytxfee", "Tx fee (DASH/kB)"),
)


def register_wallet_commands(app: typer.Typer, console: Console) -> None:
    """Register wallet command group."""
    wallet_app = typer.Typer(help="Wallet: info, new address, send")
    app.add_typer(wallet_app, name="wallet")

    @wallet_app.command("info")
    def wallet_info() -> None:
        """Show wallet state (getwalletinfo)."""
        info = run_rpc(console, lambda client: client.get_wallet_info()) or {}
        table = Table(title="Wallet")
        table.add_column("Field", style="dim")
        table.add_column("Value", style="cyan")
        for key, label in _WALLET_FIELDS:
            if key in info:
                table.add_row(label, escape(str(info[key])))
        console.print(table)

    @wallet_app.command("new-address")
    def wallet_new_address() -> None:
        """Generate a new receiving address."""
        address = run_rpc(console, lambda client: client.get_new_address())
        console.print(f"[cyan]{escape(str(address))}[/cyan]")

    @wallet_app.command("send")
    def wallet_send(
        address: str = typer.Argument(..., help="Destination address"),
        amount: float = typer.Argument(..., help="Amount in DASH"),
        comment: str = typer.Option(None, "--comment", help="Wallet-local comment"),
        comment_to: str = typer.Option(None, "--comment-to", help="Name of the recipient (wallet-local)"),
        subtract_fee: bool = typer.Option(False, "--subtract-fee", help="Deduct the fee from the amount"),
    ) -> None:
        """Send DASH to an address (sendtoaddress)."""
        # Earlier optional slots get an empty comment when a later one is used.
        extra: list = []
        if comment is not None or comment_to is not None or subtract_fee:
            extra.append(comment or "")
        if comment_to is not None or subtract_fee:
            extra.append(comment_to or "")
        if subtract_fee:
            extra.append(True)
        txid = run_rpc(console, lambda client: client.send_to_address(address, amount, *extra))
        console.print(f"[green]✓[/green] sent, txid [cyan]{escape(str(txid))}[/cyan]")
