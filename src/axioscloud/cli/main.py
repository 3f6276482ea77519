#!/usr/bin/env python3
"""CLI for the Axios school register.

Commands:
    encode      Wrap a JSON value in a wire envelope
    decode      Unwrap a wire envelope back to JSON
    get         Log in and print normalized student data
    timeline    Log in and show the events of one day
"""

import json
import sys

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from axioscloud import __version__
from axioscloud.api import ACTIONS, AxiosAPI
from axioscloud.codec import decode as decode_envelope
from axioscloud.codec import encode as encode_envelope
from axioscloud.config import get_config
from axioscloud.errors import AxiosError

# Load .env file from current directory if available
load_dotenv()

console = Console()


def _login() -> AxiosAPI:
    config = get_config()
    if not config.has_credentials:
        console.print(
            "[red]Set AXIOS_CODICE_FISCALE, AXIOS_USERNAME and AXIOS_PASSWORD to log in.[/red]"
        )
        sys.exit(1)

    api = AxiosAPI()
    result = api.login(config.codice_fiscale, config.username, config.password)
    studente = result["studente"]
    console.print(f"[green]✓ Logged in as {studente['nome']} {studente['cognome']}[/green]")
    return api


@click.group()
@click.version_option(version=__version__, prog_name="axioscloud")
def cli():
    """Axios school register CLI - inspect envelopes and query student data."""
    pass


@cli.command()
@click.argument("value")
@click.option("--layers", "-l", default=1, show_default=True, help="Percent-encoding rounds")
def encode(value: str, layers: int):
    """Encode a JSON literal into a wire envelope."""
    try:
        payload = json.loads(value)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint="VALUE") from e

    try:
        click.echo(encode_envelope(payload, layers))
    except ValueError as e:
        console.print(f"[red]Encoding failed: {e}[/red]")
        sys.exit(1)


@cli.command()
@click.argument("wire")
@click.option("--raw", is_flag=True, help="Envelope is not wrapped in a JSON string literal")
def decode(wire: str, raw: bool):
    """Decode a wire envelope and print the JSON inside."""
    try:
        console.print_json(data=decode_envelope(wire, json_wrapped=not raw))
    except (AxiosError, ValueError) as e:
        console.print(f"[red]Decoding failed: {e}[/red]")
        sys.exit(1)


@cli.command()
@click.argument("azione", type=click.Choice(sorted(ACTIONS), case_sensitive=False))
def get(azione: str):
    """Log in with env credentials and print normalized data for AZIONE."""
    try:
        api = _login()
        console.print_json(data=api.get(azione))
    except (AxiosError, ValueError) as e:
        console.print(f"[red]Request failed: {e}[/red]")
        sys.exit(1)


@cli.command()
@click.argument("day")
def timeline(day: str):
    """Show the timeline of DAY (dd/mm/yyyy)."""
    try:
        api = _login()
        result = api.get_timeline(day)
    except (AxiosError, ValueError) as e:
        console.print(f"[red]Request failed: {e}[/red]")
        sys.exit(1)

    events = result["oggi"]
    if not events:
        console.print(Panel("[green]Nothing happened on this day.[/green]", title=day))
    else:
        table = Table(title=f"Timeline - {day}")
        table.add_column("Tipo", style="cyan")
        table.add_column("Sottotipo")
        table.add_column("Ora")
        table.add_column("Titolo")
        table.add_column("Descrizione")

        for event in events:
            ora = " ".join(part for part in event["ora"] if part)
            table.add_row(
                str(event["tipo"] or ""),
                str(event["subTipo"] or ""),
                ora,
                str(event["titolo"] or "")[:40],
                str(event["descrizione"] or "")[:60],
            )
        console.print(table)

    dati = result["dati"]
    console.print(
        f"\n[bold]Media:[/bold] {dati['media']}  "
        f"[bold]Assenze:[/bold] {dati['assenzeTot']} ({dati['assenzeDaGiust']} da giustificare)  "
        f"[bold]Ritardi:[/bold] {dati['ritardiTot']} ({dati['ritardiDaGiust']} da giustificare)  "
        f"[bold]Uscite:[/bold] {dati['usciteTot']} ({dati['usciteDaGiust']} da giustificare)"
    )


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
