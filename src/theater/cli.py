import json
import logging
import sys

import click

from . import __version__ as VERSION
from .config import refresh_config
from .errors import TheaterError
from .schema import load_catalog, load_invoices
from .statement import build_statement, render_plain_text

logger = logging.getLogger(__name__)


@click.group(invoke_without_command=True)
@click.pass_context
@click.option("--version", is_flag=True, help="Show the version and exit.")
def main(ctx, version):
    """Theater: performance invoice statements"""
    ctx.obj = {"config": refresh_config()}

    if version:
        click.echo(f"theater version {VERSION}")
        return
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _emit_structured_error(message: str, *, code: str, category: str, as_json: bool = False, exit_code: int = 2):
    payload = {
        "ok": False,
        "error": {
            "code": code,
            "category": category,
            "message": message,
        },
    }
    if as_json:
        click.echo(json.dumps(payload, indent=2, sort_keys=True))
    else:
        prefix = "Theater internal error" if code == "INTERNAL" else "Theater error"
        click.echo(f"{prefix} [{category}:{code}]: {message}")
    sys.exit(exit_code)


@main.command()
@click.argument("plays_file", type=click.Path(dir_okay=False))
@click.argument("invoices_file", type=click.Path(dir_okay=False))
@click.option("--json", "json_output", is_flag=True, help="Emit machine-readable statements")
@click.pass_context
def statement(ctx, plays_file, invoices_file, json_output):
    """Print the statement of every invoice in INVOICES_FILE."""
    config = ctx.obj["config"]
    try:
        catalog = load_catalog(plays_file)
        # build everything first so a bad invoice produces no partial output
        statements = [build_statement(invoice, catalog, config) for invoice in load_invoices(invoices_file)]
    except TheaterError as exc:
        _emit_structured_error(exc.explanation, code=exc.error_code, category=exc.category, as_json=json_output)
    except Exception as exc:
        logger.exception("Unhandled theater statement error")
        _emit_structured_error(str(exc), code="INTERNAL", category="SYSTEM", as_json=json_output)

    if json_output:
        payload = {"ok": True, "statements": [data.to_dict() for data in statements]}
        click.echo(json.dumps(payload, indent=2, sort_keys=True))
        return
    for data in statements:
        click.echo(render_plain_text(data), nl=False)


@main.command()
@click.option("--json", "json_output", is_flag=True, help="Emit machine-readable constants")
@click.pass_context
def pricing(ctx, json_output):
    """Show the effective pricing constants."""
    values = ctx.obj["config"].as_dict()
    if json_output:
        click.echo(json.dumps(values, indent=2, sort_keys=True))
        return
    for name, value in values.items():
        click.echo(f"{name} = {value}")


if __name__ == "__main__":
    main()
