# upi_insights/cli.py
import logging
import os

import click
from dotenv import load_dotenv

from upi_insights.aggregation import current_month, normalize_month
from upi_insights.config import CONFIG_ENV, load_config
from upi_insights.outputs import get_output
from upi_insights.storage import get_storage
from upi_insights.store import TransactionStore
from upi_insights.view import build_dashboard, format_amount


def _month_option(ctx, param, value):
    if value is None:
        return current_month()
    try:
        return normalize_month(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


def _open_store(cfg):
    try:
        storage = get_storage(cfg)
    except KeyError as exc:
        raise click.UsageError(f"Unknown storage backend: {exc}") from exc
    store = TransactionStore(storage)
    store.load()
    return store


@click.group()
@click.option(
    '--config', 'config_path',
    default=None,
    type=click.Path(dir_okay=False),
    help=f'Path to config.yaml (default: ${CONFIG_ENV}, then built-in defaults)'
)
@click.option(
    '--env-file', 'env_file',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Optional .env file with UPI_INSIGHTS_* settings'
)
@click.pass_context
def main(ctx, config_path, env_file):
    """
    Track personal expenses by month and category. Transactions live in a
    single local storage slot; every command loads it once and every add
    rewrites it.
    """
    if env_file:
        load_dotenv(env_file)
    logging.basicConfig(level=os.getenv("UPI_INSIGHTS_LOG_LEVEL", "WARNING").upper())

    config_path = config_path or os.environ.get(CONFIG_ENV)
    try:
        cfg = load_config(config_path)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    ctx.obj = {'config': cfg, 'config_path': config_path}


@main.command()
@click.option('--amount', default='', help='Amount spent (any number, negatives allowed)')
@click.option('--category', default='', help='Free-text category label')
@click.option(
    '--month', 'month',
    default=None,
    callback=_month_option,
    help='Month as YYYY-MM (default: current month)'
)
@click.pass_obj
def add(obj, amount, category, month):
    """Append a transaction. Empty amount or category is ignored."""
    cfg = obj['config']
    store = _open_store(cfg)
    try:
        tx = store.append(amount, category, month)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="'--amount'") from exc
    if tx is None:
        return
    money = format_amount(tx.amount, cfg.get('currency_symbol', ''))
    click.echo(f"Added {money} for {tx.category} in {tx.date}.")


@main.command()
@click.pass_obj
def months(obj):
    """List every month that has transactions, in first-seen order."""
    store = _open_store(obj['config'])
    for month in store.months():
        click.echo(month)


@main.command()
@click.option(
    '--month', 'month',
    default=None,
    callback=_month_option,
    help='Month as YYYY-MM (default: current month)'
)
@click.option(
    '--output', 'output_format',
    default='text',
    type=click.Choice(['text', 'excel']),
    help='Render to the terminal or to an Excel workbook with charts'
)
@click.pass_obj
def show(obj, month, output_format):
    """Show the total, category charts and transactions for a month."""
    cfg = obj['config']
    store = _open_store(cfg)
    dashboard = build_dashboard(store.transactions, month, cfg.get('palette'))
    get_output(output_format, cfg).render(dashboard)


@main.command()
@click.option('--host', default='127.0.0.1', help='Host to bind (default: 127.0.0.1)')
@click.option('--port', default=8000, type=int, help='Port to bind (default: 8000)')
@click.pass_obj
def serve(obj, host, port):
    """Run the browser dashboard."""
    import uvicorn

    if obj['config_path']:
        os.environ[CONFIG_ENV] = os.path.abspath(obj['config_path'])
    click.echo(f"UPI Insights running at http://{host}:{port}")
    uvicorn.run("webapp.main:app", host=host, port=port)


if __name__ == "__main__":
    main()
