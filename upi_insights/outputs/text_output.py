# upi_insights/outputs/text_output.py

import click

from upi_insights.outputs.base import BaseOutput
from upi_insights.view import format_amount


class TextOutput(BaseOutput):
    """
    Print the month's dashboard to the terminal: the total, a horizontal
    bar per category, each category's share of the total and the list of
    transactions.
    """
    BAR_WIDTH = 30

    def __init__(self, config):
        self.config = config
        self.symbol = config.get('currency_symbol', '')

    def render(self, dashboard):
        money = lambda v: format_amount(v, self.symbol)
        totals = dashboard['category_totals']

        click.echo(f"Month: {dashboard['month']}")
        click.echo(f"Total Spending: {money(dashboard['total'])}")

        if not totals:
            click.echo("No transactions for this month.")
            return

        width = max(len(cat) for cat in totals)
        peak = max(abs(v) for v in totals.values()) or 1
        click.echo("\nSpending by category")
        for cat, amount in totals.items():
            bar = '█' * round(abs(amount) / peak * self.BAR_WIDTH)
            click.echo(f"  {cat:<{width}}  {bar} {money(amount)}")

        # Pie slices are proportional to absolute amounts.
        whole = sum(abs(v) for v in totals.values()) or 1
        click.echo("\nShare of spending")
        for cat, amount in totals.items():
            click.echo(f"  {cat:<{width}}  {abs(amount) / whole * 100:5.1f}%")

        click.echo("\nTransactions")
        for tx in dashboard['transactions']:
            click.echo(f"  {tx['category']:<{width}}  {money(tx['amount']):>12}  {tx['date']}")
