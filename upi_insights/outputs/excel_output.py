# upi_insights/outputs/excel_output.py

"""Excel output module backed by XlsxWriter.

Writes one month's dashboard to a workbook: a ``Transactions`` sheet with
the filtered list, a ``Summary`` sheet with the per-category totals and a
``Charts`` sheet carrying a native column chart and pie chart built from
those totals.
"""

from __future__ import annotations

import os

import xlsxwriter

from upi_insights.config import PALETTE
from upi_insights.outputs.base import BaseOutput
from upi_insights.view import color_for


class ExcelOutput(BaseOutput):
    """Render the dashboard into a local Excel workbook."""

    TRANSACTIONS = "Transactions"
    SUMMARY = "Summary"
    CHARTS = "Charts"

    def __init__(self, config: dict):
        self.config = config
        self.output_dir = config.get("output_dir", "data")
        self.palette = config.get("palette", PALETTE)
        self.symbol = config.get("currency_symbol", "")
        os.makedirs(self.output_dir, exist_ok=True)

    def path_for(self, month: str) -> str:
        return os.path.join(self.output_dir, f"Spending{month}.xlsx")

    def render(self, dashboard):
        out_path = self.path_for(dashboard["month"])
        workbook = xlsxwriter.Workbook(out_path)
        amount_fmt = workbook.add_format({"num_format": f'"{self.symbol}"#,##0.00'})

        # Transactions worksheet, insertion order
        tx_ws = workbook.add_worksheet(self.TRANSACTIONS)
        tx_ws.freeze_panes(1, 0)
        headers = ["id", "category", "amount", "date"]
        tx_ws.write_row(0, 0, headers)
        rows = dashboard["transactions"]
        for idx, tx in enumerate(rows, start=1):
            tx_ws.write_number(idx, 0, tx["id"])
            tx_ws.write(idx, 1, tx["category"])
            tx_ws.write_number(idx, 2, tx["amount"], amount_fmt)
            tx_ws.write(idx, 3, tx["date"])
        tx_ws.set_column(2, 2, None, amount_fmt)

        # Summary worksheet, first-seen category order
        summary_ws = workbook.add_worksheet(self.SUMMARY)
        summary_ws.freeze_panes(1, 0)
        summary_ws.set_column(1, 1, None, amount_fmt)
        summary_ws.write_row(0, 0, ["category", "total"])
        totals = dashboard["category_totals"]
        for idx, (cat, amount) in enumerate(totals.items(), start=1):
            summary_ws.write(idx, 0, cat)
            summary_ws.write_number(idx, 1, amount, amount_fmt)
        summary_ws.write(len(totals) + 1, 0, "Total")
        summary_ws.write_number(len(totals) + 1, 1, dashboard["total"], amount_fmt)

        charts_ws = workbook.add_worksheet(self.CHARTS)
        self._insert_charts(workbook, charts_ws, summary_ws.name, dashboard["month"], len(totals))

        workbook.close()
        print(f"Written Excel workbook {out_path}")
        return out_path

    def _points(self, count):
        points = []
        for idx in range(count):
            color = color_for(idx, self.palette)
            points.append({"fill": {"color": color}} if color else None)
        return points

    def _insert_charts(self, workbook, charts_ws, source, month, row_count):
        if row_count == 0:
            charts_ws.write(0, 0, f"No transactions for {month}.")
            return

        series = {
            "categories": [source, 1, 0, row_count, 0],
            "values": [source, 1, 1, row_count, 1],
            "points": self._points(row_count),
        }

        bar = workbook.add_chart({"type": "column"})
        bar.add_series({**series, "name": "Spending"})
        bar.set_title({"name": f"Spending by category, {month}"})
        bar.set_legend({"none": True})
        charts_ws.insert_chart(0, 0, bar, {"x_offset": 0, "y_offset": 0})

        pie = workbook.add_chart({"type": "pie"})
        pie.add_series({**series, "name": "Share of spending"})
        pie.set_title({"name": f"Share of spending, {month}"})
        pie.set_legend({"position": "right"})
        pie.set_size({"width": 480, "height": 300})
        charts_ws.insert_chart(0, 9, pie, {"x_offset": 0, "y_offset": 0})
