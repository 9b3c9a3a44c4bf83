from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import urlencode

from fastapi import FastAPI, Form, Request
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from upi_insights.aggregation import current_month, normalize_month
from upi_insights.config import load_config
from upi_insights.storage import get_storage
from upi_insights.store import TransactionStore
from upi_insights.view import build_dashboard, format_amount

logger = logging.getLogger(__name__)

app = FastAPI(title="UPI Insights")
templates = Jinja2Templates(directory=str(Path(__file__).with_name("templates")))

config = load_config()
store = TransactionStore(get_storage(config))
store.load()


def _redirect(month: str, error: str | None = None) -> RedirectResponse:
    params = {"month": month}
    if error:
        params["error"] = error
    return RedirectResponse(f"/?{urlencode(params)}", status_code=303)


def _selected_month(month: str | None) -> tuple[str, str | None]:
    if not month:
        return current_month(), None
    try:
        return normalize_month(month), None
    except ValueError as exc:
        return current_month(), str(exc)


@app.get("/")
async def index(request: Request, month: str | None = None, error: str | None = None):
    selected, month_error = _selected_month(month)
    dashboard = build_dashboard(store.transactions, selected, config.get("palette"))
    symbol = config.get("currency_symbol", "")
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "dashboard": dashboard,
            "total_display": format_amount(dashboard["total"], symbol),
            "rows": [
                {**tx, "amount_display": format_amount(tx["amount"], symbol)}
                for tx in dashboard["transactions"]
            ],
            "default_month": current_month(),
            "error": error or month_error,
        },
    )


@app.get("/api/dashboard")
async def dashboard_api(month: str | None = None):
    selected, month_error = _selected_month(month)
    if month_error:
        return JSONResponse({"error": month_error}, status_code=400)
    return build_dashboard(store.transactions, selected, config.get("palette"))


@app.post("/transactions/add")
async def add_transaction(
    amount: str = Form(""),
    category: str = Form(""),
    date: str = Form(""),
    selected_month: str = Form(""),
):
    back_to, _ = _selected_month(selected_month)
    if not amount or not category:
        return _redirect(back_to)
    try:
        month = normalize_month(date) if date else current_month()
        store.append(amount, category, month)
    except ValueError as exc:
        logger.info("Rejected transaction: %s", exc)
        return _redirect(back_to, error=str(exc))
    return _redirect(back_to)
