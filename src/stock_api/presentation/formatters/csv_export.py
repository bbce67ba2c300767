"""CSV export of stock listings.

Rows are written for spreadsheet users: prices carry thousands
separators, timestamps use ``YYYY/MM/DD HH:MM:SS`` and text that a
spreadsheet would evaluate as a formula is prefixed with a quote.
"""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable
from datetime import datetime

from ...core.exceptions import CSVExportError
from ...domain.entities.stock import Stock

CSV_HEADERS = ["ID", "商品名", "価格", "在庫数", "作成日時", "更新日時"]
CSV_MEDIA_TYPE = "text/csv; charset=utf-8"

FORMULA_TRIGGERS = ("=", "+", "-", "@")
DATETIME_FORMAT = "%Y/%m/%d %H:%M:%S"
FILENAME_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


def format_price_with_comma(price: int) -> str:
    """Render a price with a comma every three digits, e.g. 1234567 -> "1,234,567"."""
    if abs(price) < 1000:
        return str(price)

    digits = str(abs(price))
    head = len(digits) % 3 or 3
    groups = [digits[:head]] + [digits[i : i + 3] for i in range(head, len(digits), 3)]
    sign = "-" if price < 0 else ""
    return sign + ",".join(groups)


def sanitize_csv_field(field: str) -> str:
    """Neutralize values a spreadsheet would treat as a formula."""
    if field and field[0] in FORMULA_TRIGGERS:
        return "'" + field
    return field


def format_date_time(value: datetime) -> str:
    return value.strftime(DATETIME_FORMAT)


def build_stock_csv_row(stock: Stock) -> list[str]:
    return [
        str(stock.id),
        sanitize_csv_field(stock.name),
        format_price_with_comma(stock.price),
        str(stock.quantity),
        format_date_time(stock.created_at),
        format_date_time(stock.updated_at),
    ]


def write_stocks_csv(stocks: Iterable[Stock]) -> str:
    """Write the header row and one row per stock, in the given order.

    Raises:
        CSVExportError: If a row cannot be written
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer)

    try:
        writer.writerow(CSV_HEADERS)
        for stock in stocks:
            writer.writerow(build_stock_csv_row(stock))
    except (csv.Error, ValueError, AttributeError, TypeError) as e:
        raise CSVExportError(f"Failed to write stocks CSV: {e}") from e

    return buffer.getvalue()


def build_csv_filename(now: datetime) -> str:
    """Attachment name for an export started at ``now``."""
    return f"stocks_{now.strftime(FILENAME_TIMESTAMP_FORMAT)}.csv"
