"""Response formatters."""

from .csv_export import (
    CSV_HEADERS,
    CSV_MEDIA_TYPE,
    build_csv_filename,
    build_stock_csv_row,
    format_date_time,
    format_price_with_comma,
    sanitize_csv_field,
    write_stocks_csv,
)

__all__ = [
    "CSV_HEADERS",
    "CSV_MEDIA_TYPE",
    "build_csv_filename",
    "build_stock_csv_row",
    "format_date_time",
    "format_price_with_comma",
    "sanitize_csv_field",
    "write_stocks_csv",
]
