from services.shared.domain import quantize_cents

from .validators import require_number


def format_currency(amount: object) -> str:
    """金額を米ドル表記（例: $1,234.50）に整形する

    負の値は 0 に丸まっても符号を残す（-0.001 は -$0.00）。
    """
    value = quantize_cents(require_number(amount, "amount"))
    sign = "-" if value.is_signed() else ""
    return f"{sign}${value.copy_abs():,.2f}"
