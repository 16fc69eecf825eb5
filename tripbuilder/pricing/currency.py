"""Brazilian Real amounts (pt-BR).

Money is carried as ``float`` rounded to cents; every rounding goes through
``round_money`` so stored amounts and formatted strings agree on halves.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

CURRENCY_SYMBOL = "R$"
_NBSP = "\u00a0"
_CENTS = Decimal("0.01")


def _to_cents(amount: float | int | Decimal) -> Decimal:
    return Decimal(str(amount)).quantize(_CENTS, rounding=ROUND_HALF_UP)


def round_money(amount: float | int | Decimal) -> float:
    """Round to cents, halves away from zero (``1.005`` -> ``1.01``)."""
    return float(_to_cents(amount))


def format_currency(amount: float | int | Decimal) -> str:
    """Render ``amount`` as ``R$ 1.234,56``.

    Two decimal places, ``.`` thousands separator, ``,`` decimal separator and a
    non-breaking space after the symbol. Halves round away from zero.
    """
    value = _to_cents(amount)
    sign = "-" if value < 0 else ""
    integer_part, _, fraction = f"{abs(value):.2f}".partition(".")
    grouped = f"{int(integer_part):,}".replace(",", ".")
    return f"{sign}{CURRENCY_SYMBOL}{_NBSP}{grouped},{fraction}"


__all__ = ["CURRENCY_SYMBOL", "format_currency", "round_money"]
