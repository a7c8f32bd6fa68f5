from .currency import Currency
from .iso_date_time import IsoDateTime
from .money import CENT, Money, quantize_cents, round_cents, to_cents

__all__ = [
    "Currency",
    "Money",
    "IsoDateTime",
    "CENT",
    "quantize_cents",
    "round_cents",
    "to_cents",
]
