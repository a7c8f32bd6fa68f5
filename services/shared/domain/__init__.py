from .entity import Entity
from .exception import (
    ComputationFailureException,
    DomainException,
    InvalidArgumentException,
)
from .value_object import (
    CENT,
    Currency,
    IsoDateTime,
    Money,
    quantize_cents,
    round_cents,
    to_cents,
)

__all__ = [
    "Entity",
    "DomainException",
    "InvalidArgumentException",
    "ComputationFailureException",
    "Currency",
    "Money",
    "IsoDateTime",
    "CENT",
    "quantize_cents",
    "round_cents",
    "to_cents",
]
