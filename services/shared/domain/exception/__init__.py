from .exceptions import (
    ComputationFailureException,
    DomainException,
    InvalidArgumentException,
)

__all__ = [
    "DomainException",
    "InvalidArgumentException",
    "ComputationFailureException",
]
