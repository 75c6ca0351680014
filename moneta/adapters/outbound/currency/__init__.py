from .in_memory_provider import InMemoryCurrencyProvider
from .iso4217 import load_currencies

__all__ = [
    "InMemoryCurrencyProvider",
    "load_currencies",
]
