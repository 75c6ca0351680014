from .container import Container, get_container, get_money_context

__all__ = [
    "Container",
    "get_container",
    "get_money_context",
]
