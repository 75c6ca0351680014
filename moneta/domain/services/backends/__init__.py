from .approximate import ApproximateBackend
from .base import ArithmeticBackend
from .exact import ExactBackend

BACKENDS = {
    ExactBackend.name: ExactBackend,
    ApproximateBackend.name: ApproximateBackend,
}

__all__ = [
    "ArithmeticBackend",
    "ExactBackend",
    "ApproximateBackend",
    "BACKENDS",
]
