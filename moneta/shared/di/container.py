from functools import lru_cache
from typing import Optional

from dependency_injector import containers, providers

from moneta.adapters.outbound.currency import InMemoryCurrencyProvider
from moneta.domain.services import (
    AllocationService,
    ApproximateBackend,
    ExactBackend,
    FormattingService,
    MagnitudeService,
    MoneyContext,
    RoundingService,
)
from moneta.domain.services.factory import MoneyFactory
from moneta.shared.config import get_settings
from moneta.shared.logging import configure_logging, get_logger

logger = get_logger(__name__)


class Container(containers.DeclarativeContainer):
    config = providers.Configuration()

    currency_provider = providers.Singleton(InMemoryCurrencyProvider)

    backend = providers.Selector(
        config.backend,
        exact=providers.Singleton(ExactBackend),
        approximate=providers.Singleton(ApproximateBackend),
    )

    rounding_service = providers.Singleton(
        RoundingService,
        backend=backend,
        currency_provider=currency_provider,
    )

    allocation_service = providers.Singleton(
        AllocationService,
        backend=backend,
        rounding_service=rounding_service,
    )

    magnitude_service = providers.Singleton(
        MagnitudeService,
        backend=backend,
        rounding_service=rounding_service,
        currency_provider=currency_provider,
    )

    formatting_service = providers.Singleton(
        FormattingService,
        backend=backend,
        rounding_service=rounding_service,
        currency_provider=currency_provider,
    )

    money_context = providers.Singleton(
        MoneyContext,
        backend=backend,
        currency_provider=currency_provider,
        rounding=rounding_service,
        allocation=allocation_service,
        magnitude=magnitude_service,
        formatting=formatting_service,
        default_locale=config.default_locale,
    )

    money_factory = providers.Factory(
        MoneyFactory,
        context=money_context,
    )


def get_container(backend: Optional[str] = None) -> Container:
    """
    Build a container from the settings.

    :param backend: Overrides MONEY_BACKEND, "exact" or "approximate"
    """
    settings = get_settings()

    configure_logging(log_level=settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)

    container = Container()

    container.config.from_dict(
        {
            "backend": backend or settings.MONEY_BACKEND,
            "default_locale": settings.DEFAULT_LOCALE,
        }
    )

    logger.info(
        "money_context_configured",
        backend=backend or settings.MONEY_BACKEND,
        default_locale=settings.DEFAULT_LOCALE,
    )

    return container


@lru_cache()
def get_money_context() -> MoneyContext:
    """The process-wide context used by Money values built without one."""
    return get_container().money_context()
