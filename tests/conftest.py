import pytest
from dependency_injector import providers

from moneta.adapters.outbound.currency import InMemoryCurrencyProvider
from moneta.domain.values import CurrencyMetadata

# Two fraction digits, settled in steps of 0.05
SWISS_TEST_CURRENCY = CurrencyMetadata(
    code="XSW",
    fraction_digits=2,
    rounding_increment=5,
    symbol="Sw",
    display_name="Swiss-rounded test currency",
)


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("JSON_LOGS", "false")
    monkeypatch.setenv("MONEY_BACKEND", "exact")
    monkeypatch.setenv("DEFAULT_LOCALE", "en")

    from moneta.shared.config import get_settings
    from moneta.shared.di import get_money_context

    get_settings.cache_clear()
    get_money_context.cache_clear()


def build_context(backend: str):
    from moneta.shared.di import get_container

    container = get_container(backend=backend)
    container.currency_provider.override(
        providers.Singleton(InMemoryCurrencyProvider, extra=[SWISS_TEST_CURRENCY])
    )

    return container.money_context()


@pytest.fixture
def exact_context():
    return build_context("exact")


@pytest.fixture
def approximate_context():
    return build_context("approximate")


@pytest.fixture(params=["exact", "approximate"])
def context(request):
    return build_context(request.param)
