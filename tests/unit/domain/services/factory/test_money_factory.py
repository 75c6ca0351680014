import pytest

from moneta.domain.exceptions import InvalidAmountError, UnsupportedCurrencyError
from moneta.domain.models import Money
from moneta.domain.services.factory import MoneyFactory
from moneta.domain.values import Err, Ok


@pytest.fixture
def factory(context):
    return MoneyFactory(context)


def test_create_and_zero(factory, context):
    assert factory.create("12.34", "EUR") == Money("12.34", "EUR", context)

    zero = factory.zero("JPY")
    assert zero.is_zero()
    assert zero.currency == "JPY"


def test_from_string(factory, context):
    # Given
    raw = "1000.50 usd"

    # When
    money = factory.from_string(raw)

    # Then
    assert money == Money("1000.50", "USD", context)
    assert money.context is context


@pytest.mark.parametrize("raw", ["1000.50", "USD 10 20", "", None])
def test_from_string_rejects_malformed_input(factory, raw):
    with pytest.raises(InvalidAmountError):
        factory.from_string(raw)


def test_from_string_rejects_unknown_currency(factory):
    with pytest.raises(UnsupportedCurrencyError):
        factory.from_string("10 XYZ")


def test_try_variants(factory):
    assert isinstance(factory.try_create("1", "USD"), Ok)
    assert isinstance(factory.try_create("one", "USD"), Err)

    assert factory.try_from_string("5 GBP").unwrap().currency == "GBP"
    assert isinstance(factory.try_from_string("5").error, InvalidAmountError)
