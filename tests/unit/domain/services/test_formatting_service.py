import pytest


def _fmt(context, raw, currency="USD", **kwargs):
    return context.formatting.format(context.backend.parse(raw), currency, **kwargs)


@pytest.mark.parametrize(
    "raw, currency, expected",
    [
        ("1234.567", "USD", "$1,234.57"),
        ("-1234.567", "USD", "-$1,234.57"),
        ("0.5", "EUR", "€0.50"),
        ("1234.5", "JPY", "¥1,235"),
        ("1.234", "CHF", "CHF1.25"),
        ("1234567.891", "KWD", "KWD1,234,567.891"),
        ("0", "GBP", "£0.00"),
    ],
)
def test_format(context, raw, currency, expected):
    assert _fmt(context, raw, currency) == expected


def test_format_display_country_for_us(context):
    assert _fmt(context, "1", display_country_for_us=True) == "US$1.00"
    assert _fmt(context, "-1", display_country_for_us=True) == "-US$1.00"
    assert _fmt(context, "1", "EUR", display_country_for_us=True) == "€1.00"
    assert (
        _fmt(context, "1", display_country_for_us=True, locale="en_CA") == "US$1.00"
    )


def test_format_uses_locale_symbol(context):
    assert _fmt(context, "5", "CAD") == "CA$5.00"
    assert _fmt(context, "5", "CAD", locale="en_CA") == "$5.00"
    assert _fmt(context, "5", "USD", locale="en_CA") == "US$5.00"
    assert _fmt(context, "5", "USD", locale="de_DE") == "$5.00"


@pytest.mark.parametrize(
    "raw, expected",
    [("1", "+$1.00"), ("0", "$0.00"), ("-1", "-$1.00"), ("0.001", "+$0.00")],
)
def test_format_with_sign(context, raw, expected):
    value = context.backend.parse(raw)

    assert context.formatting.format_with_sign(value, "USD") == expected


@pytest.mark.parametrize(
    "raw, currency, expected",
    [
        ("-1234.567", "USD", "(1,234.57)"),
        ("1234.5", "USD", "1,234.50"),
        ("-0.001", "USD", "0.00"),
        ("-1234.5", "JPY", "(1,235)"),
        ("-10.03", "XSW", "(10.05)"),
    ],
)
def test_format_for_accounting(context, raw, currency, expected):
    value = context.backend.parse(raw)

    assert context.formatting.format_for_accounting(value, currency) == expected
