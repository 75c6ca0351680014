from moneta.domain.values import CurrencyMetadata

# code, fraction digits, rounding increment, English symbol, English name
_TABLE = [
    ("AED", 2, 0, "AED", "United Arab Emirates Dirham"),
    ("ARS", 2, 0, "ARS", "Argentine Peso"),
    ("AUD", 2, 0, "A$", "Australian Dollar"),
    ("BHD", 3, 0, "BHD", "Bahraini Dinar"),
    ("BRL", 2, 0, "R$", "Brazilian Real"),
    ("CAD", 2, 0, "CA$", "Canadian Dollar"),
    ("CHF", 2, 5, "CHF", "Swiss Franc"),
    ("CLF", 4, 0, "CLF", "Chilean Unit of Account (UF)"),
    ("CLP", 0, 0, "CLP", "Chilean Peso"),
    ("CNY", 2, 0, "CN¥", "Chinese Yuan"),
    ("COP", 2, 0, "COP", "Colombian Peso"),
    ("CZK", 2, 0, "CZK", "Czech Koruna"),
    ("DKK", 2, 0, "DKK", "Danish Krone"),
    ("EGP", 2, 0, "EGP", "Egyptian Pound"),
    ("EUR", 2, 0, "€", "Euro"),
    ("GBP", 2, 0, "£", "British Pound"),
    ("HKD", 2, 0, "HK$", "Hong Kong Dollar"),
    ("HUF", 2, 0, "HUF", "Hungarian Forint"),
    ("IDR", 2, 0, "IDR", "Indonesian Rupiah"),
    ("ILS", 2, 0, "₪", "Israeli New Shekel"),
    ("INR", 2, 0, "₹", "Indian Rupee"),
    ("ISK", 0, 0, "ISK", "Icelandic Króna"),
    ("JOD", 3, 0, "JOD", "Jordanian Dinar"),
    ("JPY", 0, 0, "¥", "Japanese Yen"),
    ("KRW", 0, 0, "₩", "South Korean Won"),
    ("KWD", 3, 0, "KWD", "Kuwaiti Dinar"),
    ("MXN", 2, 0, "MX$", "Mexican Peso"),
    ("MYR", 2, 0, "MYR", "Malaysian Ringgit"),
    ("NOK", 2, 0, "NOK", "Norwegian Krone"),
    ("NZD", 2, 0, "NZ$", "New Zealand Dollar"),
    ("OMR", 3, 0, "OMR", "Omani Rial"),
    ("PHP", 2, 0, "₱", "Philippine Peso"),
    ("PLN", 2, 0, "PLN", "Polish Zloty"),
    ("PYG", 0, 0, "PYG", "Paraguayan Guarani"),
    ("RUB", 2, 0, "RUB", "Russian Ruble"),
    ("SAR", 2, 0, "SAR", "Saudi Riyal"),
    ("SEK", 2, 0, "SEK", "Swedish Krona"),
    ("SGD", 2, 0, "SGD", "Singapore Dollar"),
    ("THB", 2, 0, "THB", "Thai Baht"),
    ("TND", 3, 0, "TND", "Tunisian Dinar"),
    ("TRY", 2, 0, "TRY", "Turkish Lira"),
    ("TWD", 2, 0, "NT$", "New Taiwan Dollar"),
    ("UAH", 2, 0, "UAH", "Ukrainian Hryvnia"),
    ("UGX", 0, 0, "UGX", "Ugandan Shilling"),
    ("USD", 2, 0, "$", "US Dollar"),
    ("VND", 0, 0, "₫", "Vietnamese Dong"),
    ("XAF", 0, 0, "FCFA", "Central African CFA Franc"),
    ("XOF", 0, 0, "F CFA", "West African CFA Franc"),
    ("XPF", 0, 0, "CFPF", "CFP Franc"),
    ("ZAR", 2, 0, "ZAR", "South African Rand"),
]

# Symbols that differ from the English default in a regional English locale
_LOCAL_SYMBOLS = {
    "AUD": {"en_AU": "$"},
    "CAD": {"en_CA": "$"},
    "NZD": {"en_NZ": "$"},
    "USD": {"en_AU": "US$", "en_CA": "US$", "en_NZ": "US$"},
}


def load_currencies() -> list[CurrencyMetadata]:
    return [
        CurrencyMetadata(
            code=code,
            fraction_digits=fraction_digits,
            rounding_increment=rounding_increment,
            symbol=symbol,
            display_name=name,
            symbols=_LOCAL_SYMBOLS.get(code, {}),
        )
        for code, fraction_digits, rounding_increment, symbol, name in _TABLE
    ]
