"""
morphology/currency.py

Money amounts as English words.

    currency_to_words(1.50, "USD")   -> "one dollar and fifty cents"
    currency_to_words(0.01, "GBP")   -> "one penny"
    currency_to_words(1000, "JPY")   -> "one thousand yen"
    currency_to_words(-2, "EUR")     -> "negative two euros"

Amounts are rounded half-up to the minor unit (cents) before conversion;
currencies without a minor unit are rounded to whole units. Unknown codes,
NaN and infinities give "".
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from types import MappingProxyType
from typing import Mapping

from morphology.numbers import number_to_words


@dataclass(frozen=True, slots=True)
class CurrencyUnit:
    major_singular: str
    major_plural: str
    minor_singular: str = ""
    minor_plural: str = ""
    has_minor_unit: bool = True

    def major(self, amount: int) -> str:
        unit = self.major_singular if amount == 1 else self.major_plural
        return f"{number_to_words(amount)} {unit}"

    def minor(self, amount: int) -> str:
        unit = self.minor_singular if amount == 1 else self.minor_plural
        return f"{number_to_words(amount)} {unit}"


def _no_minor(singular: str, plural: str) -> CurrencyUnit:
    return CurrencyUnit(singular, plural, has_minor_unit=False)


CURRENCIES: Mapping[str, CurrencyUnit] = MappingProxyType(
    {
        "USD": CurrencyUnit("dollar", "dollars", "cent", "cents"),
        "EUR": CurrencyUnit("euro", "euros", "cent", "cents"),
        "JPY": _no_minor("yen", "yen"),
        "GBP": CurrencyUnit("pound", "pounds", "penny", "pence"),
        "CHF": CurrencyUnit("franc", "francs", "centime", "centimes"),
        "CNY": CurrencyUnit("yuan", "yuan", "fen", "fen"),
        "AUD": CurrencyUnit("Australian dollar", "Australian dollars", "cent", "cents"),
        "CAD": CurrencyUnit("Canadian dollar", "Canadian dollars", "cent", "cents"),
        "HKD": CurrencyUnit("Hong Kong dollar", "Hong Kong dollars", "cent", "cents"),
        "SGD": CurrencyUnit("Singapore dollar", "Singapore dollars", "cent", "cents"),
        "NZD": CurrencyUnit("New Zealand dollar", "New Zealand dollars", "cent", "cents"),
        "TWD": CurrencyUnit("New Taiwan dollar", "New Taiwan dollars", "cent", "cents"),
        "SEK": CurrencyUnit("krona", "kronor", "öre", "öre"),
        "NOK": CurrencyUnit("krone", "kroner", "øre", "øre"),
        "DKK": CurrencyUnit("krone", "kroner", "øre", "øre"),
        "KRW": _no_minor("won", "won"),
        "INR": CurrencyUnit("rupee", "rupees", "paisa", "paise"),
        "THB": CurrencyUnit("baht", "baht", "satang", "satang"),
        "IDR": CurrencyUnit("rupiah", "rupiah", "sen", "sen"),
        "PHP": CurrencyUnit("peso", "pesos", "centavo", "centavos"),
        "MYR": CurrencyUnit("ringgit", "ringgit", "sen", "sen"),
        "VND": _no_minor("dong", "dong"),
        "PKR": CurrencyUnit("rupee", "rupees", "paisa", "paise"),
        "BDT": CurrencyUnit("taka", "taka", "poisha", "poisha"),
        "LKR": CurrencyUnit("rupee", "rupees", "cent", "cents"),
        "MXN": CurrencyUnit("peso", "pesos", "centavo", "centavos"),
        "BRL": CurrencyUnit("real", "reais", "centavo", "centavos"),
        "CLP": CurrencyUnit("peso", "pesos", "centavo", "centavos"),
        "COP": CurrencyUnit("peso", "pesos", "centavo", "centavos"),
        "PEN": CurrencyUnit("sol", "soles", "céntimo", "céntimos"),
        "ARS": CurrencyUnit("peso", "pesos", "centavo", "centavos"),
        "CRC": CurrencyUnit("colón", "colones", "céntimo", "céntimos"),
        "PLN": CurrencyUnit("zloty", "zlotys", "grosz", "groszy"),
        "CZK": CurrencyUnit("koruna", "koruny", "haléř", "haléřů"),
        "HUF": CurrencyUnit("forint", "forints", "fillér", "fillérs"),
        "RON": CurrencyUnit("leu", "lei", "ban", "bani"),
        "UAH": CurrencyUnit("hryvnia", "hryvnias", "kopiyka", "kopiykas"),
        "RUB": CurrencyUnit("ruble", "rubles", "kopeck", "kopecks"),
        "ILS": CurrencyUnit("shekel", "shekels", "agora", "agorot"),
        "AED": CurrencyUnit("dirham", "dirhams", "fil", "fils"),
        "SAR": CurrencyUnit("riyal", "riyals", "halala", "halalas"),
        "TRY": CurrencyUnit("lira", "liras", "kurus", "kurus"),
        "QAR": CurrencyUnit("riyal", "riyals", "dirham", "dirhams"),
        "KWD": CurrencyUnit("dinar", "dinars", "fil", "fils"),
        "EGP": CurrencyUnit("pound", "pounds", "piastre", "piastres"),
        "MAD": CurrencyUnit("dirham", "dirhams", "centime", "centimes"),
        "ZAR": CurrencyUnit("rand", "rand", "cent", "cents"),
        "NGN": CurrencyUnit("naira", "naira", "kobo", "kobo"),
        "KES": CurrencyUnit("shilling", "shillings", "cent", "cents"),
        "GHS": CurrencyUnit("cedi", "cedis", "pesewa", "pesewas"),
    }
)

_CENT = Decimal("0.01")
_UNIT = Decimal("1")


def currency_to_words(amount: float, code: str) -> str:
    amount = float(amount)
    if math.isnan(amount) or math.isinf(amount):
        return ""

    unit = CURRENCIES.get(code.upper())
    if unit is None:
        return ""

    negative = amount < 0
    step = _CENT if unit.has_minor_unit else _UNIT
    with localcontext() as ctx:
        # wide enough for every finite float
        ctx.prec = 400
        rounded = Decimal(repr(abs(amount))).quantize(step, rounding=ROUND_HALF_UP)

    major = int(rounded)
    minor = int((rounded - major) * 100)

    if major == 0 and minor == 0:
        return "zero " + unit.major_plural

    if major == 0:
        result = unit.minor(minor)
    elif minor == 0:
        result = unit.major(major)
    else:
        result = unit.major(major) + " and " + unit.minor(minor)

    return "negative " + result if negative else result


__all__ = ["CurrencyUnit", "CURRENCIES", "currency_to_words"]
