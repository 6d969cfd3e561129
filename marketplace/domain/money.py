"""Money value object for product prices.

Amounts are written and rendered in the currency's local format. For the
Brazilian real that means "." between thousands and "," before the cents:
"2.000,50" parses to 2000.50 and renders as "R$2.000,50".
"""

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation

_INTEGER_PART = re.compile(r"[+-]?[0-9]+")
_FRACTION_PART = re.compile(r"[0-9]+")


class InvalidAmountError(ValueError):
    """Raised when an amount string cannot be read in the currency's format."""


@dataclass(frozen=True)
class Currency:
    """ISO currency with the local format used to read and render amounts."""

    code: str
    symbol: str
    exponent: int
    digit_separator: str
    decimal_separator: str


BRL = Currency(
    code="BRL",
    symbol="R$",
    exponent=2,
    digit_separator=".",
    decimal_separator=",",
)


@dataclass(frozen=True)
class Money:
    """An exact amount in a given currency."""

    amount: Decimal
    currency: Currency = BRL

    @classmethod
    def parse(cls, value: str, currency: Currency = BRL) -> "Money":
        """
        Read an amount written in the currency's local format.

        Digit separators are only allowed in the integer part, and at most
        one decimal separator may appear.

        Args:
            value: Raw amount, e.g. "2000", "2.000" or "1.234,5"
            currency: Currency whose format applies (BRL by default)

        Returns:
            Money holding the exact parsed amount

        Raises:
            InvalidAmountError: If the string is not a valid amount
        """
        parts = value.split(currency.decimal_separator)
        if len(parts) > 2:
            raise InvalidAmountError(f"Too many decimal separators in '{value}'")

        integer_part = parts[0].replace(currency.digit_separator, "")
        if not _INTEGER_PART.fullmatch(integer_part):
            raise InvalidAmountError(f"Invalid amount: '{value}'")

        normalized = integer_part
        if len(parts) == 2:
            if not _FRACTION_PART.fullmatch(parts[1]):
                raise InvalidAmountError(f"Invalid amount: '{value}'")
            normalized = f"{integer_part}.{parts[1]}"

        money = cls(amount=Decimal(normalized), currency=currency)
        try:
            money.rounded()
        except InvalidOperation as exc:
            raise InvalidAmountError(f"Amount out of range: '{value}'") from exc
        return money

    def rounded(self) -> Decimal:
        """Amount rounded half-to-even to the currency's minor unit."""
        quantum = Decimal(1).scaleb(-self.currency.exponent)
        return self.amount.quantize(quantum, rounding=ROUND_HALF_EVEN)

    def __str__(self) -> str:
        rounded = self.rounded()

        sign = "-" if rounded < 0 else ""
        integer_digits, _, fraction_digits = f"{abs(rounded):f}".partition(".")

        groups = []
        while len(integer_digits) > 3:
            groups.insert(0, integer_digits[-3:])
            integer_digits = integer_digits[:-3]
        groups.insert(0, integer_digits)

        rendered = self.currency.digit_separator.join(groups)
        if self.currency.exponent > 0:
            rendered += self.currency.decimal_separator + fraction_digits

        return f"{sign}{self.currency.symbol}{rendered}"
