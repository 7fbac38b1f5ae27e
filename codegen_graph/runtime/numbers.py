"""High-precision numbers for indexer scalars.

BigInt and BigDecimal values routinely exceed what int-as-float or float
can hold exactly (token amounts in wei are 78-digit integers), so they
are carried as Decimal and never converted to native numbers.
"""

from decimal import Context, Decimal
from typing import Any, Union

Wei = Decimal
WeiSource = Union[Decimal, int, str]

# Enough digits for uint256 values and the indexer's BigDecimal precision
PRECISE = Context(prec=200)


def wei(value: Any, decimals: int | None = None) -> Any:
    """Convert a raw scalar value to a Decimal.

    Args:
        value: A string, int, float or Decimal. None passes through and
            lists are converted element by element.
        decimals: When given, the result is quantized to that many
            decimal places (0 for BigInt values).

    Raises:
        decimal.InvalidOperation: If the value is not a number
    """
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return [wei(item, decimals) for item in value]
    if isinstance(value, float):
        value = str(value)
    number = value if isinstance(value, Decimal) else Decimal(value)
    if decimals is None:
        return number
    return number.quantize(Decimal(1).scaleb(-decimals), context=PRECISE)
