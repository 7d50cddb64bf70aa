# src/evm_wallet_api/wallet/units.py
import re

from ..exceptions import InvalidAmount
from ..utils.config import Config

_AMOUNT_PATTERN = re.compile(r"^([0-9]+(\.[0-9]*)?|\.[0-9]+)$")


def parse_amount(amount: str, decimals: int = Config.NATIVE_DECIMALS) -> int:
    """Convert a display-unit decimal string into smallest units."""
    text = (amount or "").strip()
    if not _AMOUNT_PATTERN.match(text):
        raise InvalidAmount(f"Invalid amount: {amount!r} is not a decimal number")

    whole, _, fraction = text.partition(".")
    if len(fraction) > decimals:
        raise InvalidAmount(
            f"Invalid amount: {amount!r} has more than {decimals} decimal places"
        )

    # Integer arithmetic only, Decimal would round past 28 digits
    value = int(whole or "0") * 10 ** decimals + int(fraction.ljust(decimals, "0") or "0")
    if value > Config.MAX_UINT256:
        raise InvalidAmount(f"Invalid amount: {amount!r} overflows uint256")
    return value


def format_amount(value: int, decimals: int = Config.NATIVE_DECIMALS) -> str:
    """Render smallest units as a plain decimal string in display units."""
    whole, fraction = divmod(value, 10 ** decimals)
    fraction_text = str(fraction).rjust(decimals, "0").rstrip("0")
    if not fraction_text:
        return str(whole)
    return f"{whole}.{fraction_text}"
