from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Sequence


def parse_number(value: Any) -> Optional[Decimal]:
    """Parse a number sent by the client as int, float or string.

    Returns None for missing, blank, non-numeric or non-finite input.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    if not number.is_finite():
        return None
    return number


def normalize_name(name: str) -> str:
    return name.strip().lower()


class InventoryValidator:
    @staticmethod
    def validate_quantities(items: Sequence[Any]) -> tuple[bool, str]:
        """
        Every item must carry a quantity greater than zero.
        Returns (is_valid, message) naming the first offending product.
        """
        for index, item in enumerate(items):
            quantity = parse_number(item.quantity)
            if quantity is None or quantity <= 0:
                label = item.product_name or f"product {index + 1}"
                return False, f"Quantity must be greater than 0 for {label}"
        return True, "Quantities are valid"
