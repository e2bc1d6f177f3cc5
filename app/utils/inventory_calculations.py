from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, TypeVar

from app.utils.validators.validation_utils import parse_number

T = TypeVar("T")


@dataclass
class WeightReading:
    full_weight: Optional[Decimal]
    empty_weight: Optional[Decimal]
    net_weight: Optional[Decimal]


def parse_weight(value: Any) -> Optional[Decimal]:
    """A zero or unparseable weight counts as not recorded."""
    weight = parse_number(value)
    if weight is None or weight == 0:
        return None
    return weight


def reconcile_weights(
    full_weight: Any,
    empty_weight: Any,
    fallback_full: Any = None,
    fallback_empty: Any = None,
) -> WeightReading:
    """
    Resolve full/empty weight from the counted item, falling back to the
    catalog values side by side. Net weight is only produced when both
    sides are known and full > empty.
    """
    full = parse_weight(full_weight)
    empty = parse_weight(empty_weight)
    if full is None:
        full = parse_weight(fallback_full)
    if empty is None:
        empty = parse_weight(fallback_empty)

    net = None
    if full is not None and empty is not None and full > empty:
        net = full - empty
    return WeightReading(full_weight=full, empty_weight=empty, net_weight=net)


def build_order_map(rows: Iterable[Tuple[int, int]]) -> Dict[int, int]:
    """Map product id -> display order from (product_id, display_order) rows."""
    return {product_id: display_order for product_id, display_order in rows}


def assign_display_order(
    items: Sequence[T],
    previous_order: Mapping[int, int],
    key: Callable[[T], int] = lambda item: item.product_id,
) -> List[Tuple[T, int]]:
    """
    Number items 1..N. Products missing from the previous count come first
    in submission order, followed by carried-over products in their previous
    relative order.
    """
    new_products = []
    carried = []
    for position, item in enumerate(items):
        product_id = key(item)
        if product_id in previous_order:
            carried.append((previous_order[product_id], position, item))
        else:
            new_products.append(item)

    carried.sort(key=lambda entry: (entry[0], entry[1]))
    ordered = new_products + [entry[2] for entry in carried]
    return [(item, order) for order, item in enumerate(ordered, start=1)]
