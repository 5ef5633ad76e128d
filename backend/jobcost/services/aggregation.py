"""
Aggregation Layer

Folds per-item results into report totals:
- cost breakdowns are summed field by field
- bill-of-materials line items are merged by description
"""
from typing import Dict, Iterable, List, Optional, Type, TypeVar

from jobcost.schemas.estimate import CostBreakdown
from jobcost.schemas.report import LineItem

B = TypeVar("B", bound=CostBreakdown)


def aggregate(breakdowns: Iterable[B], breakdown_type: Optional[Type[B]] = None) -> B:
    """
    Sum breakdowns field by field.

    The fold is order-independent: any grouping or ordering of the same
    breakdowns gives the same totals.

    Args:
        breakdowns: Breakdowns of a single category
        breakdown_type: Breakdown class; required when `breakdowns` may be empty

    Returns:
        A breakdown of the same type holding the totals

    Raises:
        ValueError: If the input is empty and no type was given
        TypeError: If breakdowns of different categories are mixed
    """
    items = list(breakdowns)
    if breakdown_type is None:
        if not items:
            raise ValueError("aggregate() of an empty sequence needs breakdown_type")
        breakdown_type = type(items[0])

    fields = breakdown_type.cost_fields()
    totals: Dict[str, float] = dict.fromkeys(fields, 0.0)

    for item in items:
        if not isinstance(item, breakdown_type):
            raise TypeError(
                f"Cannot aggregate {type(item).__name__} into {breakdown_type.__name__}"
            )
        for name in fields:
            totals[name] += getattr(item, name)

    return breakdown_type(**totals)


def merge_line_items(items: Iterable[LineItem]) -> List[LineItem]:
    """
    Merge line items sharing an exact description, summing quantities.

    Unit of measure, vendor and status come from the first occurrence; later
    duplicates only add quantity. Output keeps first-seen order.
    """
    merged: Dict[str, LineItem] = {}
    for item in items:
        existing = merged.get(item.description)
        if existing is None:
            merged[item.description] = item.model_copy()
        else:
            merged[item.description] = existing.model_copy(
                update={"quantity": existing.quantity + item.quantity}
            )
    return list(merged.values())
