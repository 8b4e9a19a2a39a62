"""
Product Query Builder

Translates the optional catalog filter parameters into a single MongoDB
query document. Each criterion becomes its own top-level key, and MongoDB
ANDs top-level keys, so the discount ``$or`` group cannot widen the
category, brand or name constraints.
"""

import re
from typing import Any, Dict, Iterable, List, Optional, Union

MultiValue = Union[str, Iterable[str], None]

DISCOUNTED = "true"
NOT_DISCOUNTED = "false"


def split_multi_value(values: MultiValue) -> List[str]:
    """
    Normalize a single value, a list of values, or comma-separated values
    into a flat list.

    Examples:
        "shoes" -> ["shoes"]
        "shoes,bags" -> ["shoes", "bags"]
        ["shoes", "bags,hats"] -> ["shoes", "bags", "hats"]

    Blank entries are dropped and duplicates keep their first position.
    """
    if values is None:
        return []
    if isinstance(values, str):
        values = [values]

    result: List[str] = []
    for value in values:
        for part in str(value).split(","):
            part = part.strip()
            if part and part not in result:
                result.append(part)
    return result


def build_discount_query(discount: Optional[str]) -> Dict[str, Any]:
    """Discount criterion only: "true", "false", anything else is ignored"""
    if discount == DISCOUNTED:
        return {"discount": {"$gt": 0}}
    if discount == NOT_DISCOUNTED:
        return {"$or": [{"discount": 0}, {"discount": {"$exists": False}}]}
    return {}


def build_product_query(
    categories: MultiValue = None,
    brands: MultiValue = None,
    discount: Optional[str] = None,
    name: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build the structured product query from optional filter parameters.

    Args:
        categories: category names (single, list, or comma-separated)
        brands: brand names (single, list, or comma-separated)
        discount: "true" for discounted products, "false" for undiscounted
        name: case-insensitive substring of the product name

    Returns:
        MongoDB query document; ``{}`` matches every product
    """
    query: Dict[str, Any] = build_discount_query(discount)

    category_list = split_multi_value(categories)
    if category_list:
        query["category"] = {"$in": category_list}

    brand_list = split_multi_value(brands)
    if brand_list:
        query["brand"] = {"$in": brand_list}

    if name:
        # Literal substring match, not a user-supplied pattern
        query["name"] = {"$regex": re.escape(name), "$options": "i"}

    return query
