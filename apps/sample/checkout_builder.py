# -*- coding: utf-8 -*-
# apps/sample/checkout_builder.py
# Builds a synthetic checkout out of a menu: one of every visible, tax-included item.

import uuid
from typing import Any, Dict, Iterable, List, Optional

from ubiregi.drivers.ubiregi.util import PAID_AT_FORMAT, UtcTime

INTAX = "intax"


def tax_split(price, vat):
    """
    Split a tax-included price into (sales, tax), both truncated to int.

    >>> tax_split(108, 8)
    (100, 8)
    """
    sales = int(price * 100 / (100 + vat))
    tax = int(price * vat / (100 + vat))
    return sales, tax


def visible_category_ids(categories: Iterable[Dict[str, Any]]) -> set:
    """Categories without a position are hidden."""
    return {c["id"] for c in categories if c.get("position") is not None}


def checkout_items(items: Iterable[Dict[str, Any]], categories: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    visible = visible_category_ids(categories)
    lines = []
    for item in items:
        if item.get("category_id") not in visible or item.get("price_type") != INTAX:
            continue
        sales, tax = tax_split(item["price"], item["vat"])
        lines.append({
            "menu_item_id": item["id"],
            "count": 1,
            "sales": sales,
            "tax": tax,
            "discount_sales": 0,
            "discount_tax": 0,
        })
    return lines


def first_payment_type_id(account: Dict[str, Any]):
    payment_types = account.get("payment_types") or []
    if not payment_types:
        raise ValueError("account has no payment types")
    return payment_types[0]["id"]


def build_checkout(account, items, categories, now=None, guid: Optional[str] = None) -> Dict[str, Any]:
    """
    Build one checkout paying for every eligible item of a menu in a single payment.

    Args:
        account: decoded account, only payment_types is used
        items: menu items of the menu
        categories: categories of the same menu
        now: datetime used for paid_at, the current UTC time by default
        guid: transaction id, a fresh UUID4 by default

    Raises:
        ValueError: no payment type, or no item is both visible and tax-included
    """
    lines = checkout_items(items, categories)
    if not lines:
        raise ValueError("no visible tax-included item in the menu")
    total = sum(line["sales"] + line["tax"] for line in lines)
    return {
        "guid": guid or str(uuid.uuid4()),
        "paid_at": UtcTime(PAID_AT_FORMAT, now=now),
        "amount": total,
        "items": lines,
        "payments": [{
            "payment_type_id": first_payment_type_id(account),
            "amount": total,
        }],
    }
