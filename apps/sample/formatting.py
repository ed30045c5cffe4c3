# -*- coding: utf-8 -*-
# apps/sample/formatting.py

import json

import pandas as pd

MENU_COLUMNS = ['category', 'id', 'name', 'price', 'vat', 'price_type']


def to_json(data):
    return json.dumps(data, indent=2, ensure_ascii=False, sort_keys=True)


def menu_frame(categories, items):
    """
    One row per item of a visible category, categories ordered by position,
    items kept in server order inside a category.
    """
    visible = sorted(
        (c for c in categories if c.get('position') is not None),
        key=lambda c: c['position'],
    )
    rows = []
    for category in visible:
        for item in items:
            if item.get('category_id') != category['id']:
                continue
            rows.append({
                'category': category.get('name'),
                'id': item.get('id'),
                'name': item.get('name'),
                'price': item.get('price'),
                'vat': item.get('vat'),
                'price_type': item.get('price_type'),
            })
    return pd.DataFrame(rows, columns=MENU_COLUMNS)


def format_menu(menu_id, categories, items):
    df = menu_frame(categories, items)
    header = f"== Menu {menu_id} ({len(df)} items) =="
    if df.empty:
        return header + "\n(no visible items)"
    return header + "\n" + df.to_string(index=False)
