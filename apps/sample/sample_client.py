#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Sample command line client for the Ubiregi API.

    ubiregi-sample --secret SECRET --token TOKEN account
    ubiregi-sample menu            # formatted menus, visible categories only
    ubiregi-sample all-menu        # raw JSON of every menu's categories and items
    ubiregi-sample checkouts       # raw JSON of every checkout (slow on long histories)
    ubiregi-sample post-checkout   # post one synthetic checkout built from the first menu

Secret, token and endpoint fall back to configs/account.yaml and UBIREGI_* variables.
Not meant for production use.
"""

import argparse
import logging
import sys

from apps.sample.checkout_builder import build_checkout
from apps.sample.formatting import format_menu, to_json
from apps.utils.logger import resolve_level, setup_logger
from configs.config_reader import ConfigReader
from ubiregi.drivers.ubiregi.driver import init_UbiregiClient

COMMANDS = ('account', 'menu', 'all-menu', 'checkouts', 'post-checkout')
LOGGER_NAMES = ('ubiregi', 'apps', 'configs')

logger = logging.getLogger(__name__)


# ---------- Commands ----------

def cmd_account(driver, out):
    print(to_json(driver.account()), file=out)


def cmd_menu(driver, out):
    account = driver.account()
    for menu_id in account.get('menus') or []:
        categories, items = driver.menu(menu_id)
        print(format_menu(menu_id, categories, items), file=out)
        print(file=out)


def cmd_all_menu(driver, out):
    account = driver.account()
    dump = []
    for menu_id in account.get('menus') or []:
        categories, items = driver.menu(menu_id)
        dump.append({'menu_id': menu_id, 'categories': categories, 'items': items})
    print(to_json(dump), file=out)


def cmd_checkouts(driver, out):
    print(to_json(driver.checkouts()), file=out)


def cmd_post_checkout(driver, out):
    account = driver.account()
    menus = account.get('menus') or []
    if not menus:
        raise ValueError("account has no menus")
    categories, items = driver.menu(menus[0])
    checkout = build_checkout(account, items, categories)
    logger.info("Posting checkout %s (amount %s)", checkout['guid'], checkout['amount'])
    print(to_json(driver.post_checkouts([checkout])), file=out)


HANDLERS = {
    'account': cmd_account,
    'menu': cmd_menu,
    'all-menu': cmd_all_menu,
    'checkouts': cmd_checkouts,
    'post-checkout': cmd_post_checkout,
}


# ---------- CLI ----------

def build_parser():
    ap = argparse.ArgumentParser(description="Sample client for the Ubiregi API.")
    ap.add_argument("--secret", help="app secret (default: config / UBIREGI_SECRET)", default=None)
    ap.add_argument("--token", help="installation auth token (default: config / UBIREGI_TOKEN)", default=None)
    ap.add_argument("--endpoint", help="API endpoint (default: https://ubiregi.com/api/3/)", default=None)
    ap.add_argument("--account", help="account name in account.yaml", default="main")
    ap.add_argument("--config-dir", help="directory holding ubiregi.yaml / account.yaml", default=None)
    ap.add_argument("--log-dir", help="write rotating log files to this directory", default=None)
    ap.add_argument("--plain-secret", help="send the raw app secret instead of a salted digest",
                    action="store_true")
    ap.add_argument("-v", "--verbose", help="debug logging", action="store_true")
    ap.add_argument("command", choices=COMMANDS)
    return ap


def main(argv=None, out=None):
    ap = build_parser()
    args = ap.parse_args(argv)
    out = out or sys.stdout

    settings = ConfigReader(args.config_dir).get_ubiregi_config()
    try:
        level = logging.DEBUG if args.verbose else resolve_level(settings.get('log_level') or logging.INFO)
    except ValueError as e:
        ap.error(f"ubiregi.yaml: {e}")
    for name in LOGGER_NAMES:
        setup_logger(name, level=level, log_dir=args.log_dir or settings.get('log_dir'))

    try:
        driver = init_UbiregiClient(
            account=args.account,
            config_dir=args.config_dir,
            secret=args.secret,
            token=args.token,
            endpoint=args.endpoint,
            salted=False if args.plain_secret else None,
        )
    except ValueError as e:
        ap.error(str(e))

    try:
        HANDLERS[args.command](driver, out)
    finally:
        driver.close()


if __name__ == "__main__":
    main()
