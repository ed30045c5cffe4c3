# -*- coding: utf-8 -*-
# ubiregi/drivers/ubiregi/driver.py
# Ubiregi driver that wraps the signed REST client behind the POS syscalls.

import logging

from ubiregi.core.kernel.syscalls import PosSyscalls
from ubiregi.drivers.ubiregi.rest import DEFAULT_ENDPOINT, RestClient
from ubiregi.drivers.ubiregi.signer import DEFAULT_USER_AGENT, Signer

logger = logging.getLogger(__name__)


def init_UbiregiClient(account='main', config_dir=None, **overrides):
    """
    Build a driver from configs/ubiregi.yaml, configs/account.yaml and UBIREGI_* variables.

    Args:
        account: account name under accounts.ubiregi in account.yaml
        config_dir: directory holding the YAML files, configs/ by default
        **overrides: secret / token / endpoint / salted / timeout values that win over the config

    Returns:
        UbiregiDriver
    """
    from configs.config_reader import ConfigReader

    settings = ConfigReader(config_dir).get_client_settings(account)
    settings.update({k: v for k, v in overrides.items() if v is not None})
    if not settings.get('secret') or not settings.get('token'):
        raise ValueError(f"Ubiregi account '{account}' has no secret/token configured")
    logger.info("Using Ubiregi account %s at %s", account, settings['endpoint'])
    return UbiregiDriver(
        secret=settings['secret'],
        token=settings['token'],
        endpoint=settings['endpoint'],
        salted=settings.get('salted', True),
        timeout=settings.get('timeout'),
        user_agent=settings.get('user_agent') or DEFAULT_USER_AGENT,
    )


class UbiregiDriver(PosSyscalls):
    """
    Ubiregi API driver.

    Args:
        secret: identifies the client app; generated on ubiregi.com
        token: identifies the account; generated for each installation of the app
        endpoint: API endpoint, mostly useful for development
        salted: send a time-salted digest of the secret instead of the raw secret
        timeout: per-request timeout in seconds, None waits forever
        session: requests.Session to send requests through
    """

    def __init__(self, secret, token, endpoint=DEFAULT_ENDPOINT, salted=True, timeout=None,
                 session=None, user_agent=DEFAULT_USER_AGENT):
        self.signer = Signer(secret, token, salted=salted, user_agent=user_agent)
        self.rest = RestClient(self.signer, endpoint=endpoint, session=session, timeout=timeout)

    def __repr__(self):
        return f"UbiregiDriver(endpoint={self.rest.endpoint!r}, signer={self.signer!r})"

    @property
    def endpoint(self):
        return self.rest.endpoint

    def account(self, callback=None):
        response = self.rest.get("accounts/current")
        if callback:
            callback(response)
        return response["account"]

    def menu_items(self, menu_id, callback=None):
        # One call may send more than one GET request.
        return self.rest.index(f"menus/{menu_id}/items", "items", callback)

    def menu_categories(self, menu_id, callback=None):
        return self.rest.index(f"menus/{menu_id}/categories", "categories", callback)

    def checkouts(self, callback=None):
        """Download every checkout of the account. Slow for accounts with a long history."""
        return self.rest.index("checkouts", "checkouts", callback)

    def post_checkouts(self, checkouts):
        return self.rest.post("checkouts", {"checkouts": list(checkouts)})

    def close(self):
        self.rest.close()
