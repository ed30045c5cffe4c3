# -*- coding: utf-8 -*-
# ubiregi/core/kernel/syscalls.py
# A minimal syscall interface for point-of-sale drivers.
# Plain base class with NotImplementedError.

class PosSyscalls(object):
    # ---- Account ----
    def account(self, callback=None):
        """Return the current account as a dict
           :param callback: Called with the raw decoded response (optional)
        """
        raise NotImplementedError

    # ---- Menus ----
    def menu_items(self, menu_id, callback=None):
        """Return every item of a menu, following pagination
           :param menu_id: Menu ID
           :param callback: Called with each raw decoded page (optional)
        """
        raise NotImplementedError

    def menu_categories(self, menu_id, callback=None):
        """Return every category of a menu, following pagination
           :param menu_id: Menu ID
           :param callback: Called with each raw decoded page (optional)
        """
        raise NotImplementedError

    # ---- Checkouts ----
    def checkouts(self, callback=None):
        """Return every checkout registered for the account
           :param callback: Called with each raw decoded page (optional)
        """
        raise NotImplementedError

    def post_checkouts(self, checkouts):
        """Register new checkouts, return the decoded server response
           :param checkouts: List of checkout dicts
        """
        raise NotImplementedError

    # ---- Convenience methods ----
    def post_checkout(self, checkout):
        """Convenience method for registering a single checkout
           :param checkout: Checkout dict
        """
        return self.post_checkouts([checkout])

    def menu(self, menu_id, callback=None):
        """Return (categories, items) of a menu
           :param menu_id: Menu ID
           :param callback: Called with each raw decoded page (optional)
        """
        return self.menu_categories(menu_id, callback), self.menu_items(menu_id, callback)
