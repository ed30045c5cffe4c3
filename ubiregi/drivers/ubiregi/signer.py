"""
Request signer for the Ubiregi API.
- X-Ubiregi-Auth-Token: installation specific token, shared by ubiregi.com, the user and the client.
- X-Ubiregi-App-Secret: app specific secret, shared by ubiregi.com and the client only.
  Sent as "<salt>:<sha1-hex(salt + secret)>" with the current UTC time as salt,
  or as the raw secret in the simplified variant.
"""
import hashlib

from ubiregi.drivers.ubiregi.util import UtcTime

DEFAULT_USER_AGENT = "SampleAPI Client; en"


def sign(secret, salt):
    digest = hashlib.sha1((salt + secret).encode("utf-8")).hexdigest()
    return salt + ":" + digest


class Signer:
    def __init__(self, secret, token, salted=True, user_agent=DEFAULT_USER_AGENT):
        self.secret = secret
        self.token = token
        self.salted = salted
        self.user_agent = user_agent

    def make_salt(self, now=None):
        return UtcTime(now=now)

    def app_secret(self, salt=None):
        if not self.salted:
            return self.secret
        if salt is None:
            salt = self.make_salt()
        return sign(self.secret, salt)

    def headers(self, salt=None):
        """Default HTTP request headers, a fresh salt on every call."""
        return {
            "User-Agent": self.user_agent,
            "X-Ubiregi-Auth-Token": self.token,
            "X-Ubiregi-App-Secret": self.app_secret(salt),
        }

    def __repr__(self):
        masked = self.token[:4] + "..." if self.token else ""
        return f"Signer(token={masked!r}, salted={self.salted})"
