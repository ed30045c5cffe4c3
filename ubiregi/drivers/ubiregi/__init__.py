"""
Ubiregi driver package.
signer.py + rest.py + driver.py according to the POS syscalls.
"""

from .driver import UbiregiDriver, init_UbiregiClient  # noqa: F401
from .rest import DEFAULT_ENDPOINT, RestClient  # noqa: F401
from .signer import Signer, sign  # noqa: F401
