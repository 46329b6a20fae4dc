"""
headerstore - case-insensitive, order-preserving HTTP headers for Python
"""

import pkgutil
import sys

# Declare top-level shortcuts
from headerstore.http import HeaderStore
from headerstore.settings import Settings
from headerstore.utils.log import logger


__all__ = [
    '__version__', 'version_info', 'HeaderStore', 'Settings', 'logger'
]


# headerstore versions
__version__ = (pkgutil.get_data(__package__, "VERSION") or b"").decode("ascii").strip()
version_info = tuple(int(v) if v.isdigit() else v for v in __version__.split('.'))


# Check minimum required Python version
if sys.version_info < (3, 9):
    print("headerstore %s requires Python 3.9+" % __version__)
    sys.exit(1)


del pkgutil
del sys
