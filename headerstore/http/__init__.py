"""
Module containing the HTTP header classes and helpers

Use this module (instead of the more specific ones) when importing HeaderStore
outside this module.
"""

from headerstore.http.headers import HeaderStore
from headerstore.http.wire import HeaderCodec, headers_from_raw, headers_to_raw, iter_header_lines
