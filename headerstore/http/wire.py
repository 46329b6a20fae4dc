"""
Conversion between HeaderStore and raw HTTP header blocks.
HeaderStore与原始HTTP头部块之间的转换。

Every header is written as a single line carrying its joined value, except
Set-Cookie, which is written as one line per cookie because cookie values
may contain commas. Blocks are formatted by w3lib.http and parsed line by
line, in order. Obsolete line folding is not supported.
每个头部被写为一行，携带其连接后的值，但Set-Cookie除外，
它按每个cookie写一行，因为cookie值可能包含逗号。
行由w3lib.http格式化，并按顺序逐行解析。不支持过时的行折叠。
"""

from w3lib.http import headers_dict_to_raw

from headerstore.http.headers import SET_COOKIE, HeaderStore
from headerstore.utils.log import logger
from headerstore.utils.python import to_bytes, to_unicode


def iter_header_lines(headers):
    """
    Yield (name, value) pairs, one per line that should go on the wire.
    生成(名称, 值)对，每对对应应发送的一行。

    Names are the original names each header was created with.
    名称为每个头部创建时使用的原始名称。
    """
    for name in headers.raw():
        if name.lower() == SET_COOKIE:
            for cookie in headers.get_set_cookie():
                yield name, cookie
        else:
            yield name, headers.get(name)


def headers_to_raw(headers, encoding='utf-8'):
    """
    Serialize headers to a CRLF separated header block.
    将头部序列化为以CRLF分隔的头部块。

    Args:
        headers: The HeaderStore to serialize.
                要序列化的HeaderStore。
        encoding: Encoding used for names and values.
                 名称和值使用的编码。

    Returns:
        bytes: Lines of the form ``Name: value`` joined with ``\\r\\n``.
              ``Name: value``形式的行，以``\\r\\n``连接。
    """
    raw = {}
    for name, value in iter_header_lines(headers):
        raw.setdefault(to_bytes(name, encoding), []).append(to_bytes(value, encoding))
    return headers_dict_to_raw(raw)


def headers_from_raw(raw, encoding='utf-8'):
    """
    Parse a raw header block into a HeaderStore.
    将原始头部块解析为HeaderStore。

    Repeated lines for the same name are appended, so several Set-Cookie
    lines remain separate cookies. Lines without a colon are skipped.
    同名的重复行会被追加，因此多个Set-Cookie行仍为独立的cookie。没有冒号的行会被跳过。

    Args:
        raw: The header block, as bytes or str.
            头部块，bytes或str。
        encoding: Encoding used to decode names and values.
                 用于解码名称和值的编码。

    Returns:
        HeaderStore: The parsed headers.
                    解析后的头部。
    """
    raw = to_bytes(raw, encoding)
    headers = HeaderStore()
    skipped = 0
    # Lines are appended in block order; names differing only in case share an entry
    for line in raw.splitlines():
        parts = line.split(b':', 1)
        if len(parts) != 2:
            if line.strip():
                skipped += 1
            continue
        name, value = parts
        headers.append(to_unicode(name.strip(), encoding), to_unicode(value.strip(), encoding))
    if skipped:
        logger.debug(f'Skipped {skipped} header line(s) without a colon')
    return headers


class HeaderCodec:
    """
    Converts headers to and from raw blocks using the configured encoding.
    使用配置的编码在头部与原始块之间进行转换。
    """

    def __init__(self, encoding='utf-8'):
        self.encoding = encoding

    @classmethod
    def from_settings(cls, settings):
        """
        Create a HeaderCodec from the HEADERS_ENCODING setting.
        从HEADERS_ENCODING设置创建HeaderCodec。
        """
        return cls(settings.get('HEADERS_ENCODING', 'utf-8'))

    def dumps(self, headers):
        return headers_to_raw(headers, self.encoding)

    def loads(self, raw):
        return headers_from_raw(raw, self.encoding)
