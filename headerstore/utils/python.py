"""
Python utility functions for headerstore.
headerstore的Python实用函数。

Helpers for telling header value lists apart from single values and for
moving header text between str and bytes.
用于区分头部值列表与单个值，以及在str和bytes之间转换头部文本的辅助函数。
"""


def is_listlike(x):
    """
    Check if the given object is list-like (iterable but not a string or bytes).
    检查给定对象是否类似列表（可迭代但不是字符串或字节）。

    Header values are accepted either as a single str/bytes or as a list of
    them; this is the test that tells the two apart.
    头部值可以是单个str/bytes或它们的列表；此函数用于区分两者。

    Examples:
        >>> is_listlike("gzip")
        False
        >>> is_listlike(b"gzip")
        False
        >>> is_listlike(["gzip", "br"])
        True
        >>> is_listlike(("gzip",))
        True
        >>> is_listlike(v for v in ["gzip"])
        True
    """
    return hasattr(x, "__iter__") and not isinstance(x, (str, bytes))


def to_unicode(text, encoding=None, errors='strict'):
    """
    Convert a bytes object to a unicode (str) object.
    将字节对象转换为unicode（str）对象。

    Args:
        text: The text to convert. Must be a bytes or str object.
              要转换的文本。必须是bytes或str对象。
        encoding: The encoding to use for decoding bytes. Defaults to 'utf-8'.
                 用于解码字节的编码。默认为'utf-8'。
        errors: The error handling scheme for decoding. Defaults to 'strict'.
               解码的错误处理方案。默认为'strict'。

    Returns:
        str: The unicode representation of the input text.
             输入文本的unicode表示。

    Raises:
        TypeError: If the input is not a bytes or str object.
                  如果输入不是bytes或str对象。
    """
    if isinstance(text, str):
        return text
    if not isinstance(text, bytes):
        raise TypeError('to_unicode must receive a bytes or str '
                        f'object, got {type(text).__name__}')
    if encoding is None:
        encoding = 'utf-8'
    return text.decode(encoding, errors)


def to_bytes(text, encoding=None, errors='strict'):
    """
    Convert a unicode (str) object to a bytes object.
    将unicode（str）对象转换为字节对象。

    Raises:
        TypeError: If the input is not a str or bytes object.
                  如果输入不是str或bytes对象。
    """
    if isinstance(text, bytes):
        return text
    if not isinstance(text, str):
        raise TypeError('to_bytes must receive a str or bytes '
                        f'object, got {type(text).__name__}')
    if encoding is None:
        encoding = 'utf-8'
    return text.encode(encoding, errors)


def without_none_values(iterable):
    """
    Return a copy of an iterable with all None entries removed.
    返回一个去除所有None条目的可迭代对象的副本。

    Examples:
        >>> without_none_values({'Accept': '*/*', 'User-Agent': None})
        {'Accept': '*/*'}
        >>> without_none_values(['gzip', None, 'br'])
        ['gzip', 'br']
    """
    try:
        return {k: v for k, v in iterable.items() if v is not None}
    except AttributeError:
        return type(iterable)((v for v in iterable if v is not None))
