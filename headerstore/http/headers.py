"""
HTTP headers implementation for headerstore.
headerstore的HTTP头部实现。

This module provides the HeaderStore class, a case-insensitive, order-preserving
multi-value container for HTTP headers. Header names are folded to lower case
for lookup while the casing used to create each entry is retained for display.
Repeated values are joined with ", " when read back, except through
get_set_cookie(), which returns the Set-Cookie values unjoined.
此模块提供HeaderStore类，这是一个大小写不敏感、保持顺序的HTTP头部多值容器。
头部名称被转换为小写以进行查找，同时保留创建每个条目时使用的大小写用于显示。
重复的值在读取时以", "连接，但get_set_cookie()除外，它返回未连接的Set-Cookie值。
"""

from collections.abc import Mapping
from functools import partial

from headerstore.exceptions import InvalidHeaders
from headerstore.utils.log import logger
from headerstore.utils.python import is_listlike, to_unicode

VALUE_SEPARATOR = ', '
SET_COOKIE = 'set-cookie'


class _HeaderEntry:
    """One normalized header: the name it was created with and its raw values."""

    __slots__ = ('name', 'values')

    def __init__(self, name, values):
        self.name = name
        self.values = values

    def joined(self):
        return VALUE_SEPARATOR.join(self.values)


class HeaderStore:
    """
    Case insensitive, order preserving HTTP headers container.
    大小写不敏感、保持顺序的HTTP头部容器。

    Each header is stored once under its lower-cased name together with the
    name it was first created with and the ordered list of its values.
    每个头部以其小写名称存储一次，同时保存首次创建时使用的名称及其值的有序列表。

    Example:
        ```python
        headers = HeaderStore({'Accept': '*/*', 'Content-Type': ['application/json', 'text/plain']})
        assert headers.get('CONTENT-TYPE') == 'application/json, text/plain'
        assert headers.all() == {'accept': '*/*', 'content-type': 'application/json, text/plain'}
        assert headers.raw() == {'Accept': '*/*', 'Content-Type': 'application/json, text/plain'}
        ```
    """

    __slots__ = ('_entries',)

    def __init__(self, init=None):
        """
        Initialize a HeaderStore.
        初始化HeaderStore。

        Args:
            init: Optional initial headers. One of: another HeaderStore (or a
                  compatible headers object exposing entries()), a mapping of
                  name to value or list of values, or an iterable of
                  (name, value-or-list-of-values) pairs.
                  可选的初始头部。可以是另一个HeaderStore（或提供entries()的兼容头部对象）、
                  名称到值或值列表的映射，或(名称, 值或值列表)对的可迭代对象。

        Raises:
            InvalidHeaders: If init is not one of the supported shapes.
                           如果init不是支持的形式之一。
        """
        self._entries = {}
        if init is None:
            return

        for pair in self._iter_init(init):
            try:
                name, value = pair
            except (TypeError, ValueError):
                raise InvalidHeaders(f'Header pairs must have exactly two items, got {pair!r}')
            if is_listlike(value):
                value = VALUE_SEPARATOR.join(self.normvalue(v) for v in value)
            self.append(name, value)

    @staticmethod
    def _iter_init(init):
        # Multi-value mappings yield repeated names from items()
        if isinstance(init, HeaderStore):
            return init.entries()
        if isinstance(init, Mapping):
            return init.items()
        entries = getattr(init, 'entries', None)
        if callable(entries):
            logger.debug(f'Copying headers from {type(init).__name__} through entries()')
            return entries()
        if is_listlike(init):
            return init
        raise InvalidHeaders(
            'HeaderStore must be initialized with headers, a mapping or a sequence '
            f'of (name, value) pairs, got {type(init).__name__}'
        )

    def normkey(self, key):
        """
        Normalize a header name for case-insensitive lookup.
        规范化头部名称以进行大小写不敏感的查找。

        The name is lower-cased only. Surrounding whitespace is kept.
        名称仅被转换为小写，周围的空白会被保留。
        """
        return self.normname(key).lower()

    @staticmethod
    def normname(name):
        try:
            return to_unicode(name)
        except TypeError:
            raise InvalidHeaders(f'Header name must be str or bytes, got {type(name).__name__}')

    @staticmethod
    def normvalue(value):
        try:
            return to_unicode(value)
        except TypeError:
            raise InvalidHeaders(f'Header value must be str or bytes, got {type(value).__name__}')

    def get(self, name):
        """
        Get the value of a header.
        获取头部的值。

        Args:
            name: The header name, matched case-insensitively.
                 头部名称，大小写不敏感匹配。

        Returns:
            str or None: All values joined with ", ", or None if the header is absent.
                        所有值以", "连接，如果头部不存在则为None。
        """
        entry = self._entries.get(self.normkey(name))
        if entry is None:
            return None
        return entry.joined()

    def get_all(self, name):
        """Return a copy of the raw, unjoined values of a header ([] if absent)."""
        entry = self._entries.get(self.normkey(name))
        if entry is None:
            return []
        return list(entry.values)

    def get_set_cookie(self):
        """
        Return every Set-Cookie value, unjoined, in the order they were added.
        按添加顺序返回所有未连接的Set-Cookie值。

        Set-Cookie values may themselves contain commas (e.g. in Expires), so
        they cannot be recovered from the joined value returned by get().
        Set-Cookie值本身可能包含逗号（例如在Expires中），因此无法从get()返回的连接值中恢复。

        Returns:
            list: The Set-Cookie values, or an empty list if none were set.
                 Set-Cookie值，如果未设置则为空列表。
        """
        return self.get_all(SET_COOKIE)

    def set(self, name, value):
        """
        Set a header, replacing every existing value.
        设置头部，替换所有现有值。

        The stored original name becomes this call's name. An existing header
        keeps its position in iteration order.
        存储的原始名称变为此次调用的名称。已存在的头部在迭代顺序中保持其位置。

        Args:
            name: The header name.
                 头部名称。
            value: The header value.
                  头部值。
        """
        name = self.normname(name)
        self._entries[name.lower()] = _HeaderEntry(name, [self.normvalue(value)])

    def append(self, name, value):
        """
        Add a value to a header, creating the header if needed.
        向头部添加一个值，必要时创建该头部。

        Appending to an existing header does not change its original name.
        向已存在的头部追加值不会改变其原始名称。

        Args:
            name: The header name.
                 头部名称。
            value: The header value to add.
                  要添加的头部值。
        """
        name = self.normname(name)
        value = self.normvalue(value)
        entry = self._entries.get(name.lower())
        if entry is None:
            self._entries[name.lower()] = _HeaderEntry(name, [value])
        else:
            entry.values.append(value)

    def has(self, name):
        """
        Return whether a header is present (case-insensitive).
        返回头部是否存在（大小写不敏感）。
        """
        return self.normkey(name) in self._entries

    def delete(self, name):
        """Remove a header and all of its values. Does nothing if it is absent."""
        self._entries.pop(self.normkey(name), None)

    def all(self):
        """
        Return the headers as a dict keyed by normalized (lower-cased) name.
        返回以规范化（小写）名称为键的头部字典。
        """
        return {key: entry.joined() for key, entry in self._entries.items()}

    def raw(self):
        """
        Return the headers as a dict keyed by the name each header was created with.
        返回以每个头部创建时使用的名称为键的头部字典。
        """
        return {entry.name: entry.joined() for entry in self._entries.values()}

    def for_each(self, callback, this_arg=None):
        """
        Call callback(value, name, headers) once per header, in order.
        按顺序为每个头部调用一次callback(value, name, headers)。

        ``value`` is always what ``get(name)`` returns at call time and ``name``
        is the normalized name. Modifying the headers from within the callback
        is not supported.
        ``value``始终是调用时``get(name)``返回的值，``name``是规范化名称。
        不支持在回调中修改头部。

        Args:
            callback: The callable to invoke.
                     要调用的可调用对象。
            this_arg: Optional receiver, passed to callback as its first argument.
                     可选的接收者，作为第一个参数传递给callback。
        """
        if this_arg is not None:
            callback = partial(callback, this_arg)
        for name, value in self.entries():
            callback(value, name, self)

    def keys(self):
        """
        Return an iterator of normalized header names.
        返回规范化头部名称的迭代器。
        """
        return (key for key in list(self._entries))

    def values(self):
        """
        Return an iterator of joined header values.
        返回连接后头部值的迭代器。
        """
        return (entry.joined() for entry in list(self._entries.values()))

    def entries(self):
        """
        Return a new iterator of (name, value) pairs.
        返回(名称, 值)对的新迭代器。

        The entry order is captured when this method is called; values are
        joined as they are consumed.
        条目顺序在调用此方法时捕获；值在被消费时连接。
        """
        return ((key, entry.joined()) for key, entry in list(self._entries.items()))

    def __iter__(self):
        """
        Iterate over (name, value) pairs, same as entries().
        遍历(名称, 值)对，与entries()相同。
        """
        return self.entries()

    def __contains__(self, name):
        return self.has(name)

    def __len__(self):
        return len(self._entries)

    def __repr__(self):
        return f'{self.__class__.__name__}({self.raw()!r})'

    def __copy__(self):
        """
        Create a copy of the headers.
        创建头部的副本。

        Values are copied unjoined, so multiple Set-Cookie values survive.
        值以未连接的形式复制，因此多个Set-Cookie值得以保留。
        """
        new = self.__class__()
        for key, entry in self._entries.items():
            new._entries[key] = _HeaderEntry(entry.name, list(entry.values))
        return new

    copy = __copy__
