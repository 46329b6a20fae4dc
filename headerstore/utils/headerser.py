"""
Header serialization utilities for headerstore.
headerstore的头部序列化实用工具。

Helpers that turn a HeaderStore into a plain dict and back, for storing
headers in queues, caches or databases. Unlike all() and raw(), the dict keeps
every value unjoined, so several Set-Cookie values survive the round trip.
将HeaderStore转换为普通字典并转换回来的辅助函数，用于在队列、缓存或数据库中存储头部。
与all()和raw()不同，该字典保留所有未连接的值，因此多个Set-Cookie值在往返中得以保留。
"""
from headerstore.http.headers import HeaderStore


def headers_to_dict(headers: HeaderStore) -> dict:
    """
    Convert a HeaderStore to a dictionary representation.
    将HeaderStore转换为字典表示。

    Returns:
        dict: ``{'headers': [[original_name, [value, ...]], ...]}`` in iteration order.
              按迭代顺序的``{'headers': [[原始名称, [值, ...]], ...]}``。

    Example:
        >>> headers = HeaderStore({'Set-Cookie': 'a=1'})
        >>> headers.append('set-cookie', 'b=2')
        >>> headers_to_dict(headers)
        {'headers': [['Set-Cookie', ['a=1', 'b=2']]]}
    """
    return {'headers': [[name, headers.get_all(name)] for name in headers.raw()]}


def headers_from_dict(d: dict) -> HeaderStore:
    """
    Convert a dictionary made by headers_to_dict() back to a HeaderStore.
    将headers_to_dict()生成的字典转换回HeaderStore。
    """
    headers = HeaderStore()
    for name, values in d.get('headers', []):
        for value in values:
            headers.append(name, value)
    return headers
