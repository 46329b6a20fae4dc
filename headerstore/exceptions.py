"""
headerstore exceptions
headerstore异常
"""


class NotConfigured(Exception):
    """
    Indicates a missing configuration situation.
    表示缺少配置的情况。

    Raised when a component is disabled or lacks the settings it needs.
    当组件被禁用或缺少所需设置时引发。
    """
    pass


class InvalidHeaders(TypeError):
    """
    Indicates headers were given in a shape HeaderStore does not accept.
    表示以HeaderStore不接受的形式提供了头部。

    Raised for initializers that are not a HeaderStore, a mapping or a
    sequence of (name, value) pairs, and for names or values that are not
    str or bytes. It is a TypeError, so callers treating it as a generic
    contract violation keep working.
    当初始化参数不是HeaderStore、映射或(名称, 值)对序列，
    或名称、值不是str或bytes时引发。它是TypeError的子类。
    """
    pass
