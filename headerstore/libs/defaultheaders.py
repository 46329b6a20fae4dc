"""
Default headers
默认头部

Fills in the headers configured in the DEFAULT_REQUEST_HEADERS setting. A
default is only added when the headers do not already carry a header of the
same name, in any casing, so explicitly given headers take precedence.
填充DEFAULT_REQUEST_HEADERS设置中配置的头部。仅当头部中尚未包含同名头部
（任何大小写）时才会添加默认值，因此显式给出的头部优先。
"""

from headerstore.exceptions import NotConfigured
from headerstore.utils.log import logger


class DefaultHeaders:
    """
    Applies a fixed set of default headers to a HeaderStore.
    将一组固定的默认头部应用于HeaderStore。
    """

    def __init__(self, headers):
        """
        Initialize DefaultHeaders.
        初始化DefaultHeaders。

        Args:
            headers: An iterable of (name, value) pairs representing the default headers.
                    表示默认头部的(名称, 值)对的可迭代对象。
        """
        self._headers = list(headers)

    @classmethod
    def from_settings(cls, settings):
        """
        Create a DefaultHeaders instance from settings.
        从设置创建DefaultHeaders实例。

        Raises:
            NotConfigured: If DEFAULT_HEADERS_ENABLED is false.
                          如果DEFAULT_HEADERS_ENABLED为false。
        """
        if not settings.getbool('DEFAULT_HEADERS_ENABLED'):
            raise NotConfigured('DEFAULT_HEADERS_ENABLED is off')
        return cls(settings.getheaders('DEFAULT_REQUEST_HEADERS').raw().items())

    def apply(self, headers):
        """
        Set each default header that is missing from headers.
        设置headers中缺少的每个默认头部。

        Args:
            headers: The HeaderStore to complete. It is modified in place.
                    要补全的HeaderStore。会被原地修改。

        Returns:
            HeaderStore: The same headers object.
                        同一个头部对象。
        """
        added = []
        for name, value in self._headers:
            if not headers.has(name):
                headers.set(name, value)
                added.append(name)
        if added:
            logger.debug(f'Added default headers: {", ".join(added)}')
        return headers
