"""
Settings module for headerstore.
headerstore的设置模块。

A small priority-aware settings system: every value is stored together with
the priority it was set with, and a later set() only wins when its priority
is at least as high.
一个支持优先级的小型设置系统：每个值与其设置时的优先级一起存储，
后续的set()仅在其优先级不低于现有优先级时生效。
"""

import copy
import json
from collections.abc import MutableMapping
from importlib import import_module

from headerstore.http.headers import HeaderStore
from headerstore.settings import default_settings
from headerstore.utils.python import without_none_values


SETTINGS_PRIORITIES = {
    'default': 0,
    'command': 10,
    'project': 20,
    'cmdline': 40,
}


def get_settings_priority(priority):
    """
    Convert a priority name to its numerical value; numbers pass through.
    将优先级名称转换为其数值；数字原样返回。
    """
    if isinstance(priority, str):
        return SETTINGS_PRIORITIES[priority]
    else:
        return priority


class SettingsAttribute:
    """
    A setting value paired with the priority it was stored with.
    与存储时的优先级配对的设置值。

    Internal to BaseSettings.
    仅供BaseSettings内部使用。
    """

    def __init__(self, value, priority):
        self.value = value
        if isinstance(self.value, BaseSettings):
            self.priority = max(self.value.maxpriority(), priority)
        else:
            self.priority = priority

    def set(self, value, priority):
        """Replace the value if priority is higher or equal than the current one."""
        if priority >= self.priority:
            if isinstance(self.value, BaseSettings):
                value = BaseSettings(value, priority=priority)
            self.value = value
            self.priority = priority

    def __str__(self):
        return f"<SettingsAttribute value={self.value!r} priority={self.priority}>"

    __repr__ = __str__


class BaseSettings(MutableMapping):
    """
    Dictionary-like settings container with priority support.
    具有优先级支持的类字典设置容器。

    Values passed on initialization take the ``priority`` level, unless
    ``values`` is already a BaseSettings, in which case its own priorities are
    kept. Reading a missing key returns None rather than raising.
    初始化时传入的值采用``priority``级别，除非``values``已经是BaseSettings，
    此时保留其自身的优先级。读取不存在的键返回None而不是引发异常。

    Attributes:
        attributes (dict): Setting name to SettingsAttribute.
                          设置名称到SettingsAttribute的映射。
    """

    def __init__(self, values=None, priority='project'):
        self.attributes = {}
        if values:
            self.update(values, priority)

    def __getitem__(self, opt_name):
        if opt_name not in self:
            return None
        return self.attributes[opt_name].value

    def __contains__(self, name):
        return name in self.attributes

    def get(self, name, default=None):
        return self[name] if self[name] is not None else default

    def getbool(self, name, default=False):
        """
        Get a setting value as a boolean.
        将设置值作为布尔值获取。

        ``1``, ``'1'``, ``True``, ``'True'`` and ``'true'`` are true;
        ``0``, ``'0'``, ``False``, ``'False'``, ``'false'`` and ``None`` are false.
        Anything else raises ValueError.
        其他任何值都会引发ValueError。
        """
        got = self.get(name, default)
        try:
            return bool(int(got))
        except ValueError:
            if got in ("True", "true"):
                return True
            if got in ("False", "false"):
                return False
            raise ValueError("Supported values for boolean settings "
                             "are 0/1, True/False, '0'/'1', "
                             "'True'/'False' and 'true'/'false'")

    def getheaders(self, name, default=None):
        """
        Get a setting value as a HeaderStore.
        将设置值作为HeaderStore获取。

        The setting may be a dict of name to value (or list of values), a JSON
        string encoding such a dict, or a list of (name, value) pairs. Headers
        whose value is None are left out, which lets a higher priority setting
        remove a default header.
        设置可以是名称到值（或值列表）的字典、编码此类字典的JSON字符串，
        或(名称, 值)对的列表。值为None的头部会被忽略，这允许更高优先级的设置移除默认头部。

        Args:
            name: The setting name.
                 设置名称。
            default: The value to use if no setting is found.
                    如果未找到设置，则使用的值。

        Returns:
            HeaderStore: The headers described by the setting.
                        设置所描述的头部。
        """
        value = self.get(name, default)
        if value is None:
            return HeaderStore()
        if isinstance(value, str):
            value = json.loads(value)
        if isinstance(value, BaseSettings):
            value = value.copy_to_dict()
        if isinstance(value, dict):
            return HeaderStore(without_none_values(value))
        return HeaderStore([(k, v) for k, v in value if v is not None])

    def getpriority(self, name):
        """Return the numerical priority of a setting, or None if it is not set."""
        if name not in self:
            return None
        return self.attributes[name].priority

    def maxpriority(self):
        if len(self) > 0:
            return max(self.getpriority(name) for name in self)
        else:
            return get_settings_priority('default')

    def __setitem__(self, name, value):
        self.set(name, value)

    def set(self, name, value, priority='project'):
        """
        Store a key/value attribute with a given priority.
        存储具有给定优先级的键/值属性。

        An existing setting is only replaced when the new priority is equal to
        or higher than the stored one.
        仅当新优先级等于或高于已存储的优先级时，才会替换现有设置。
        """
        priority = get_settings_priority(priority)
        if name not in self:
            if isinstance(value, SettingsAttribute):
                self.attributes[name] = value
            else:
                self.attributes[name] = SettingsAttribute(value, priority)
        else:
            self.attributes[name].set(value, priority)

    def setmodule(self, module, priority='project'):
        """
        Store every uppercase global of a module (or module path) as a setting.
        将模块（或模块路径）的每个大写全局变量存储为设置。
        """
        if isinstance(module, str):
            module = import_module(module)
        for key in dir(module):
            if key.isupper():
                self.set(key, getattr(module, key), priority)

    def update(self, values, priority='project'):
        """
        Store key/value pairs with a given priority.
        以给定优先级存储键/值对。

        ``values`` may be a dict, a JSON string or a BaseSettings instance; for
        the latter its per-key priorities are used and ``priority`` is ignored.
        ``values``可以是字典、JSON字符串或BaseSettings实例；
        对于后者，使用其每个键的优先级并忽略``priority``。
        """
        if isinstance(values, str):
            values = json.loads(values)

        if values is not None:
            if isinstance(values, BaseSettings):
                for name, value in values.items():
                    self.set(name, value, values.getpriority(name))
            else:
                for name, value in values.items():
                    self.set(name, value, priority)

    def __delitem__(self, name):
        del self.attributes[name]

    def copy(self):
        return copy.deepcopy(self)

    def __iter__(self):
        return iter(self.attributes)

    def __len__(self):
        return len(self.attributes)

    def _to_dict(self):
        return {k: (v._to_dict() if isinstance(v, BaseSettings) else v)
                for k, v in self.items()}

    def copy_to_dict(self):
        """
        Return a plain dict copy of the settings, nested settings included.
        返回设置的普通字典副本，包括嵌套设置。
        """
        settings = self.copy()
        return settings._to_dict()


class Settings(BaseSettings):
    """
    Settings container pre-populated with headerstore's default settings.
    预先填充了headerstore默认设置的设置容器。

    Dict defaults (such as DEFAULT_REQUEST_HEADERS) are wrapped in BaseSettings
    so their keys can be overridden one by one with a higher priority.
    字典类型的默认值（例如DEFAULT_REQUEST_HEADERS）被包装为BaseSettings，
    以便可以用更高的优先级逐个覆盖其键。
    """

    def __init__(self, values=None, priority='project'):
        super().__init__()
        self.setmodule(default_settings, 'default')
        for name, val in self.items():
            if isinstance(val, dict):
                self.set(name, BaseSettings(val, 'default'), 'default')
        self.update(values, priority)
