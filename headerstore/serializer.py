"""
Serialization utilities for headerstore.
headerstore的序列化实用工具。

Serializer classes that turn Python objects into JSON or pickle payloads and
back, plus shortcuts that apply them to HeaderStore through the dict form
produced by headerstore.utils.headerser.
将Python对象转换为JSON或pickle数据并转换回来的序列化器类，
以及通过headerstore.utils.headerser生成的字典形式将其应用于HeaderStore的快捷函数。
"""

import pickle
from abc import ABCMeta, abstractmethod

import ujson

from headerstore.utils.headerser import headers_from_dict, headers_to_dict

__all__ = ['PickleSerializer', 'JsonSerializer', 'AbsSerializer', 'dumps_headers', 'loads_headers']


class AbsSerializer(object, metaclass=ABCMeta):
    """
    Abstract base class for serializers.
    序列化器的抽象基类。
    """

    @staticmethod
    @abstractmethod
    def loads(s):
        """Deserialize a payload to a Python object."""
        pass

    @staticmethod
    @abstractmethod
    def dumps(obj):
        """Serialize a Python object to a payload."""
        pass


class PickleSerializer(AbsSerializer):
    """
    Serializer that uses Python's pickle module.
    使用Python的pickle模块的序列化器。

    Warning:
        Pickle is not secure against maliciously constructed data. Never unpickle
        data received from untrusted or unauthenticated sources.
        Pickle对恶意构造的数据不安全。切勿对来自不受信任的来源的数据进行反序列化。
    """

    @staticmethod
    def loads(s):
        return pickle.loads(s)

    @staticmethod
    def dumps(obj):
        # protocol=-1 means use the highest available protocol
        # protocol=-1表示使用最高可用的协议
        return pickle.dumps(obj, protocol=-1)


class JsonSerializer(AbsSerializer):
    """
    Serializer that uses the ujson module.
    使用ujson模块的序列化器。

    Only JSON types (dict, list, str, int, float, bool, None) can be
    serialized, but the output is human-readable and safe to load from
    untrusted sources.
    只能序列化JSON类型，但输出是人类可读的，并且可以安全地从不受信任的来源加载。
    """

    @staticmethod
    def loads(s):
        return ujson.loads(s)

    @staticmethod
    def dumps(obj):
        return ujson.dumps(obj, ensure_ascii=False)


def dumps_headers(headers, serializer=JsonSerializer):
    """
    Serialize a HeaderStore, keeping original names and unjoined values.
    序列化HeaderStore，保留原始名称和未连接的值。

    Args:
        headers: The HeaderStore to serialize.
                要序列化的HeaderStore。
        serializer: The serializer class to use. Defaults to JsonSerializer.
                   要使用的序列化器类。默认为JsonSerializer。
    """
    return serializer.dumps(headers_to_dict(headers))


def loads_headers(s, serializer=JsonSerializer):
    """
    Rebuild a HeaderStore from the output of dumps_headers().
    从dumps_headers()的输出重建HeaderStore。
    """
    return headers_from_dict(serializer.loads(s))
