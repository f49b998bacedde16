from packio.serialization.base import SerdeType, Serializer
from packio.serialization.factory import (
    new,
    new_json,
    new_toml,
    new_wrapper,
    new_yaml,
)
from packio.serialization.json_serializer import JsonWrapper
from packio.serialization.toml_serializer import TomlWrapper
from packio.serialization.yaml_serializer import YamlWrapper

__all__ = [
    "SerdeType",
    "Serializer",
    "JsonWrapper",
    "YamlWrapper",
    "TomlWrapper",
    "new",
    "new_json",
    "new_yaml",
    "new_toml",
    "new_wrapper",
]
