"""
packio — wrappers genéricos que serializan su valor en JSON, YAML o TOML.

Exports principales:
    new()                   → factory, JSON por defecto
    new_json / new_yaml / new_toml → constructores directos por formato
    new_wrapper()           → alias histórico de new_json
    Serializer              → interfaz común (Protocol)
    SerdeType               → JSON, YAML, TOML
    EncodeError, DecodeError, PackioError → errores de codec
    zero_value()            → valor cero de un tipo

Uso:
    w = packio.new(Product(name="mate"))            # JSON
    y = packio.new(Product(), packio.SerdeType.YAML)
    copia = w.clone()                               # copia profunda

Sin control de concurrencia: sincronizar afuera si se comparte un wrapper.
"""

from . import config
from .errors import DecodeError, EncodeError, PackioError
from .serialization import (
    JsonWrapper,
    SerdeType,
    Serializer,
    TomlWrapper,
    YamlWrapper,
    new,
    new_json,
    new_toml,
    new_wrapper,
    new_yaml,
)
from .zero import zero_value

__all__ = [
    "new",
    "new_json",
    "new_yaml",
    "new_toml",
    "new_wrapper",
    "Serializer",
    "SerdeType",
    "JsonWrapper",
    "YamlWrapper",
    "TomlWrapper",
    "EncodeError",
    "DecodeError",
    "PackioError",
    "zero_value",
]
