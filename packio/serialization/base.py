from __future__ import annotations

from enum import Enum
from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


class SerdeType(str, Enum):
    """Formatos soportados. JSON es el default cuando no se indica ninguno."""
    JSON = "json"
    YAML = "yaml"
    TOML = "toml"


@runtime_checkable
class Serializer(Protocol[T]):
    """Interfaz unificada para serializar el valor envuelto.

    Implementaciones concretas: JsonWrapper, YamlWrapper, TomlWrapper.
    El formato se fija al construir y no cambia durante la vida del wrapper.
    Sin control de concurrencia: si se comparte entre threads, sincronizar
    afuera.
    """

    @property
    def format(self) -> SerdeType:
        """Formato con el que se codifica y decodifica."""
        ...

    def serialize(self) -> bytes:
        """Codifica el valor actual. Nunca lo modifica.

        Raises:
            EncodeError: el codec no puede representar el valor.
        """
        ...

    def deserialize(self, data: bytes | str) -> None:
        """Decodifica `data` y reemplaza el valor actual.

        Raises:
            DecodeError: sintaxis inválida o tipos que no coinciden.
        """
        ...

    def get(self) -> T:
        """Retorna el valor actual, sin copia defensiva."""
        ...

    def set(self, value: T) -> None:
        """Reemplaza el valor actual sin validar."""
        ...

    def clone(self, empty: bool = False) -> Serializer[T]:
        """Nuevo wrapper del mismo formato.

        Con `empty=True` contiene el valor cero del tipo; si no, una copia
        profunda obtenida haciendo encode → decode con el propio codec.
        Si ese round trip falla, retorna un wrapper con el valor cero
        (ver PACKIO_STRICT_CLONE).
        """
        ...
