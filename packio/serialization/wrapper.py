"""
Wrapper base compartido por las tres estrategias de formato.

El valor se baja a datos planos con un TypeAdapter de pydantic (respetando
aliases de campos) y el codec de cada formato solo convierte datos planos
↔ texto. Al decodificar, los datos planos se validan en modo JSON estricto:
sin coerción de "12" a número, pero enums y fechas aceptan su forma en texto.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import TypeAdapter
from pydantic_core import to_json

from packio import config
from packio.errors import DecodeError, EncodeError
from packio.serialization.base import SerdeType, Serializer
from packio.zero import fill_nulls, zero_value

T = TypeVar("T")

_logger = logging.getLogger("packio.codec")
_clone_logger = logging.getLogger("packio.clone")


@lru_cache(maxsize=256)
def _adapter_for(value_type: Any) -> TypeAdapter:
    return TypeAdapter(value_type)


class BaseWrapper(Generic[T]):
    """Contiene un valor de tipo T y delega encode/decode en un codec."""

    _format: ClassVar[SerdeType]
    # ValueError cubre JSONDecodeError, TOMLDecodeError, UnicodeDecodeError,
    # ValidationError y PydanticSerializationError. RecursionError aparece con
    # documentos muy anidados en los tres codecs.
    _encode_errors: ClassVar[tuple[type[Exception], ...]] = (
        TypeError,
        ValueError,
        RecursionError,
    )
    _decode_errors: ClassVar[tuple[type[Exception], ...]] = (ValueError, RecursionError)

    def __init__(self, value: T, value_type: Any = None):
        if value_type is None:
            value_type = Any if value is None else type(value)
        self._value = value
        self._value_type = value_type
        self._adapter = _adapter_for(value_type)

    @property
    def format(self) -> SerdeType:
        return self._format

    @property
    def value_type(self) -> Any:
        return self._value_type

    def _dumps(self, data: Any) -> str:
        raise NotImplementedError

    def _loads(self, text: str) -> Any:
        raise NotImplementedError

    def serialize(self) -> bytes:
        try:
            data = self._adapter.dump_python(self._value, mode="json", by_alias=True)
            text = self._dumps(data)
        except self._encode_errors as e:
            _logger.debug("%s encode failed: %s", self._format.value, e)
            raise EncodeError(self._format, e) from e
        return text.encode("utf-8")

    def deserialize(self, data: bytes | str) -> None:
        # Solo se asigna si el decode completo salió bien.
        self._value = self._decode(data)

    def _decode(self, data: bytes | str) -> T:
        try:
            if isinstance(data, (bytes, bytearray)):
                data = data.decode("utf-8")
            plain = fill_nulls(self._loads(data), self._value_type)
            return self._adapter.validate_json(to_json(plain), strict=True)
        except self._decode_errors as e:
            _logger.debug("%s decode failed: %s", self._format.value, e)
            raise DecodeError(self._format, e) from e

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        self._value = value

    def clone(self, empty: bool = False) -> Serializer[T]:
        if empty:
            return self._zero()

        try:
            value = self._decode(self.serialize())
        except (EncodeError, DecodeError) as e:
            if config.STRICT_CLONE:
                raise
            _clone_logger.warning(
                "%s clone round trip failed, returning zero value: %s",
                self._format.value,
                e,
            )
            return self._zero()

        return type(self)(value, value_type=self._value_type)

    def _zero(self) -> Serializer[T]:
        return type(self)(zero_value(self._value_type), value_type=self._value_type)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"
