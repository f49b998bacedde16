"""Errores del paquete.

Los codecs (json, PyYAML, tomllib/tomli_w, pydantic) levantan cada uno sus
propias excepciones. Se traducen a un único tipo por dirección conservando el
mensaje original, el formato y la excepción de origen.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from packio.serialization.base import SerdeType


class PackioError(ValueError):
    """Error base de packio."""


class _CodecError(PackioError):
    def __init__(self, fmt: SerdeType, cause: Exception):
        super().__init__(str(cause))
        self.format = fmt
        self.cause = cause


class EncodeError(_CodecError):
    """El codec no pudo representar el valor actual en el formato destino."""


class DecodeError(_CodecError):
    """Los bytes no son sintaxis válida o no encajan en la forma del tipo."""
