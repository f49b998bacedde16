"""
Valor cero — el equivalente a "todos los campos en su valor vacío".

Python no tiene un valor cero por tipo, así que se deriva del tipo declarado:
  - None / Any / Optional[...]  → None
  - Enum, Literal               → primer miembro
  - BaseModel, dataclass        → instancia con defaults; los campos
                                  requeridos reciben su propio valor cero
  - TypedDict                   → dict con las claves requeridas en cero
  - resto                       → tp() ("", 0, 0.0, False, [], {}) o None
"""

from __future__ import annotations

import dataclasses
import types
from enum import Enum
from typing import (
    Annotated,
    Any,
    Literal,
    Union,
    get_args,
    get_origin,
    get_type_hints,
    is_typeddict,
)

from pydantic import BaseModel

_NONE_TYPE = type(None)


def zero_value(tp: Any) -> Any:
    if tp is None or tp is _NONE_TYPE or tp is Any:
        return None

    origin = get_origin(tp)
    args = get_args(tp)

    if origin is Union or origin is types.UnionType:
        if _NONE_TYPE in args:
            return None
        return zero_value(args[0])
    if origin is Literal:
        return args[0]
    if origin is Annotated:
        return zero_value(args[0])
    if origin is not None:
        # list[str] → list, dict[str, int] → dict
        tp = origin

    if is_typeddict(tp):
        hints = get_type_hints(tp)
        return {key: zero_value(hints[key]) for key in tp.__required_keys__}

    if not isinstance(tp, type):
        return None

    if issubclass(tp, BaseModel):
        required = {
            name: zero_value(field.annotation)
            for name, field in tp.model_fields.items()
            if field.is_required()
        }
        return tp.model_construct(**required)

    if dataclasses.is_dataclass(tp):
        hints = get_type_hints(tp)
        required = {
            f.name: zero_value(hints.get(f.name, Any))
            for f in dataclasses.fields(tp)
            if f.init
            and f.default is dataclasses.MISSING
            and f.default_factory is dataclasses.MISSING
        }
        return tp(**required)

    if issubclass(tp, Enum):
        return next(iter(tp))

    try:
        return tp()
    except TypeError:
        return None


_MISSING = object()


def _field_annotations(tp: Any) -> dict[str, Any]:
    """Anotación por clave (nombre y alias) para modelos, dataclasses y TypedDict."""
    origin = get_origin(tp)
    if origin is Annotated:
        return _field_annotations(get_args(tp)[0])
    if origin is Union or origin is types.UnionType:
        non_null = [arg for arg in get_args(tp) if arg is not _NONE_TYPE]
        return _field_annotations(non_null[0]) if len(non_null) == 1 else {}

    if isinstance(tp, type) and issubclass(tp, BaseModel):
        annotations = {}
        for name, field in tp.model_fields.items():
            annotations[name] = field.annotation
            if field.alias:
                annotations[field.alias] = field.annotation
        return annotations
    if is_typeddict(tp) or dataclasses.is_dataclass(tp):
        return get_type_hints(tp)
    return {}


def fill_nulls(data: Any, tp: Any) -> Any:
    """Reemplaza null por el valor cero en campos que no admiten None.

    Un null en el documento deja el campo en su valor cero, igual que si
    no estuviera. Los campos Optional conservan el None.
    """
    if not isinstance(data, dict):
        return data
    annotations = _field_annotations(tp)
    if not annotations:
        return data

    filled = {}
    for key, value in data.items():
        annotation = annotations.get(key, _MISSING)
        if annotation is _MISSING:
            filled[key] = value
        elif value is None:
            filled[key] = zero_value(annotation)
        else:
            filled[key] = fill_nulls(value, annotation)
    return filled
