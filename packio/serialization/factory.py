from typing import Any

from packio.serialization.base import SerdeType, Serializer
from packio.serialization.json_serializer import JsonWrapper
from packio.serialization.toml_serializer import TomlWrapper
from packio.serialization.wrapper import T
from packio.serialization.yaml_serializer import YamlWrapper

_WRAPPERS: dict[SerdeType, type] = {
    SerdeType.JSON: JsonWrapper,
    SerdeType.YAML: YamlWrapper,
    SerdeType.TOML: TomlWrapper,
}


def _resolve_format(fmt: SerdeType | str | None) -> SerdeType:
    if isinstance(fmt, SerdeType):
        return fmt
    if isinstance(fmt, str):
        try:
            return SerdeType(fmt.lower())
        except ValueError:
            pass
    return SerdeType.JSON


def new(
    value: T,
    fmt: SerdeType | str | None = None,
    *,
    value_type: Any = None,
) -> Serializer[T]:
    """Retorna un wrapper del formato pedido.

    Args:
        value: Valor inicial a envolver.
        fmt: SerdeType o su nombre ("json", "yaml", "toml"). Si es None o
             no se reconoce, usa JSON. Nunca falla.
        value_type: Tipo declarado del valor. Si es None se infiere con
                    type(value); pasarlo explícito para genéricos como
                    list[str] o para Optional.

    Returns:
        Instancia de Serializer (JsonWrapper, YamlWrapper o TomlWrapper).
    """
    wrapper_cls = _WRAPPERS.get(_resolve_format(fmt), JsonWrapper)
    return wrapper_cls(value, value_type=value_type)


def new_json(value: T, *, value_type: Any = None) -> JsonWrapper[T]:
    return JsonWrapper(value, value_type=value_type)


def new_yaml(value: T, *, value_type: Any = None) -> YamlWrapper[T]:
    return YamlWrapper(value, value_type=value_type)


def new_toml(value: T, *, value_type: Any = None) -> TomlWrapper[T]:
    return TomlWrapper(value, value_type=value_type)


# Alias histórico: siempre JSON, retorna el tipo concreto.
new_wrapper = new_json
