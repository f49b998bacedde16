import tomllib
from collections.abc import Mapping
from typing import Any

import tomli_w

from packio.serialization.base import SerdeType
from packio.serialization.wrapper import BaseWrapper, T


class TomlWrapper(BaseWrapper[T]):
    """Serializa el valor como TOML.

    tomllib solo lee, la escritura va por tomli_w. TOML exige que el
    documento sea una tabla y no tiene null: un valor que no baja a un
    mapping, o un campo en None, falla con EncodeError.
    """

    _format = SerdeType.TOML

    def _dumps(self, data: Any) -> str:
        if not isinstance(data, Mapping):
            raise TypeError(
                f"TOML documents must be a table, got {type(data).__name__}"
            )
        return tomli_w.dumps(data)

    def _loads(self, text: str) -> Any:
        return tomllib.loads(text)
