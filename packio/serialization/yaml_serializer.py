from typing import Any

import yaml

from packio.serialization.base import SerdeType
from packio.serialization.wrapper import BaseWrapper, T


class YamlWrapper(BaseWrapper[T]):
    """Serializa el valor como YAML (safe_dump / safe_load de PyYAML).

    Un documento vacío se carga como None, que solo es válido si el tipo
    del valor lo admite.
    """

    _format = SerdeType.YAML
    _encode_errors = BaseWrapper._encode_errors + (yaml.YAMLError,)
    _decode_errors = BaseWrapper._decode_errors + (yaml.YAMLError,)

    def _dumps(self, data: Any) -> str:
        return yaml.safe_dump(data, allow_unicode=True, sort_keys=False)

    def _loads(self, text: str) -> Any:
        return yaml.safe_load(text)
