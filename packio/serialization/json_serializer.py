import json
from typing import Any

from packio.serialization.base import SerdeType
from packio.serialization.wrapper import BaseWrapper, T


class JsonWrapper(BaseWrapper[T]):
    """Serializa el valor como JSON. Formato por defecto del proyecto."""

    _format = SerdeType.JSON

    def _dumps(self, data: Any) -> str:
        return json.dumps(data, ensure_ascii=False, allow_nan=False)

    def _loads(self, text: str) -> Any:
        return json.loads(text)
