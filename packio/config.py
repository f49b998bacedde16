import logging
import os

from dotenv import dotenv_values, find_dotenv


def _read_dotenv() -> dict[str, str | None]:
    """Lee el .env del directorio de trabajo sin tocar os.environ."""
    path = find_dotenv(usecwd=True)
    return dotenv_values(path) if path else {}


_DOTENV = _read_dotenv()


def _getenv(key: str, default: str) -> str:
    # Las variables del proceso tienen prioridad sobre el .env
    value = os.getenv(key)
    if value is None:
        value = _DOTENV.get(key) or default
    return value


# Clone: si es true, un fallo del round trip se propaga en vez de degradar
# a un wrapper con el valor cero.
STRICT_CLONE = _getenv("PACKIO_STRICT_CLONE", "false").lower() == "true"

# Logging
LOG_LEVEL = _getenv("PACKIO_LOG_LEVEL", "WARNING").upper()


def configure_logging(level: str | None = None) -> None:
    """Aplica el nivel al logger raíz del paquete. No instala handlers."""
    logging.getLogger("packio").setLevel(level or LOG_LEVEL)
