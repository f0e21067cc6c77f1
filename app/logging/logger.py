import logging
import sys


class Log:
    """Centralized logging; keyword fields are rendered as ``key=value`` pairs."""

    _logger: logging.Logger = logging.getLogger("resource_registry")

    @classmethod
    def configure(cls, log_level: str, app_env: str = "dev") -> None:
        """Set the level and install a single stdout handler tagged with the env."""
        cls._logger.setLevel(log_level.upper())
        cls._logger.propagate = False
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter(
                    f"%(asctime)s [%(levelname)s] ({app_env}) %(message)s"
                )
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **fields: object) -> None:
        cls._logger.info(cls._render(message, fields))

    @classmethod
    def warning(cls, message: str, **fields: object) -> None:
        cls._logger.warning(cls._render(message, fields))

    @classmethod
    def error(cls, message: str, **fields: object) -> None:
        cls._logger.error(cls._render(message, fields))

    @classmethod
    def debug(cls, message: str, **fields: object) -> None:
        cls._logger.debug(cls._render(message, fields))

    @staticmethod
    def _render(message: str, fields: dict[str, object]) -> str:
        if not fields:
            return message
        pairs = " ".join(f"{key}={value!r}" for key, value in fields.items())
        return f"{message} {pairs}"
