"""Startup config snapshot with secrets masked."""

from pydantic_settings import BaseSettings

from givepay.common.logging import logger

SECRET_MARKERS = ("key", "secret", "password", "token")


def redact_config(config: BaseSettings, fields: list[str]) -> dict[str, object]:
    """Effective values of `fields`, with secret-looking ones masked."""

    snapshot: dict[str, object] = {}
    for name in fields:
        value = getattr(config, name)
        if any(marker in name.lower() for marker in SECRET_MARKERS):
            value = "<redacted>" if value else "<unset>"
        snapshot[name] = value
    return snapshot


def log_startup_config(config: BaseSettings, fields: list[str]) -> dict[str, object]:
    """Log the effective checkout config once at startup and return it."""

    snapshot = {"service": config.service_name, **redact_config(config, fields)}
    logger.info("startup config loaded", extra={"startup_config": snapshot})
    return snapshot
