"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from mp_sanitizer.config.settings.base import Settings
from mp_sanitizer.config.settings.loaders import SettingsLoader
from mp_sanitizer.config.validation.errors import ConfigError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)


def _default_of(field: dataclasses.Field[Any]) -> Any:
    if field.default is not dataclasses.MISSING:
        return field.default
    if field.default_factory is not dataclasses.MISSING:  # type: ignore[misc]
        return field.default_factory()  # type: ignore[misc]
    return dataclasses.MISSING


class SettingsFactory:
    """Build one settings instance from several loaders plus overrides.

    Each loader contributes only the fields it set away from their default,
    so a later loader never resets a value an earlier one supplied.
    *overrides* win over every loader.  A failing loader aborts the build:
    sanitization must never start from a half-read configuration.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        fields = dataclasses.fields(settings_cls)  # type: ignore[arg-type]
        defaults = {field.name: _default_of(field) for field in fields}

        merged: dict[str, Any] = {}
        for loader in loaders or []:
            instance = loader.load(settings_cls)
            for name, default in defaults.items():
                value = getattr(instance, name)
                if default is dataclasses.MISSING or value != default:
                    merged[name] = value
        merged.update(overrides or {})

        for name, default in defaults.items():
            if default is dataclasses.MISSING and name not in merged:
                raise MissingRequiredSettingError(name)

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}") from exc


__all__ = ["SettingsFactory"]
