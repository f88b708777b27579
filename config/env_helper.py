"""Helpers for reading settings from the process environment."""

import os

from django.core.exceptions import ImproperlyConfigured


def get_env(var_name: str, default=None, required: bool = False):
    value = os.environ.get(var_name, default)
    if required and value in (None, ""):
        raise ImproperlyConfigured(f"Missing required environment variable: {var_name}")
    return value


def get_bool_env(var_name: str, default: bool = False) -> bool:
    value = os.environ.get(var_name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def get_int_env(var_name: str, default: int) -> int:
    value = os.environ.get(var_name)
    if value in (None, ""):
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ImproperlyConfigured(f"Environment variable {var_name} must be an integer, got {value!r}") from exc


def get_list_env(var_name: str, default: str = "") -> list[str]:
    return [item.strip() for item in os.environ.get(var_name, default).split(",") if item.strip()]
