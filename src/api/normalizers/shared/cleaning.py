"""Remoção recursiva de valores nulos."""

from __future__ import annotations

from typing import Any


def clean_nulls(value: Any) -> Any:
    """Remove chaves/itens None de dicts e listas, recursivamente.

    Strings vazias, zeros e coleções vazias são preservados.
    """
    if isinstance(value, dict):
        return {k: clean_nulls(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [clean_nulls(item) for item in value if item is not None]
    return value
