"""
Normalizers applied to environment values before pydantic validates them
against their Literal choices (`LOG_LEVEL=debug ` is accepted as "DEBUG").
"""


def _clean(value):
    if value is None or not isinstance(value, str):
        return value
    return value.strip()


def to_uppercase(value: str | None) -> str | None:
    value = _clean(value)
    return value.upper() if isinstance(value, str) else value


def to_lowercase(value: str | None) -> str | None:
    value = _clean(value)
    return value.lower() if isinstance(value, str) else value
