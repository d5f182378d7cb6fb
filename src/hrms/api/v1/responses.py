"""Success envelope helpers used by every router."""
from typing import Any


def success(message: str | None, data: Any = None) -> dict[str, Any]:
    return {"message": message, "data": data}
