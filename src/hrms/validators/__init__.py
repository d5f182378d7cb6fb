from .existence_validators import SupportsExists, ensure_exists

__all__ = ["SupportsExists", "ensure_exists"]
