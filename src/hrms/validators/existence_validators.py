"""
Foreign-key existence checks used by repositories before a write.

A repository that references another entity holds the referenced entity's
repository (anything with `async exists(id) -> bool`) and calls
`ensure_exists` for each reference it is about to store, so a dangling id
surfaces as a 404 instead of a constraint failure from the database.
"""
import logging
from typing import Any, Protocol, runtime_checkable

from hrms.exceptions.base import NotFoundError

logger = logging.getLogger(__name__)


@runtime_checkable
class SupportsExists(Protocol):
    async def exists(self, entity_id: Any) -> bool: ...


async def ensure_exists(checker: SupportsExists, entity_id: Any, display_name: str) -> None:
    """
    Raise NotFoundError("<display_name> not found") unless `entity_id` names a
    stored record. A missing id (None) counts as not found.
    """
    if entity_id is None or not await checker.exists(entity_id):
        logger.info(
            "validators.reference_missing",
            extra={"reference": display_name, "id": entity_id},
        )
        raise NotFoundError(f"{display_name} not found")
