"""
Generic paginated-CRUD repository shared by every HRMS entity.

`BaseRepository` implements create / read / update / delete / list / exists
once. Entity repositories subclass it and only describe what differs:

    - label / plural_label: display names used in error messages
    - ordering: fixed (column, direction) sequence for list queries
    - date_field: column used by the startDate/endDate range (None disables it)
    - load_options(): relations eager-loaded on every read and write
    - normalize_create() / normalize_update(): input shaping and defaults
    - search_condition() / extra_filters(): list filter building
    - validate_references(): foreign-key existence checks before a write

Every write commits on its own; there is no unit of work spanning several
repository calls. Failures are mapped by `db_error_handler`: writes raise
DataError (500), reads and lists raise ServiceUnavailableError (503).
"""
import logging
import time
from datetime import datetime
from typing import Any, Generic, Mapping, Sequence, Type, TypeVar

from sqlalchemy import ColumnElement, delete, func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.interfaces import LoaderOption

from hrms.database.base import Base
from hrms.exceptions.base import DataError, InvalidFieldError, NotFoundError, ServiceUnavailableError
from hrms.exceptions.mapper import db_error_handler
from .filters import coerce_active_flag, coerce_int, date_range, normalize_search
from .pagination import Page, compute_skip, normalize_page, normalize_size

# Type variable for the model class
ModelType = TypeVar("ModelType", bound=Base)

logger = logging.getLogger(__name__)

SYSTEM_USER_ID = 1
DEFAULT_LOG_INST = 1

# audit columns the repository stamps itself
_MANAGED_ON_CREATE = {"id", "createdate", "updatedby", "updatedate"}
_MANAGED_ON_UPDATE = {"id", "createdate", "createdby", "updatedate", "log_inst"}


class BaseRepository(Generic[ModelType]):
    """
    Generic repository over one SQLAlchemy model.

    Type Parameters:
        ModelType: The SQLAlchemy model class this repository manages.
    """

    label: str = "record"
    plural_label: str | None = None
    ordering: Sequence[tuple[str, str]] = (("updatedate", "desc"), ("createdate", "desc"))
    date_field: str | None = "createdate"

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        """
        Args:
            model: The SQLAlchemy model class (e.g. Branch, not Branch())
            db: The async database session of the current request
        """
        self.model = model
        self.db = db
        self._columns = frozenset(inspect(model).columns.keys())

    @property
    def model_name(self) -> str:
        return self.model.__name__

    @property
    def plural(self) -> str:
        return self.plural_label or f"{self.label}s"

    # =================================================================================================================
    # Entity hooks
    # =================================================================================================================

    def load_options(self) -> list[LoaderOption]:
        """Loader options applied to every query returning entities."""
        return []

    def normalize_create(self, values: dict[str, Any]) -> dict[str, Any]:
        """Entity-specific shaping of a create payload (defaults for optional fields)."""
        return values

    def normalize_update(self, values: dict[str, Any]) -> dict[str, Any]:
        """Entity-specific shaping of the fields supplied to an update."""
        return values

    def search_condition(self, term: str) -> ColumnElement[bool] | None:
        """Predicate for a trimmed, lower-cased search term."""
        return None

    def extra_filters(self, **filters: Any) -> list[ColumnElement[bool]]:
        """Predicates for entity-specific list filters (is_active, foreign keys)."""
        return []

    async def validate_references(self, values: Mapping[str, Any]) -> None:
        """Raise NotFoundError when `values` points at a missing related record."""
        return None

    # =================================================================================================================
    # Create
    # =================================================================================================================

    async def create(self, data: Mapping[str, Any]) -> ModelType:
        """
        Normalize `data`, check its references, insert and commit.

        Returns the stored entity re-read with its eager-loaded relations.

        Raises:
            NotFoundError: a referenced record does not exist.
            DataError: the database rejected the insert.
        """
        logger.debug(
            "repo.create.start",
            extra={
                "model": self.model_name,
                "operation": "create",
                "provided_keys": sorted(data.keys()),
            },
        )
        values = self._prepare_create(data)
        start = time.perf_counter()

        async with db_error_handler(self.db, self.model_name, f"Error creating {self.label}"):
            await self.validate_references(values)

            entity = self.model(**values)
            self.db.add(entity)
            await self.db.flush()
            entity_id = entity.id
            await self.db.commit()

            created = await self._fetch(entity_id, refresh=True)

        logger.info(
            "repo.create.success",
            extra={
                "model": self.model_name,
                "operation": "create",
                "id": entity_id,
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )
        return created

    def _prepare_create(self, data: Mapping[str, Any]) -> dict[str, Any]:
        values = {k: v for k, v in data.items() if k in self._columns and k not in _MANAGED_ON_CREATE}
        ignored = sorted(k for k in data if k not in values)
        if ignored:
            logger.debug(
                "repo.create.ignored_fields",
                extra={"model": self.model_name, "ignored_fields": ignored},
            )

        values = self.normalize_create(values)
        values["is_active"] = coerce_active_flag(values.get("is_active")) or "Y"
        values["createdby"] = coerce_int(values.get("createdby")) or SYSTEM_USER_ID
        values["log_inst"] = coerce_int(values.get("log_inst")) or DEFAULT_LOG_INST
        values["createdate"] = datetime.now()
        return values

    # =================================================================================================================
    # Read
    # =================================================================================================================

    async def get_by_id(self, entity_id: int) -> ModelType | None:
        """
        Fetch one entity (with its eager-loaded relations) by primary key.

        Returns None when no row matches; a failing query raises
        ServiceUnavailableError.
        """
        if coerce_int(entity_id) is None:
            logger.debug("repo.get_by_id.invalid_id", extra={"model": self.model_name, "id": str(entity_id)[:32]})
            return None

        async with db_error_handler(
            self.db,
            self.model_name,
            f"Error finding {self.label} by ID",
            error_cls=ServiceUnavailableError,
        ):
            entity = await self._fetch(entity_id)

        logger.debug(
            "repo.get_by_id",
            extra={"model": self.model_name, "id": entity_id, "found": entity is not None},
        )
        return entity

    async def get_by_id_or_raise(self, entity_id: int) -> ModelType:
        """Like `get_by_id` but raises NotFoundError("<label> not found")."""
        entity = await self.get_by_id(entity_id)
        if entity is None:
            raise NotFoundError(f"{self.label} not found")
        return entity

    async def exists(self, entity_id: Any) -> bool:
        """True when a row with this primary key is stored. Non-numeric ids never exist."""
        key = coerce_int(entity_id)
        if key is None:
            return False

        async with db_error_handler(
            self.db,
            self.model_name,
            f"Error checking {self.label}",
            error_cls=ServiceUnavailableError,
        ):
            result = await self.db.execute(select(self.model.id).where(self.model.id == key).limit(1))
            found = result.scalar() is not None

        logger.debug("repo.exists", extra={"model": self.model_name, "id": key, "exists": found})
        return found

    async def _fetch(self, entity_id: int, *, refresh: bool = False) -> ModelType | None:
        stmt = select(self.model).where(self.model.id == entity_id).options(*self.load_options())
        if refresh:
            # overwrite identity-map state so relations reflect the committed row
            stmt = stmt.execution_options(populate_existing=True)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    # =================================================================================================================
    # Update
    # =================================================================================================================

    async def update(self, entity_id: int, data: Mapping[str, Any]) -> ModelType:
        """
        Merge the supplied fields into an existing entity and commit.

        Only keys present in `data` are normalized and written; `updatedby`
        defaults to the system user and `updatedate` is set to now.

        Raises:
            InvalidFieldError: `data` names no column of the entity.
            NotFoundError: the entity, or a record it references, does not exist.
            DataError: the database rejected the update.
        """
        values = {k: v for k, v in data.items() if k in self._columns and k not in _MANAGED_ON_UPDATE}
        if not values:
            logger.info(
                "repo.update.invalid_fields",
                extra={"model": self.model_name, "id": entity_id, "provided_keys": sorted(data.keys())},
            )
            raise InvalidFieldError(
                f"No updatable field supplied for {self.label}",
                fields=sorted(data.keys()) or None,
            )

        values = self.normalize_update(values)
        if "is_active" in values:
            flag = coerce_active_flag(values["is_active"])
            if flag is None:
                values.pop("is_active")
            else:
                values["is_active"] = flag
        values["updatedby"] = coerce_int(values.get("updatedby")) or SYSTEM_USER_ID
        values["updatedate"] = datetime.now()

        if coerce_int(entity_id) is None:
            raise NotFoundError(f"{self.label} not found")

        start = time.perf_counter()
        async with db_error_handler(self.db, self.model_name, f"Error updating {self.label}"):
            entity = await self._fetch(entity_id)
            if entity is None:
                logger.info("repo.update.not_found", extra={"model": self.model_name, "id": entity_id})
                raise NotFoundError(f"{self.label} not found")

            await self.validate_references(values)

            for field_name, value in values.items():
                setattr(entity, field_name, value)
            await self.db.flush()
            await self.db.commit()

            updated = await self._fetch(entity_id, refresh=True)

        logger.info(
            "repo.update.success",
            extra={
                "model": self.model_name,
                "operation": "update",
                "id": entity_id,
                "updated_fields": sorted(values.keys()),
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )
        return updated

    # =================================================================================================================
    # Delete
    # =================================================================================================================

    async def delete(self, entity_id: int) -> None:
        """
        Hard-delete an entity by primary key.

        A missing id is a DataError, as is a row still referenced elsewhere.
        """
        if coerce_int(entity_id) is None:
            raise DataError(f"Error deleting {self.label}: record to delete does not exist")

        async with db_error_handler(self.db, self.model_name, f"Error deleting {self.label}"):
            result = await self.db.execute(delete(self.model).where(self.model.id == entity_id))
            if result.rowcount == 0:
                await self.db.rollback()
                logger.info("repo.delete.not_found", extra={"model": self.model_name, "id": entity_id})
                raise DataError(f"Error deleting {self.label}: record to delete does not exist")
            await self.db.commit()

        logger.info("repo.delete.success", extra={"model": self.model_name, "operation": "delete", "id": entity_id})

    # =================================================================================================================
    # List
    # =================================================================================================================

    def build_filters(
        self,
        search: Any = None,
        start_date: Any = None,
        end_date: Any = None,
        **filters: Any,
    ) -> list[ColumnElement[bool]]:
        """AND-ed predicates for a list query built from raw inputs."""
        conditions: list[ColumnElement[bool]] = []

        term = normalize_search(search)
        if term:
            condition = self.search_condition(term)
            if condition is not None:
                conditions.append(condition)

        if self.date_field:
            condition = date_range(getattr(self.model, self.date_field), start_date, end_date)
            if condition is not None:
                conditions.append(condition)

        conditions.extend(self.extra_filters(**filters))
        return conditions

    def order_clauses(self) -> list:
        clauses = []
        for field_name, direction in self.ordering:
            column = getattr(self.model, field_name)
            # never-updated rows sort after updated ones on every backend
            clauses.append(column.asc() if direction == "asc" else column.desc().nulls_last())
        return clauses

    async def list(
        self,
        page: Any = None,
        size: Any = None,
        search: Any = None,
        start_date: Any = None,
        end_date: Any = None,
        **filters: Any,
    ) -> Page[ModelType]:
        """
        One ordered page of entities matching the filters, plus counts.

        The page query and the count query are separate round trips run with
        identical predicates.

        Raises:
            ServiceUnavailableError: either query failed.
        """
        page = normalize_page(page)
        size = normalize_size(size)
        skip = compute_skip(page, size)
        conditions = self.build_filters(search=search, start_date=start_date, end_date=end_date, **filters)

        async with db_error_handler(
            self.db,
            self.model_name,
            f"Error retrieving {self.plural}",
            error_cls=ServiceUnavailableError,
        ):
            stmt = (
                select(self.model)
                .where(*conditions)
                .options(*self.load_options())
                .order_by(*self.order_clauses())
                .offset(skip)
                .limit(size)
            )
            rows = list((await self.db.execute(stmt)).scalars().all())

            count_stmt = select(func.count()).select_from(self.model).where(*conditions)
            total_count = (await self.db.execute(count_stmt)).scalar_one()

        logger.debug(
            "repo.list",
            extra={
                "model": self.model_name,
                "page": page,
                "size": size,
                "filters": len(conditions),
                "returned": len(rows),
                "total_count": total_count,
            },
        )
        return Page(data=rows, current_page=page, size=size, total_count=total_count)
