"""Employee store: Cosmos DB container, or a JSON seed file held in memory."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from azure.core.exceptions import AzureError
from azure.cosmos.aio import CosmosClient
from pydantic import TypeAdapter, ValidationError

from hr_analytics.core.config import Settings
from hr_analytics.models.employee import Employee
from hr_analytics.services.filters import FilterCriteria, apply_filter, build_query

logger = logging.getLogger(__name__)

_ACTIVE_QUERY = "SELECT * FROM c WHERE NOT IS_DEFINED(c.isActive) OR c.isActive = true"
_BY_ID_QUERY = "SELECT * FROM c WHERE c.id = @id"

_EMPLOYEE_LIST = TypeAdapter(list[Employee])


class EmployeeRetrievalError(Exception):
    """The employee store could not be queried or updated."""


def load_seed_file(path: str | Path) -> list[Employee]:
    try:
        raw = Path(path).read_bytes()
    except OSError as err:
        raise EmployeeRetrievalError(f"Cannot read seed file {path}: {err}") from err
    try:
        return _EMPLOYEE_LIST.validate_json(raw)
    except ValidationError as err:
        raise EmployeeRetrievalError(f"Invalid seed file {path}: {err}") from err


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EmployeeService:
    def __init__(self) -> None:
        self.client: CosmosClient | None = None
        self.container: Any = None
        self.snapshot: list[Employee] | None = None
        self.initialized: bool = False

    @property
    def backend(self) -> str:
        if self.container is not None:
            return "cosmos_db"
        if self.snapshot is not None:
            return "seed_file"
        return "not_configured"

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        endpoint = settings.COSMOS_DB_ENDPOINT
        key = settings.COSMOS_DB_KEY

        if endpoint and key:
            container_name = settings.COSMOS_DB_EMPLOYEES_CONTAINER
            self.client = CosmosClient(endpoint, key)
            db = self.client.get_database_client(settings.COSMOS_DB_DATABASE)
            self.container = db.get_container_client(container_name)
            self.initialized = True
            logger.info("EmployeeService initialized (container=%s)", container_name)
            return

        if settings.EMPLOYEE_SEED_FILE:
            self.snapshot = load_seed_file(settings.EMPLOYEE_SEED_FILE)
            self.initialized = True
            logger.info(
                "EmployeeService initialized from seed file %s (%d employees)",
                settings.EMPLOYEE_SEED_FILE,
                len(self.snapshot),
            )
            return

        logger.warning("Cosmos DB credentials and seed file missing — service not initialized")

    async def close(self) -> None:
        if self.client:
            await self.client.close()
        self.client = None
        self.container = None
        self.snapshot = None
        self.initialized = False

    async def list_employees(self, criteria: FilterCriteria | None = None) -> list[Employee]:
        criteria = criteria or FilterCriteria()

        if self.snapshot is not None:
            return apply_filter(self.snapshot, criteria)
        if not self.container:
            return []

        query, params = build_query(criteria)
        return await self._query(query, params)

    async def get_active_employees(self) -> list[Employee]:
        if self.snapshot is not None:
            return [e for e in self.snapshot if e.is_active]
        if not self.container:
            return []
        return await self._query(_ACTIVE_QUERY)

    async def get_employee(self, employee_id: str) -> Employee | None:
        if self.snapshot is not None:
            return next((e for e in self.snapshot if e.id == employee_id), None)

        raw = await self._get_raw(employee_id)
        if raw is None:
            return None
        return self._transform_employee(raw)

    async def set_active(self, employee_id: str, is_active: bool) -> Employee | None:
        """Persist a new active flag and return the updated employee."""
        now = _utcnow()

        if self.snapshot is not None:
            for idx, emp in enumerate(self.snapshot):
                if emp.id == employee_id:
                    updated = emp.model_copy(update={"is_active": is_active, "updated_at": now})
                    self.snapshot[idx] = updated
                    logger.info("Employee %s isActive=%s (seed file, not persisted)", employee_id, is_active)
                    return updated
            return None

        raw = await self._get_raw(employee_id)
        if raw is None:
            return None

        raw["isActive"] = is_active
        raw["updatedAt"] = now.isoformat()
        try:
            saved = await self.container.upsert_item(body=raw)
        except AzureError as err:
            raise EmployeeRetrievalError(f"Failed to update employee {employee_id}: {err}") from err

        logger.info("Employee %s isActive=%s", employee_id, is_active)
        return self._transform_employee(saved or raw)

    async def check_connection(self) -> bool:
        if self.snapshot is not None:
            return True
        if not self.container:
            return False
        try:
            query = "SELECT VALUE COUNT(1) FROM c"
            async for _ in self.container.query_items(
                query=query,
                enable_cross_partition_query=True,
            ):
                return True
            return True
        except Exception:
            logger.exception("Cosmos DB connection check failed")
            return False

    async def _get_raw(self, employee_id: str) -> dict[str, Any] | None:
        if not self.container:
            return None

        params: list[dict[str, Any]] = [{"name": "@id", "value": employee_id}]
        try:
            async for item in self.container.query_items(
                query=_BY_ID_QUERY,
                parameters=params,
                enable_cross_partition_query=True,
            ):
                return item
        except AzureError as err:
            raise EmployeeRetrievalError(str(err)) from err
        return None

    async def _query(
        self,
        query: str,
        params: list[dict[str, Any]] | None = None,
    ) -> list[Employee]:
        results: list[Employee] = []
        try:
            async for item in self.container.query_items(
                query=query,
                parameters=params or [],
                enable_cross_partition_query=True,
            ):
                results.append(self._transform_employee(item))
        except AzureError as err:
            raise EmployeeRetrievalError(str(err)) from err
        return results

    def _transform_employee(self, raw: dict[str, Any]) -> Employee:
        data = dict(raw)

        # Fallback: Cosmos system timestamp when the record has no createdAt
        if not data.get("createdAt") and isinstance(data.get("_ts"), int | float):
            data["createdAt"] = datetime.fromtimestamp(data["_ts"], tz=timezone.utc)

        try:
            return Employee.model_validate(data)
        except ValidationError as err:
            raise EmployeeRetrievalError(f"Malformed employee record {raw.get('id')!r}: {err}") from err


employee_service = EmployeeService()
