#!/usr/bin/env python3
"""Load employee records from a JSON file into the Cosmos DB container.

Run from the backend/ directory:

    python3 scripts/seed_employees.py data/employees.json [--dry-run] [--verbose]

Each document is validated against the Employee model before upload.
Existing records with the same id are replaced.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from azure.cosmos.aio import CosmosClient  # noqa: E402
from pydantic import ValidationError  # noqa: E402

from hr_analytics.core.config import Settings  # noqa: E402
from hr_analytics.models.employee import Employee  # noqa: E402

logger = logging.getLogger(__name__)


def build_document(raw: dict[str, Any], now: datetime | None = None) -> dict[str, Any]:
    """Validate a raw record and return the camelCase document to store.

    Raises ``pydantic.ValidationError`` for records missing required fields.
    """
    now = now or datetime.now(timezone.utc)
    employee = Employee.model_validate(raw)
    if employee.created_at is None:
        employee.created_at = now
    employee.updated_at = now
    return employee.model_dump(mode="json", by_alias=True)


def read_records(path: str) -> list[dict[str, Any]]:
    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON array of employee records")
    return data


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Seed the employee container from a JSON file",
    )
    parser.add_argument("file", help="Path to a JSON array of employee records")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate documents without uploading",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return parser.parse_args(argv)


async def seed(args: argparse.Namespace) -> tuple[int, int]:
    settings = Settings()
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")

    records = read_records(args.file)
    logger.info("Read %d records from %s", len(records), args.file)

    documents: list[dict[str, Any]] = []
    failed = 0
    for idx, raw in enumerate(records):
        try:
            documents.append(build_document(raw))
        except ValidationError as err:
            failed += 1
            logger.error("Record %d (id=%s) is invalid: %s", idx, raw.get("id"), err)

    if args.dry_run:
        logger.info("[DRY RUN] %d valid, %d invalid. Nothing uploaded.", len(documents), failed)
        return len(documents), failed

    if not settings.COSMOS_DB_ENDPOINT or not settings.COSMOS_DB_KEY:
        raise SystemExit("COSMOS_DB_ENDPOINT and COSMOS_DB_KEY must be set to upload")

    succeeded = 0
    cosmos_client = CosmosClient(settings.COSMOS_DB_ENDPOINT, settings.COSMOS_DB_KEY)
    try:
        db = cosmos_client.get_database_client(settings.COSMOS_DB_DATABASE)
        container = db.get_container_client(settings.COSMOS_DB_EMPLOYEES_CONTAINER)

        for doc in documents:
            try:
                await container.upsert_item(body=doc)
                succeeded += 1
                logger.debug("Upserted %s", doc["id"])
            except Exception:
                logger.exception("Upload of %s failed — continuing...", doc["id"])
                failed += 1
    finally:
        await cosmos_client.close()

    logger.info("Seeding complete: %d succeeded, %d failed", succeeded, failed)
    return succeeded, failed


def main() -> None:
    args = parse_args()
    asyncio.run(seed(args))


if __name__ == "__main__":
    main()
