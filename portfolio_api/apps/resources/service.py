"""
Generic CRUD over registered resources
"""
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence, Tuple

from fastapi import HTTPException, status
from sqlalchemy import delete, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlmodel import SQLModel

from portfolio_api.apps.resources.payload import prepare_payload
from portfolio_api.apps.resources.registry import ResourceSpec
from portfolio_api.common.fields import utc_now
from portfolio_api.common.retry import with_retry

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 50
SEARCH_COLUMNS = ("title", "name")
TOUCH_COLUMNS = ("updatedAt", "updated_at")


def serialize(instance: SQLModel, relations: Sequence[str] = ()) -> Dict[str, Any]:
    """Model instance as a dict, with loaded relations nested under their attribute name"""
    data = instance.model_dump()
    for relation in relations:
        related = getattr(instance, relation, None)
        data[relation] = related.model_dump() if related is not None else None
    return data


def parse_positive_int(value: Optional[str], default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


class ResourceService:
    """
    CRUD for one request. Reads go through the retry wrapper, writes never do.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _read(self, func: Callable[[], Awaitable[Any]]) -> Any:
        async def attempt():
            try:
                return await func()
            except Exception:
                # Leave the session usable for the next attempt
                await self.session.rollback()
                raise

        return await with_retry(attempt)

    def _load_options(self, spec: ResourceSpec) -> List[Any]:
        return [selectinload(getattr(spec.model, relation)) for relation in spec.relations]

    def _touch(self, spec: ResourceSpec, values: Dict[str, Any]) -> Dict[str, Any]:
        for column in TOUCH_COLUMNS:
            if spec.has_column(column):
                values[column] = utc_now()
        return values

    async def list_items(
        self,
        spec: ResourceSpec,
        page: Optional[str] = None,
        limit: Optional[str] = None,
        search: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Newest first, paginated with page/limit; optional case-insensitive search on title/name"""
        page_number = parse_positive_int(page, DEFAULT_PAGE)
        page_size = parse_positive_int(limit, DEFAULT_LIMIT)
        model = spec.model
        table = model.__table__

        stmt = select(model).options(*self._load_options(spec))
        if search:
            searchable = [table.c[name] for name in SEARCH_COLUMNS if spec.has_column(name)]
            if searchable:
                # autoescape makes % and _ in the term match literally
                stmt = stmt.where(or_(*[column.icontains(search, autoescape=True) for column in searchable]))
        stmt = stmt.order_by(table.c.id.desc()).limit(page_size).offset((page_number - 1) * page_size)

        async def run():
            result = await self.session.execute(stmt)
            return result.scalars().all()

        rows = await self._read(run)
        return [serialize(row, spec.relations) for row in rows]

    async def get_one(self, spec: ResourceSpec, item_id: int) -> Dict[str, Any]:
        model = spec.model
        stmt = (
            select(model)
            .options(*self._load_options(spec))
            .where(model.__table__.c.id == item_id)
        )
        result = await self.session.execute(stmt)
        item = result.scalars().first()
        if item is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
        return serialize(item, spec.relations)

    async def _latest_row(self, spec: ResourceSpec) -> Optional[Dict[str, Any]]:
        table = spec.model.__table__

        async def run():
            result = await self.session.execute(
                select(*table.c).order_by(table.c.id.desc()).limit(1)
            )
            return result.mappings().first()

        row = await self._read(run)
        return dict(row) if row is not None else None

    async def get_singleton(self, spec: ResourceSpec) -> Dict[str, Any]:
        """Latest row by id, or an empty object when the table is empty"""
        return await self._latest_row(spec) or {}

    async def _insert(self, spec: ResourceSpec, values: Dict[str, Any]) -> Dict[str, Any]:
        table = spec.model.__table__
        result = await self.session.execute(insert(table).values(**values).returning(*table.c))
        row = dict(result.mappings().one())
        await self.session.commit()
        return row

    async def _update(self, spec: ResourceSpec, item_id: int, values: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        table = spec.model.__table__
        if not values:
            result = await self.session.execute(select(*table.c).where(table.c.id == item_id))
            row = result.mappings().first()
            return dict(row) if row is not None else None

        result = await self.session.execute(
            update(table).where(table.c.id == item_id).values(**values).returning(*table.c)
        )
        row = result.mappings().first()
        await self.session.commit()
        return dict(row) if row is not None else None

    async def create(self, spec: ResourceSpec, body: Dict[str, Any]) -> Tuple[int, Dict[str, Any]]:
        """
        Insert a row and return (status_code, row).

        Singletons are upserted: once a row exists, POST updates the latest
        row (200) instead of inserting a second one (201).
        """
        values = prepare_payload(spec, body)

        if spec.singleton:
            latest = await self._latest_row(spec)
            if latest is not None:
                updated = await self._update(spec, latest["id"], self._touch(spec, values))
                logger.info(f"Updated singleton {spec.name} (id {latest['id']})")
                return status.HTTP_200_OK, updated

        created = await self._insert(spec, values)
        logger.info(f"Created {spec.name} (id {created.get('id')})")
        return status.HTTP_201_CREATED, created

    async def update(self, spec: ResourceSpec, item_id: int, body: Dict[str, Any]) -> Dict[str, Any]:
        values = self._touch(spec, prepare_payload(spec, body))
        updated = await self._update(spec, item_id, values)
        if updated is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
        logger.info(f"Updated {spec.name} (id {item_id})")
        return updated

    async def delete(self, spec: ResourceSpec, item_id: int) -> Dict[str, Any]:
        table = spec.model.__table__
        await self.session.execute(delete(table).where(table.c.id == item_id))
        await self.session.commit()
        logger.info(f"Deleted {spec.name} (id {item_id})")
        return {"success": True}

    async def bulk_delete(self, spec: ResourceSpec, ids: List[int]) -> Dict[str, Any]:
        """Delete every row in ids with a single statement"""
        table = spec.model.__table__
        result = await self.session.execute(delete(table).where(table.c.id.in_(ids)))
        await self.session.commit()
        deleted = result.rowcount if result.rowcount is not None and result.rowcount >= 0 else len(ids)
        logger.info(f"Bulk deleted {deleted}/{len(ids)} {spec.name}")
        return {"success": True, "count": deleted, "requested": len(ids)}
