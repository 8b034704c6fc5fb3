import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from pydantic import ValidationError
from sqlalchemy import func, insert, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from todoserver.database import Base, build_engine, build_sessionmaker
from todoserver.errors import PersistenceFailure, TodoConflict, TodoNotFound
from todoserver.models.todo import TodoRow
from todoserver.repositories.base import TodoStore
from todoserver.schemas.todo import Todo

logger = logging.getLogger(__name__)


class SqlTodoStore(TodoStore):
    """Todos persisted in the ``todos`` table.

    Transactions go through the engine one at a time, so callers see each
    operation as atomic. ``toggle`` flips the flag inside the UPDATE itself
    rather than reading it first, which keeps concurrent toggles of one id
    from losing each other.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.sessionmaker = build_sessionmaker(engine)
        self._lock = asyncio.Lock()

    @classmethod
    def from_url(cls, database_url: str) -> "SqlTodoStore":
        return cls(build_engine(database_url))

    async def create_schema(self) -> None:
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as exc:
            raise PersistenceFailure(f"could not create schema: {exc}") from exc

    async def close(self) -> None:
        await self.engine.dispose()

    async def list(self) -> list[Todo]:
        async with self._session() as db:
            result = await db.execute(select(TodoRow).order_by(TodoRow.position))
            return [_to_todo(row) for row in result.scalars().all()]

    async def get(self, todo_id: int) -> Todo:
        async with self._session() as db:
            row = await db.get(TodoRow, todo_id)
            if row is None:
                raise TodoNotFound(todo_id)
            return _to_todo(row)

    async def insert(self, todo: Todo) -> None:
        next_position = select(func.coalesce(func.max(TodoRow.position), 0) + 1).scalar_subquery()
        stmt = insert(TodoRow).values(
            id=todo.id,
            text=todo.text,
            completed=todo.completed,
            position=next_position,
        )
        async with self._session() as db:
            try:
                await db.execute(stmt)
                await db.commit()
            except IntegrityError as exc:
                logger.debug("insert rejected for todo %s: %s", todo.id, exc.orig)
                raise TodoConflict(todo.id) from None

    async def update(self, todo: Todo) -> None:
        stmt = (
            update(TodoRow)
            .where(TodoRow.id == todo.id)
            .values(text=todo.text, completed=todo.completed)
        )
        async with self._session() as db:
            res = await db.execute(stmt)
            if not res.rowcount:
                raise TodoNotFound(todo.id)
            await db.commit()

    async def toggle(self, todo_id: int) -> bool:
        stmt = (
            update(TodoRow)
            .where(TodoRow.id == todo_id)
            .values(completed=~TodoRow.completed)
        )
        async with self._session() as db:
            res = await db.execute(stmt)
            if not res.rowcount:
                raise TodoNotFound(todo_id)
            completed = await db.scalar(
                select(TodoRow.completed).where(TodoRow.id == todo_id)
            )
            await db.commit()
        return bool(completed)

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[AsyncSession]:
        async with self._lock:
            async with self.sessionmaker() as db:
                try:
                    yield db
                except (SQLAlchemyError, OverflowError) as exc:
                    raise PersistenceFailure(str(exc)) from exc


def _to_todo(row: TodoRow) -> Todo:
    try:
        return Todo.model_validate(row, from_attributes=True)
    except ValidationError as exc:
        raise PersistenceFailure(f"malformed todo row {row.id!r}") from exc
