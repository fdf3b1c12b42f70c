"""
SQLAlchemy-backed key-value store.

One row per key, JSON in a text column. Suitable for a kiosk or
server-side session where browser storage is not available.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, String, Text, delete
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from rigcart.config import get_settings


# ═══════════════════════════════════════════════════════════════════════════════
# Table
# ═══════════════════════════════════════════════════════════════════════════════

class Base(DeclarativeBase):
    pass


class ClientStateTable(Base):
    __tablename__ = "client_state"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)


# ═══════════════════════════════════════════════════════════════════════════════
# Store
# ═══════════════════════════════════════════════════════════════════════════════

class SQLAlchemyKeyValueStore:
    """
    KeyValueStore over an async session factory.

    Example:
        store, engine = await create_state_store("sqlite+aiosqlite:///state.db")
        await store.set("vortex_cart", [...])
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get(self, key: str) -> Any | None:
        async with self._session_factory() as session:
            row = await session.get(ClientStateTable, key)
            return json.loads(row.value) if row is not None else None

    async def set(self, key: str, value: Any) -> None:
        encoded = json.dumps(value)
        async with self._session_factory() as session, session.begin():
            row = await session.get(ClientStateTable, key)
            if row is None:
                session.add(ClientStateTable(key=key, value=encoded, updated_at=datetime.now()))
            else:
                row.value = encoded
                row.updated_at = datetime.now()

    async def clear(self, key: str) -> None:
        async with self._session_factory() as session, session.begin():
            await session.execute(delete(ClientStateTable).where(ClientStateTable.key == key))


async def create_state_store(
    url: str | None = None,
) -> tuple[SQLAlchemyKeyValueStore, AsyncEngine]:
    """
    Create the table and return (store, engine). Dispose the engine when done.

    Without a url, ``Settings.state_database_url`` is used.
    """
    engine = create_async_engine(url or get_settings().state_database_url, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    return SQLAlchemyKeyValueStore(async_sessionmaker(engine, expire_on_commit=False)), engine


__all__ = ("ClientStateTable", "SQLAlchemyKeyValueStore", "create_state_store")
