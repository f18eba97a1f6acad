import asyncio

from sqlalchemy import text

from fittrack.db.base import Base
from fittrack.db.session import engine
# Import all models
from fittrack.models import *  # noqa: F401, F403


async def drop_tables():
    print("Dropping all tables...")
    async with engine.begin() as conn:
        await conn.execute(text("DROP TABLE IF EXISTS alembic_version"))
        await conn.run_sync(Base.metadata.drop_all)
    print("Tables dropped.")
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(drop_tables())
