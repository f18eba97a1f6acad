import asyncio

from sqlalchemy import text

from fittrack.db.session import async_session_maker, engine

TABLES = ["exercise_logs", "meal_logs", "daily_logs", "user_profile", "workout_plans"]


async def check_data():
    async with async_session_maker() as session:
        print(f"Checking tables: {TABLES}")
        for table in TABLES:
            try:
                result = await session.execute(text(f"SELECT count(*) FROM {table}"))
                count = result.scalar()
                print(f"Table '{table}' row count: {count}")

                if count and table in ("exercise_logs", "meal_logs", "daily_logs"):
                    latest = await session.execute(text(f"SELECT max(date) FROM {table}"))
                    print(f"  Latest date in {table}: {latest.scalar()}")
            except Exception as e:
                print(f"Error querying {table}: {e}")
                await session.rollback()
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(check_data())
