"""Recompute the daily log for every date that has meal or exercise logs.

Use after bulk imports or direct edits, which do not refresh daily logs.
Pass --since YYYY-MM-DD to limit the run.
"""

import argparse
import asyncio

from sqlalchemy import select, union

from fittrack.db.session import async_session_maker, engine
from fittrack.models import ExerciseLog, MealLog
from fittrack.services.daily_aggregation import recalculate


async def main(since: str | None):
    async with async_session_maker() as session:
        stmt = union(select(ExerciseLog.date), select(MealLog.date))
        dates = sorted(d for (d,) in (await session.execute(stmt)).all() if not since or d >= since)
        print(f"Recalculating {len(dates)} dates...")
        for d in dates:
            await recalculate(session, d)
        await session.commit()
        print("Done.")
    await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--since", help="Only dates on or after YYYY-MM-DD")
    args = parser.parse_args()
    asyncio.run(main(args.since))
