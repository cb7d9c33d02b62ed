"""Load a league JSON file (seasons, players, roster, rounds, scores) into PostgreSQL.

    python3 data/load_league_data.py                      # bundled Kiawah 2026 sample
    python3 data/load_league_data.py my_trip.json --init-schema
"""

import argparse
import asyncio
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

from database.connection import DatabasePool
from database.memory import SAMPLE_DATA_PATH, load_league_data
from database.seed import initialize_schema, seed_league


async def load_data(json_path: str, dsn: str, init_schema: bool = False) -> None:
    data = load_league_data(json_path)
    print(
        f"Loaded {len(data.get('players', []))} players, "
        f"{len(data.get('rounds', []))} rounds, "
        f"{len(data.get('scores', []))} scores from {json_path}"
    )

    pool = DatabasePool()
    await pool.initialize(dsn)
    try:
        if init_schema:
            await initialize_schema(pool.pool)
            print("Schema ready")
        counts = await seed_league(pool.pool, data)
        for table, count in counts.items():
            print(f"  {table}: {count}")
        print("Done")
    finally:
        await pool.close()


def main():
    load_dotenv()
    parser = argparse.ArgumentParser(description="Seed the golf trip league store.")
    parser.add_argument("json_path", nargs="?", default=str(SAMPLE_DATA_PATH))
    parser.add_argument("--dsn", default=os.environ.get("DATABASE_URL"))
    parser.add_argument("--init-schema", action="store_true", help="run database/schema.sql first")
    args = parser.parse_args()

    if not args.dsn:
        print("Set DATABASE_URL or pass --dsn")
        sys.exit(1)

    asyncio.run(load_data(args.json_path, args.dsn, args.init_schema))


if __name__ == "__main__":
    main()
