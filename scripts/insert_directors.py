import argparse
import asyncio
import json
import sys
from typing import List, Tuple

from daily_movie.domain.exceptions import RepositoryError
from daily_movie.infrastructure.adapters.repositories.sqlalchemy_catalog_repository import (
    SQLAlchemyCatalogRepository,
)
from daily_movie.infrastructure.persistence.database import create_tables, dispose_engine, get_engine, get_sessionmaker


def read_directors(path: str) -> List[Tuple[str, dict]]:
    """Read `{"<document id>": {"name": ..., "recommendedMovies": [...]}}` from a JSON file."""
    with open(path, encoding="utf-8") as f:
        documents = json.load(f)
    if not isinstance(documents, dict):
        raise ValueError("Expected a JSON object keyed by director document id")
    return list(documents.items())


async def insert_directors(documents: List[Tuple[str, dict]], dry_run: bool, limit: int) -> int:
    await create_tables()
    repository = SQLAlchemyCatalogRepository(get_sessionmaker(get_engine()))
    count = 0
    try:
        for director_id, document in documents:
            if limit and count >= limit:
                break
            if dry_run:
                count += 1
                continue
            try:
                await repository.upsert_director(director_id, document)
                count += 1
            except RepositoryError:
                print(f"Failed to insert director: {director_id}", file=sys.stderr)
                continue
    finally:
        await dispose_engine()
    return count


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--directors_path", type=str, default="data/directors.json")
    parser.add_argument("--limit", type=int, default=0)
    parser.add_argument("--dry_run", action="store_true")
    args = parser.parse_args()
    try:
        documents = read_directors(args.directors_path)
    except Exception as e:
        print(f"Failed to read directors: {e}", file=sys.stderr)
        sys.exit(1)
    count = asyncio.run(insert_directors(documents, args.dry_run, args.limit))
    print(f"Inserted {count} directors")


if __name__ == "__main__":
    main()
