"""
One-shot CSV import into the automobiles table.

Runs outside the API process with its own engine. Each row is inserted and
committed on its own, in file order; a failing row stops the run and rows
already inserted stay in the table.
"""
import csv
import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from sqlalchemy import create_engine, insert

from ..core.config import settings
from ..core.database import Base
from ..models.automobile_model import Automobile

COLUMNS = ("make", "model", "year", "vin")

logger = logging.getLogger(__name__)

app = typer.Typer(help="Import automobiles from a CSV file into the database.")


def _row_values(row: dict) -> dict:
    # Missing columns and empty cells are stored as NULL
    return {column: (row.get(column) or None) for column in COLUMNS}


def load_csv(csv_path: Path, database_url: Optional[str] = None) -> int:
    """
    Create the automobiles table if needed and insert every row of csv_path.

    Returns the number of inserted rows. Any error propagates after the
    engine has been disposed.
    """
    engine = create_engine(database_url or settings.SQLALCHEMY_DATABASE_URI)
    table = Automobile.__table__
    inserted = 0
    try:
        Base.metadata.create_all(bind=engine, tables=[table])
        logger.info("Table created successfully or already exists.")

        with csv_path.open("r", newline="", encoding="utf-8") as f, engine.connect() as conn:
            for row in csv.DictReader(f):
                conn.execute(insert(table), _row_values(row))
                conn.commit()
                inserted += 1
    finally:
        engine.dispose()

    logger.info(f"CSV data successfully imported: {inserted} row(s) from {csv_path}")
    return inserted


@app.command()
def main(
    csv_path: Path = typer.Argument(
        Path(settings.LOADER_CSV_PATH),
        help="CSV file with a header row naming make, model, year and vin.",
    ),
    database_url: Optional[str] = typer.Option(
        None,
        "--database-url",
        "-d",
        help="SQLAlchemy URL of the target database (default from settings).",
    ),
) -> None:
    """
    Load automobiles from a CSV file, one insert per row.
    """
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    try:
        inserted = load_csv(csv_path, database_url)
    except Exception as e:
        logger.error(f"Error setting up database: {e}", exc_info=True)
        raise typer.Exit(code=1)
    typer.echo(f"Imported {inserted} automobile(s) from {csv_path}")


def run() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    run()
