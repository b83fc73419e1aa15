"""
Build the listings table from an Inside Airbnb CSV export or a SQLite database.
"""

from __future__ import annotations

import logging
import re
import sqlite3
from contextlib import closing
from pathlib import Path
from typing import Dict, Optional, Set, Union

import pandas as pd

from listings_report.config import LISTING_COLUMNS, get_settings
from listings_report.errors import UnsupportedSourceError

logger = logging.getLogger(__name__)

SENTINELS: Set[str] = {"", "None", "none", "N/A", "n/a", "NA", "na", "null", "Null", "-"}
CSV_SUFFIXES = (".csv", ".csv.gz")
SQLITE_SUFFIXES = (".db", ".sqlite", ".sqlite3")
TABLE_NAME_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

# detailed Inside Airbnb exports name some columns differently
COLUMN_ALIASES: Dict[str, str] = {"neighbourhood_group_cleansed": "neighbourhood_group"}


def is_text(series: pd.Series) -> bool:
    """True for object columns and pandas string columns (the default for text in pandas 3)."""
    return pd.api.types.is_object_dtype(series) or pd.api.types.is_string_dtype(series)


def _normalize_sentinels(df: pd.DataFrame) -> Dict[str, int]:
    """Replace sentinel string tokens with None in-place, returning counts per column."""
    replacements: Dict[str, int] = {}
    for col in df.columns:
        if is_text(df[col]):
            mask = df[col].apply(lambda v: isinstance(v, str) and v.strip() in SENTINELS)
            count = int(mask.sum())
            if count:
                replacements[col] = count
                df.loc[mask, col] = None
    return replacements


def _parse_price(series: pd.Series) -> pd.Series:
    # "$1,234.00" -> 1234.0; anything unparseable becomes NaN
    if pd.api.types.is_numeric_dtype(series):
        return series.astype("float64")
    text = series.map(lambda v: re.sub(r"[^0-9.\-]", "", v) if isinstance(v, str) else v)
    text = text.where(text != "")
    return pd.to_numeric(text, errors="coerce").astype("float64")


def _parse_nights(series: pd.Series) -> pd.Series:
    nights = pd.to_numeric(series, errors="coerce")
    return nights.where(nights % 1 == 0).astype("Int64")


def _source_kind(path: Path) -> str:
    name = path.name.lower()
    if name.endswith(CSV_SUFFIXES):
        return "csv"
    if name.endswith(SQLITE_SUFFIXES):
        return "sqlite"
    raise UnsupportedSourceError(
        f"Unsupported listings source: {path} (expected one of {CSV_SUFFIXES + SQLITE_SUFFIXES})"
    )


def _read_sqlite(path: Path, table: str) -> pd.DataFrame:
    if not TABLE_NAME_PATTERN.fullmatch(table):
        raise UnsupportedSourceError(f"Invalid table name: {table!r}")
    with closing(sqlite3.connect(path)) as conn:
        return pd.read_sql_query(f"SELECT * FROM {table}", conn)


def load_listings(
    path: Optional[Union[str, Path]] = None,
    table: Optional[str] = None,
) -> pd.DataFrame:
    """Load the listings table and return it with the Listing columns normalised.

    `path` and `table` default to the LISTINGS_PATH / LISTINGS_TABLE settings.
    Load diagnostics are stored in `df.attrs['diagnostics']`.
    """
    settings = get_settings()
    source = Path(path) if path is not None else settings.listings_path
    table = table or settings.listings_table

    kind = _source_kind(source)
    if not source.exists():
        raise FileNotFoundError(f"Listings source not found: {source}")

    logger.info("Loading listings from %s (%s)", source, kind)
    if kind == "csv":
        raw = pd.read_csv(source, low_memory=False)
    else:
        raw = _read_sqlite(source, table)

    aliases = {src: dst for src, dst in COLUMN_ALIASES.items() if src in raw.columns and dst not in raw.columns}
    if aliases:
        logger.info("Renaming column(s): %s", aliases)
        raw = raw.rename(columns=aliases)

    keep = [c for c in LISTING_COLUMNS if c in raw.columns]
    missing = [c for c in LISTING_COLUMNS if c not in raw.columns]
    if missing:
        logger.warning("Listings source %s lacks column(s): %s", source, ", ".join(missing))
    df = raw[keep].copy()

    replacements = _normalize_sentinels(df)
    if replacements:
        logger.warning("Replaced sentinel values: %s", replacements)

    price_failures = 0
    if "price" in df.columns:
        parsed = _parse_price(df["price"])
        price_failures = int((parsed.isna() & df["price"].notna()).sum())
        df["price"] = parsed
        if price_failures:
            logger.warning("%d price value(s) could not be parsed", price_failures)

    nights_failures = 0
    if "minimum_nights" in df.columns:
        parsed_nights = _parse_nights(df["minimum_nights"])
        nights_failures = int((parsed_nights.isna() & df["minimum_nights"].notna()).sum())
        df["minimum_nights"] = parsed_nights

    df.attrs["diagnostics"] = {
        "source": str(source),
        "source_kind": kind,
        "raw_row_count": int(len(raw)),
        "missing_columns": missing,
        "sentinel_replacements": replacements,
        "price_parse_failures": price_failures,
        "minimum_nights_parse_failures": nights_failures,
    }
    logger.info("Loaded %s listings from %s", f"{len(df):,}", source.name)
    return df
