import pandas as pd
from typing import Dict, Any

from listings_report.config import ROOM_TYPES
from listings_report.data.loader import is_text


def missing_values_summary(df: pd.DataFrame) -> pd.DataFrame:
    mv_series = df.isna().sum()
    # blank strings count as missing too
    for col in df.columns:
        if is_text(df[col]):
            blanks = df[col].apply(lambda v: isinstance(v, str) and v.strip() == "")
            if blanks.any():
                mv_series[col] += blanks.sum()
    mv = mv_series.reset_index()
    mv.columns = ["column", "missing_count"]
    mv["missing_pct"] = mv["missing_count"] / len(df) * 100 if len(df) > 0 else 0.0
    return mv.sort_values("missing_pct", ascending=False, kind="mergesort").reset_index(drop=True)


def duplicate_count(df: pd.DataFrame) -> int:
    if "id" in df.columns:
        return int(df.duplicated(subset=["id"]).sum())
    return int(df.duplicated().sum())


def unknown_room_types(df: pd.DataFrame) -> pd.DataFrame:
    """Room type values outside the canonical four, with their row counts."""
    if "room_type" not in df.columns:
        return pd.DataFrame(columns=["room_type", "rows"])
    other = df.loc[df["room_type"].notna() & ~df["room_type"].isin(ROOM_TYPES), "room_type"]
    out = other.value_counts().rename_axis("room_type").reset_index(name="rows")
    return out


def build_quality_overview(df: pd.DataFrame) -> Dict[str, Any]:
    return {
        "row_count": len(df),
        "duplicate_count": duplicate_count(df),
        "distinct_hosts": int(df["host_id"].nunique()) if "host_id" in df.columns else None,
        "unknown_room_type_rows": int(unknown_room_types(df)["rows"].sum()),
    }
