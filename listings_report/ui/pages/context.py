from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from listings_report.config import Settings
from listings_report.data.filters import ListingFilters


@dataclass
class PageContext:
    raw_df: pd.DataFrame
    filters: ListingFilters
    settings: Settings
