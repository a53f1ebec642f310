"""StatsReport model definition"""
from typing import List, Optional
from pydantic import BaseModel

class OriginSummary(BaseModel):
    """
    Display values for a single origin.

    Attributes:
        origin: The site's URL origin
        monetized_time_spent: Milliseconds spent while the site was monetized
        number_of_visits: Number of recorded visits
        percent_time_spent: Share of total time spent at this origin, 0-100
        percent_visits: Share of total visits made to this origin, 0-100
        estimated_payment_usd: Estimated payment streamed to the site, 2 decimals
    """
    origin: str
    monetized_time_spent: float = 0
    number_of_visits: int = 0
    percent_time_spent: float = 0.0
    percent_visits: float = 0.0
    estimated_payment_usd: str = "0.00"

class StatsReport(BaseModel):
    """
    Everything the UI needs to render the stats page.

    top_origins and need_love_origins are None when the extension has
    not recorded any origins yet.
    """
    top_origins: Optional[List[OriginSummary]] = None
    need_love_origins: Optional[List[OriginSummary]] = None
    monetized_time_spent_percent: float = 0.0
    estimated_total_payment_usd: str = "0.00"
    has_used_web_monetization_provider: bool = False
    origin_count: int = 0
