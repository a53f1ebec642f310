"""Ranking, percentage and payment estimate calculations for the stats UI"""
import logging
import math
from functools import cmp_to_key
from typing import List, Optional

from akita_stats.config import Settings, settings as default_settings
from akita_stats.models.origin import OriginData, OriginStats
from akita_stats.services.provider import DataProvider

logger = logging.getLogger(__name__)

def un_nan(number: float) -> float:
    """Replace a not-a-number value with 0"""
    return 0 if math.isnan(number) else number

def divide(numerator: float, denominator: float) -> float:
    """Divide, yielding NaN instead of raising on a zero denominator"""
    if denominator == 0:
        return math.nan
    return numerator / denominator

def to_percent(number: float) -> float:
    """
    Convert a fraction to a percent rounded to 2 decimal places.

    Returns a float (25.0, not "25.00"); fixed-width display formatting is
    left to the UI.
    """
    return round(un_nan(100 * number), 2)

def need_love_ratio(origin_data: OriginData) -> float:
    """
    Monetized time spent per visit.

    A small ratio means the user spends little time on the site relative
    to how often they visit it. Origins with no visits never need love.
    """
    if origin_data.number_of_visits == 0:
        return math.inf
    return origin_data.monetized_time_spent / origin_data.number_of_visits

def _closeness(ratio_a: float, ratio_b: float) -> float:
    """Smaller ratio over larger ratio, 1.0 for identical ratios"""
    if ratio_a == ratio_b:
        return 1.0
    low, high = min(ratio_a, ratio_b), max(ratio_a, ratio_b)
    if math.isinf(high):
        return 0.0
    return low / high

def compare_need_love(a: OriginData, b: OriginData,
                      magic_number: float = 1.0, margin: float = 0.25) -> int:
    """
    Order two origins by how much love they need, neediest first.

    Returns a negative number if a needs more love than b, positive if b
    needs more, 0 if neither. When the two ratios are within the margin of
    each other, the origin with fewer visits needs more love.
    """
    ratio_a = need_love_ratio(a)
    ratio_b = need_love_ratio(b)
    closeness = _closeness(ratio_a, ratio_b)

    if (magic_number - margin) <= closeness <= magic_number and a.number_of_visits != b.number_of_visits:
        return 1 if a.number_of_visits > b.number_of_visits else -1

    difference = un_nan(ratio_a - ratio_b)
    if difference < 0:
        return -1
    elif difference > 0:
        return 1
    return 0

class StatsCalculator:
    """Computes derived stats from the origin data supplied by a data provider"""

    def __init__(self, provider: DataProvider, settings: Settings = default_settings):
        self.provider = provider
        self.settings = settings

    def _need_love_key(self):
        ranking = self.settings.ranking
        return cmp_to_key(
            lambda a, b: compare_need_love(a, b, ranking.magic_number, ranking.margin)
        )

    async def get_top_origins_by_time_spent(self, n_top_origins: int) -> Optional[List[OriginData]]:
        """Get the top N origins by monetized time spent, most time first"""
        origin_data_list = await self.provider.get_origin_data_list()
        if not origin_data_list:
            return None
        if len(origin_data_list) == 1:
            return origin_data_list

        ranked = sorted(origin_data_list, key=lambda o: o.monetized_time_spent, reverse=True)
        logger.debug(f"Ranked {len(ranked)} origins by time spent")
        return ranked[:min(n_top_origins, len(ranked))]

    async def get_top_origins_that_need_some_love(self, n_top_origins: int) -> Optional[List[OriginData]]:
        """Get the top N origins that need some love, neediest first"""
        origin_data_list = await self.provider.get_origin_data_list()
        if not origin_data_list:
            return None
        if len(origin_data_list) == 1:
            return origin_data_list

        ranked = sorted(origin_data_list, key=self._need_love_key())
        logger.debug(f"Ranked {len(ranked)} origins by need-love ratio")
        return ranked[:min(n_top_origins, len(ranked))]

    @staticmethod
    def has_used_web_monetization_provider(origin_stats: Optional[OriginStats]) -> bool:
        """Check if any payment was streamed through a Web Monetization provider"""
        return bool(origin_stats and origin_stats.total_sent_assets_map)

    async def get_estimated_payment_for_origin_usd(self, origin: str) -> str:
        """Estimate the payment streamed to an origin in USD"""
        origin_data = await self.provider.load_origin_data(origin)
        if not origin_data:
            return "0.00"

        estimated_payment = origin_data.monetized_time_spent * self.settings.STREAM_RATE_PER_MILLISECOND
        return f"{un_nan(estimated_payment):.2f}"

    def get_estimated_payment_for_time_in_usd(self, time_spent: float) -> str:
        """Estimate the payment streamed over a duration in milliseconds"""
        # Not NaN-guarded, unlike the per-origin estimate
        return f"{time_spent * self.settings.STREAM_RATE_PER_MILLISECOND:.2f}"

    @staticmethod
    def get_percent_time_spent_at_origin_out_of_total(origin_data: Optional[OriginData],
                                                       origin_stats: Optional[OriginStats]) -> float:
        """Get the percent of total time spent that was spent at the origin"""
        if not origin_data or not origin_stats:
            return 0
        return to_percent(divide(origin_data.monetized_time_spent, origin_stats.total_time_spent))

    @staticmethod
    def get_percent_visits_to_origin_out_of_total(origin_data: Optional[OriginData],
                                                   origin_stats: Optional[OriginStats]) -> float:
        """Get the percent of total visits that were made to the origin"""
        if not origin_data or not origin_stats or origin_stats.total_visits == 0:
            return 0
        return to_percent(divide(origin_data.number_of_visits, origin_stats.total_visits))

    @staticmethod
    def get_monetized_time_spent_percent(origin_stats: Optional[OriginStats]) -> float:
        """Get the percent of total time spent that was spent on monetized origins"""
        if not origin_stats or origin_stats.total_time_spent == 0:
            return 0
        return to_percent(divide(origin_stats.total_monetized_time_spent, origin_stats.total_time_spent))
