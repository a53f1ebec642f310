"""Assembles calculator outputs into a single report for the UI"""
import logging
from typing import List, Optional

from akita_stats.calculator import StatsCalculator
from akita_stats.config import Settings
from akita_stats.models.origin import OriginData, OriginStats
from akita_stats.models.report import OriginSummary, StatsReport
from akita_stats.services.provider import DataProvider

logger = logging.getLogger(__name__)

class StatsSummary:
    """Builds the stats page report"""

    def __init__(self, provider: DataProvider, settings: Settings):
        """Initialize report builder with a data provider and settings"""
        self.settings = settings
        self.provider = provider
        self.calculator = StatsCalculator(provider, settings)

    async def _summarize_origin(self, origin_data: OriginData,
                                origin_stats: Optional[OriginStats]) -> OriginSummary:
        return OriginSummary(
            origin=origin_data.origin,
            monetized_time_spent=origin_data.monetized_time_spent,
            number_of_visits=origin_data.number_of_visits,
            percent_time_spent=self.calculator.get_percent_time_spent_at_origin_out_of_total(
                origin_data, origin_stats),
            percent_visits=self.calculator.get_percent_visits_to_origin_out_of_total(
                origin_data, origin_stats),
            estimated_payment_usd=await self.calculator.get_estimated_payment_for_origin_usd(
                origin_data.origin)
        )

    async def _summarize_origins(self, origins: Optional[List[OriginData]],
                                 origin_stats: Optional[OriginStats]) -> Optional[List[OriginSummary]]:
        if origins is None:
            return None
        return [await self._summarize_origin(o, origin_stats) for o in origins]

    async def generate(self) -> StatsReport:
        """Generate the report from a fresh snapshot of the provider's data"""
        count = self.settings.TOP_ORIGINS_COUNT
        try:
            origin_stats = await self.provider.load_origin_stats()
            if origin_stats is None:
                logger.warning("No origin stats available, percentages will be 0")

            top_origins = await self.calculator.get_top_origins_by_time_spent(count)
            need_love_origins = await self.calculator.get_top_origins_that_need_some_love(count)
            origin_list = await self.provider.get_origin_data_list()

            total_monetized = origin_stats.total_monetized_time_spent if origin_stats else 0

            report = StatsReport(
                top_origins=await self._summarize_origins(top_origins, origin_stats),
                need_love_origins=await self._summarize_origins(need_love_origins, origin_stats),
                monetized_time_spent_percent=self.calculator.get_monetized_time_spent_percent(origin_stats),
                estimated_total_payment_usd=self.calculator.get_estimated_payment_for_time_in_usd(total_monetized),
                has_used_web_monetization_provider=self.calculator.has_used_web_monetization_provider(origin_stats),
                origin_count=len(origin_list or [])
            )
            logger.info(f"Generated stats report for {report.origin_count} origins")
            return report

        except Exception as e:
            logger.error(f"Error generating stats report: {e}")
            raise
