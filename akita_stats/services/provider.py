"""Data provider contract and in-memory implementation"""
import logging
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from akita_stats.models.origin import OriginData, OriginStats

logger = logging.getLogger(__name__)

class DataProvider(ABC):
    """Supplies read-only snapshots of origin data to the calculator"""

    @abstractmethod
    async def get_origin_data_list(self) -> Optional[List[OriginData]]:
        """Get data for every recorded origin, or None if unavailable"""

    @abstractmethod
    async def load_origin_data(self, origin: str) -> Optional[OriginData]:
        """Get data for a single origin, or None if it was never recorded"""

    @abstractmethod
    async def load_origin_stats(self) -> Optional[OriginStats]:
        """Get aggregate stats across all origins, or None if unavailable"""

class InMemoryDataProvider(DataProvider):
    """Serves a fixed snapshot of origin data"""

    def __init__(self, origins: Optional[Iterable[OriginData]], stats: Optional[OriginStats] = None):
        self._origins = list(origins) if origins is not None else None
        self._stats = stats

    async def get_origin_data_list(self) -> Optional[List[OriginData]]:
        if self._origins is None:
            logger.warning("No origin data list available")
            return None
        # Callers get their own list so reordering it never touches the snapshot
        return list(self._origins)

    async def load_origin_data(self, origin: str) -> Optional[OriginData]:
        for origin_data in self._origins or []:
            if origin_data.origin == origin:
                return origin_data
        logger.debug(f"No origin data recorded for {origin}")
        return None

    async def load_origin_stats(self) -> Optional[OriginStats]:
        return self._stats
