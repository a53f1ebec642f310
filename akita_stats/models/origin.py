"""Domain models for origin visit data supplied by the extension"""
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

def _non_negative(data: Dict[str, Any], key: str) -> float:
    """Read a non-negative number from a camelCase record, defaulting to 0"""
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{key} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"{key} must be finite, got {value}")
    if value < 0:
        raise ValueError(f"{key} must be non-negative, got {value}")
    return value

def _count(data: Dict[str, Any], key: str) -> int:
    """Read a non-negative whole number from a camelCase record, defaulting to 0"""
    value = _non_negative(data, key)
    if value != int(value):
        raise ValueError(f"{key} must be a whole number, got {value}")
    return int(value)

@dataclass(frozen=True)
class OriginVisitData:
    """Visit data recorded for a single origin"""
    monetized_time_spent: float = 0  # milliseconds
    number_of_visits: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'OriginVisitData':
        return cls(
            monetized_time_spent=_non_negative(data, 'monetizedTimeSpent'),
            number_of_visits=_count(data, 'numberOfVisits')
        )

@dataclass(frozen=True)
class OriginData:
    """A distinct site and its visit data"""
    origin: str
    origin_visit_data: OriginVisitData = field(default_factory=OriginVisitData)

    @property
    def monetized_time_spent(self) -> float:
        return self.origin_visit_data.monetized_time_spent

    @property
    def number_of_visits(self) -> int:
        return self.origin_visit_data.number_of_visits

    @classmethod
    def from_dict(cls, data: Dict[str, Any], origin: Optional[str] = None) -> 'OriginData':
        """
        Build from an extension record.

        The origin may be given separately when records are keyed by origin.
        """
        origin = data.get('origin', origin)
        if not origin:
            raise ValueError("Origin data record has no origin")
        return cls(
            origin=origin,
            origin_visit_data=OriginVisitData.from_dict(data.get('originVisitData') or {})
        )

@dataclass(frozen=True)
class OriginStats:
    """Aggregate stats across all origins"""
    total_time_spent: float = 0
    total_monetized_time_spent: float = 0
    total_visits: int = 0
    total_sent_assets_map: Optional[Dict[str, Any]] = None  # asset code -> sent amount

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'OriginStats':
        sent_assets = data.get('totalSentAssetsMap')
        if sent_assets is not None and not isinstance(sent_assets, dict):
            raise ValueError(f"totalSentAssetsMap must be an object, got {sent_assets!r}")
        return cls(
            total_time_spent=_non_negative(data, 'totalTimeSpent'),
            total_monetized_time_spent=_non_negative(data, 'totalMonetizedTimeSpent'),
            total_visits=_count(data, 'totalVisits'),
            total_sent_assets_map=dict(sent_assets) if sent_assets is not None else None
        )
