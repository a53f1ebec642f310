"""Data provider backed by a JSON export of the extension's storage"""
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from akita_stats.models.origin import OriginData, OriginStats
from akita_stats.services.provider import DataProvider

logger = logging.getLogger(__name__)

class ExportError(Exception):
    """Raised when an extension data export cannot be read"""
    pass

def find_export_file(input_dir: str) -> Path:
    """Find the first JSON export in the input directory"""
    if not os.path.isdir(input_dir):
        raise FileNotFoundError(f"Input directory not found: {input_dir}")

    for filename in sorted(os.listdir(input_dir)):
        if os.path.splitext(filename)[1].lower() == '.json':
            return Path(input_dir) / filename

    raise FileNotFoundError(f"No JSON export found in {input_dir}")

class ExportDataProvider(DataProvider):
    """
    Serves origin data from an export file.

    Expected format:
        {
            "originDataList": [{"origin": ..., "originVisitData": {...}}, ...],
            "originStats": {"totalTimeSpent": ..., ...}
        }

    originDataList may also be an object keyed by origin.
    """

    def __init__(self, path: str):
        self.path = Path(path)
        self._origins: Optional[List[OriginData]] = None
        self._stats: Optional[OriginStats] = None
        self._loaded = False

    def _read(self) -> Dict[str, Any]:
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                document = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to read export {self.path}: {e}")
            raise ExportError(f"Failed to read export {self.path}: {str(e)}")

        if not isinstance(document, dict):
            raise ExportError(f"Export {self.path} must contain a JSON object")
        return document

    def _parse_origins(self, raw: Any) -> Optional[List[OriginData]]:
        if raw is None:
            return None
        if isinstance(raw, dict):
            return [OriginData.from_dict(record, origin=origin) for origin, record in raw.items()]
        if isinstance(raw, list):
            return [OriginData.from_dict(record) for record in raw]
        raise ExportError(f"originDataList must be a list or an object, got {type(raw).__name__}")

    def _load(self) -> Tuple[Optional[List[OriginData]], Optional[OriginStats]]:
        if not self._loaded:
            document = self._read()
            try:
                self._origins = self._parse_origins(document.get('originDataList'))
                raw_stats = document.get('originStats')
                self._stats = OriginStats.from_dict(raw_stats) if raw_stats is not None else None
            except (ValueError, TypeError, AttributeError) as e:
                logger.error(f"Malformed export {self.path}: {e}")
                raise ExportError(f"Malformed export {self.path}: {str(e)}")

            self._loaded = True
            logger.info(f"Loaded {len(self._origins or [])} origins from {self.path}")

        return self._origins, self._stats

    async def get_origin_data_list(self) -> Optional[List[OriginData]]:
        origins, _ = self._load()
        return list(origins) if origins is not None else None

    async def load_origin_data(self, origin: str) -> Optional[OriginData]:
        origins, _ = self._load()
        return next((o for o in origins or [] if o.origin == origin), None)

    async def load_origin_stats(self) -> Optional[OriginStats]:
        _, stats = self._load()
        return stats
