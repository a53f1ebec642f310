"""Entry point for stats report generation"""
import asyncio
import json
import logging
import os
import sys
import traceback

from akita_stats.config import settings
from akita_stats.services.export import ExportDataProvider, find_export_file
from akita_stats.summary import StatsSummary

logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger(__name__)

def run() -> None:
    """Generate the stats report for the export in the input directory."""
    try:
        export_path = find_export_file(settings.INPUT_DIR)
        logger.info(f"Reading extension export {export_path}")

        logger.info("Using configuration:")
        logger.info(json.dumps(settings.model_dump(), indent=2))

        summary = StatsSummary(ExportDataProvider(export_path), settings)
        report = asyncio.run(summary.generate())

        # Save results
        os.makedirs(settings.OUTPUT_DIR, exist_ok=True)
        output_path = os.path.join(settings.OUTPUT_DIR, "results.json")
        with open(output_path, 'w') as f:
            json.dump(report.model_dump(), f, indent=2)

        logger.info(f"Stats report complete: {output_path}")

    except Exception as e:
        logger.error(f"Error during stats report generation: {e}")
        traceback.print_exc()
        sys.exit(1)

if __name__ == "__main__":
    run()
