"""
Data Mining Ingestion Package.

Runs a fixed-order mining pipeline (open, extract, parse, analyze,
report, close) over a single file. Supported formats:
- csv: comma separated values with a header line
- pdf: plain-text stand-in, one paragraph per line
- doc: plain-text stand-in, one text run per line

Public API:
    - mine(): Main entry point for a mining run
    - create_default_registry(): Get a registry with all built-in adapters
"""

from dataminer.ingestion.pipeline import MiningResult, MiningStatus, mine
from dataminer.ingestion.adapters import (
    BaseFormatAdapter,
    CSVAdapter,
    DocAdapter,
    PDFAdapter,
    create_default_registry,
)

__all__ = [
    "mine",
    "MiningResult",
    "MiningStatus",
    "BaseFormatAdapter",
    "CSVAdapter",
    "DocAdapter",
    "PDFAdapter",
    "create_default_registry",
]
