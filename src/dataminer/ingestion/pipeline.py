"""
Mining Pipeline Orchestrator.

Drives one mining run through the fixed step order:
open -> extract -> parse -> analyze -> report, closing the input source
on every exit path.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TextIO

from dataminer.analysis import analyze, report
from dataminer.ingestion.adapters import BaseFormatAdapter
from dataminer.records import Dataset, Summary

logger = logging.getLogger(__name__)


class MiningState(Enum):
    IDLE = "idle"
    OPENING = "opening"
    EXTRACTING = "extracting"
    PARSING = "parsing"
    ANALYZING = "analyzing"
    REPORTING = "reporting"
    FAILED = "failed"
    CLOSED = "closed"


class MiningStatus(Enum):
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class MiningResult:
    """Outcome of a single mine() call."""
    status: MiningStatus
    dataset: Optional[Dataset] = None
    summary: Optional[Summary] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is MiningStatus.COMPLETED


def _enter(state: MiningState) -> None:
    logger.debug(f"Mining state -> {state.value}")


def mine(
    path,
    adapter: BaseFormatAdapter,
    sink: Optional[TextIO] = None,
) -> MiningResult:
    """
    Run the full mining sequence on one file.

    The format is chosen by the caller through the adapter instance; there
    is no detection from the path. I/O errors raised while opening or
    extracting are logged as a single line and end the run early. The
    adapter's close() is always called, with None if open failed.

    Args:
        path: Filesystem path of the input file.
        adapter: Format adapter used for open/extract/parse/close.
        sink: Text stream for the report. Defaults to sys.stdout.

    Returns:
        MiningResult with the dataset and summary on success, or the
        error message on failure.
    """
    _enter(MiningState.IDLE)
    handle = None
    try:
        try:
            _enter(MiningState.OPENING)
            handle = adapter.open(path)
            _enter(MiningState.EXTRACTING)
            raw = adapter.extract(handle)
        except OSError as e:
            logger.error(f"Error processing file: {e}")
            _enter(MiningState.FAILED)
            return MiningResult(status=MiningStatus.FAILED, error=str(e))

        _enter(MiningState.PARSING)
        dataset = adapter.parse(raw)
        _enter(MiningState.ANALYZING)
        summary = analyze(dataset)
        _enter(MiningState.REPORTING)
        report(summary, sink)

        return MiningResult(
            status=MiningStatus.COMPLETED,
            dataset=dataset,
            summary=summary,
        )
    finally:
        try:
            adapter.close(handle)
        except Exception as e:
            logger.debug(f"Ignoring error while releasing {path}: {e}")
        _enter(MiningState.CLOSED)
