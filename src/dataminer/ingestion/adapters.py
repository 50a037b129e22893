"""
Format Adapters Module.

Each format adapter implements the four variable steps of a mining run:
open, extract, parse and close. Parsing is line based for every format;
the PDF and DOC adapters read plain-text stand-ins rather than decoding
the real binary formats.

Adding a new format:
    1. Subclass BaseFormatAdapter
    2. Implement parse() and set format_tag
    3. Call registry.register("name", YourAdapter)
"""

import logging
import re
from abc import ABC, abstractmethod
from typing import BinaryIO, Callable, Dict, List, Optional

from dataminer.records import Dataset, Row

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"

# CRLF, then any single vertical line break. Unlike str.splitlines, the
# file/group/record separators (\x1c-\x1e) are not line breaks.
LINE_BREAK = re.compile(r"\r\n|[\n\x0b\x0c\r\x85\u2028\u2029]")


# =============================================================================
# Base Adapter
# =============================================================================

class BaseFormatAdapter(ABC):
    """
    Base interface for all format adapters.

    open/extract/close work on binary file handles and are shared by the
    built-in adapters; parse is format specific and must stay free of I/O.
    """

    format_tag = "BASE"

    def __init__(self, encoding: str = DEFAULT_ENCODING):
        self.encoding = encoding

    def open(self, path) -> BinaryIO:
        """
        Acquire the input source.

        Raises:
            OSError: If the path is missing or cannot be read.
        """
        logger.info(f"[{self.format_tag}] Opening {path}")
        return open(path, "rb")

    def extract(self, handle: BinaryIO) -> bytes:
        """
        Read the whole content of an open handle.

        Raises:
            OSError: On read failure, including reads after close.
        """
        logger.info(f"[{self.format_tag}] Extracting bytes")
        try:
            return handle.read()
        except ValueError as e:
            # io raises ValueError for I/O on a closed file
            raise OSError(f"Cannot read from handle: {e}") from e

    @abstractmethod
    def parse(self, raw: bytes) -> Dataset:
        """
        Convert raw bytes into a Dataset.

        Never raises: malformed input yields fewer rows or none.
        """
        pass

    def close(self, handle: Optional[BinaryIO]) -> None:
        """Release the handle. A None handle is a no-op; errors are swallowed."""
        logger.info(f"[{self.format_tag}] Closing file")
        if handle is None:
            return
        try:
            handle.close()
        except Exception as e:
            logger.debug(f"[{self.format_tag}] Ignoring error on close: {e}")

    def _lines(self, raw: bytes) -> List[str]:
        """Decode and split on any line ending (LF, CRLF, CR, NEL, Unicode separators)."""
        return LINE_BREAK.split(raw.decode(self.encoding, errors="replace"))


# =============================================================================
# CSV Adapter
# =============================================================================

def _split_fields(line: str) -> List[str]:
    """Split on literal commas, dropping trailing empty fields."""
    fields = line.split(",")
    while fields and fields[-1] == "":
        fields.pop()
    return fields


class CSVAdapter(BaseFormatAdapter):
    """
    Comma separated values with a header line.

    No quoting or escaping: every comma is a separator. Each data row is
    truncated to the shorter of the header and its own field list.
    """

    format_tag = "CSV"

    def parse(self, raw: bytes) -> Dataset:
        logger.info(f"[{self.format_tag}] Parsing comma separated lines")
        lines = self._lines(raw)
        headers = [h.strip() for h in _split_fields(lines[0])]
        rows: Dataset = []

        for line in lines[1:]:
            if not line.strip():
                continue
            values = _split_fields(line)
            row: Row = {}
            for header, value in zip(headers, values):
                row[header] = value.strip()
            rows.append(row)

        return rows


# =============================================================================
# PDF Adapter (simulated)
# =============================================================================

class PDFAdapter(BaseFormatAdapter):
    """Plain-text stand-in for PDF: one "paragraph" row per non-blank line."""

    format_tag = "PDF"

    def parse(self, raw: bytes) -> Dataset:
        logger.info(f"[{self.format_tag}] Parsing (simulated: one row per line)")
        return [
            {"paragraph": line.strip()}
            for line in self._lines(raw)
            if line.strip()
        ]


# =============================================================================
# DOC Adapter (simulated)
# =============================================================================

class DocAdapter(BaseFormatAdapter):
    """
    Plain-text stand-in for DOC: every non-blank line is a text run.

    Runs are keyed "run#<n>", numbered from 1 over non-blank lines only.
    """

    format_tag = "DOC"

    def parse(self, raw: bytes) -> Dataset:
        logger.info(f"[{self.format_tag}] Parsing (simulated: lines as runs)")
        rows: Dataset = []
        for line in self._lines(raw):
            text = line.strip()
            if not text:
                continue
            rows.append({f"run#{len(rows) + 1}": text})
        return rows


# =============================================================================
# Adapter Registry
# =============================================================================

AdapterFactory = Callable[..., BaseFormatAdapter]


class AdapterRegistry:
    """
    Maps format names to adapter factories.

    create() builds a fresh adapter each time so that no two mining runs
    share an instance.
    """

    def __init__(self):
        self._factories: Dict[str, AdapterFactory] = {}

    def register(self, name: str, factory: AdapterFactory):
        """Register a factory under a format name (case-insensitive)."""
        self._factories[name.lower()] = factory

    def create(self, name: str, **kwargs) -> BaseFormatAdapter:
        """
        Build a new adapter for a format name.

        Raises:
            ValueError: If no adapter is registered under that name.
        """
        factory = self._factories.get(name.lower())
        if factory is None:
            raise ValueError(
                f"Unsupported format: '{name}'. "
                f"Supported formats: {', '.join(self.supported_formats())}"
            )
        return factory(**kwargs)

    def supported_formats(self) -> List[str]:
        """Return the registered format names."""
        return list(self._factories.keys())


def create_default_registry() -> AdapterRegistry:
    """Create an AdapterRegistry with the built-in csv, pdf and doc adapters."""
    registry = AdapterRegistry()
    registry.register("csv", CSVAdapter)
    registry.register("pdf", PDFAdapter)
    registry.register("doc", DocAdapter)
    return registry
