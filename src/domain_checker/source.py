"""Line-oriented input: a count line followed by that many domain lines."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TextIO

import structlog

from .domain import Domain
from .errors import InputFormatError

log = structlog.get_logger()


class DomainSource(ABC):
    """Supplies the block-list and the queries for one run.

    Implementations:
        - StreamSource: reads both sections, in order, from one text stream
    """

    @abstractmethod
    def read_blocklist(self) -> list[Domain]:
        """Read the domains to forbid."""

    @abstractmethod
    def read_queries(self) -> list[Domain]:
        """Read the domains to check, in output order."""


class LineReader:
    """Wraps a text stream and tracks the number of the last line read."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self.line_number = 0

    def readline(self) -> str:
        line = self._stream.readline()
        if line:
            self.line_number += 1
        return line


def read_count(reader: LineReader) -> int:
    """Read a non-negative domain count from the next line.

    A blank line or end of input counts as zero domains.
    """
    text = reader.readline().strip()
    if not text:
        return 0
    try:
        number = int(text)
    except ValueError:
        raise InputFormatError(f"expected a domain count, got {text!r}", reader.line_number) from None
    if number < 0:
        raise InputFormatError(f"domain count must not be negative, got {number}", reader.line_number)
    return number


def read_domains(reader: LineReader, number: int) -> list[Domain]:
    """Read ``number`` domains, one per line, keeping each line verbatim."""
    domains: list[Domain] = []
    for _ in range(number):
        line = reader.readline()
        if not line:
            raise InputFormatError(
                f"expected {number} domains, input ended after {len(domains)}",
                reader.line_number,
            )
        domains.append(Domain(line.rstrip("\r\n")))
    return domains


class StreamSource(DomainSource):
    """Reads the block-list section, then the query section, from one stream.

    ``read_blocklist`` must be called before ``read_queries``.
    """

    def __init__(self, stream: TextIO) -> None:
        self._reader = LineReader(stream)

    def _read_section(self, section: str) -> list[Domain]:
        number = read_count(self._reader)
        domains = read_domains(self._reader, number)
        log.info("section_read", section=section, domains=len(domains))
        return domains

    def read_blocklist(self) -> list[Domain]:
        return self._read_section("blocklist")

    def read_queries(self) -> list[Domain]:
        return self._read_section("queries")
