"""Parse raw ASPX responses into ordered header/row datasets.

The ASPX stats format is line oriented. The first line is a status line
("O" on success). Every following line is classified by its two-character
prefix:

    H\t  starts a new dataset; the remainder is its tab-separated header
    D\t  adds a data row to the current dataset
    $\t  end-of-dataset marker (no-op)
    *    anything else continues the header or row currently being read

Lines may end in "\r\n"; one trailing "\r" is dropped before classifying.

Input:  raw response text as returned by a BF2 stats provider.
Output: list[Dataset], in the order their header lines appear.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from bf2_jsonifier.parsers.errors import (
    PlayerNotFoundError,
    SourceError,
    StructureError,
)

logger = logging.getLogger(__name__)

STATUS_OK = "O"

HEADER_MARKER = "H\t"
DATA_MARKER = "D\t"
END_MARKER = "$\t"

# BF2Hub answers unknown players with this exact status line.
NOT_FOUND_STATUS = "E\t998"
# PlayBF2 collapses headers and dummy values into the status line instead.
NOT_FOUND_STATUS_PREFIX = "O\tH\tasof\tD"
# Phoenix Network sends a regular "E" dataset carrying this error text.
NOT_FOUND_PHRASE = "Player Not Found"


class LineKind(StrEnum):
    """Kind of the most recently classified header or data line."""

    HEADER = "header"
    DATA = "data"


@dataclass(frozen=True)
class Dataset:
    """One header plus the data rows that follow it."""

    header: str
    rows: tuple[str, ...] = ()

    @property
    def fields(self) -> list[str]:
        return self.header.split("\t")


def check_status(status_line: str, remaining_lines: list[str]) -> None:
    """Raise the matching error unless the status line reports success."""
    if status_line.strip() == STATUS_OK:
        return

    if (
        status_line.strip() == NOT_FOUND_STATUS
        or status_line.startswith(NOT_FOUND_STATUS_PREFIX)
        or NOT_FOUND_PHRASE in "".join(remaining_lines)
    ):
        raise PlayerNotFoundError()
    raise SourceError()


def parse_response(raw_text: str) -> list[Dataset]:
    """Parse an ASPX response body into datasets.

    Args:
        raw_text: Full response body, lines separated by "\\n".

    Returns:
        Datasets in order of appearance. Dataset 0 holds response metadata.

    Raises:
        PlayerNotFoundError: Provider signalled an unknown player.
        SourceError: Status line is anything other than "O".
        StructureError: A row or continuation line precedes every header.
    """
    status_line, *lines = raw_text.split("\n")
    check_status(status_line, lines)

    headers: list[str] = []
    rows: list[list[str]] = []
    last_kind = LineKind.HEADER

    for line_no, line in enumerate(lines, start=2):
        line = line.removesuffix("\r")
        marker = line[:2]

        if marker == HEADER_MARKER:
            headers.append(line[2:])
            rows.append([])
            last_kind = LineKind.HEADER
        elif marker == DATA_MARKER:
            if not headers:
                raise StructureError(
                    f"Data line {line_no} appears before any header line",
                )
            rows[-1].append(line[2:])
            last_kind = LineKind.DATA
        elif marker == END_MARKER:
            continue
        elif not line:
            # Trailing newlines produce empty lines; appending "" is a no-op.
            continue
        else:
            if not headers:
                raise StructureError(
                    f"Continuation line {line_no} appears before any header line",
                )
            if last_kind == LineKind.HEADER:
                headers[-1] += line
            else:
                rows[-1][-1] += line

    datasets = [
        Dataset(header=header, rows=tuple(data))
        for header, data in zip(headers, rows)
    ]
    logger.debug(
        "Parsed %d dataset(s) with %d row(s)",
        len(datasets), sum(len(d.rows) for d in datasets),
    )
    return datasets
