# csv_parser.py
# Turns an uploaded CSV blob into a column-oriented table for the table-QA model.
import csv
import io
import logging

from models import ParseError, Table

LOG = logging.getLogger(__name__)

QUOTE = '"'
DELIMITER = ","


def _reject_bare_quotes(data: str) -> None:
    """
    Raise ParseError if a quote appears inside a field that did not start with one.
    csv.reader accepts `Al"ice` even in strict mode.
    """
    line = 1
    in_quotes = False
    quoted_field = False
    field_start = True
    for c in data:
        if c == "\n":
            line += 1
        if in_quotes:
            if c == QUOTE:
                in_quotes = False
            continue
        if c in (DELIMITER, "\n"):
            field_start = True
            quoted_field = False
        elif c == QUOTE:
            if not (field_start or quoted_field):
                raise ParseError(f'bare " in non-quoted field at line {line}')
            # opening quote, or the second half of an escaped ""
            in_quotes = True
            quoted_field = True
            field_start = False
        elif c != "\r":
            field_start = False


def csv_to_table(data: str) -> Table:
    """
    Return {header: [values...]} for a CSV text with a header row.

    Empty input gives {}; a header-only input gives empty columns.
    Raises ParseError on ragged rows, duplicate headers, unescaped quotes or broken quoting.
    """
    data = data or ""
    _reject_bare_quotes(data)

    reader = csv.reader(io.StringIO(data), strict=True)
    try:
        # blank lines come back as [] and are skipped
        records = [row for row in reader if row]
    except csv.Error as e:
        raise ParseError(f"malformed CSV at line {reader.line_num}: {e}")

    if not records:
        return {}

    headers = records[0]
    if len(set(headers)) != len(headers):
        dupes = sorted({h for h in headers if headers.count(h) > 1})
        raise ParseError(f"duplicate column names: {', '.join(dupes)}")

    table = {h: [] for h in headers}
    for row_no, record in enumerate(records[1:], start=2):
        if len(record) != len(headers):
            raise ParseError(
                f"record {row_no}: expected {len(headers)} fields, got {len(record)}")
        for header, value in zip(headers, record):
            table[header].append(value)

    LOG.debug("parsed CSV: %d columns, %d rows", len(headers), len(records) - 1)
    return table
