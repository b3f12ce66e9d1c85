# aggregator.py
# Turns the table-QA answer into the text shown to the user.
import logging
from typing import List

from models import AnswerResult

LOG = logging.getLogger(__name__)

RESPONSE_PREFIX = "AI Model Response: \n"


def sum_cells(cells: List[str]) -> float:
    """Sum the numeric cells; cells that are not numbers are logged and skipped."""
    total = 0.0
    for cell in cells:
        try:
            total += float(cell.strip())
        except ValueError:
            LOG.warning("skipping non-numeric cell in SUM: %r", cell)
    return total


def format_cells(cells: List[str]) -> str:
    return "[" + " ".join(cells) + "]"


def format_answer(result: AnswerResult) -> str:
    if result.aggregator == "SUM":
        return f"{sum_cells(result.cells):f}"
    return RESPONSE_PREFIX + format_cells(result.cells)
