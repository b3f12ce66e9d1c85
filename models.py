# models.py
# Containers passed between the parser, the inference connector and the handler.
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# column name -> cell values, one per data row
Table = Dict[str, List[str]]


class JawabError(Exception):
    """Base class for failures that end a /jawab request with success=false."""


class DecodeError(JawabError):
    pass


class ParseError(JawabError):
    pass


class TranslationError(JawabError):
    pass


class UpstreamError(JawabError):
    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    def __str__(self):
        base = super().__str__()
        if self.status_code is None:
            return base
        return f"{base} (status {self.status_code}, body: {self.body[:400]})"


@dataclass(frozen=True)
class AnswerResult:
    answer: str
    coordinates: List[List[int]] = field(default_factory=list)
    cells: List[str] = field(default_factory=list)
    aggregator: str = "NONE"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnswerResult":
        """
        Build from the table-QA JSON object. Raises ValueError on a wrong shape.
        """
        if not isinstance(data, dict):
            raise ValueError("answer payload must be a JSON object")

        answer = data.get("answer", "")
        if not isinstance(answer, str):
            raise ValueError("answer must be a string")

        coords = data.get("coordinates")
        if coords is None:
            coords = []
        if not isinstance(coords, list):
            raise ValueError("coordinates must be a list")
        coordinates = []
        for pair in coords:
            if (not isinstance(pair, list) or len(pair) != 2
                    or not all(isinstance(v, int) and not isinstance(v, bool) for v in pair)):
                raise ValueError(f"coordinate must be an [row, column] integer pair, got {pair!r}")
            coordinates.append([pair[0], pair[1]])

        cells = data.get("cells")
        if cells is None:
            cells = []
        if not isinstance(cells, list) or not all(isinstance(c, str) for c in cells):
            raise ValueError("cells must be a list of strings")

        aggregator = data.get("aggregator")
        if aggregator is None:
            aggregator = "NONE"
        if not isinstance(aggregator, str) or not aggregator:
            raise ValueError("aggregator must be a non-empty string")

        return cls(answer=answer, coordinates=coordinates, cells=list(cells), aggregator=aggregator)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "answer": self.answer,
            "coordinates": [list(p) for p in self.coordinates],
            "cells": list(self.cells),
            "aggregator": self.aggregator,
        }
