from aggregator import format_answer, sum_cells
from models import AnswerResult


def test_sum_skips_non_numeric_cells():
    assert sum_cells(["1.5", "2.5", "x"]) == 4.0


def test_sum_trims_whitespace():
    assert sum_cells([" 10 ", "\t2.5\n"]) == 12.5


def test_sum_answer_is_formatted_total():
    result = AnswerResult(answer="SUM > 1.5, 2.5, x", cells=["1.5", "2.5", "x"], aggregator="SUM")
    assert format_answer(result) == "4.000000"


def test_sum_of_no_cells_is_zero():
    assert format_answer(AnswerResult(answer="", aggregator="SUM")) == "0.000000"


def test_count_renders_cells_verbatim():
    result = AnswerResult(answer="COUNT > a, b", cells=["a", "b"], aggregator="COUNT")
    assert format_answer(result) == "AI Model Response: \n[a b]"


def test_average_is_not_summed():
    result = AnswerResult(answer="AVERAGE > 1, 3", cells=["1", "3"], aggregator="AVERAGE")
    assert format_answer(result) == "AI Model Response: \n[1 3]"


def test_none_aggregator_single_cell():
    result = AnswerResult(answer="Alice", coordinates=[[0, 0]], cells=["Alice"])
    assert format_answer(result) == "AI Model Response: \n[Alice]"


def test_answer_result_round_trips_to_dict():
    data = {"answer": "Alice", "coordinates": [[0, 0]], "cells": ["Alice"], "aggregator": "NONE"}
    assert AnswerResult.from_dict(data).to_dict() == data
