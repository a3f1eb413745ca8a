"""Tests for the presentation helpers."""

import math
import random
import re

import pytest

from csvlens_qt.dashboard.derive import (
    cell_text,
    dataset_summary,
    format_stat,
    missing_chart,
    preview_matrix,
    stat_rows,
)
from csvlens_qt.types.analysis import AnalysisResult, Preview, SummaryStats


def _result_with_missing(sales_payload, by_column: dict) -> AnalysisResult:
    sales_payload["missing"] = {"total": sum(by_column.values()), "byColumn": by_column}
    return AnalysisResult.model_validate(sales_payload)


class TestMissingChart:
    """Test cases for the missing-value ranking."""

    def test_no_result(self):
        assert missing_chart(None) == []

    def test_sorted_descending(self, sales_payload):
        result = _result_with_missing(sales_payload, {"a": 1, "b": 5, "c": 3})
        assert missing_chart(result) == [("b", 5), ("c", 3), ("a", 1)]

    def test_keeps_twelve_largest_of_twenty(self, sales_payload):
        by_column = {f"col{i:02d}": i for i in range(20)}
        result = _result_with_missing(sales_payload, by_column)

        chart = missing_chart(result)

        assert len(chart) == 12
        assert [count for _, count in chart] == list(range(19, 7, -1))

    def test_ties_ordered_by_column_name(self, sales_payload):
        result = _result_with_missing(sales_payload, {"zeta": 2, "alpha": 2, "mid": 7})
        assert missing_chart(result) == [("mid", 7), ("alpha", 2), ("zeta", 2)]

    def test_ordering_and_length_for_random_mappings(self, sales_payload):
        rng = random.Random(7)
        for size in (0, 1, 5, 12, 13, 40):
            by_column = {f"c{i}": rng.randint(0, 10) for i in range(size)}
            chart = missing_chart(_result_with_missing(dict(sales_payload), by_column))

            counts = [count for _, count in chart]
            assert counts == sorted(counts, reverse=True)
            assert len(chart) == min(12, size)


class TestFormatting:
    """Test cases for statistic and cell formatting."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (41.2, "41.2000"),
            (97, "97.0000"),
            (0, "0.0000"),
            (-1.23456, "-1.2346"),
            (float("nan"), "NaN"),
            (float("inf"), "Infinity"),
            (float("-inf"), "-Infinity"),
            (None, "null"),
        ],
    )
    def test_format_stat(self, value, expected):
        assert format_stat(value) == expected

    def test_stat_rows_cover_all_fields(self):
        stats = SummaryStats(
            count=97,
            mean=41.2,
            std=float("nan"),
            min=18,
            p25=35,
            median=41,
            p75=47,
            max=float("inf"),
        )

        rows = stat_rows(stats)

        assert [name for name, _ in rows] == [
            "count", "mean", "std", "min", "p25", "median", "p75", "max"
        ]
        non_finite = {"NaN", "Infinity", "-Infinity", "null"}
        for _, text in rows:
            assert re.fullmatch(r"-?\d+\.\d{4}", text) or text in non_finite
        assert dict(rows)["mean"] == "41.2000"

    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, ""),
            ("north", "north"),
            (41, "41"),
            (2.5, "2.5"),
            (True, "true"),
            (False, "false"),
            (math.nan, "NaN"),
        ],
    )
    def test_cell_text(self, value, expected):
        assert cell_text(value) == expected

    def test_preview_matrix_fills_absent_cells(self):
        preview = Preview(
            columns=["age", "region"],
            rows=[{"age": 41, "region": None}, {"age": 30}],
        )
        assert preview_matrix(preview) == [["41", ""], ["30", ""]]


def test_dataset_summary(sales_result):
    assert dataset_summary(sales_result) == [
        ("File", "sales.csv"),
        ("Rows", "100"),
        ("Cols", "5"),
        ("Missing", "3"),
        ("Numeric cols", "1"),
    ]
