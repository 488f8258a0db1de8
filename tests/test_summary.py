"""
Unit tests for the monthly summary pivot
"""
import pandas as pd
import pytest

from fars.analysis.summary import summarize_monthly_counts


def _year_table(year, months):
    return pd.DataFrame({"MONTH": months, "year": [year] * len(months)})


@pytest.mark.unit
class TestSummarizeMonthlyCounts:

    def test_counts_per_month_and_year(self):
        result = summarize_monthly_counts([
            _year_table(2013, [1, 1, 2, 3]),
            _year_table(2014, [1, 2, 2, 3]),
        ])

        expected = pd.DataFrame({
            "MONTH": [1, 2, 3],
            2013: pd.array([2, 1, 1], dtype="Int64"),
            2014: pd.array([1, 2, 1], dtype="Int64"),
        })
        pd.testing.assert_frame_equal(result, expected)

    def test_missing_month_is_null_not_zero(self):
        result = summarize_monthly_counts([
            _year_table(2013, [1, 2]),
            _year_table(2014, [1]),
        ])

        row = result.set_index("MONTH").loc[2]
        assert row[2013] == 1
        assert pd.isna(row[2014])

    def test_columns_and_rows_are_sorted(self):
        result = summarize_monthly_counts([
            _year_table(2015, [12, 3]),
            _year_table(2013, [7, 1]),
        ])

        assert list(result.columns) == ["MONTH", 2013, 2015]
        assert result["MONTH"].tolist() == [1, 3, 7, 12]

    def test_out_of_range_months_dropped(self):
        result = summarize_monthly_counts([_year_table(2013, [0, 1, 13, 99])])
        assert result["MONTH"].tolist() == [1]

    def test_empty_input(self):
        result = summarize_monthly_counts([])
        assert list(result.columns) == ["MONTH"]
        assert result.empty

    def test_extra_columns_ignored(self):
        df = _year_table(2013, [5, 5]).assign(STATE=[1, 2])
        result = summarize_monthly_counts([df])
        assert list(result.columns) == ["MONTH", 2013]
        assert result[2013].tolist() == [2]

    def test_missing_column_raises(self):
        with pytest.raises(ValueError, match="year"):
            summarize_monthly_counts([pd.DataFrame({"MONTH": [1]})])

    def test_inputs_not_mutated(self):
        df = _year_table(2013, [1, 99])
        before = df.copy()
        summarize_monthly_counts([df])
        pd.testing.assert_frame_equal(df, before)
