"""Tests for table views."""

import pandas as pd
import pytest

from id3_tlbx.data.views import HIDDEN, BaseView, DropView, SelectView, find_column
from id3_tlbx.exceptions import ColumnNotFoundError, TableLoadError


def _consume(view) -> list[list[str]]:
    rows = []
    view.reset()
    while (row := view.next()) is not None:
        rows.append(row)
    return rows


class TestFindColumn:
    """Test column lookup by name."""

    def test_returns_position(self) -> None:
        assert find_column(["a", "b", "c"], "c") == 2

    def test_missing_name_raises(self) -> None:
        with pytest.raises(ColumnNotFoundError) as excinfo:
            find_column(["a", "b"], "z")
        assert excinfo.value.column == "z"

    def test_hidden_columns_are_not_addressable(self) -> None:
        """The blank placeholder of a dropped column never matches."""
        with pytest.raises(ColumnNotFoundError):
            find_column(["a", HIDDEN, "c"], HIDDEN)

    def test_error_is_a_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            find_column([], "a")


class TestBaseView:
    """Test the root view owning the rows."""

    def test_columns_and_first_row(self, weather_view: BaseView) -> None:
        assert weather_view.columns() == ["outlook", "temperature", "humidity", "wind", "play"]
        row = weather_view.next()
        assert row is not None
        assert row[0] == "sunny"
        assert len(row) == 5

    def test_exhaustion_returns_none(self, weather_view: BaseView) -> None:
        rows = _consume(weather_view)
        assert len(rows) == 14
        assert weather_view.next() is None
        assert weather_view.next() is None

    def test_reset_is_idempotent(self, weather_view: BaseView) -> None:
        """Resetting then consuming twice yields the same sequence."""
        weather_view.next()
        weather_view.reset()
        weather_view.reset()
        first = _consume(weather_view)
        second = _consume(weather_view)
        assert first == second
        assert first[0] == ["sunny", "hot", "high", "weak", "no"]

    def test_iteration_restarts(self, weather_view: BaseView) -> None:
        weather_view.next()
        weather_view.next()
        assert len(list(weather_view)) == 14
        assert len(list(weather_view)) == 14

    def test_columns_returns_copy(self, weather_view: BaseView) -> None:
        cols = weather_view.columns()
        cols[0] = "changed"
        assert weather_view.columns()[0] == "outlook"

    def test_empty_table(self) -> None:
        view = BaseView.from_rows([["a", "b"]])
        assert len(view) == 0
        assert view.next() is None

    def test_ragged_row_rejected(self) -> None:
        with pytest.raises(TableLoadError, match="row 3"):
            BaseView.from_rows([["a", "b"], ["1", "2"], ["1"]])

    def test_duplicate_header_rejected(self) -> None:
        with pytest.raises(TableLoadError, match="duplicate"):
            BaseView(["a", "a"], [])

    def test_blank_header_rejected(self) -> None:
        with pytest.raises(TableLoadError, match="blank"):
            BaseView(["a", ""], [])

    def test_missing_header_rejected(self) -> None:
        with pytest.raises(TableLoadError):
            BaseView.from_rows([])

    def test_from_frame_casts_to_str(self) -> None:
        df = pd.DataFrame({"size": [1, 2], "label": ["x", "y"]})
        view = BaseView.from_frame(df)
        assert view.columns() == ["size", "label"]
        assert list(view) == [["1", "x"], ["2", "y"]]


class TestSelectView:
    """Test value-based row filtering."""

    def test_select_overcast(self, weather_view: BaseView) -> None:
        view = weather_view.select("outlook", "overcast")
        assert isinstance(view, SelectView)
        view.reset()
        for _ in range(4):
            assert view.next() is not None
        assert view.next() is None

    def test_rows_match_value(self, weather_view: BaseView) -> None:
        rows = _consume(weather_view.select("wind", "strong"))
        assert len(rows) == 6
        assert all(row[3] == "strong" for row in rows)

    def test_select_keeps_row_order(self, weather_view: BaseView) -> None:
        rows = _consume(weather_view.select("outlook", "rain"))
        assert [row[1] for row in rows] == ["mild", "cool", "cool", "mild", "mild"]

    def test_chained_selects(self, weather_view: BaseView) -> None:
        rows = _consume(weather_view.select("outlook", "sunny").select("humidity", "high"))
        assert len(rows) == 3
        assert {row[4] for row in rows} == {"no"}

    def test_unknown_value_yields_nothing(self, weather_view: BaseView) -> None:
        assert _consume(weather_view.select("outlook", "snow")) == []

    def test_unknown_column_raises(self, weather_view: BaseView) -> None:
        with pytest.raises(ColumnNotFoundError):
            weather_view.select("pressure", "low")

    def test_does_not_mutate_parent(self, weather_view: BaseView) -> None:
        weather_view.select("outlook", "sunny")
        assert len(_consume(weather_view)) == 14


class TestDropView:
    """Test column hiding."""

    def test_drop_blanks_column(self, weather_view: BaseView) -> None:
        view = weather_view.drop("outlook")
        assert isinstance(view, DropView)
        assert view.columns() == [HIDDEN, "temperature", "humidity", "wind", "play"]
        assert weather_view.columns()[0] == "outlook"

    def test_drop_keeps_rows_intact(self, weather_view: BaseView) -> None:
        """Field positions stay valid after hiding columns."""
        view = weather_view.drop("outlook").drop("wind")
        rows = _consume(view)
        assert len(rows) == 14
        assert rows[0] == ["sunny", "hot", "high", "weak", "no"]
        assert view.columns() == [HIDDEN, "temperature", "humidity", HIDDEN, "play"]

    def test_dropped_column_cannot_be_used(self, weather_view: BaseView) -> None:
        view = weather_view.drop("outlook")
        with pytest.raises(ColumnNotFoundError):
            view.select("outlook", "sunny")
        with pytest.raises(ColumnNotFoundError):
            view.drop("outlook")

    def test_select_after_drop(self, weather_view: BaseView) -> None:
        view = weather_view.select("outlook", "sunny").drop("outlook").select("humidity", "normal")
        rows = _consume(view)
        assert [row[4] for row in rows] == ["yes", "yes"]
        assert view.columns()[0] == HIDDEN

    def test_to_frame_omits_hidden_columns(self, weather_view: BaseView) -> None:
        frame = weather_view.select("outlook", "overcast").drop("outlook").to_frame()
        assert frame.columns.tolist() == ["temperature", "humidity", "wind", "play"]
        assert len(frame) == 4
        assert set(frame["play"]) == {"yes"}
