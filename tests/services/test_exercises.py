"""Tests for ExerciseService."""

from objtasks.services.exercises import ExerciseService


class TestSellTickets:
    def test_can_sell(self) -> None:
        result = ExerciseService().sell_tickets([25, 25, 50])
        assert result.ok
        assert result.data == {"can_sell": True, "customers": 3}

    def test_cannot_sell_is_still_ok(self) -> None:
        """Running out of change is an answer, not an error."""
        result = ExerciseService().sell_tickets([25, 100])
        assert result.ok
        assert result.data["can_sell"] is False

    def test_invalid_bill(self) -> None:
        result = ExerciseService().sell_tickets([25, 20, 75])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_INPUT"
        assert result.error.detail == {"bills": [20, 75]}


class TestCities:
    RECORDS = [
        {"country": "Russia", "city": "Omsk"},
        {"country": "Belarus", "city": "Minsk"},
        {"country": "Belarus", "city": "Brest"},
    ]

    def test_sort(self) -> None:
        result = ExerciseService().sort_cities([dict(r) for r in self.RECORDS])
        assert result.op == "sort_cities"
        assert [r["city"] for r in result.data["items"]] == ["Brest", "Minsk", "Omsk"]

    def test_group(self) -> None:
        result = ExerciseService().group_cities(self.RECORDS)
        assert result.op == "group_cities"
        assert result.data["groups"] == {"Russia": ["Omsk"], "Belarus": ["Minsk", "Brest"]}

    def test_not_a_list(self) -> None:
        result = ExerciseService().sort_cities({"country": "x"})
        assert result.error is not None
        assert result.error.code == "INVALID_INPUT"

    def test_missing_city(self) -> None:
        result = ExerciseService().group_cities([{"country": "Poland"}])
        assert result.error is not None
        assert "city" in result.error.message
