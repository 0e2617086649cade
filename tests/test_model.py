"""Tests for the core models."""

from dataclasses import FrozenInstanceError
from datetime import date, datetime

import pytest

from todoline.engine.model import Context, KeyValue, Project, TodoEntry


class TestTodoEntryInvariants:
    """Test construction-time checks."""

    def test_defaults(self):
        """Test the default entry."""
        entry = TodoEntry()
        assert entry.done is False
        assert entry.priority is None
        assert entry.completion_date is None
        assert entry.creation_date is None
        assert entry.description == ""

    @pytest.mark.parametrize("priority", ["a", "AA", "", "1", "("])
    def test_invalid_priority(self, priority):
        """Test that priorities must be one uppercase letter."""
        with pytest.raises(ValueError):
            TodoEntry(priority=priority)

    @pytest.mark.parametrize("value", ["2019-02", "2019/02/01", "19-02-01", "2019-02-01 "])
    def test_invalid_date_shape(self, value):
        """Test that dates must look like YYYY-MM-DD."""
        with pytest.raises(ValueError):
            TodoEntry(creation_date=value)

    def test_date_shape_only(self):
        """Test that calendar validity is not checked."""
        assert TodoEntry(creation_date="2019-99-99").creation_date == "2019-99-99"

    def test_completion_requires_creation(self):
        """Test that a completion date needs a creation date."""
        with pytest.raises(ValueError, match="requires creation_date"):
            TodoEntry(completion_date="2019-07-02")

    def test_done_independent_of_dates(self):
        """Test that done entries need no dates."""
        assert TodoEntry(done=True).done is True

    def test_immutable(self):
        """Test that entries cannot be modified."""
        entry = TodoEntry(description="Stuff")
        with pytest.raises(FrozenInstanceError):
            entry.description = "Other"  # type: ignore[misc]


class TestRecords:
    """Test conversion to and from plain mappings."""

    def test_to_dict(self):
        """Test the record layout."""
        entry = TodoEntry(done=True, priority="A", creation_date="2019-05-01", description="Milk")
        assert entry.to_dict() == {
            "done": True,
            "priority": "A",
            "completion_date": None,
            "creation_date": "2019-05-01",
            "description": "Milk",
        }

    def test_from_dict_round_trip(self):
        """Test that to_dict output is accepted by from_dict."""
        entry = TodoEntry(
            done=True,
            priority="B",
            completion_date="2019-07-02",
            creation_date="2019-06-03",
            description="Do Stuff",
        )
        assert TodoEntry.from_dict(entry.to_dict()) == entry

    def test_from_dict_defaults(self):
        """Test that missing keys take defaults."""
        assert TodoEntry.from_dict({"description": "Stuff"}) == TodoEntry(description="Stuff")
        assert TodoEntry.from_dict({"description": None}) == TodoEntry()

    def test_from_dict_date_objects(self):
        """Test that date values are normalised to ISO strings."""
        entry = TodoEntry.from_dict(
            {
                "completion_date": datetime(2019, 7, 2, 10, 30),
                "creation_date": date(2019, 6, 3),
            }
        )
        assert entry.completion_date == "2019-07-02"
        assert entry.creation_date == "2019-06-03"

    def test_from_dict_ignores_tags(self):
        """Test that derived keys are ignored."""
        entry = TodoEntry.from_dict({"description": "x @a", "tags": [{"context": "a"}]})
        assert entry.description == "x @a"

    @pytest.mark.parametrize(
        "data",
        [
            ["not", "a", "mapping"],
            {"done": "yes"},
            {"priority": 1},
            {"description": 42},
            {"creation_date": 20190101},
            {"completion_date": "2019-07-02"},
        ],
    )
    def test_from_dict_invalid(self, data):
        """Test that malformed records are rejected."""
        with pytest.raises(ValueError):
            TodoEntry.from_dict(data)


class TestTags:
    """Test tag values."""

    def test_str(self):
        """Test rendering tags as source words."""
        assert str(Project("school")) == "+school"
        assert str(Context("home")) == "@home"
        assert str(KeyValue("due", "2019-02-01")) == "due:2019-02-01"

    def test_to_dict(self):
        """Test structured tag output."""
        assert Project("p").to_dict() == {"project": "p"}
        assert Context("c").to_dict() == {"context": "c"}
        assert KeyValue("k", "v").to_dict() == {"key": "k", "value": "v"}

    def test_variants_are_distinct(self):
        """Test that variants with equal text are not equal."""
        assert Project("a") != Context("a")
