"""
Tests for tag-to-point mapping.
"""
from datetime import date, datetime, timedelta, timezone
from pathlib import Path

from tagsync.mapper import expand, expand_note, is_taggable
from tagsync.models import Note


def make_note(day, tags):
    return Note(path=Path(f"{day.isoformat()}.md"), date=day, tags=tuple(tags))


def midnight(day):
    return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)


class TestIsTaggable:

    def test_marker_anywhere(self):
        assert is_taggable("#work")
        assert is_taggable("area/#home")

    def test_without_marker(self):
        assert not is_taggable("misc")
        assert not is_taggable("")

    def test_custom_marker(self):
        assert is_taggable("@alice", "@")
        assert not is_taggable("#work", "@")


class TestExpandNote:

    def test_one_second_per_taggable_tag(self):
        day = date(2024, 3, 10)
        records = expand_note(make_note(day, ["#a", "#b", "#c"]))

        assert [r.timestamp for r in records] == [midnight(day) + timedelta(seconds=i) for i in range(3)]
        assert len({r.timestamp for r in records}) == 3
        assert [r.tag for r in records] == ["#a", "#b", "#c"]
        assert all(r.value == 1 for r in records)

    def test_offsets_count_only_taggable_tags(self):
        day = date(2024, 3, 10)
        records = expand_note(make_note(day, ["misc", "#a", "other", "#b"]))

        assert [(r.tag, r.timestamp - midnight(day)) for r in records] == [
            ("#a", timedelta(seconds=0)),
            ("#b", timedelta(seconds=1)),
        ]

    def test_weekday_label(self):
        # 2024-01-01 was a Monday
        assert expand_note(make_note(date(2024, 1, 1), ["#x"]))[0].weekday == "Mon"
        assert expand_note(make_note(date(2024, 1, 7), ["#x"]))[0].weekday == "Sun"

    def test_timestamps_are_utc(self):
        (record,) = expand_note(make_note(date(2024, 1, 1), ["#x"]))
        assert record.timestamp.tzinfo == timezone.utc

    def test_no_taggable_tags(self):
        assert expand_note(make_note(date(2024, 1, 1), ["misc", "plain"])) == []

    def test_no_tags(self):
        assert expand_note(make_note(date(2024, 1, 1), [])) == []


class TestExpand:

    def test_scenario_two_days(self):
        notes = [
            make_note(date(2024, 1, 1), ["#work", "misc"]),
            make_note(date(2024, 1, 2), ["#home"]),
        ]

        records = expand(notes)
        assert [(r.timestamp.isoformat(), r.tag) for r in records] == [
            ("2024-01-01T00:00:00+00:00", "#work"),
            ("2024-01-02T00:00:00+00:00", "#home"),
        ]

    def test_offsets_are_per_note(self):
        # Same-date notes in different folders each start at midnight + 0s
        day = date(2024, 1, 1)
        notes = [
            Note(path=Path("a/2024-01-01.md"), date=day, tags=("#a", "#b")),
            Note(path=Path("b/2024-01-01.md"), date=day, tags=("#c",)),
        ]

        records = expand(notes)
        assert [(r.tag, r.timestamp - midnight(day)) for r in records] == [
            ("#a", timedelta(seconds=0)),
            ("#b", timedelta(seconds=1)),
            ("#c", timedelta(seconds=0)),
        ]

    def test_empty(self):
        assert expand([]) == []
