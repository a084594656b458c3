import json

import pytest

from typistconsole.storage import StoredStats


def _sample():
    return StoredStats(
        total_sessions=3,
        total_chars=1500,
        total_mistakes=42,
        avg_wpm=55.5,
        avg_accuracy=97.2,
    )


def test_json_round_trip():
    stats = _sample()
    assert StoredStats.from_json(stats.to_json()) == stats


def test_json_keys():
    data = json.loads(_sample().to_json())
    assert set(data) == {
        "total_sessions",
        "total_chars",
        "total_mistakes",
        "avg_wpm",
        "avg_accuracy",
    }


def test_integer_averages_accepted():
    text = json.dumps(
        {
            "total_sessions": 1,
            "total_chars": 10,
            "total_mistakes": 0,
            "avg_wpm": 20,
            "avg_accuracy": 100,
        }
    )
    stats = StoredStats.from_json(text)
    assert stats.avg_wpm == 20.0
    assert stats.avg_accuracy == 100.0


def test_missing_field_rejected():
    data = json.loads(_sample().to_json())
    del data["avg_accuracy"]
    with pytest.raises(ValueError):
        StoredStats.from_json(json.dumps(data))


def test_invalid_json_rejected():
    with pytest.raises(ValueError):
        StoredStats.from_json("{not json")


def test_non_object_rejected():
    with pytest.raises(ValueError):
        StoredStats.from_json("[1, 2, 3]")


@pytest.mark.parametrize(
    "field, value",
    [
        ("total_sessions", -1),
        ("total_sessions", 2**32),
        ("total_chars", 2**64),
        ("total_mistakes", 1.5),
        ("avg_wpm", "fast"),
    ],
)
def test_out_of_range_or_wrong_type_rejected(field, value):
    data = json.loads(_sample().to_json())
    data[field] = value
    with pytest.raises(ValueError):
        StoredStats.from_json(json.dumps(data))


def test_u32_upper_bound_accepted():
    data = json.loads(_sample().to_json())
    data["total_sessions"] = 2**32 - 1
    assert StoredStats.from_json(json.dumps(data)).total_sessions == 2**32 - 1