import pytest

from typistconsole.stats import TypingStats


def test_defaults():
    stats = TypingStats()
    assert (stats.total_chars, stats.mistakes, stats.wpm) == (0, 0, 0.0)


def test_accuracy_with_no_chars_is_full():
    assert TypingStats().accuracy() == 100.0


def test_accuracy_without_mistakes_is_full():
    assert TypingStats(total_chars=42, mistakes=0).accuracy() == 100.0


def test_accuracy_with_mistakes():
    assert TypingStats(total_chars=4, mistakes=1).accuracy() == pytest.approx(75.0)


def test_accuracy_saturates_at_zero():
    assert TypingStats(total_chars=3, mistakes=10).accuracy() == 0.0


def test_update_wpm_one_minute():
    stats = TypingStats(total_chars=50)
    stats.update_wpm(60.0)
    assert stats.wpm == pytest.approx(10.0)


def test_update_wpm_doubling_time_halves_speed():
    a = TypingStats(total_chars=123)
    b = TypingStats(total_chars=123)
    a.update_wpm(30.0)
    b.update_wpm(60.0)
    assert a.wpm == pytest.approx(2 * b.wpm)


@pytest.mark.parametrize("seconds", [0.0, -5.0])
def test_update_wpm_ignores_non_positive_time(seconds):
    stats = TypingStats(total_chars=100, wpm=33.5)
    stats.update_wpm(seconds)
    assert stats.wpm == 33.5


def test_to_dict_fields():
    stats = TypingStats(total_chars=7, mistakes=2, wpm=12.5)
    assert stats.to_dict() == {"total_chars": 7, "mistakes": 2, "wpm": 12.5}


def test_dict_round_trip():
    stats = TypingStats(total_chars=300, mistakes=17, wpm=48.25)
    assert TypingStats.from_dict(stats.to_dict()) == stats


def test_from_dict_missing_field():
    with pytest.raises(ValueError):
        TypingStats.from_dict({"total_chars": 1, "mistakes": 0})


def test_from_dict_negative_count():
    with pytest.raises(ValueError):
        TypingStats.from_dict({"total_chars": -1, "mistakes": 0, "wpm": 0.0})


def test_from_dict_bad_wpm():
    with pytest.raises(ValueError):
        TypingStats.from_dict({"total_chars": 1, "mistakes": 0, "wpm": "fast"})