"""Unit tests for the end-of-game performance rating."""
import pytest

from app.services.gamification import DEFAULT_ACHIEVEMENTS, performance_rating


@pytest.mark.parametrize(
    "score, unlocked, label",
    [
        (0, 0, "Keep practicing!"),
        (60, 0, "Keep practicing!"),
        (80, 0, "Good effort!"),
        (60, 3, "Excellent!"),
        (100, 1, "Great job!"),
        (90, 3, "Outstanding!"),
        (500, 0, "Outstanding!"),
    ],
)
def test_performance_rating(score, unlocked, label):
    assert performance_rating(score, unlocked) == label


def test_unlocked_count_is_clamped():
    assert performance_rating(0, 99) == performance_rating(0, len(DEFAULT_ACHIEVEMENTS))
    assert performance_rating(0, -1) == "Keep practicing!"


def test_default_achievements():
    ids = [a["id"] for a in DEFAULT_ACHIEVEMENTS]
    assert ids == ["everyone_revealed", "vocabulary_master", "topic_explorer"]
    assert all(not a["isUnlocked"] for a in DEFAULT_ACHIEVEMENTS)
