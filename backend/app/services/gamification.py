"""
XP and achievements: default achievement set and the end-of-game performance rating.
"""

DEFAULT_ACHIEVEMENTS = [
    {
        "id": "everyone_revealed",
        "name": "Group Revelation",
        "description": "Everyone completed a 'Reveal' prompt",
        "icon": "fa-star",
        "isUnlocked": False,
    },
    {
        "id": "vocabulary_master",
        "name": "Vocabulary Master",
        "description": "Successfully used 5 vocabulary challenge words",
        "icon": "fa-book",
        "isUnlocked": False,
        "progress": 0,
        "maxProgress": 5,
    },
    {
        "id": "topic_explorer",
        "name": "Topic Explorer",
        "description": "Practiced with 3 different topics",
        "icon": "fa-compass",
        "isUnlocked": False,
        "progress": 0,
        "maxProgress": 3,
    },
]

# (minimum combined score, label), checked top-down
RATING_THRESHOLDS = [
    (90, "Outstanding!"),
    (75, "Excellent!"),
    (60, "Great job!"),
    (40, "Good effort!"),
]
DEFAULT_RATING = "Keep practicing!"


def performance_rating(score: int, achievements_unlocked: int) -> str:
    """Label for a finished game: min(100, XP/2 + unlocked-achievement ratio * 50)."""
    total = len(DEFAULT_ACHIEVEMENTS)
    ratio = min(max(achievements_unlocked, 0), total) / total if total else 0.0
    combined = min(100.0, score / 2 + ratio * 50)
    for threshold, label in RATING_THRESHOLDS:
        if combined >= threshold:
            return label
    return DEFAULT_RATING
