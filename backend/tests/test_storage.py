"""Tests for the Storage data-access object (seeding, prompt round-trip and ordering, users, records)."""
import pytest

from app.database import DEFAULT_TOPICS, seed_topics
from app.models.prompt import Prompt


def _prompt(topic_id, stage="Ask", level="B1", session_id="s1", **extra):
    data = {
        "topic_id": topic_id,
        "level": level,
        "stage": stage,
        "question": f"{stage} question?",
        "context": "Some context.",
        "hint_words": ["one", "two", "three", "four", "five"],
        "session_id": session_id,
    }
    data.update(extra)
    return data


def test_topics_seeded_once(storage, db_session):
    topics = storage.get_all_topics()
    assert [t.name for t in topics] == [name for name, *_ in DEFAULT_TOPICS]
    assert seed_topics(db_session) == 0
    assert len(storage.get_all_topics()) == len(DEFAULT_TOPICS)


def test_get_topic_by_id(storage, topic_ids):
    topic = storage.get_topic_by_id(topic_ids["Your Class"])
    assert topic.description == "Teachers & classmates"
    assert topic.color_class == "accent1"
    assert storage.get_topic_by_id(12345) is None


def test_create_topic(storage):
    topic = storage.create_topic("Sports", "Games & teams", "fa-futbol", "primary")
    assert topic.id is not None
    assert storage.get_topic_by_id(topic.id).name == "Sports"


def test_prompt_round_trip(storage, topic_ids):
    tid = topic_ids["Food"]
    created = storage.create_prompt(_prompt(tid, metadata={"sessionId": "s1", "timestamp": 1, "aspect": "Ask"}))
    [row] = storage.get_prompts_by_level_and_topic("B1", tid)
    assert row.id == created.id
    assert row.stage == "Ask"
    assert row.question == "Ask question?"
    assert row.context == "Some context."
    assert row.hint_words == ["one", "two", "three", "four", "five"]
    assert row.prompt_metadata == {"sessionId": "s1", "timestamp": 1, "aspect": "Ask"}
    assert row.created_at is not None


def test_prompts_newest_first_with_limit(storage, topic_ids):
    tid = topic_ids["Travel"]
    ids = [storage.create_prompt(_prompt(tid, stage=s)).id for s in ("Ask", "Tell", "Reveal", "Ask")]
    rows = storage.get_prompts_by_level_and_topic("B1", tid)
    assert [r.id for r in rows] == sorted(ids, reverse=True)
    assert [r.id for r in storage.get_prompts_by_level_and_topic("B1", tid, limit=3)] == sorted(ids, reverse=True)[:3]
    assert storage.get_prompts_by_level_and_topic("C1", tid) == []


def test_create_prompt_batch_is_atomic(storage, db_session, topic_ids):
    tid = topic_ids["Food"]
    bad = _prompt(tid, stage="Ask")
    bad["question"] = None  # NOT NULL violation
    with pytest.raises(Exception):
        storage.create_prompt_batch([_prompt(tid, stage="Ask"), _prompt(tid, stage="Tell"), bad])
    assert db_session.query(Prompt).count() == 0
    rows = storage.create_prompt_batch([_prompt(tid, stage=s) for s in ("Ask", "Tell", "Reveal")])
    assert [r.stage for r in rows] == ["Ask", "Tell", "Reveal"]
    assert all(r.id for r in rows)


def test_users(storage):
    user = storage.create_user("maria", "hash")
    assert storage.get_user(user.id).username == "maria"
    assert storage.get_user_by_username("maria").id == user.id
    assert storage.get_user_by_username("nobody") is None


def test_game_records_filtered_by_class(storage, topic_ids):
    base = {
        "level": "B1",
        "topic_id": topic_ids["Food"],
        "topic_name": "Food",
        "score": 40,
        "achievements_unlocked": 1,
        "keywords_used": 3,
        "rounds_completed": 2,
        "rating": "Good effort!",
    }
    storage.create_game_record({**base, "student_name": "Ana", "class_id": "7A"})
    storage.create_game_record({**base, "student_name": "Ben", "class_id": "7B"})
    storage.create_game_record({**base, "student_name": "Cai", "class_id": "7A"})
    assert [r.student_name for r in storage.list_game_records("7A")] == ["Cai", "Ana"]
    assert len(storage.list_game_records()) == 3
