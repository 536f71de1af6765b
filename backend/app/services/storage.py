"""
Storage: data-access object over one SQLAlchemy Session.
Topics, prompts, users and game records; CRUD only. Prompts are append-only and read newest first
by their autoincrement id.
"""
import logging

from sqlalchemy.orm import Session

from app.models.game_record import GameRecord
from app.models.prompt import Prompt
from app.models.topic import Topic
from app.models.user import User

logger = logging.getLogger(__name__)


class Storage:
    def __init__(self, db: Session) -> None:
        self.db = db

    # Topics

    def get_all_topics(self) -> list[Topic]:
        return self.db.query(Topic).order_by(Topic.id).all()

    def get_topic_by_id(self, topic_id: int) -> Topic | None:
        return self.db.get(Topic, topic_id)

    def create_topic(self, name: str, description: str, icon: str, color_class: str) -> Topic:
        topic = Topic(name=name, description=description, icon=icon, color_class=color_class)
        self.db.add(topic)
        self.db.commit()
        self.db.refresh(topic)
        return topic

    # Prompts

    def get_prompts_by_level_and_topic(
        self,
        level: str,
        topic_id: int,
        limit: int | None = None,
        include_custom: bool = False,
    ) -> list[Prompt]:
        """Prompts for (level, topic_id), most recently created first. Custom-topic rows are excluded unless asked for."""
        q = self.db.query(Prompt).filter(Prompt.level == level, Prompt.topic_id == topic_id)
        if not include_custom:
            q = q.filter(Prompt.custom_topic.is_(None))
        q = q.order_by(Prompt.id.desc())
        if limit is not None:
            q = q.limit(limit)
        return q.all()

    def _new_prompt(self, data: dict) -> Prompt:
        return Prompt(
            topic_id=data["topic_id"],
            level=data["level"],
            stage=data["stage"],
            question=data["question"],
            context=data["context"],
            hint_words=list(data["hint_words"]),
            session_id=data["session_id"],
            custom_topic=data.get("custom_topic"),
            prompt_metadata=data.get("metadata"),
        )

    def create_prompt(self, data: dict) -> Prompt:
        prompt = self._new_prompt(data)
        self.db.add(prompt)
        self.db.commit()
        self.db.refresh(prompt)
        return prompt

    def create_prompt_batch(self, rows: list[dict]) -> list[Prompt]:
        """Insert one generated set in a single transaction; on error nothing is written."""
        prompts = [self._new_prompt(r) for r in rows]
        try:
            self.db.add_all(prompts)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        for p in prompts:
            self.db.refresh(p)
        return prompts

    # Users

    def get_user(self, user_id: int) -> User | None:
        return self.db.get(User, user_id)

    def get_user_by_username(self, username: str) -> User | None:
        return self.db.query(User).filter(User.username == username).first()

    def create_user(self, username: str, password_hash: str) -> User:
        user = User(username=username, password_hash=password_hash)
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    # Game records

    def create_game_record(self, data: dict) -> GameRecord:
        record = GameRecord(**data)
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        return record

    def list_game_records(self, class_id: str | None = None) -> list[GameRecord]:
        q = self.db.query(GameRecord)
        if class_id:
            q = q.filter(GameRecord.class_id == class_id)
        return q.order_by(GameRecord.id.desc()).all()
