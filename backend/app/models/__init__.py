"""
SQLAlchemy models. Import here so create_all and the app see every table.
"""
from app.models.topic import Topic
from app.models.prompt import Prompt
from app.models.user import User
from app.models.game_record import GameRecord

__all__ = ["Topic", "Prompt", "User", "GameRecord"]
