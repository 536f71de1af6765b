"""
Topic: curated conversation topic shown on the home screen.
Seeded at startup (see app.database.DEFAULT_TOPICS); read-only for the prompt flow.
"""
from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Topic(Base):
    __tablename__ = "topics"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(String(512), nullable=False)
    icon: Mapped[str] = mapped_column(String(100), nullable=False)
    color_class: Mapped[str] = mapped_column(String(50), nullable=False)
