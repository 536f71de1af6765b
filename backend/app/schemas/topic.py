"""
Topic response (home screen topic cards and game header).
"""
from pydantic import BaseModel, Field


class TopicResponse(BaseModel):
    id: int
    name: str
    description: str
    icon: str
    color_class: str = Field(alias="colorClass")

    class Config:
        from_attributes = True
        populate_by_name = True
