"""Schema for the static language categories shown on the landing page."""

from pydantic import BaseModel


class LanguageCategory(BaseModel):
    id: int
    language: str
    title: str
    teachers: str
    icon: str
