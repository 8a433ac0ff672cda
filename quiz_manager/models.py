"""
Core data models for the quiz registry.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union
from datetime import datetime


class Category(str, Enum):
    """Subjects a quiz can belong to."""
    SPORT = "sport"
    MUSIC = "music"
    MOVIES = "movies"

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]


@dataclass
class Answer:
    """A single id/text pair given as a response to a quiz."""
    id: int
    text: str


@dataclass
class Quiz:
    """Represents a quiz record held by the registry."""
    id: str
    title: str
    category: Category
    questions: List[str] = field(default_factory=list)
    answers: List[Answer] = field(default_factory=list)
    created_at: Optional[datetime] = None


@dataclass
class QuizQuestion:
    """Standalone multiple-choice question used for sample data."""
    id: int
    question: str
    options: Union[List[str], List[float]]
    answer: Union[str, float, List[Union[str, float]]]


@dataclass
class RegistrySettings:
    """Runtime settings for a QuizRegistry."""
    validate_categories: bool = False
    summary_separator: str = "\n"
