"""
Test fixtures and sample data for quiz registry tests.
"""
from datetime import datetime, timezone
from typing import Dict, List

from quiz_manager.models import Answer, Category, Quiz
from quiz_manager.registry import QuizRegistry


class TestFixtures:
    """Centralized test fixtures for all test modules."""

    @staticmethod
    def create_football_quiz() -> Quiz:
        """Create the single-answer sport quiz used across tests."""
        return Quiz(
            id="q1",
            title="Football quiz",
            questions=["Who won 2018?"],
            answers=[Answer(id=1, text="France")],
            category=Category.SPORT
        )

    @staticmethod
    def create_sample_quizzes() -> List[Quiz]:
        """Create quizzes covering every category, one without answers."""
        return [
            TestFixtures.create_football_quiz(),
            Quiz(
                id="q2",
                title="Rock classics",
                questions=["Who sang Bohemian Rhapsody?", "Which band released Abbey Road?"],
                answers=[Answer(1, "Queen"), Answer(2, "The Beatles")],
                category=Category.MUSIC,
                created_at=datetime(2024, 3, 1, 10, 0, tzinfo=timezone.utc)
            ),
            Quiz(
                id="q3",
                title="Film trivia",
                questions=["Who directed Jaws?"],
                answers=[],
                category=Category.MOVIES
            ),
            Quiz(
                id="q4",
                title="Olympics",
                questions=["Where were the 2012 games held?"],
                answers=[Answer(1, "London"), Answer(2, "Paris"), Answer(3, "London")],
                category=Category.SPORT
            )
        ]

    @staticmethod
    def create_populated_registry() -> QuizRegistry:
        """Create a registry holding the sample quizzes in order."""
        registry = QuizRegistry()
        for quiz in TestFixtures.create_sample_quizzes():
            registry.insert(quiz)
        return registry

    @staticmethod
    def create_valid_quiz_dict() -> Dict:
        """Create a valid quiz dictionary as found in config.json."""
        return {
            "id": "q2",
            "title": "Rock classics",
            "questions": ["Who sang Bohemian Rhapsody?"],
            "answers": [{"id": 1, "text": "Queen"}],
            "category": "music",
            "createdAt": "2024-03-01T10:00:00Z"
        }

    @staticmethod
    def create_invalid_quiz_dicts() -> List:
        """Create various quiz dictionaries that cannot be parsed."""
        return [
            # Not an object
            "not a quiz",
            # Missing id
            {
                "title": "No id",
                "questions": [],
                "answers": [],
                "category": "sport"
            },
            # Missing category
            {
                "id": "x",
                "title": "No category",
                "questions": [],
                "answers": []
            },
            # Questions is null
            {
                "id": "x",
                "title": "Null questions",
                "questions": None,
                "answers": [],
                "category": "sport"
            },
            # Questions is a string, not an array
            {
                "id": "x",
                "title": "String questions",
                "questions": "Who won?",
                "answers": [],
                "category": "sport"
            },
            # Question item is not a string
            {
                "id": "x",
                "title": "Numeric question",
                "questions": ["Who won?", 2018],
                "answers": [],
                "category": "sport"
            },
            # Id is not a string
            {
                "id": 1,
                "title": "Numeric id",
                "questions": [],
                "answers": [],
                "category": "sport"
            },
            # Title is not a string
            {
                "id": "x",
                "title": None,
                "questions": [],
                "answers": [],
                "category": "sport"
            },
            # Unknown category
            {
                "id": "x",
                "title": "Cooking",
                "questions": [],
                "answers": [],
                "category": "cooking"
            },
            # Answers not an array
            {
                "id": "x",
                "title": "Bad answers",
                "questions": [],
                "answers": "France",
                "category": "sport"
            },
            # Answer missing text
            {
                "id": "x",
                "title": "Bad answer item",
                "questions": [],
                "answers": [{"id": 1}],
                "category": "sport"
            },
            # Unparseable timestamp
            {
                "id": "x",
                "title": "Bad timestamp",
                "questions": [],
                "answers": [],
                "category": "sport",
                "createdAt": "yesterday"
            }
        ]
