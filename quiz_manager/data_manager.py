"""
Data manager for turning plain quiz dictionaries into registry records.
"""
import logging
from datetime import datetime
from typing import Dict, List, Optional

from .models import Answer, Category, Quiz
from .registry import QuizRegistry


class DataManager:
    """Parses quiz dictionaries and loads them into a QuizRegistry."""

    REQUIRED_FIELDS = ("id", "title", "questions", "answers", "category")

    def __init__(self, registry: QuizRegistry):
        """
        Initialize DataManager with the registry to load into.

        Args:
            registry: Registry receiving parsed quizzes
        """
        self.registry = registry
        self.logger = logging.getLogger(__name__)
        self.load_errors: List[str] = []  # Track parse errors for user feedback

    def load_quizzes(self, records: List[dict]) -> int:
        """
        Parse quiz dictionaries and insert them into the registry in order.

        Args:
            records: List of quiz dictionaries

        Returns:
            Number of quizzes inserted
        """
        self.load_errors.clear()

        if not isinstance(records, list):
            self.load_errors.append("Quiz records must be a list")
            self.logger.error("Quiz records must be a list")
            return 0

        inserted = 0
        for i, record in enumerate(records):
            quiz = self.parse_quiz(record)
            if quiz is None:
                self.load_errors.append(f"Record {i}: could not be parsed")
                continue

            self.registry.insert(quiz)
            inserted += 1

        self.logger.info(f"Loaded {inserted} of {len(records)} quizzes")
        if self.load_errors:
            self.logger.warning(f"Encountered {len(self.load_errors)} loading errors")

        return inserted

    def parse_quiz(self, data: dict) -> Optional[Quiz]:
        """
        Build a Quiz from a dictionary.

        Expected structure:
        {
            "id": str,
            "title": str,
            "questions": [str, ...],
            "answers": [{"id": int, "text": str}, ...],
            "category": "sport" | "music" | "movies",
            "createdAt": str  # Optional, ISO-8601
        }

        Args:
            data: Quiz dictionary

        Returns:
            Quiz object, or None if the dictionary cannot be parsed
        """
        if not isinstance(data, dict):
            self.logger.error("Quiz data must be an object")
            return None

        for field_name in self.REQUIRED_FIELDS:
            if field_name not in data:
                self.logger.error(f"Quiz data missing '{field_name}' field")
                return None

        # Validate field types
        for field_name in ("id", "title"):
            if not isinstance(data[field_name], str):
                self.logger.error(f"Quiz '{field_name}' field must be a string")
                return None

        questions = data["questions"]
        if not isinstance(questions, list):
            self.logger.error(f"Quiz '{data['id']}' 'questions' field must be an array")
            return None

        for i, question in enumerate(questions):
            if not isinstance(question, str):
                self.logger.error(f"Quiz '{data['id']}' question {i} must be a string")
                return None

        try:
            category = Category(data["category"])
        except ValueError:
            self.logger.error(f"Quiz '{data['id']}' has unknown category '{data['category']}'")
            return None

        answers = self._parse_answers(data["answers"])
        if answers is None:
            return None

        created_at = None
        raw_created_at = data.get("createdAt")
        if raw_created_at is None:
            raw_created_at = data.get("created_at")
        if raw_created_at is not None:
            created_at = self._parse_timestamp(raw_created_at)
            if created_at is None:
                return None

        return Quiz(
            id=data["id"],
            title=data["title"],
            questions=list(questions),
            answers=answers,
            category=category,
            created_at=created_at
        )

    def _parse_answers(self, answers_data: list) -> Optional[List[Answer]]:
        if not isinstance(answers_data, list):
            self.logger.error("'answers' value must be an array")
            return None

        answers = []
        for i, answer_data in enumerate(answers_data):
            if not isinstance(answer_data, dict) or "id" not in answer_data or "text" not in answer_data:
                self.logger.error(f"Answer {i} must be an object with 'id' and 'text'")
                return None
            answers.append(Answer(id=answer_data["id"], text=answer_data["text"]))

        return answers

    def _parse_timestamp(self, value) -> Optional[datetime]:
        if isinstance(value, datetime):
            return value
        try:
            # fromisoformat() rejects a trailing 'Z' on older interpreters
            return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
        except ValueError as e:
            self.logger.error(f"Invalid createdAt timestamp '{value}': {e}")
            return None

    def get_load_errors(self) -> List[str]:
        """
        Get list of errors encountered during the last load operation.

        Returns:
            List of error messages
        """
        return self.load_errors.copy()

    def has_load_errors(self) -> bool:
        return len(self.load_errors) > 0

    def get_loading_summary(self) -> Dict[str, any]:
        """
        Get a summary of the last loading operation.

        Returns:
            Dictionary with loading statistics and status
        """
        return {
            'total_quizzes': len(self.registry),
            'has_errors': self.has_load_errors(),
            'error_count': len(self.load_errors),
            'errors': self.get_load_errors(),
            'quiz_ids': self.registry.get_quiz_ids()
        }
