"""
In-memory quiz registry.

Holds quizzes in insertion order and answers lookup, category filtering
and answer-count reporting. "Not found" is always reported as None, never
raised, and is distinct from an empty list.
"""
import logging
from typing import Dict, Iterator, List, Optional, Union

from .models import Answer, Category, Quiz, RegistrySettings


class QuizRegistry:
    """Ordered, append-only collection of Quiz records."""

    def __init__(self, settings: Optional[RegistrySettings] = None):
        """
        Initialize an empty registry.

        Args:
            settings: Runtime settings, defaults to RegistrySettings()
        """
        self.settings = settings if settings is not None else RegistrySettings()
        self.logger = logging.getLogger(__name__)
        self._quizzes: List[Quiz] = []

    def __len__(self) -> int:
        return len(self._quizzes)

    def __iter__(self) -> Iterator[Quiz]:
        return iter(self._quizzes)

    def insert(self, quiz: Quiz) -> None:
        """
        Append a quiz to the registry.

        Duplicate ids are allowed and simply coexist. When category
        validation is enabled, a quiz with an unknown category is skipped
        with a warning instead.

        Args:
            quiz: Quiz record to store
        """
        if self.settings.validate_categories and quiz.category not in Category.values():
            self.logger.warning(
                f"Skipping quiz '{quiz.id}': unknown category '{quiz.category}'"
            )
            return

        self._quizzes.append(quiz)
        self.logger.debug(f"Inserted quiz '{quiz.id}' ({len(self._quizzes)} total)")

    def find_by_id(self, quiz_id: str) -> Optional[Quiz]:
        """
        Find the first quiz with the given id.

        Args:
            quiz_id: Id of the quiz

        Returns:
            The first matching Quiz in insertion order, or None if not found
        """
        for quiz in self._quizzes:
            if quiz.id == quiz_id:
                return quiz
        return None

    def filter_by_category(self, category: Union[Category, str]) -> List[Quiz]:
        """
        Get all quizzes in a category, in insertion order.

        Args:
            category: Category member or its string value

        Returns:
            List of matching quizzes, empty if none match
        """
        return [quiz for quiz in self._quizzes if quiz.category == category]

    def answers_for(self, quiz_id: str) -> Optional[List[Answer]]:
        """
        Retrieve the answers of a quiz.

        Args:
            quiz_id: Id of the quiz

        Returns:
            The quiz's answers (possibly empty), or None if the quiz is not found
        """
        quiz = self.find_by_id(quiz_id)
        if quiz is None:
            return None
        return quiz.answers

    def summary_text(self) -> str:
        """
        Build one "Quiz ID: <id>, Answers Count: <n>" line per quiz.

        Counts come from answers_for(), so a quiz sharing its id with an
        earlier one reports the earlier quiz's count.

        Returns:
            Lines joined by the configured separator, "" for an empty registry
        """
        lines = []
        for quiz in self._quizzes:
            answers = self.answers_for(quiz.id)
            count = len(answers) if answers is not None else 0
            lines.append(f"Quiz ID: {quiz.id}, Answers Count: {count}")
        return self.settings.summary_separator.join(lines)

    def get_quiz_count(self) -> int:
        return len(self._quizzes)

    def get_quiz_ids(self) -> List[str]:
        """Ids in insertion order, duplicates included."""
        return [quiz.id for quiz in self._quizzes]

    def quiz_exists(self, quiz_id: str) -> bool:
        return self.find_by_id(quiz_id) is not None

    def get_registry_summary(self) -> Dict[str, any]:
        """
        Get counts describing the registry contents.

        Returns:
            Dictionary with totals, per-category counts and quiz ids
        """
        per_category = {value: 0 for value in Category.values()}
        for quiz in self._quizzes:
            key = quiz.category.value if isinstance(quiz.category, Category) else str(quiz.category)
            per_category[key] = per_category.get(key, 0) + 1

        return {
            'total_quizzes': len(self._quizzes),
            'total_answers': sum(len(quiz.answers) for quiz in self._quizzes),
            'quizzes_per_category': per_category,
            'quiz_ids': self.get_quiz_ids()
        }
