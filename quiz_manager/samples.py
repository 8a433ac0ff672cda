"""
Sample multiple-choice questions used for demonstration output.
"""
from dataclasses import asdict
from typing import List

from .models import QuizQuestion


FIRST_SAMPLE_QUESTION = QuizQuestion(
    id=1,
    question="What is the capital of France?",
    options=["Paris", "London", "Berlin", "Madrid"],
    answer="Paris"
)

SECOND_SAMPLE_QUESTION = QuizQuestion(
    id=2,
    question="What is the best food?",
    options=["Spaghetti", "Pizza", "Taco", "Sushi"],
    answer=["Pizza", "Sushi"]
)


def get_sample_questions() -> List[QuizQuestion]:
    """Return the sample questions in display order."""
    return [FIRST_SAMPLE_QUESTION, SECOND_SAMPLE_QUESTION]


def print_sample_questions() -> None:
    """Print each sample question to standard output."""
    for sample in get_sample_questions():
        print(asdict(sample))
