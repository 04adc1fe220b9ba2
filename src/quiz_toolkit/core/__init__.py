"""
Quiz Toolkit Core Package

Shared data models, output validation and serialization. The extractor
builds QuizItem records; everything that reads or writes questions.json
goes through core.utils.serialization.
"""

from .models import Block, QuestionRecord, QuizItem, SolutionRecord

__all__ = [
    "Block",
    "QuestionRecord",
    "QuizItem",
    "SolutionRecord",
]
