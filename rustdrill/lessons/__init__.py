"""Worked solutions for the exercises, grouped by topic."""

__all__ = [
    "basics",
    "collections",
    "errors",
    "iterators",
    "quizzes",
    "structs",
    "threads",
]