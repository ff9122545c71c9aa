"""
Evaluation module for Minesweeper agents.

Provides batch play, agent comparison and result export.
"""
from .evaluator import (
    EvaluationConfig,
    EpisodeStats,
    EvaluationStats,
    Evaluator,
    save_results,
)

__all__ = [
    "EvaluationConfig",
    "EpisodeStats",
    "EvaluationStats",
    "Evaluator",
    "save_results",
]
