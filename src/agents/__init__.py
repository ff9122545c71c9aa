"""
Minesweeper AI agents module.

Provides agents for playing Minesweeper:
- RandomAgent: Baseline random selection
- ProbabilityAgent: Local constraint propagation with probability guessing
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .probability import (
    IGNORED,
    UNKNOWN,
    ProbabilityEstimator,
    format_probabilities,
    round_probability,
)
from .probability_agent import Move, ProbabilityAgent

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "IGNORED",
    "UNKNOWN",
    "ProbabilityEstimator",
    "format_probabilities",
    "round_probability",
    "Move",
    "ProbabilityAgent",
]
