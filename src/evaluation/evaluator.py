"""
Evaluation module for Minesweeper agents.

Plays batches of games through ``MinesweeperEnv`` and reports win rate,
step counts and, for agents that track them, certain moves vs guesses.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union
import json

import numpy as np

from game.board import BoardConfig, Position
from game.environment import MinesweeperEnv
from agents.base_agent import BaseAgent


# ============================================================================
# Evaluation Configuration
# ============================================================================

@dataclass
class EvaluationConfig:
    """
    Configuration for an evaluation run.

    Attributes:
        num_episodes: Games to play per agent.
        max_steps: Step cap per game; 0 means twice the cell count,
            enough to flag every mine and reveal every safe cell.
        seed: Seed for the layout draws, so agents see the same boards.
    """

    num_episodes: int = 100
    max_steps: int = 0
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.num_episodes < 1:
            raise ValueError("num_episodes must be positive")
        if self.max_steps < 0:
            raise ValueError("max_steps cannot be negative")

    def step_limit(self, board_config: BoardConfig) -> int:
        return self.max_steps or 2 * board_config.total_cells


# ============================================================================
# Evaluation Statistics
# ============================================================================

@dataclass
class EpisodeStats:
    """Statistics for a single episode."""

    total_reward: float = 0.0
    steps: int = 0
    won: bool = False
    revealed_cells: int = 0
    flags: int = 0
    mine_layout: Tuple[Position, ...] = ()


@dataclass
class EvaluationStats:
    """Accumulated statistics over an evaluation run."""

    episodes: List[EpisodeStats] = field(default_factory=list)
    certain_moves: int = 0
    guesses_made: int = 0

    @property
    def episodes_completed(self) -> int:
        return len(self.episodes)

    @property
    def wins(self) -> int:
        return sum(episode.won for episode in self.episodes)

    @property
    def win_rate(self) -> float:
        if not self.episodes:
            return 0.0
        return self.wins / len(self.episodes)

    def _mean(self, attribute: str) -> float:
        if not self.episodes:
            return 0.0
        return float(np.mean([getattr(e, attribute) for e in self.episodes]))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "episodes_completed": self.episodes_completed,
            "wins": self.wins,
            "win_rate": self.win_rate,
            "avg_reward": self._mean("total_reward"),
            "avg_steps": self._mean("steps"),
            "avg_revealed": self._mean("revealed_cells"),
            "avg_flags": self._mean("flags"),
            "certain_moves": self.certain_moves,
            "guesses_made": self.guesses_made,
        }


# ============================================================================
# Agent Evaluator
# ============================================================================

class Evaluator:
    """
    Evaluate and compare agents on the same sequence of boards.

    Each evaluation reseeds the environment from ``config.seed``. Every
    layout is drawn before the first click, so two agents evaluated with
    the same evaluator meet the same layouts; the only difference is a
    mine under an agent's first click, which moves to the spare cell
    drawn with the layout.
    """

    def __init__(
        self,
        board_config: Optional[BoardConfig] = None,
        config: Optional[EvaluationConfig] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            board_config: Board configuration for evaluation.
            config: Episode count, step cap and seed.
        """
        self.board_config = board_config or BoardConfig()
        self.config = config or EvaluationConfig()

    def run(self, agent: BaseAgent) -> EvaluationStats:
        """Play ``config.num_episodes`` games with ``agent``."""
        env = MinesweeperEnv(config=self.board_config, seed=self.config.seed)
        stats = EvaluationStats()
        certain_before = getattr(agent, "certain_moves", 0)
        guesses_before = getattr(agent, "guesses_made", 0)

        for _ in range(self.config.num_episodes):
            stats.episodes.append(self._run_episode(env, agent))

        stats.certain_moves = getattr(agent, "certain_moves", 0) - certain_before
        stats.guesses_made = getattr(agent, "guesses_made", 0) - guesses_before
        return stats

    def _run_episode(self, env: MinesweeperEnv, agent: BaseAgent) -> EpisodeStats:
        episode = EpisodeStats()
        observation, _ = env.reset()
        agent.reset()

        for _ in range(self.config.step_limit(self.board_config)):
            action = agent.select_action(observation, env.get_action_mask())
            observation, reward, terminated, truncated, info = env.step(action)

            episode.total_reward += float(reward)
            episode.steps += 1
            episode.revealed_cells = info.get("revealed", 0)
            episode.flags = info.get("flags", 0)

            if terminated or truncated:
                episode.won = info.get("game_state") == "WON"
                break

        episode.mine_layout = env.board.mine_layout
        return episode

    def evaluate(self, agent: BaseAgent) -> Dict[str, Any]:
        """
        Evaluate a single agent.

        Returns:
            Dictionary with evaluation metrics, see ``EvaluationStats``.
        """
        return self.run(agent).to_dict()

    def compare(
        self, agents: Dict[str, BaseAgent]
    ) -> Dict[str, Dict[str, Any]]:
        """
        Compare multiple agents.

        Args:
            agents: Dictionary of agent_name -> agent.

        Returns:
            Dictionary of agent_name -> evaluation metrics.
        """
        results = {}
        for name, agent in agents.items():
            print(f"Evaluating {name}...")
            results[name] = self.evaluate(agent)
        return results


def save_results(results: Dict[str, Any], path: Union[str, Path]) -> Path:
    """Write evaluation results to ``path`` as JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(results, f, indent=2)
    return path
