"""Seeded timing experiments over a file of puzzles."""

from __future__ import annotations
import json
import os
import random
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional

from tqdm import tqdm

from ..core.board import SudokuBoard
from ..logging_utils import get_logger
from ..solvers import CSPSolver, SolverConfig

logger = get_logger(__name__)


DEFAULT_CONFIGS: Dict[str, SolverConfig] = {
    "MAC+MRV": SolverConfig(use_mac=True, use_mrv=True),
    "FC+MRV": SolverConfig(use_mac=False, use_mrv=True),
    "MAC": SolverConfig(use_mac=True, use_mrv=False),
    "FC": SolverConfig(use_mac=False, use_mrv=False),
}


def load_puzzles(path: str) -> List[str]:
    """Read one puzzle string per line, skipping blank lines."""
    with open(path, "r") as f:
        return [line.strip() for line in f if line.strip()]


@dataclass
class ExperimentResult:
    """Result of solving one drawn puzzle with one configuration."""
    trial: int
    puzzle_index: int
    puzzle: str
    config: str
    solved: bool
    time_seconds: float
    iterations: int
    backtracks: int
    nodes_explored: int
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def time_ms(self) -> float:
        return self.time_seconds * 1000.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "trial": self.trial,
            "puzzle_index": self.puzzle_index,
            "puzzle": self.puzzle,
            "config": self.config,
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "time_ms": self.time_ms,
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            **self.extra
        }


class Experiment:
    """
    Draw puzzles at random from a pool and time the solver on each.

    Puzzles are drawn with replacement from a ``random.Random`` seeded with
    ``seed``, so the same seed always picks the same sequence. Every drawn
    puzzle is solved once per configuration.
    """

    def __init__(
        self,
        puzzles: List[str],
        trials: int = 50,
        seed: Optional[int] = None,
        configs: Optional[Dict[str, SolverConfig]] = None
    ):
        """
        Initialize the experiment.

        Args:
            puzzles: Pool of puzzle strings to draw from.
            trials: Number of puzzles to draw.
            seed: Random seed for reproducibility.
            configs: Dict of config_name -> SolverConfig (default: MAC+MRV only).
        """
        if not puzzles:
            raise ValueError("Puzzle pool is empty")
        self.puzzles = puzzles
        self.trials = trials
        self.seed = seed
        self.configs = configs or {"MAC+MRV": DEFAULT_CONFIGS["MAC+MRV"]}
        self.results: List[ExperimentResult] = []

    @classmethod
    def from_file(cls, path: str, **kwargs) -> Experiment:
        return cls(load_puzzles(path), **kwargs)

    def draw(self) -> List[int]:
        """Indices of the puzzles drawn for this experiment."""
        rng = random.Random(self.seed)
        return [rng.randrange(len(self.puzzles)) for _ in range(self.trials)]

    def run(self, show_progress: bool = True) -> List[ExperimentResult]:
        """
        Run every configuration on every drawn puzzle.

        Returns:
            List of ExperimentResult objects.
        """
        self.results = []
        drawn = self.draw()

        pbar = tqdm(total=len(drawn) * len(self.configs), desc="Solving", disable=not show_progress)

        for trial, index in enumerate(drawn):
            for config_name, config in self.configs.items():
                self.results.append(self._run_single(trial, index, config_name, config))
                pbar.update(1)

        pbar.close()
        return self.results

    def _run_single(
        self,
        trial: int,
        index: int,
        config_name: str,
        config: SolverConfig
    ) -> ExperimentResult:
        """Solve one puzzle with one configuration, recording any failure."""
        puzzle = self.puzzles[index]
        try:
            board = SudokuBoard.from_string(puzzle)
            solver = CSPSolver(config, track_memory=False)
            _, stats = solver.solve(board)
            return ExperimentResult(
                trial=trial,
                puzzle_index=index,
                puzzle=puzzle,
                config=config_name,
                solved=stats.solved,
                time_seconds=stats.time_seconds,
                iterations=stats.iterations,
                backtracks=stats.backtracks,
                nodes_explored=stats.nodes_explored,
            )
        except Exception as e:
            logger.warning("Puzzle %d failed with %s: %s", index, config_name, e)
            return ExperimentResult(
                trial=trial,
                puzzle_index=index,
                puzzle=puzzle,
                config=config_name,
                solved=False,
                time_seconds=0.0,
                iterations=0,
                backtracks=0,
                nodes_explored=0,
                extra={"error": str(e)}
            )

    def get_summary(self) -> Dict[str, Any]:
        """
        Summary statistics per configuration.

        Times are in milliseconds and cover solved runs only, as unsolved
        runs say nothing about solve time.
        """
        summary = {
            "trials": self.trials,
            "seed": self.seed,
            "pool_size": len(self.puzzles),
            "results_by_config": {}
        }

        for config_name in self.configs:
            config_results = [r for r in self.results if r.config == config_name]
            if not config_results:
                continue
            solved = [r for r in config_results if r.solved]
            times = [r.time_ms for r in solved]

            summary["results_by_config"][config_name] = {
                "solved": len(solved),
                "tested": len(config_results),
                "max_ms": max(times) if times else 0.0,
                "min_ms": min(times) if times else 0.0,
                "avg_ms": sum(times) / len(times) if times else 0.0,
                "avg_backtracks": sum(r.backtracks for r in solved) / len(solved) if solved else 0.0,
            }

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save raw results and the summary as JSON files."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "experiment_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "experiment_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        logger.info("Results saved to %s", output_dir)
