"""Visualization utilities for experiment results."""

from __future__ import annotations
import os
from typing import List

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .experiment import ExperimentResult


class Visualizer:
    """
    Chart generator for solver experiment results.

    Compares search configurations by solve time and search effort.
    """

    # Color palette for configurations
    COLORS = {
        "MAC+MRV": "#2ecc71",   # Green
        "FC+MRV": "#3498db",    # Blue
        "MAC": "#9b59b6",       # Purple
        "FC": "#e74c3c",        # Red
    }

    def __init__(self, results: List[ExperimentResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of experiment results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        sns.set_theme(style="whitegrid")

    def _configs(self) -> List[str]:
        # First-seen order, matching the order configurations were run
        return list(dict.fromkeys(r.config for r in self.results))

    def _solved_times_ms(self, config: str) -> List[float]:
        return [r.time_ms for r in self.results if r.config == config and r.solved]

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_time_comparison(),
            self.plot_time_distribution(),
            self.plot_backtracks_comparison(),
        ]

    def plot_time_comparison(self) -> str:
        """Create bar chart comparing average solve times of solved runs."""
        fig, ax = plt.subplots(figsize=(10, 6))

        configs = self._configs()
        avg_times = []
        colors = []

        for config in configs:
            times = self._solved_times_ms(config)
            avg_times.append(float(np.mean(times)) if times else 0.0)
            colors.append(self.COLORS.get(config, "#95a5a6"))

        bars = ax.bar(configs, avg_times, color=colors, edgecolor='black', linewidth=0.5)

        for bar, time in zip(bars, avg_times):
            height = bar.get_height()
            ax.annotate(f'{time:.1f} ms',
                       xy=(bar.get_x() + bar.get_width() / 2, height),
                       xytext=(0, 3),
                       textcoords="offset points",
                       ha='center', va='bottom', fontsize=10)

        ax.set_xlabel('Configuration', fontsize=12)
        ax.set_ylabel('Average Time (ms)', fontsize=12)
        ax.set_title('Average Solve Time by Configuration', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)

        plt.tight_layout()
        path = os.path.join(self.output_dir, "time_comparison.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path

    def plot_time_distribution(self) -> str:
        """Create box plot showing the distribution of solve times."""
        fig, ax = plt.subplots(figsize=(12, 6))

        configs = [c for c in self._configs() if self._solved_times_ms(c)]
        if configs:
            data = [self._solved_times_ms(c) for c in configs]
            bp = ax.boxplot(data, patch_artist=True)
            ax.set_xticks(range(1, len(configs) + 1))
            ax.set_xticklabels(configs)

            for patch, config in zip(bp['boxes'], configs):
                patch.set_facecolor(self.COLORS.get(config, "#95a5a6"))
                patch.set_alpha(0.7)

        ax.set_xlabel('Configuration', fontsize=12)
        ax.set_ylabel('Time (ms)', fontsize=12)
        ax.set_title('Solve Time Distribution by Configuration', fontsize=14, fontweight='bold')

        plt.tight_layout()
        path = os.path.join(self.output_dir, "time_distribution.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path

    def plot_backtracks_comparison(self) -> str:
        """Create bar chart comparing average backtracks per configuration."""
        fig, ax = plt.subplots(figsize=(10, 6))

        configs = self._configs()
        avg_backtracks = []
        for config in configs:
            counts = [r.backtracks for r in self.results if r.config == config and r.solved]
            avg_backtracks.append(float(np.mean(counts)) if counts else 0.0)

        ax.bar(configs, avg_backtracks,
               color=[self.COLORS.get(c, "#95a5a6") for c in configs],
               edgecolor='black', linewidth=0.5)

        ax.set_xlabel('Configuration', fontsize=12)
        ax.set_ylabel('Average Backtracks (Log Scale)', fontsize=12)
        ax.set_title('Average Backtracks by Configuration', fontsize=14, fontweight='bold')
        # Backtrack counts vary by orders of magnitude between FC and MAC
        if any(v > 0 for v in avg_backtracks):
            ax.set_yscale('log')

        plt.tight_layout()
        path = os.path.join(self.output_dir, "backtracks_comparison.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path

    def generate_summary_table(self) -> str:
        """Generate a markdown summary table."""
        lines = [
            "# Experiment Summary\n",
            "| Configuration | Solved | Max | Min | Avg | Avg Backtracks |",
            "|---------------|--------|-----|-----|-----|----------------|"
        ]

        for config in self._configs():
            config_results = [r for r in self.results if r.config == config]
            times = self._solved_times_ms(config)
            solved = len(times)
            if times:
                max_t, min_t, avg_t = max(times), min(times), float(np.mean(times))
            else:
                max_t = min_t = avg_t = 0.0
            backtracks = [r.backtracks for r in config_results if r.solved]
            avg_bt = float(np.mean(backtracks)) if backtracks else 0.0

            lines.append(
                f"| {config} | {solved}/{len(config_results)} | {max_t:.1f} ms | "
                f"{min_t:.1f} ms | {avg_t:.1f} ms | {avg_bt:,.1f} |"
            )

        content = "\n".join(lines)

        path = os.path.join(self.output_dir, "experiment_summary.md")
        with open(path, "w") as f:
            f.write(content)

        return path
