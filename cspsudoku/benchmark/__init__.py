"""Experiment module for timing the CSP solver on puzzle files."""

from .experiment import Experiment, ExperimentResult, load_puzzles, DEFAULT_CONFIGS

__all__ = ["Experiment", "ExperimentResult", "load_puzzles", "DEFAULT_CONFIGS"]
