"""
Evaluation module for Minesweeper agents.

Plays agents through the environment and collects results.
"""
from .evaluator import CAPPED, EpisodeResult, Evaluator, summarize

__all__ = [
    "CAPPED",
    "EpisodeResult",
    "Evaluator",
    "summarize",
]
