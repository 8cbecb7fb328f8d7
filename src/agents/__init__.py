"""
Minesweeper agents module.

Provides simple scripted players that drive the environment:
- BaseAgent: Interface every agent implements
- RandomAgent: Baseline random selection
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent

__all__ = [
    "BaseAgent",
    "RandomAgent",
]
