"""
Agent evaluation over repeated games.

Each game is recorded as an ``EpisodeResult``; ``summarize`` turns a
list of them into rates and averages.
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from agents.base_agent import BaseAgent
from minefield.board import GameState
from minefield.config import BoardConfig
from minefield.environment import MinesweeperEnv


CAPPED = "CAPPED"

StepCallback = Callable[[MinesweeperEnv, int, Dict[str, Any]], None]


# ============================================================================
# Episode Results
# ============================================================================

@dataclass
class EpisodeResult:
    """
    Outcome of one game.

    Attributes:
        outcome: ``WON``, ``LOST``, or ``CAPPED`` when the step limit
            ran out first.
        steps: Actions taken.
        reward: Total reward collected.
        safe_opened: Safe squares opened when the game stopped.
        total_safe: Safe squares on the board.
    """

    outcome: str
    steps: int
    reward: float
    safe_opened: int
    total_safe: int

    @property
    def cleared(self) -> float:
        """Fraction of the safe squares that were opened."""
        if self.total_safe == 0:
            return 1.0
        return self.safe_opened / self.total_safe


def summarize(results: List[EpisodeResult]) -> Dict[str, float]:
    """
    Aggregate episode results.

    Returns:
        Outcome rates plus average reward, steps, safe squares opened
        and fraction of the board cleared.
    """
    count = len(results)
    if count == 0:
        raise ValueError("No episodes to summarize")

    def rate(outcome: str) -> float:
        return sum(1 for result in results if result.outcome == outcome) / count

    return {
        "win_rate": rate(GameState.WON.name),
        "loss_rate": rate(GameState.LOST.name),
        "capped_rate": rate(CAPPED),
        "avg_reward": sum(result.reward for result in results) / count,
        "avg_steps": sum(result.steps for result in results) / count,
        "avg_revealed": sum(result.safe_opened for result in results) / count,
        "avg_cleared": sum(result.cleared for result in results) / count,
    }


# ============================================================================
# Agent Evaluator
# ============================================================================

class Evaluator:
    """
    Play an agent through fresh games and report how it did.

    Each game starts from an empty layout; mines are placed on the
    agent's first uncover.
    """

    def __init__(
        self,
        board_config: Optional[BoardConfig] = None,
        num_episodes: int = 100,
        max_steps: int = 1000,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            board_config: Board configuration for evaluation.
            num_episodes: Number of games to play.
            max_steps: Actions allowed per game before it is capped.
            seed: Seed for the first game's mine placement.
        """
        self.board_config = board_config or BoardConfig()
        self.num_episodes = num_episodes
        self.max_steps = max_steps
        self.seed = seed

    def play_episode(
        self,
        agent: BaseAgent,
        env: MinesweeperEnv,
        seed: Optional[int] = None,
        on_step: Optional[StepCallback] = None,
    ) -> EpisodeResult:
        """
        Play one game.

        Args:
            agent: Agent choosing the actions.
            env: Environment to play in; it is reset first.
            seed: Seed for this game's mine placement.
            on_step: Called after each action with the environment,
                the action and the step info.

        Returns:
            The game's result.
        """
        observation, info = env.reset(seed=seed)
        agent.reset()
        reward_total = 0.0
        steps = 0
        outcome = CAPPED

        while steps < self.max_steps:
            action = agent.select_action(observation, env.get_action_mask())
            observation, reward, terminated, truncated, info = env.step(action)
            reward_total += float(reward)
            steps += 1

            if on_step is not None:
                on_step(env, action, info)
            if terminated or truncated:
                outcome = info["game_state"]
                break

        return EpisodeResult(
            outcome=outcome,
            steps=steps,
            reward=reward_total,
            safe_opened=info["revealed"],
            total_safe=info["total_safe"],
        )

    def run(
        self, agent: BaseAgent, on_step: Optional[StepCallback] = None
    ) -> List[EpisodeResult]:
        """Play ``num_episodes`` games and collect their results."""
        env = MinesweeperEnv(config=self.board_config)
        return [
            self.play_episode(
                agent,
                env,
                seed=self.seed if episode == 0 else None,
                on_step=on_step,
            )
            for episode in range(self.num_episodes)
        ]

    def evaluate(
        self, agent: BaseAgent, on_step: Optional[StepCallback] = None
    ) -> Dict[str, float]:
        """Play the games and summarize them."""
        return summarize(self.run(agent, on_step=on_step))
