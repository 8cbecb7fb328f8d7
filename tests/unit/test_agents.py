"""
Unit tests for agents and the evaluator.
"""
import numpy as np
import pytest
from agents import RandomAgent
from agents.base_agent import BaseAgent
from evaluation import CAPPED, EpisodeResult, Evaluator, summarize
from minefield import BoardConfig


class GuessingAgent(BaseAgent):
    """Agent that only ever cycles the guess on the first cell."""

    def select_action(self, observation, valid_actions=None) -> int:
        return self.guess_action(0, 0)


class TestRandomAgent:
    """Test the random baseline."""

    def test_picks_covered_cell(self) -> None:
        """Only covered cells should be chosen."""
        obs = np.zeros((3, 3), dtype=np.int8)
        obs[2, 1] = -1
        agent = RandomAgent(3, 3, seed=0)
        for _ in range(10):
            assert agent.select_action(obs) == 7

    def test_skips_flagged_cells(self) -> None:
        """Flagged cells should not be uncovered."""
        obs = np.full((2, 2), -2, dtype=np.int8)
        obs[0, 1] = -3
        agent = RandomAgent(2, 2, seed=0)
        assert agent.select_action(obs) == 1

    def test_uses_uncover_half_of_mask(self) -> None:
        """Only the uncover part of the action mask is used."""
        obs = np.full((2, 2), -1, dtype=np.int8)
        mask = np.array([False, False, True, False, True, True, True, True])
        agent = RandomAgent(2, 2, seed=0)
        assert agent.select_action(obs, mask) == 2

    def test_no_candidates_returns_zero(self) -> None:
        """With nothing to uncover, action 0 is returned."""
        obs = np.zeros((2, 2), dtype=np.int8)
        agent = RandomAgent(2, 2)
        assert agent.select_action(obs) == 0

    def test_invalid_guess_rate_raises(self) -> None:
        """Guess rates outside [0, 1) are rejected."""
        with pytest.raises(ValueError, match="Guess rate"):
            RandomAgent(3, 3, guess_rate=1.0)
        with pytest.raises(ValueError, match="Guess rate"):
            RandomAgent(3, 3, guess_rate=-0.5)

    def test_guesses_when_only_flags_remain(self) -> None:
        """With every covered cell flagged, a guess action is chosen."""
        obs = np.zeros((2, 2), dtype=np.int8)
        obs[1, 0] = -2
        agent = RandomAgent(2, 2, seed=0)
        assert agent.select_action(obs) == 4 + 2

    def test_guess_rate_mixes_in_guesses(self) -> None:
        """A high guess rate yields mostly guess actions on covered cells."""
        obs = np.full((3, 3), -1, dtype=np.int8)
        obs[0, 0] = 0
        agent = RandomAgent(3, 3, seed=0, guess_rate=0.9)
        actions = [agent.select_action(obs) for _ in range(50)]
        guesses = [action for action in actions if action >= 9]
        assert len(guesses) > 25
        assert all(action != 9 for action in guesses)
        assert all(action != 0 for action in actions)

    def test_action_helpers(self) -> None:
        """Index helpers should agree with the environment layout."""
        agent = RandomAgent(3, 4)
        assert agent.uncover_action(1, 2) == 6
        assert agent.guess_action(1, 2) == 18
        assert agent.action_to_position(6) == (1, 2)
        assert agent.action_to_position(18) == (1, 2)


class TestEvaluator:
    """Test playing repeated games."""

    def test_mine_free_board_always_wins(self) -> None:
        """Every game on a board without mines is won."""
        evaluator = Evaluator(BoardConfig(3, 3, 0), num_episodes=3)
        results = evaluator.evaluate(RandomAgent(3, 3, seed=0))
        assert results["win_rate"] == 1.0
        assert results["avg_steps"] == 1.0

    def test_metrics(self) -> None:
        """Results should contain the standard metrics."""
        evaluator = Evaluator(BoardConfig(9, 9, 10), num_episodes=5, seed=0)
        results = evaluator.evaluate(RandomAgent(9, 9, seed=0))
        assert set(results) == {
            "win_rate", "loss_rate", "capped_rate", "avg_reward",
            "avg_steps", "avg_revealed", "avg_cleared",
        }
        assert results["win_rate"] + results["loss_rate"] + results[
            "capped_rate"
        ] == pytest.approx(1.0)
        assert results["avg_steps"] >= 1.0
        assert 0.0 <= results["avg_cleared"] <= 1.0

    def test_step_limit_caps_game(self) -> None:
        """Games cut off by the step limit are reported as capped."""
        evaluator = Evaluator(BoardConfig(9, 9, 10), num_episodes=2, max_steps=3)
        results = evaluator.run(GuessingAgent(9, 9))
        for result in results:
            assert result.outcome == CAPPED
            assert result.steps == 3
            assert result.safe_opened == 0
            assert result.reward == 0.0

    def test_step_callback_sees_every_action(self) -> None:
        """The step callback is called once per action taken."""
        calls = []
        evaluator = Evaluator(BoardConfig(5, 5, 3), num_episodes=3, seed=7)
        results = evaluator.run(
            RandomAgent(5, 5, seed=7),
            on_step=lambda env, action, info: calls.append((action, info["steps"])),
        )
        assert len(calls) == sum(result.steps for result in results)
        assert calls[0][1] == 1


class TestSummarize:
    """Test aggregating episode results."""

    def test_rates_and_averages(self) -> None:
        """Outcome rates and averages are taken over all games."""
        results = [
            EpisodeResult("WON", steps=4, reward=20.0, safe_opened=8, total_safe=8),
            EpisodeResult("LOST", steps=2, reward=-9.0, safe_opened=2, total_safe=8),
            EpisodeResult(CAPPED, steps=6, reward=1.0, safe_opened=4, total_safe=8),
            EpisodeResult("LOST", steps=1, reward=-10.0, safe_opened=0, total_safe=8),
        ]
        summary = summarize(results)
        assert summary["win_rate"] == 0.25
        assert summary["loss_rate"] == 0.5
        assert summary["capped_rate"] == 0.25
        assert summary["avg_reward"] == pytest.approx(0.5)
        assert summary["avg_steps"] == pytest.approx(3.25)
        assert summary["avg_revealed"] == pytest.approx(3.5)
        assert summary["avg_cleared"] == pytest.approx(14 / 32)

    def test_empty_results_raise(self) -> None:
        """There is nothing to summarize without games."""
        with pytest.raises(ValueError, match="No episodes"):
            summarize([])

    def test_cleared_fraction(self) -> None:
        """Cleared is the share of safe squares opened."""
        assert EpisodeResult("LOST", 3, -8.0, 3, 12).cleared == 0.25
        assert EpisodeResult("WON", 1, 10.0, 0, 0).cleared == 1.0
