"""
Tests for main.py - the simulation controller and headless driver.
"""

import json
import random
import sys
import os
from unittest.mock import patch

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import SimulationConfig
from domain.constants import (
    UP, DOWN, LEFT, RIGHT,
    CONTINUE, GREW, COLLIDED,
    SELF_COLLISION, BOARD_FULL,
)
from domain.food import Food
from domain.game_state import GameState
from domain.snake import Snake
from main import SnakeGame, run_simulation, main
from players import RandomPlayer, ScriptedPlayer


def make_game(positions, direction=RIGHT, food=(150, 150), width=300, height=300, seed=1, **config_kwargs):
    config = SimulationConfig(width=width, height=height, cell_size=15, **config_kwargs)
    return SnakeGame(
        config,
        rng=random.Random(seed),
        snake=Snake(positions, 15, direction=direction),
        food=Food(food, 15),
    )


class TestSnakeGameInit:
    """Tests for SnakeGame construction."""

    def test_random_start(self):
        """A fresh game places one segment and food that doesn't overlap it."""
        game = SnakeGame(SimulationConfig(seed=7))

        assert len(game.snake) == 1
        assert game.snake.direction == RIGHT
        assert game.food.position != game.snake.head
        assert game.snake.head.x < 300 - 15
        assert game.snake.head.y < 300 - 15
        assert game.is_terminal() is False
        assert game.tick_count == 0

    def test_same_seed_same_start(self):
        first = SnakeGame(SimulationConfig(seed=99))
        second = SnakeGame(SimulationConfig(seed=99))
        assert first.snake.head == second.snake.head
        assert first.food.position == second.food.position

    def test_invalid_config_is_rejected(self):
        with pytest.raises(ValueError):
            SnakeGame(SimulationConfig(width=310))

    @pytest.mark.parametrize("width,height", [(15, 300), (300, 15)])
    def test_single_cell_axis_is_rejected_before_placement(self, width, height):
        """A one-cell-wide grid fails config validation, not food placement."""
        config = SimulationConfig(width=width, height=height, cell_size=15)

        with pytest.raises(ValueError, match="at least two cells"):
            SnakeGame(
                config,
                snake=Snake([(0, 0)], 15, direction=DOWN),
                food=Food((0, 15), 15),
            )

        with pytest.raises(ValueError, match="at least two cells"):
            SnakeGame(config)

    def test_default_config(self):
        game = SnakeGame()
        assert (game.width, game.height, game.cell_size) == (300, 300, 15)


class TestTick:
    """Tests for the tick() state machine."""

    def test_eating_food_grows_and_relocates(self):
        """One tick onto the food grows the snake and moves the food elsewhere."""
        game = make_game([(0, 0)], food=(15, 0), width=30, height=30)

        result = game.tick()

        assert result == GREW
        assert game.snake.head == (15, 0)
        assert len(game.snake) == 2
        assert game.food.position not in {(0, 0), (15, 0)}
        assert game.is_terminal() is False
        assert game.food_eaten == 1

    def test_moving_into_tail_ends_game(self):
        game = make_game([(15, 0), (0, 0)], direction=LEFT, food=(15, 15), width=30, height=30)

        result = game.tick()

        assert result == COLLIDED
        assert game.is_terminal() is True
        assert game.end_reason == SELF_COLLISION
        assert list(game.snake.positions) == [(15, 0), (0, 0)]

    def test_left_edge_wraps(self):
        game = make_game([(0, 0)], direction=LEFT, food=(15, 15), width=30, height=30)

        result = game.tick()

        assert result == CONTINUE
        assert game.snake.head == (15, 0)
        assert game.is_terminal() is False

    def test_ended_game_is_frozen(self):
        """Ticks after the terminal state change nothing."""
        game = make_game([(15, 0), (0, 0)], direction=LEFT, food=(15, 15), width=30, height=30)
        game.tick()

        positions = list(game.snake.positions)
        food = game.food.position
        ticks = game.tick_count

        for _ in range(5):
            game.set_direction(DOWN)
            assert game.tick() is None

        assert list(game.snake.positions) == positions
        assert game.food.position == food
        assert game.tick_count == ticks
        assert game.is_terminal() is True
        assert game.end_reason == SELF_COLLISION

    def test_filling_the_grid_ends_game(self):
        """Growing into the last free cell leaves nowhere for the food."""
        game = make_game(
            [(15, 0), (15, 15), (0, 15)],
            direction=LEFT,
            food=(0, 0),
            width=30,
            height=30,
            max_placement_attempts=3,
        )

        result = game.tick()

        assert result == GREW
        assert len(game.snake) == 4
        assert game.is_terminal() is True
        assert game.end_reason == BOARD_FULL

    def test_invariants_hold_over_a_long_run(self):
        """Length changes follow the step result and the food never overlaps the body."""
        config = SimulationConfig(width=90, height=90, cell_size=15, seed=3)
        game = SnakeGame(config)
        player = RandomPlayer(turn_probability=0.5, rng=random.Random(3))

        for _ in range(500):
            if game.is_terminal():
                break
            move = player.get_move(game.get_current_state())
            if move is not None:
                game.set_direction(move)

            before = list(game.snake.positions)
            result = game.tick()

            if result == GREW:
                assert len(game.snake) == len(before) + 1
            elif result == CONTINUE:
                assert len(game.snake) == len(before)
            else:
                assert list(game.snake.positions) == before

            assert len(set(game.snake.positions)) == len(game.snake)
            if not game.is_terminal():
                assert not game.snake.occupies(game.food.position)


class TestSetDirection:
    """Tests for input latching."""

    def test_direction_applies_on_next_tick(self):
        game = make_game([(30, 30)])
        game.set_direction(DOWN)

        assert game.snake.direction == RIGHT
        game.tick()

        assert game.snake.direction == DOWN
        assert game.snake.head == (30, 45)
        assert game.pending_direction is None

    def test_last_event_in_a_frame_wins(self):
        """UP then LEFT in one frame latches LEFT, which reverses RIGHT and is dropped."""
        game = make_game([(30, 30), (15, 30)])
        game.set_direction(UP)
        game.set_direction(LEFT)

        result = game.tick()

        assert result == CONTINUE
        assert game.snake.direction == RIGHT
        assert game.snake.head == (45, 30)

    def test_reversal_is_ignored(self):
        game = make_game([(30, 30)])
        game.set_direction(LEFT)
        game.tick()

        assert game.snake.direction == RIGHT
        assert game.snake.head == (45, 30)

    @pytest.mark.parametrize("event", ["SPACE", None, "up", 42])
    def test_non_directional_input_is_ignored(self, event):
        game = make_game([(30, 30)])
        game.set_direction(event)
        assert game.pending_direction is None


class TestGetCurrentState:
    """Tests for the render snapshot."""

    def test_snapshot_contents(self):
        game = make_game([(30, 30), (15, 30)], food=(60, 60))
        state = game.get_current_state()

        assert isinstance(state, GameState)
        assert state.snake_positions == [(30, 30), (15, 30)]
        assert state.food_position == (60, 60)
        assert state.snake_size == 15
        assert state.food_size == 15
        assert state.snake_color == game.snake.color
        assert state.food_color == game.food.color
        assert state.direction == RIGHT
        assert state.length == 2
        assert state.ended is False

    def test_print_board(self, capsys):
        """The board is printed one character per cell, head and food marked."""
        game = make_game([(15, 0), (0, 0)], food=(15, 15), width=30, height=30)
        game.print_board()

        out = capsys.readouterr().out
        assert "S H\n. F" in out

    def test_snapshot_is_detached(self):
        game = make_game([(30, 30)])
        state = game.get_current_state()
        state.snake_positions.append((0, 0))

        assert len(game.snake) == 1


class TestRunSimulation:
    """Tests for the headless driver."""

    def test_stops_at_max_ticks(self):
        config = SimulationConfig(max_ticks=5)
        game = make_game([(0, 0)], food=(150, 150), max_ticks=5)

        summary, history = run_simulation(config, ScriptedPlayer([]), game=game)

        assert summary["ticks"] == 5
        assert summary["ended"] is False
        assert summary["end_reason"] is None
        assert len(history) == 6
        assert history[-1].snake_positions == [(75, 0)]

    def test_stops_when_game_ends(self):
        config = SimulationConfig(width=30, height=30)
        game = make_game([(15, 0), (0, 0)], direction=LEFT, food=(15, 15), width=30, height=30)

        summary, history = run_simulation(config, ScriptedPlayer([]), game=game)

        assert summary == {
            "ticks": 1,
            "length": 2,
            "food_eaten": 0,
            "ended": True,
            "end_reason": SELF_COLLISION,
        }
        assert history[-1].ended is True

    def test_scripted_input_is_delivered(self):
        config = SimulationConfig(max_ticks=2)
        game = make_game([(30, 30)])

        run_simulation(config, ScriptedPlayer([DOWN, "JUMP"]), game=game)

        assert game.snake.head == (30, 60)

    def test_history_can_be_skipped(self):
        config = SimulationConfig(max_ticks=3, seed=4)
        summary, history = run_simulation(config, ScriptedPlayer([]), record_history=False)

        assert history == []
        assert summary["ticks"] <= 3

    def test_realtime_sleeps_between_ticks(self):
        config = SimulationConfig(max_ticks=3, updates_per_second=20)
        game = make_game([(0, 0)])

        with patch("main.time.sleep") as mock_sleep:
            run_simulation(config, ScriptedPlayer([]), realtime=True, game=game)

        assert mock_sleep.call_count == 3
        mock_sleep.assert_called_with(pytest.approx(0.05))


class TestMain:
    """Tests for the CLI entry point."""

    def test_main_prints_summary(self, capsys):
        main(["--seed", "3", "--max-ticks", "20", "--moves", "up", "-", "left"])

        out = capsys.readouterr().out
        summary = json.loads(out.split("Simulation Result Summary:", 1)[1])
        assert 1 <= summary["ticks"] <= 20
        assert summary["length"] >= 1

    def test_main_prints_board(self, capsys):
        main(["--seed", "5", "--max-ticks", "3", "--print-board"])

        out = capsys.readouterr().out
        assert "H" in out
        assert "F" in out
