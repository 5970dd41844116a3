import argparse
import json
import logging
import random
import time
from typing import Any, Dict, List, Optional, Tuple

from dotenv import load_dotenv

from config import SimulationConfig
from domain.constants import (
    VALID_MOVES,
    GREW, COLLIDED,
    SELF_COLLISION, BOARD_FULL,
)
from domain.food import Food
from domain.game_state import GameState
from domain.grid import random_cell
from domain.snake import Snake
from players import Player, RandomPlayer, ScriptedPlayer

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Manages:
      - Grid extent (width, height, cell size)
      - The snake and the food
      - A pending direction latched from input events
      - The terminal flag, which never resets once set
    """
    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        rng: Optional[random.Random] = None,
        snake: Optional[Snake] = None,
        food: Optional[Food] = None
    ):
        self.config = config or SimulationConfig()
        self.config.validate()

        self.width = self.config.width
        self.height = self.config.height
        self.cell_size = self.config.cell_size
        self.rng = rng or random.Random(self.config.seed)

        self.tick_count = 0
        self.food_eaten = 0
        self.ended = False
        self.end_reason: Optional[str] = None
        self.pending_direction: Optional[str] = None

        if snake is None:
            start = random_cell(self.width, self.height, self.cell_size, self.rng)
            snake = Snake([start], self.cell_size)
        self.snake = snake

        if food is None:
            food = Food(self.snake.head, self.cell_size)
            if not self._relocate_food(food):
                raise ValueError("No free cell left to place the food")
        self.food = food

        logger.info(
            f"New game on {self.width}x{self.height} grid (cell {self.cell_size}), "
            f"snake at {self.snake.head}, food at {self.food.position}"
        )

    def _relocate_food(self, food: Food) -> bool:
        return food.relocate(
            self.width,
            self.height,
            self.cell_size,
            self.snake,
            rng=self.rng,
            max_attempts=self.config.max_placement_attempts
        )

    def set_direction(self, requested: Any):
        """
        Latch a direction event to be applied at the start of the next tick.

        Later events in the same frame overwrite earlier ones. Anything that
        is not one of the four directions is ignored.
        """
        if requested not in VALID_MOVES:
            logger.debug(f"Ignoring non-directional input: {requested!r}")
            return
        self.pending_direction = requested

    def is_terminal(self) -> bool:
        return self.ended

    def tick(self) -> Optional[str]:
        """
        Advance the simulation by one step.

        Returns the snake's step result (CONTINUE, GREW or COLLIDED), or
        None if the game had already ended.
        """
        if self.ended:
            return None

        if self.pending_direction is not None:
            self.snake.set_direction(self.pending_direction)
            self.pending_direction = None

        result = self.snake.advance(self.food.position, self.width, self.height)
        self.tick_count += 1

        if result == COLLIDED:
            self.end_game(SELF_COLLISION)
        elif result == GREW:
            self.food_eaten += 1
            logger.debug(f"Snake grew to {len(self.snake)} at {self.snake.head}")
            if not self._relocate_food(self.food):
                self.end_game(BOARD_FULL)

        return result

    def end_game(self, reason: str):
        self.ended = True
        self.end_reason = reason
        logger.info(
            f"Game Over after {self.tick_count} ticks: {reason} "
            f"(length {len(self.snake)}, food eaten {self.food_eaten})"
        )

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick=self.tick_count,
            snake_positions=list(self.snake.positions),
            snake_size=self.snake.size,
            snake_color=self.snake.color,
            food_position=self.food.position,
            food_size=self.food.size,
            food_color=self.food.color,
            width=self.width,
            height=self.height,
            cell_size=self.cell_size,
            direction=self.snake.direction,
            ended=self.ended,
            end_reason=self.end_reason
        )

    def print_board(self):
        """
        Prints a visual representation of the current board state.
        """
        print("\n" + self.get_current_state().print_board() + "\n")


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(
    config: SimulationConfig,
    player: Player,
    rng: Optional[random.Random] = None,
    realtime: bool = False,
    record_history: bool = True,
    game: Optional[SnakeGame] = None
) -> Tuple[Dict[str, Any], List[GameState]]:
    """
    Drive one game at a fixed update rate until it ends or max_ticks is reached.

    Args:
        config: Grid and driver settings.
        player: Input source asked for one event per tick.
        rng: Random source for placement (defaults to one seeded from config.seed).
        realtime: Sleep one tick interval between updates.
        record_history: Keep a snapshot of every frame for rendering.
        game: An already constructed game to drive instead of a fresh one.

    Returns:
        A summary dictionary and the list of recorded snapshots.
    """
    if game is None:
        game = SnakeGame(config, rng=rng)

    history: List[GameState] = []
    if record_history:
        history.append(game.get_current_state())

    while not game.is_terminal() and game.tick_count < config.max_ticks:
        move = player.get_move(game.get_current_state())
        if move is not None:
            game.set_direction(move)

        game.tick()

        if record_history:
            history.append(game.get_current_state())

        if realtime:
            time.sleep(config.tick_interval)

    summary = {
        "ticks": game.tick_count,
        "length": len(game.snake),
        "food_eaten": game.food_eaten,
        "ended": game.is_terminal(),
        "end_reason": game.end_reason,
    }
    return summary, history


# -------------------------------
# Example Usage (Main Entry Point)
# -------------------------------
def main(argv: Optional[List[str]] = None):
    load_dotenv()
    defaults = SimulationConfig.from_env()

    parser = argparse.ArgumentParser(
        description="Run a headless snake simulation on a wrap-around grid."
    )
    parser.add_argument("--width", type=float, default=defaults.width,
                        help="Grid width in pixels")
    parser.add_argument("--height", type=float, default=defaults.height,
                        help="Grid height in pixels")
    parser.add_argument("--cell-size", type=float, default=defaults.cell_size,
                        help="Side length of one cell; must divide width and height")
    parser.add_argument("--ups", type=float, default=defaults.updates_per_second,
                        help="Simulation updates per second")
    parser.add_argument("--max-ticks", type=int, default=defaults.max_ticks,
                        help="Stop after this many ticks if the game has not ended")
    parser.add_argument("--seed", type=int, default=defaults.seed,
                        help="Seed for reproducible placement and input")
    parser.add_argument("--moves", type=str, nargs='+',
                        help="Scripted input, one event per tick (use '-' for no key)")
    parser.add_argument("--realtime", action="store_true",
                        help="Pace updates at the configured rate")
    parser.add_argument("--video", type=str,
                        help="Write the replay to this path (.gif or .mp4)")
    parser.add_argument("--print-board", action="store_true",
                        help="Print the final board")
    parser.add_argument("--verbose", action="store_true",
                        help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = SimulationConfig(
        width=args.width,
        height=args.height,
        cell_size=args.cell_size,
        updates_per_second=args.ups,
        max_ticks=args.max_ticks,
        max_placement_attempts=defaults.max_placement_attempts,
        seed=args.seed
    )

    if args.moves:
        player: Player = ScriptedPlayer(
            None if move == '-' else move.upper() for move in args.moves
        )
    else:
        player = RandomPlayer(rng=random.Random(args.seed))

    summary, history = run_simulation(
        config,
        player,
        realtime=args.realtime,
        record_history=bool(args.video or args.print_board)
    )

    if args.print_board and history:
        print("\n" + history[-1].print_board() + "\n")

    if args.video:
        from services.frame_renderer import SnakeFrameRenderer
        renderer = SnakeFrameRenderer(fps=config.updates_per_second)
        summary["video"] = renderer.generate_video(history, args.video)

    print("\nSimulation Result Summary:")
    print(json.dumps(summary, indent=2))


if __name__ == "__main__":
    main()
