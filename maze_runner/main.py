import argparse
import sys
import os
import logging
import time

# Ensure project root is in path so we can import 'maze_runner' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_runner.config import GameConfig
from maze_runner.core.errors import MazeError


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze Runner: generate a maze and find your way out")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a maze and print it as text")
    gen_parser.add_argument("--width", type=str, default=None, help="Maze Width (2-100)")
    gen_parser.add_argument("--height", type=str, default=None, help="Maze Height (2-100)")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")

    # Play Command
    play_parser = subparsers.add_parser("play", help="Play the maze in a window")
    play_parser.add_argument("--width", type=str, default=None, help="Maze Width (2-100)")
    play_parser.add_argument("--height", type=str, default=None, help="Maze Height (2-100)")
    play_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    play_parser.add_argument("--record", action="store_true", default=None, help="Record gameplay video")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time maze generation")
    bench_parser.add_argument("--size", type=int, default=100, help="Largest square size to time")

    return parser


def run_generate(args, logger):
    from maze_runner.game.session import GameSession
    from maze_runner.viz.ascii import render_ascii

    config = GameConfig.from_args(args)
    session = GameSession(config)
    grid = session.new_maze()
    logger.debug(f"Entrance {grid.entrance}, exit {grid.exit}")
    print(render_ascii(grid))


def run_play(args, logger):
    from maze_runner.game.session import GameSession
    from maze_runner.viz.renderer import GameRenderer

    config = GameConfig.from_args(args)
    session = GameSession(config)
    session.new_maze()

    logger.info("Opening game window...")
    renderer = GameRenderer(session)
    if config.record:
        logger.info(f"Recording video to {renderer.recorder.output_file}")
    renderer.init_window()
    renderer.run_loop()


def run_benchmark(args, logger):
    from maze_runner.algo.dfs import generate

    logger.info(f"Running generation benchmark up to {args.size}x{args.size}...")
    sizes = sorted({s for s in (10, 25, 50, 100, args.size) if 2 <= s <= args.size})

    print(f"\n{'SIZE':<12} | {'TIME (s)':<10} | {'CELLS/SEC':<12}")
    print("-" * 40)
    for size in sizes:
        t_start = time.perf_counter()
        generate(size, size, seed=123)
        duration = time.perf_counter() - t_start
        rate = (size * size) / duration if duration > 0 else float("inf")
        print(f"{f'{size}x{size}':<12} | {duration:<10.4f} | {rate:<12,.0f}")


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_runner")

    if args.command is None:
        parser.print_help()
        return 0

    logger.info(f"Running command: {args.command}")

    try:
        if args.command == "generate":
            run_generate(args, logger)
        elif args.command == "play":
            run_play(args, logger)
        elif args.command == "benchmark":
            run_benchmark(args, logger)
    except MazeError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
