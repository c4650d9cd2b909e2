import argparse
import sys
import os
import time
import logging

# Ensure project root is in path so we can import 'tilemaze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from tilemaze.algo.base import Algorithm, GenerationStalledError
from tilemaze.core.config import GenerationConfig, GRID_WIDTH, GRID_HEIGHT, NUM_CURSORS
from tilemaze.core.session import MazeSession
from tilemaze.core.stats import calculate_stats

ALGO_CHOICES = [a.value for a in Algorithm]


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="tilemaze: step-driven maze carving")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Carve a maze to completion")
    gen_parser.add_argument("--width", type=int, default=GRID_WIDTH, help="Maze Width")
    gen_parser.add_argument("--height", type=int, default=GRID_HEIGHT, help="Maze Height")
    gen_parser.add_argument("--algo", type=str, default=Algorithm.BACKTRACKING.value, choices=ALGO_CHOICES, help="Generation Algorithm")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--cursors", type=int, default=NUM_CURSORS, help="Backtracking cursors (1-4)")
    gen_parser.add_argument("--steps-per-tick", type=int, default=1, help="Generator steps per tick")
    gen_parser.add_argument("--tick-ms", type=int, default=0, help="Delay between ticks in milliseconds")
    gen_parser.add_argument("--max-resets", type=int, default=None, help="Abort WFC after this many resets")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time every algorithm")
    bench_parser.add_argument("--size", type=int, default=64, help="Benchmark size")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")

    return parser


def run_generate(args, logger) -> MazeSession:
    config = GenerationConfig(
        width=args.width,
        height=args.height,
        algorithm=args.algo,
        seed=args.seed,
        cursors=args.cursors,
        steps_per_tick=args.steps_per_tick,
        tick_ms=args.tick_ms,
        max_resets=args.max_resets,
    ).validate()

    logger.info(f"Generating {config.width}x{config.height} maze with {config.algorithm.value.upper()}...")
    session = MazeSession(config)
    t0 = time.time()
    ticks = session.run()
    logger.info(f"Generation complete in {ticks} ticks ({time.time()-t0:.4f}s)")

    stats = calculate_stats(session.grid)
    logger.info(f"Stats: {stats}")
    return session


def run_benchmark(args):
    print(f"\n{'ALGORITHM':<14} | {'TIME (s)':<10} | {'TICKS':<8} | {'DEAD ENDS':<10} | {'JUNCTIONS':<10}")
    print("-" * 64)

    for algo in Algorithm:
        config = GenerationConfig(width=args.size, height=args.size, algorithm=algo,
                                  seed=args.seed, tick_ms=0)
        session = MazeSession(config)

        t_start = time.time()
        ticks = session.run()
        duration = time.time() - t_start

        stats = calculate_stats(session.grid)
        print(f"{algo.value:<14} | {duration:<10.4f} | {ticks:<8} | {stats['dead_ends']:<10} | {stats['junctions']:<10}")


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("tilemaze")

    if args.command is None:
        parser.print_help()
        return

    logger.info(f"Running command: {args.command}")

    if args.command == "generate":
        try:
            run_generate(args, logger)
        except ValueError as e:
            parser.error(str(e))
        except GenerationStalledError as e:
            logger.error(str(e))
            sys.exit(1)
        print("Done.")

    elif args.command == "benchmark":
        logger.info(f"Running Generator Benchmark Suite (Size: {args.size}x{args.size})...")
        run_benchmark(args)


if __name__ == "__main__":
    main()
