"""Command line entry point.

Usage:
    montyhall [TRIALS] [--verbose]

Without TRIALS the exact chances are calculated. With TRIALS that many
games are simulated. Arguments after TRIALS are ignored.
"""

import argparse
import logging
import re

from pydantic import ValidationError

from montyhall.analysis import calculate_result
from montyhall.log import get_logger
from montyhall.models import SimulationConfig
from montyhall.output import ConsoleOutput
from montyhall.simulation import MonteCarloSimulator

# Plain ASCII digits with an optional sign, no spaces or underscores
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_args(argv: list[str] | None = None) -> tuple[argparse.Namespace, list[str]]:
    """Parse the command line without exiting on unexpected arguments.

    Returns:
        Tuple of (known arguments, leftover tokens)
    """
    parser = argparse.ArgumentParser(
        prog="montyhall",
        description="Calculate or simulate the chances of winning the Monty Hall game",
    )
    parser.add_argument(
        "trials",
        nargs="?",
        default=None,
        help="Number of games to simulate (default: calculate the exact chances)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log run diagnostics to stderr",
    )
    return parser.parse_known_args(argv)


def parse_trials(text: str) -> int:
    """Convert a trial count, accepting only an optionally signed run of digits.

    Raises:
        ValueError: If text is not such a number
    """
    if not INTEGER_PATTERN.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    return int(text)


def run_calculation(output: ConsoleOutput) -> None:
    output.print_calculation(calculate_result())
    output.print_simulation_hint()


def run_simulation(output: ConsoleOutput, config: SimulationConfig) -> None:
    simulator = MonteCarloSimulator.from_config(config)
    output.print_simulation_start()
    result = simulator.simulate(config.trials)
    output.print_simulation(config.trials, result)


def main(argv: list[str] | None = None, output: ConsoleOutput | None = None) -> int:
    """Run the program.

    Args:
        argv: Command line arguments (default: sys.argv)
        output: Where report lines go (default: stdout)

    Returns:
        Exit code, always 0
    """
    args, extra = parse_args(argv)
    argument = args.trials if args.trials is not None else next(iter(extra), None)
    logger = get_logger(logging.INFO if args.verbose else logging.WARNING)
    output = output or ConsoleOutput()

    output.print_instructions()

    if argument is None:
        logger.info("RUN START mode=calculation")
        run_calculation(output)
        logger.info("RUN END")
        return 0

    try:
        trials = parse_trials(argument)
    except ValueError:
        logger.info("Could not parse %r as a trial count, skipping simulation", argument)
        output.print_parse_error(argument)
        return 0

    try:
        config = SimulationConfig(trials=trials)
    except ValidationError as e:
        logger.info("Invalid trial count %d: %s", trials, e.errors()[0]["msg"])
        output.print_invalid_trials(argument)
        return 0

    logger.info("RUN START mode=simulation trials=%d", config.trials)
    run_simulation(output, config)
    logger.info("RUN END")
    return 0
