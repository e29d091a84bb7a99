"""Console output formatting."""

from collections.abc import Callable

from montyhall.analysis.result import Result

UNDEFINED = "undefined"

INSTRUCTIONS = [
    "Welcome to Monty Hall, a brain teaser",
    "Suppose you're on a game show, and you're given the choice of three doors: "
    "Behind one door is a car; behind the others, goats.",
    "You pick a door, say No. 1, and the host, who knows what's behind the doors, "
    "opens another door, say No. 3, which has a goat.",
    "He then says to you, 'Do you want to pick door No. 2?' "
    "Is it to your advantage to switch your choice?",
    "",
]


def format_percentage(value: float | None) -> str:
    """Format a win chance, e.g. '33.33%', or 'undefined' if there is none."""
    if value is None:
        return UNDEFINED
    return f"{value:.2f}%"


class ConsoleOutput:
    """Formats results as plain text lines for a sink."""

    def __init__(self, sink: Callable[[str], None] = print):
        """Initialize console output.

        Args:
            sink: Receives each line of text
        """
        self.sink = sink

    def report(self, message: str) -> None:
        self.sink(message)

    def print_instructions(self) -> None:
        """Print the puzzle."""
        for line in INSTRUCTIONS:
            self.report(line)

    def print_result(self, result: Result) -> None:
        """Print the win chance for each strategy."""
        self.report(f"If you do not switch: {format_percentage(result.not_switch)}")
        self.report(f"If you do switch: {format_percentage(result.do_switch)}")

    def print_calculation(self, result: Result) -> None:
        """Print the exact chances."""
        self.report("This program has calculated that the chances of winning are:")
        self.print_result(result)

    def print_simulation_start(self) -> None:
        self.report("Running simulation...")

    def print_simulation(self, num_trials: int, result: Result) -> None:
        """Print the chances observed over a simulation run.

        Args:
            num_trials: Number of simulated games
            result: Observed win percentages
        """
        self.report(f"After {num_trials} simulations the chances of winning are:")
        self.print_result(result)

    def print_simulation_hint(self) -> None:
        """Explain how to ask for a simulation instead."""
        self.report("")
        self.report(
            "If you want this program to run a simulation enter a number as a command line "
            "argument telling the program how many simulations to run."
        )

    def print_parse_error(self, argument: str) -> None:
        self.report(
            f"I'm sorry, I could not parse: '{argument}' as a number "
            "so I will not run the simulation."
        )

    def print_invalid_trials(self, argument: str) -> None:
        self.report(
            f"I'm sorry, I cannot run '{argument}' simulations, "
            "the number must not be negative so I will not run the simulation."
        )
