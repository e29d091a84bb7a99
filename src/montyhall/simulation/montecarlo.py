"""Monte Carlo simulation of the game."""

import logging
from dataclasses import dataclass

import numpy as np

from montyhall.analysis.result import Result, percentage
from montyhall.models import PLAYER_DOOR, GameTable, SimulationConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Trial:
    """One simulated game."""

    prize_door: int
    switched: bool
    player_door: int = PLAYER_DOOR

    @property
    def won(self) -> bool:
        """Whether the player drove home with the car.

        Only one closed door is left to switch to, so switching wins
        exactly when the first pick was wrong.
        """
        if self.switched:
            return self.prize_door != self.player_door
        return self.prize_door == self.player_door


@dataclass
class TrialTally:
    """Attempts and wins per strategy across simulated games."""

    switch_attempts: int = 0
    switch_wins: int = 0
    stay_attempts: int = 0
    stay_wins: int = 0

    @property
    def total_trials(self) -> int:
        return self.switch_attempts + self.stay_attempts

    def add(self, trial: Trial) -> None:
        """Count a finished game."""
        if trial.switched:
            self.switch_attempts += 1
            if trial.won:
                self.switch_wins += 1
        else:
            self.stay_attempts += 1
            if trial.won:
                self.stay_wins += 1

    def to_result(self) -> Result:
        """Win percentages, each over its own strategy's attempts."""
        return Result(
            not_switch=percentage(self.stay_wins, self.stay_attempts),
            do_switch=percentage(self.switch_wins, self.switch_attempts),
        )


class MonteCarloSimulator:
    """Plays the game repeatedly with a coin flip deciding the strategy."""

    def __init__(
        self,
        rng: np.random.Generator | None = None,
        table: GameTable | None = None,
    ):
        """Initialize the simulator.

        Args:
            rng: Random number generator
            table: Doors and initial pick (default: three doors, door 0 picked)
        """
        self.rng = rng if rng is not None else np.random.default_rng()
        self.table = table or GameTable()

    @classmethod
    def from_config(
        cls,
        config: SimulationConfig,
        table: GameTable | None = None,
    ) -> "MonteCarloSimulator":
        """Create a simulator seeded from a run configuration."""
        return cls(rng=np.random.default_rng(config.seed), table=table)

    def play_trial(self) -> Trial:
        """Hide the car behind a random door and flip a fair coin to switch."""
        prize_door = int(self.rng.integers(0, self.table.num_doors))
        switched = bool(self.rng.integers(0, 2))
        return Trial(
            prize_door=prize_door,
            switched=switched,
            player_door=self.table.player_door,
        )

    def run(self, num_trials: int) -> TrialTally:
        """Run the simulation.

        The two strategy groups are sized by the coin flips, so they are
        generally unequal and one may be empty for small runs.

        Args:
            num_trials: Number of games to play

        Returns:
            Tally of attempts and wins per strategy
        """
        if num_trials < 0:
            raise ValueError("num_trials must not be negative")

        tally = TrialTally()
        for _ in range(num_trials):
            tally.add(self.play_trial())

        logger.info(
            "Simulated %d games: switch %d/%d, stay %d/%d",
            tally.total_trials,
            tally.switch_wins,
            tally.switch_attempts,
            tally.stay_wins,
            tally.stay_attempts,
        )
        if tally.switch_attempts == 0:
            logger.warning("No game switched doors, switch chance is undefined")
        if tally.stay_attempts == 0:
            logger.warning("No game stayed with the first door, stay chance is undefined")

        return tally

    def simulate(self, num_trials: int) -> Result:
        """Run the simulation and return the win percentages."""
        return self.run(num_trials).to_result()
