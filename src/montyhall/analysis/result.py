"""Win chances shared by the calculator and the simulator."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Result:
    """Chance of winning the car, in percent, for each strategy.

    A value of None means the chance is undefined: no game was played
    with that strategy.
    """

    not_switch: float | None
    do_switch: float | None

    @property
    def is_complete(self) -> bool:
        """Both chances are defined."""
        return self.not_switch is not None and self.do_switch is not None


def percentage(wins: int, attempts: int) -> float | None:
    """Win percentage, or None when there were no attempts."""
    return wins / attempts * 100.0 if attempts else None
