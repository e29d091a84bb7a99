"""Exact win chances by enumerating the prize placements."""

from montyhall.analysis.result import Result
from montyhall.models import GameTable


def calculate_result(table: GameTable | None = None) -> Result:
    """Calculate the chance of winning with and without switching.

    Every door is equally likely to hide the car. When it is behind the
    player's door, staying wins. Otherwise the host opens all the other
    goat doors but one, so switching wins.

    Args:
        table: Doors and initial pick (default: three doors, door 0 picked)

    Returns:
        Result with exact percentages
    """
    table = table or GameTable()

    not_switch_wins = 0
    switch_wins = 0
    for prize_door in table.doors:
        if prize_door == table.player_door:
            not_switch_wins += 1
        else:
            switch_wins += 1

    return Result(
        not_switch=not_switch_wins / table.num_doors * 100.0,
        do_switch=switch_wins / table.num_doors * 100.0,
    )
