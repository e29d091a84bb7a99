import pytest
from pydantic import ValidationError

from montyhall.models import GameTable, SimulationConfig


def test_default_table_is_three_doors_first_picked():
    table = GameTable()
    assert table.num_doors == 3
    assert table.player_door == 0
    assert list(table.doors) == [0, 1, 2]


def test_player_door_must_be_on_stage():
    with pytest.raises(ValidationError):
        GameTable(num_doors=3, player_door=3)


def test_needs_at_least_three_doors():
    with pytest.raises(ValidationError):
        GameTable(num_doors=2)


def test_negative_trials_rejected():
    with pytest.raises(ValidationError):
        SimulationConfig(trials=-1)


def test_zero_trials_allowed():
    assert SimulationConfig(trials=0).trials == 0
