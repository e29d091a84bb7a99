"""Game table and run configuration."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

# The classic show: three doors, player picks the first one
NUM_DOORS = 3
PLAYER_DOOR = 0


class GameTable(BaseModel):
    """The doors on stage and the player's initial pick."""

    model_config = ConfigDict(frozen=True)

    num_doors: int = Field(
        default=NUM_DOORS,
        ge=3,
        description="Number of doors, exactly one hides the car",
    )
    player_door: int = Field(
        default=PLAYER_DOOR,
        ge=0,
        description="Index of the door the player picks first",
    )

    @model_validator(mode="after")
    def _check_player_door(self) -> "GameTable":
        if self.player_door >= self.num_doors:
            raise ValueError(
                f"player_door {self.player_door} is not one of {self.num_doors} doors"
            )
        return self

    @property
    def doors(self) -> range:
        """All door indices."""
        return range(self.num_doors)


class SimulationConfig(BaseModel):
    """Settings for one Monte Carlo run."""

    trials: int = Field(
        ge=0,
        description="Number of games to simulate",
    )
    seed: int | None = Field(
        default=None,
        description="Random seed for reproducibility (None = fresh entropy)",
    )
