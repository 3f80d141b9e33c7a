from pydantic import BaseModel, ConfigDict, Field

from durland.domain.enums import BiomeName, PlayerAction, TickResult


class TickReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    tick: int = Field(..., ge=1, description="Global tick count after the tick was processed")
    result: TickResult = Field(..., description="Ok while alive, Died on the terminal tick")
    biome: BiomeName = Field(..., description="Biome the player spent the tick in")
    action: PlayerAction | None = Field(None, description="Kind tag of the committed action")
    health: float = Field(..., description="Player health after the commit")
    money: float = Field(..., description="Player money after the commit")
    satisfaction: float = Field(..., description="Player satisfaction after the commit")


class RunSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    ticks: int = Field(..., ge=0, description="Global tick count when the run stopped")
    result: TickResult | None = Field(None, description="Result of the last tick, if any ran")
    health: float
    money: float
    satisfaction: float
    biomes_visited: int = Field(default=0, ge=0, description="Length of the biome history")
    stopped_by_guard: bool = Field(
        default=False, description="Whether the max-tick guard ended the run before death"
    )
