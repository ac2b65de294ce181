from pydantic import BaseModel, ConfigDict, Field, model_validator

MINUTES_PER_DAY = 24 * 60


def format_minute(minute: int) -> str:
    return f"{minute // 60:02d}:{minute % 60:02d}"


class Interval(BaseModel):
    model_config = ConfigDict(frozen=True)

    start_minute: int = Field(ge=0, lt=MINUTES_PER_DAY)
    end_minute: int = Field(ge=0, lt=MINUTES_PER_DAY)

    @model_validator(mode="after")
    def check_order(self) -> "Interval":
        if self.start_minute > self.end_minute:
            raise ValueError("start_minute must not exceed end_minute")
        return self

    def get_duration(self) -> int:
        # Both ends are inclusive.
        return self.end_minute - self.start_minute + 1

    def __str__(self) -> str:
        return f"{format_minute(self.start_minute)}-{format_minute(self.end_minute)}"
