from pydantic import BaseModel, ConfigDict

from .Interval import format_minute

class PeakWindow(BaseModel):
    model_config = ConfigDict(frozen=True)

    start_minute: int
    end_minute: int
    drivers: int

    def get_duration(self) -> int:
        return self.end_minute - self.start_minute + 1

    def describe(self) -> str:
        plural = "s" if self.drivers > 1 else ""
        return (
            f"Busiest range is {format_minute(self.start_minute)}-{format_minute(self.end_minute)} "
            f"with {self.drivers} driver{plural} taking a break."
        )
