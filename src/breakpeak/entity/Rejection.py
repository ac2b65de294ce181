from enum import Enum

from pydantic import BaseModel, ConfigDict

class RejectionKind(str, Enum):
    FORMAT = "format"
    RANGE = "range"
    ORDERING = "ordering"


class Rejection(BaseModel):
    model_config = ConfigDict(frozen=True)

    line: str
    kind: RejectionKind
    field: str | None = None
    reason: str

    @property
    def message(self) -> str:
        return f"Failed parsing time range `{self.line}`! {self.reason}"
