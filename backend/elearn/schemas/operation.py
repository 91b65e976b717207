"""Operation Schemas — uniform envelope for every committed mutation."""

from pydantic import BaseModel


class OperationResponse(BaseModel):
    """Committed operation: its return value and the sequence number it occupied."""
    ok: bool = True
    result: bool | int
    sequence_number: int

    @classmethod
    def from_outcome(cls, outcome) -> "OperationResponse":
        return cls(result=outcome.result, sequence_number=outcome.sequence_number)
