from pydantic import BaseModel, Field


class BlameEntry(BaseModel):
    """Time a unit took to initialize during boot.
    """
    model_config = {'frozen': True}

    unit: str = Field(..., min_length=1, description='Unit name')
    time_ms: int = Field(..., ge=0, description='Initialization time in ms')
