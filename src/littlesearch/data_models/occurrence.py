from pydantic import BaseModel, ConfigDict, Field, PositiveInt


class Occurrence(BaseModel):
    """How many times one keyword occurs in one document."""

    model_config = ConfigDict(validate_assignment=True)

    doc_id: str = Field(min_length=1)
    frequency: PositiveInt = 1

    def __str__(self) -> str:
        return f"({self.doc_id},{self.frequency})"
