"""Domain model for factual claims."""

from pydantic import BaseModel, Field


class Claim(BaseModel):
    """Represents one verifiable factual assertion extracted from input text."""

    text: str = Field(..., description="The claim text to be verified")

    class Config:
        """Pydantic model configuration."""
        frozen = True  # Immutable model
        json_schema_extra = {
            "example": {
                "text": "The Eiffel Tower was completed in 1889.",
            }
        }

    def __str__(self) -> str:
        return self.text
