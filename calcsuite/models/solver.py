"""Models for the AI math solver boundary."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProblemImage(BaseModel):
    """A single embedded image sent along with the problem."""

    data: bytes = Field(..., min_length=1)
    mime_type: str

    @field_validator('mime_type')
    @classmethod
    def validate_mime_type(cls, v: str) -> str:
        """Only allow image types."""
        if not v.lower().startswith("image/"):
            raise ValueError(f"Unsupported image type: {v}")
        return v.lower()


class SolverRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    problem: str = ""
    unit_hint: Optional[str] = Field(
        default=None,
        description="Unit the final answer should be converted to"
    )
    image: Optional[ProblemImage] = None

    @property
    def is_empty(self) -> bool:
        return not self.problem and self.image is None


class SolverResponse(BaseModel):
    text: str
    solved: bool
