"""
Pydantic request models -- the API contract for callers.

  POST /api/v1/validate        -> ValidateRequest
  POST /api/v1/safety/classify -> TextRequest
  POST /api/v1/intent          -> TextRequest
  POST /api/v1/autofix         -> TextRequest

Length limits are enforced in the routes (from Settings), not here.
"""

from pydantic import BaseModel, Field


class TextRequest(BaseModel):
    """A single piece of text to inspect."""

    text: str = Field(..., description="Text to inspect")


class ValidateRequest(BaseModel):
    """Validate text, optionally letting the originating prompt pick the checks."""

    text: str = Field(..., description="Text to validate")
    prompt: str | None = Field(
        None, description="Prompt that produced the text; used for intent detection"
    )
    use_intent: bool = Field(
        False, description="Choose checks from the detected intent instead of running all"
    )
    message_id: str | None = Field(
        None, description="Track evidence for this message id"
    )
