"""
Base model configuration for the maps tools.

All request, result and provider payload models derive from
``BaseMapsModel`` so they share one validation policy.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class BaseMapsModel(BaseModel):
    """
    Base model for all maps tool data structures.

    Unknown keys are ignored so provider payloads can be validated directly
    without listing every field Google returns.
    """

    model_config = ConfigDict(
        # Enable validation on assignment
        validate_assignment=True,
        # Ignore extra fields from external APIs
        extra="ignore",
        # Validate default values
        validate_default=True,
    )

    def model_dump_tool(self) -> dict[str, Any]:
        """Serialize model for a tool response (JSON-safe, aliases applied)."""
        return self.model_dump(mode="json", by_alias=True)
