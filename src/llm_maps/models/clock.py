from datetime import datetime

from pydantic import Field

from .base import BaseMapsModel


class TimeResult(BaseMapsModel):
    """Current wall-clock time in the service's home timezone."""

    current_time: str = Field(
        description="e.g. 'Monday, October 19, 2026 at 02:07:05 PM'"
    )
    timezone: str = Field(description="IANA timezone identifier")
    location: str = Field(description="Default location the timezone belongs to")


def format_long_time(moment: datetime) -> str:
    """Format ``moment`` as US-English long date with a 12-hour clock."""
    return (
        f"{moment:%A}, {moment:%B} {moment.day}, {moment.year} "
        f"at {moment:%I:%M:%S %p}"
    )
