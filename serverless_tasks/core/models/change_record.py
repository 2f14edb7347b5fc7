"""
Change stream domain model.
"""
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class ChangeRecord:
    """One record from a DynamoDB stream batch."""
    event_id: str
    event_name: str
    payload: Dict[str, Any] = field(default_factory=dict)
