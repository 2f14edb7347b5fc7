"""
Step Functions state payload schema.
"""
from typing import Any, Dict, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class WorkflowState(BaseModel):
    """
    State record passed between the greeting workflow steps.

    Accepts the PascalCase keys used by the state machine definition as well
    as snake_case and camelCase variants; serializes back to PascalCase.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("Name", "name"),
        serialization_alias="Name",
        description="Person to greet"
    )
    message: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("Message", "message"),
        serialization_alias="Message",
        description="Message built up by the workflow steps"
    )
    wait_in_seconds: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("WaitInSeconds", "waitInSeconds", "waitSeconds", "wait_in_seconds"),
        serialization_alias="WaitInSeconds",
        description="Seconds the state machine waits before the next step"
    )

    @classmethod
    def from_event(cls, event: Optional[Dict[str, Any]]) -> "WorkflowState":
        return cls.model_validate(event or {})

    def to_event(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
