"""
Greeting workflow steps executed as Step Functions tasks.

Both steps are pure: they return a new state and leave the input untouched.
"""
from serverless_tasks.schemas.workflow import WorkflowState

# Pause requested from the state machine between the two steps
GREETING_WAIT_SECONDS = 5


def greeting(state: WorkflowState) -> WorkflowState:
    """Start the message with a greeting and ask the state machine to wait."""
    message = "Hello"
    if state.name:
        message += " " + state.name

    return state.model_copy(update={
        "message": message,
        "wait_in_seconds": GREETING_WAIT_SECONDS
    })


def salutations(state: WorkflowState) -> WorkflowState:
    """Append a farewell to the message."""
    message = (state.message or "") + ", Goodbye"
    if state.name:
        message += " " + state.name

    return state.model_copy(update={"message": message})
