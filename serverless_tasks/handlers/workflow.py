"""
Step Functions task handlers for the greeting workflow.
"""
from typing import Any, Dict

from serverless_tasks.core.services.workflow_steps import greeting, salutations
from serverless_tasks.infrastructure.logging.log_config import get_logger
from serverless_tasks.schemas.workflow import WorkflowState

logger = get_logger(__name__)


def greeting_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Build the greeting and ask the state machine to wait before the next step."""
    state = greeting(WorkflowState.from_event(event))
    logger.debug("Greeting step completed", extra={'extra_fields': state.to_event()})
    return state.to_event()


def salutations_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Append the farewell to the message."""
    state = salutations(WorkflowState.from_event(event))
    logger.debug("Salutations step completed", extra={'extra_fields': state.to_event()})
    return state.to_event()
