from .workflow import WorkflowState

__all__ = ["WorkflowState"]
