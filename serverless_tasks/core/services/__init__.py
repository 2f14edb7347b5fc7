from .image_constraints import ImageConstraints
from .tag_builder import build_tags
from .workflow_steps import GREETING_WAIT_SECONDS, greeting, salutations

__all__ = ["GREETING_WAIT_SECONDS", "ImageConstraints", "build_tags", "greeting", "salutations"]
