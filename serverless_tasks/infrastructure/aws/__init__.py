from .aws_config import AWSConfigManager

__all__ = ["AWSConfigManager"]
