"""
Dependency Injection Configuration for the Lambda handlers.

Builds settings, AWS clients, adapters and use cases lazily and keeps them
for the lifetime of the Lambda container.
"""
from typing import Any, Dict, Optional

from serverless_tasks.adapters.detection.rekognition_label_detector import RekognitionLabelDetector
from serverless_tasks.adapters.storage.s3_object_store import S3ObjectStore
from serverless_tasks.config.settings import LambdaSettings, get_settings
from serverless_tasks.core.ports.label_detector import LabelDetectorPort
from serverless_tasks.core.ports.object_store import ObjectStorePort
from serverless_tasks.core.usecases.fetch_object_metadata import FetchObjectMetadataUseCase
from serverless_tasks.core.usecases.relay_change_records import RelayChangeRecordsUseCase
from serverless_tasks.core.usecases.tag_image_labels import TagImageLabelsUseCase
from serverless_tasks.infrastructure.aws.aws_config import AWSConfigManager
from serverless_tasks.infrastructure.logging.log_config import get_logger

logger = get_logger(__name__)


class DependencyContainer:
    """
    Dependency injection container for the Lambda handlers.

    Manages the creation and lifecycle of all dependencies needed by the
    handlers, following Clean Architecture principles.
    """

    def __init__(self, settings: Optional[LambdaSettings] = None):
        self._settings: Optional[LambdaSettings] = settings
        self._aws_config_manager: Optional[AWSConfigManager] = None
        self._object_store: Optional[ObjectStorePort] = None
        self._label_detector: Optional[LabelDetectorPort] = None
        self._tag_image_labels_use_case: Optional[TagImageLabelsUseCase] = None
        self._fetch_object_metadata_use_case: Optional[FetchObjectMetadataUseCase] = None
        self._relay_change_records_use_case: Optional[RelayChangeRecordsUseCase] = None

        logger.debug("Dependency container initialized")

    def get_settings(self) -> LambdaSettings:
        """Get Lambda settings (read once per container)."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    def get_aws_config_manager(self) -> AWSConfigManager:
        """Get AWS configuration manager (singleton)."""
        if self._aws_config_manager is None:
            self._aws_config_manager = AWSConfigManager(self.get_settings())
            logger.debug("AWS config manager created")
        return self._aws_config_manager

    def get_object_store(self) -> ObjectStorePort:
        """Get object store implementation (singleton)."""
        if self._object_store is None:
            self._object_store = S3ObjectStore(self.get_aws_config_manager())
            logger.debug("Object store created")
        return self._object_store

    def get_label_detector(self) -> LabelDetectorPort:
        """Get label detector implementation (singleton)."""
        if self._label_detector is None:
            self._label_detector = RekognitionLabelDetector(self.get_aws_config_manager())
            logger.debug("Label detector created")
        return self._label_detector

    def get_tag_image_labels_use_case(self) -> TagImageLabelsUseCase:
        """Get tag image labels use case (singleton)."""
        if self._tag_image_labels_use_case is None:
            settings = self.get_settings()
            self._tag_image_labels_use_case = TagImageLabelsUseCase(
                object_store=self.get_object_store(),
                label_detector=self.get_label_detector(),
                min_confidence=settings.min_confidence,
                object_timeout_seconds=settings.object_timeout_seconds,
                timeout_safety_margin_ms=settings.timeout_safety_margin_ms,
                max_workers=settings.max_workers
            )
            logger.info(f"Using minimum confidence of {settings.min_confidence}", extra={'extra_fields': {
                "min_confidence": settings.min_confidence,
                "max_workers": settings.max_workers,
                "object_timeout_seconds": settings.object_timeout_seconds
            }})
        return self._tag_image_labels_use_case

    def get_fetch_object_metadata_use_case(self) -> FetchObjectMetadataUseCase:
        """Get fetch object metadata use case (singleton)."""
        if self._fetch_object_metadata_use_case is None:
            self._fetch_object_metadata_use_case = FetchObjectMetadataUseCase(self.get_object_store())
            logger.debug("Fetch object metadata use case created")
        return self._fetch_object_metadata_use_case

    def get_relay_change_records_use_case(self) -> RelayChangeRecordsUseCase:
        """Get relay change records use case (singleton)."""
        if self._relay_change_records_use_case is None:
            self._relay_change_records_use_case = RelayChangeRecordsUseCase()
            logger.debug("Relay change records use case created")
        return self._relay_change_records_use_case

    def get_all_dependencies(self) -> Dict[str, Any]:
        """Get all dependencies as a dictionary (useful for testing)."""
        return {
            'settings': self.get_settings(),
            'aws_config_manager': self.get_aws_config_manager(),
            'object_store': self.get_object_store(),
            'label_detector': self.get_label_detector(),
            'tag_image_labels_use_case': self.get_tag_image_labels_use_case(),
            'fetch_object_metadata_use_case': self.get_fetch_object_metadata_use_case(),
            'relay_change_records_use_case': self.get_relay_change_records_use_case()
        }

    def reset(self):
        """Reset all singletons (useful for testing)."""
        self._aws_config_manager = None
        self._object_store = None
        self._label_detector = None
        self._tag_image_labels_use_case = None
        self._fetch_object_metadata_use_case = None
        self._relay_change_records_use_case = None
        logger.debug("Dependency container reset")


# Global dependency container instance, one per Lambda container
_container = DependencyContainer()


def get_container() -> DependencyContainer:
    """Get the global dependency container."""
    return _container


def configure_dependencies(settings: Optional[LambdaSettings] = None, **overrides) -> DependencyContainer:
    """
    Configure dependencies with custom implementations.

    Args:
        settings: Settings to use instead of the environment
        **overrides: Dependency overrides, e.g. object_store=..., label_detector=...

    Returns:
        Configured dependency container

    Raises:
        ValueError: If an override names an unknown dependency
    """
    container = DependencyContainer(settings)

    for dependency_name, implementation in overrides.items():
        if not hasattr(container, f'_{dependency_name}'):
            raise ValueError(f"Unknown dependency: {dependency_name}")
        setattr(container, f'_{dependency_name}', implementation)
        logger.debug(f"Dependency override applied: {dependency_name}")

    return container
