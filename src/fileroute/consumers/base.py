"""
Base consumer interface.

A consumer owns one endpoint and a processor callback. Each call to
``poll`` performs a single pass over the endpoint and hands every
discovered item to the processor; scheduling repeated polls is left to
the caller.
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from ..core.models import Config, EndpointConfig, GenericFile

Processor = Callable[[GenericFile], None]


class Consumer(ABC):
    """Abstract base class for endpoint consumers."""

    def __init__(self, endpoint: EndpointConfig, processor: Processor, config: Optional[Config] = None):
        """Initialize consumer with its endpoint and processor."""
        self.endpoint = endpoint
        self.processor = processor
        self.config = config or Config()
        self.errors: List[str] = []
        self.files_processed = 0

    @abstractmethod
    def poll(self) -> int:
        """
        Run a single pass over the endpoint.

        Returns:
            Number of items handed to the processor.
        """
        pass

    def _dispatch(self, item: GenericFile) -> None:
        """Hand one item to the processor, honouring bridgeErrorHandler."""
        try:
            self.processor(item)
        except Exception as e:
            if not self.endpoint.bridge_error_handler:
                raise
            self.errors.append(f"{item.relative_path}: {type(e).__name__}: {e}")
        self.files_processed += 1

    def has_errors(self) -> bool:
        """Check if any processor errors were collected."""
        return len(self.errors) > 0
