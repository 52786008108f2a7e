"""Consumers that read from resolved endpoints."""
from typing import Optional, Union

from ..core.endpoint import resolve_endpoint
from ..core.models import Config, EndpointConfig
from .base import Consumer, Processor
from .file import FileConsumer


def create_consumer(endpoint: Union[str, EndpointConfig], processor: Processor,
                    config: Optional[Config] = None, show_progress: bool = False) -> Consumer:
    """
    Create a consumer for an endpoint.

    Args:
        endpoint: Endpoint URI or an already resolved EndpointConfig
        processor: Callback invoked once per discovered file
        config: Process settings
        show_progress: Display a progress bar while polling

    Returns:
        FileConsumer bound to the endpoint

    Raises:
        ResolveEndpointFailedError: If ``endpoint`` is a URI that does not
            resolve.
    """
    config = config or Config()
    if isinstance(endpoint, str):
        endpoint = resolve_endpoint(endpoint, config)
    return FileConsumer(endpoint, processor, config, show_progress=show_progress)


__all__ = ['Consumer', 'FileConsumer', 'Processor', 'create_consumer']
