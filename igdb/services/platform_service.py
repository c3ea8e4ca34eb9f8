"""Service for the IGDB ``platforms`` endpoint."""
from ..models import Platform
from .base import BaseService


class PlatformService(BaseService[Platform]):
    """Handles all the API calls for IGDB platforms (consoles, PC, web...)."""

    record_type = Platform
    endpoint = 'platforms/'
    plural = 'Platforms'
