"""Services package - expose all concrete services from one import."""
from .base import BaseService
from .company_service import CompanyService
from .game_service import GameService
from .genre_service import GenreService
from .platform_service import PlatformService
from .pulse_group_service import PulseGroupService
from .pulse_service import PulseService
from .dummy_service import TestDummyService

__all__ = [
    'BaseService',
    'CompanyService',
    'GameService',
    'GenreService',
    'PlatformService',
    'PulseGroupService',
    'PulseService',
    'TestDummyService',
]
