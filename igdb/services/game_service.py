"""Service for the IGDB ``games`` endpoint."""
from ..models import Game
from .base import BaseService


class GameService(BaseService[Game]):
    """Handles all the API calls for IGDB games."""

    record_type = Game
    endpoint = 'games/'
    plural = 'Games'
