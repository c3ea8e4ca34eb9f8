"""Service for the IGDB ``genres`` endpoint."""
from ..models import Genre
from .base import BaseService


class GenreService(BaseService[Genre]):
    record_type = Genre
    endpoint = 'genres/'
    plural = 'Genres'
