"""Service for the IGDB ``test_dummies`` endpoint."""
from ..models import TestDummy
from .base import BaseService


class TestDummyService(BaseService[TestDummy]):
    """Handles all the API calls for the IGDB TestDummy endpoint.

    TestDummies are synthetic records carrying one field of every type the
    API supports; they are handy for checking decoding end to end.
    """

    record_type = TestDummy
    endpoint = 'test_dummies/'
    plural = 'TestDummies'
