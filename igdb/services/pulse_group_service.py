"""Service for the IGDB ``pulse_groups`` endpoint."""
from ..models import PulseGroup
from .base import BaseService


class PulseGroupService(BaseService[PulseGroup]):
    """Handles all the API calls for IGDB pulse groups.

    A pulse group bundles the news articles (pulses) written about one
    event, so :meth:`search` is the usual way in.
    """

    record_type = PulseGroup
    endpoint = 'pulse_groups/'
    plural = 'PulseGroups'
