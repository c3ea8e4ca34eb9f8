"""Service for the IGDB ``pulses`` endpoint."""
from ..models import Pulse
from .base import BaseService


class PulseService(BaseService[Pulse]):
    record_type = Pulse
    endpoint = 'pulses/'
    plural = 'Pulses'
