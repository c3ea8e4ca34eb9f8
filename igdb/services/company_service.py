"""Service for the IGDB ``companies`` endpoint (developers and publishers)."""
from ..models import Company
from .base import BaseService


class CompanyService(BaseService[Company]):
    record_type = Company
    endpoint = 'companies/'
    plural = 'Companies'
