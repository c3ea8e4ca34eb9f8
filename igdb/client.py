"""
client.py
=========
HTTP client for the IGDB REST API.

The :class:`Client` owns the root URL, the API key and a
``requests.Session``.  Resource operations live on per-resource service
objects exposed as attributes (``client.platforms``, ``client.pulse_groups``
...); every service funnels through the three request helpers here, which
build the query string, perform the GET and classify the response.

Usage
-----
::

    from igdb import Client
    from igdb.options import set_fields, set_limit

    client = Client(api_key="abc")
    ps4 = client.platforms.get(48, set_fields("name", "slug"))
    # Platform(id=48, name='PlayStation 4', slug='ps4', ...)

Response classification
-----------------------
* network failure          -> :class:`~igdb.errors.RequestError`
* non-2xx status           -> :class:`~igdb.errors.ServerError` subclass
* empty JSON array ``[]``  -> :class:`~igdb.errors.NoResultsError`
* empty / malformed body   -> :class:`~igdb.errors.InvalidJSONError`
"""
import json
import logging
from functools import lru_cache
from typing import Any, List, Optional, Type, TypeVar

import requests
from pydantic import TypeAdapter, ValidationError

from .config import DEFAULT_ROOT_URL, DEFAULT_TIMEOUT, load_config
from .errors import (
    InvalidJSONError, NoResultsError, RequestError, error_for_status,
)
from .models import Count, Record
from .options import Option, QueryParams, apply_options, new_params
from .services import (
    CompanyService, GameService, GenreService, PlatformService,
    PulseGroupService, PulseService, TestDummyService,
)

R = TypeVar('R', bound=Record)

logger = logging.getLogger('igdb.client')


@lru_cache(maxsize=None)
def _list_adapter(record_type: Type[Record]) -> TypeAdapter:
    return TypeAdapter(List[record_type])


def _decode(body: str) -> Any:
    """Parse *body* as JSON, mapping any failure to :class:`InvalidJSONError`."""
    try:
        return json.loads(body)
    except ValueError as exc:
        raise InvalidJSONError() from exc


def _error_message(body: str) -> Optional[str]:
    """Pull the ``message`` out of an IGDB error body, if there is one."""
    try:
        data = json.loads(body)
    except ValueError:
        return None
    if isinstance(data, list) and data:
        data = data[0]
    if isinstance(data, dict):
        data = data.get('Err', data)
        if isinstance(data, dict) and data.get('message'):
            return str(data['message'])
    return None


class Client:
    """Blocking IGDB API client.

    Args:
        api_key:  IGDB API key, sent in the ``user-key`` header.
        root_url: API root; resource endpoints are appended to it.
        timeout:  HTTP request timeout in seconds.
        session:  Optional pre-configured ``requests.Session``.
    """

    def __init__(
        self,
        api_key: str,
        root_url: str = DEFAULT_ROOT_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not api_key:
            raise ValueError("api_key must not be empty")
        self.root_url = root_url if root_url.endswith('/') else root_url + '/'
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            'user-key': api_key,
            'Accept':   'application/json',
        })

        self.platforms = PlatformService(self)
        self.pulse_groups = PulseGroupService(self)
        self.pulses = PulseService(self)
        self.games = GameService(self)
        self.genres = GenreService(self)
        self.companies = CompanyService(self)
        self.test_dummies = TestDummyService(self)

    @classmethod
    def from_config(cls, config_path: str = 'config.json') -> 'Client':
        """Build a client from :func:`igdb.config.load_config` output."""
        config = load_config(config_path)
        return cls(
            api_key=config['igdb_api_key'],
            root_url=config['igdb_root_url'],
            timeout=config['timeout'],
        )

    # ------------------------------------------------------------------
    # Request helpers used by the services
    # ------------------------------------------------------------------

    def get(self, end: str, record_type: Type[R], *opts: Option) -> List[R]:
        """GET *end* and decode the body into a list of *record_type*.

        Raises:
            NoResultsError:   The server returned an empty array.
            InvalidJSONError: The body is empty, malformed or not a list of
                              objects shaped like *record_type*.
        """
        params = apply_options(new_params(), opts)
        data = self._send(end, params)
        if data == []:
            raise NoResultsError()
        try:
            return _list_adapter(record_type).validate_python(data)
        except ValidationError as exc:
            raise InvalidJSONError(
                f'response does not match {record_type.__name__} records') from exc

    def get_count(self, end: str, *opts: Option) -> int:
        """GET ``<end>count`` and return the ``count`` value."""
        params = apply_options({}, opts)
        data = self._send(end + 'count', params)
        if data == []:
            raise NoResultsError()
        try:
            return Count.model_validate(data).count
        except ValidationError as exc:
            raise InvalidJSONError('response is not a count object') from exc

    def get_fields(self, end: str) -> List[str]:
        """GET ``<end>meta`` and return the resource's field names.

        An empty array is a valid answer here and yields an empty list.
        """
        data = self._send(end + 'meta', {})
        if not isinstance(data, list) or not all(isinstance(f, str) for f in data):
            raise InvalidJSONError('response is not a list of field names')
        return data

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _send(self, end: str, params: QueryParams) -> Any:
        """Perform the GET and return the parsed JSON body."""
        url = self.root_url + end
        logger.debug("GET %s params=%s", url, params)
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise RequestError(f"network error calling IGDB: {exc}") from exc

        if not 200 <= resp.status_code < 300:
            err = error_for_status(resp.status_code, _error_message(resp.text))
            logger.warning("IGDB error %s for %s: %s", resp.status_code, end, err.message)
            raise err

        return _decode(resp.text)

