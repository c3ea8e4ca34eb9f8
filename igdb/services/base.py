"""Service base class shared by every IGDB resource."""
import logging
from typing import Generic, List, Sequence, Type, TypeVar

from ..errors import EmptyIDsError, EmptyQueryError, IGDBError, NegativeIDError
from ..models import Record
from ..options import Operator, Option, set_filter, set_search

R = TypeVar('R', bound=Record)


class BaseService(Generic[R]):
    """Get / List / Index / Search / Count / Fields for one resource.

    Sub-classes only declare which record they decode and where it lives::

        class PlatformService(BaseService[Platform]):
            record_type = Platform
            endpoint = 'platforms/'
            plural = 'Platforms'

    Input checks (negative IDs, empty ID lists, blank queries) happen before
    any option is applied or request sent.  Errors coming back from the
    client are annotated with the failed operation and re-raised unchanged
    otherwise, so callers can catch the sentinel class they care about.
    """

    record_type: Type[R]
    endpoint: str
    plural: str

    def __init__(self, client) -> None:
        """
        Args:
            client: The owning :class:`igdb.client.Client`.
        """
        self._client = client
        self._log = logging.getLogger(f'igdb.service.{type(self).__name__}')

    @property
    def name(self) -> str:
        return self.record_type.__name__

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get(self, id: int, *opts: Option) -> R:
        """Return the single record identified by the IGDB *id*.

        Provide :func:`~igdb.options.set_fields` to choose which fields to
        retrieve.

        Raises:
            NegativeIDError: *id* is below zero.
            NoResultsError:  No record has this ID.
        """
        if id < 0:
            raise NegativeIDError()

        opts = opts + (set_filter('id', Operator.EQUALS, id),)
        try:
            records = self._client.get(self.endpoint, self.record_type, *opts)
        except IGDBError as exc:
            self._log.debug("get %s failed: %s", id, exc)
            raise exc.annotate(f'cannot get {self.name} with ID {id}')
        return records[0]

    def list(self, ids: Sequence[int], *opts: Option) -> List[R]:
        """Return the records identified by *ids*.

        IDs that match nothing are ignored; if none match,
        :class:`~igdb.errors.NoResultsError` is raised.

        Raises:
            EmptyIDsError:   *ids* is empty.
            NegativeIDError: any ID is below zero.
        """
        ids = list(ids)
        if not ids:
            raise EmptyIDsError()
        for id in ids:
            if id < 0:
                raise NegativeIDError()

        opts = opts + (set_filter('id', Operator.CONTAINS_AT_LEAST, *ids),)
        try:
            return self._client.get(self.endpoint, self.record_type, *opts)
        except IGDBError as exc:
            raise exc.annotate(f'cannot get {self.plural} with IDs {ids}')

    def index(self, *opts: Option) -> List[R]:
        """Return records chosen only by *opts* (sort, filter, paginate)."""
        try:
            return self._client.get(self.endpoint, self.record_type, *opts)
        except IGDBError as exc:
            raise exc.annotate(f'cannot get index of {self.plural}')

    def search(self, query: str, *opts: Option) -> List[R]:
        """Return records matching the full-text *query*.

        Raises:
            EmptyQueryError: *query* is blank.
        """
        if not query or not query.strip():
            raise EmptyQueryError()

        opts = opts + (set_search(query),)
        try:
            return self._client.get(self.endpoint, self.record_type, *opts)
        except IGDBError as exc:
            raise exc.annotate(f'cannot search {self.plural} for {query!r}')

    def count(self, *opts: Option) -> int:
        """Return how many records exist, optionally narrowed by filters."""
        try:
            return self._client.get_count(self.endpoint, *opts)
        except IGDBError as exc:
            raise exc.annotate(f'cannot count {self.plural}')

    def fields(self) -> List[str]:
        """Return the up-to-date list of field names for this resource."""
        try:
            return self._client.get_fields(self.endpoint)
        except IGDBError as exc:
            raise exc.annotate(f'cannot get {self.name} fields')
