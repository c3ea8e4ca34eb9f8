"""
options.py
==========
Composable query options for IGDB requests.

Each ``set_*`` factory returns an :data:`Option`: a callable that validates
its inputs and writes one query parameter into a :class:`QueryParams`
mapping.  Services and callers pass any number of options to an operation;
the client applies them in order before the request is sent, so an invalid
option never reaches the network.

Usage
-----
::

    from igdb.options import Operator, Order, set_filter, set_limit, set_order

    client.platforms.index(
        set_filter('generation', Operator.GREATER_THAN, 6),
        set_order('popularity', Order.DESC),
        set_limit(5),
    )
    # GET platforms/?filter[generation][gt]=6&order=popularity:desc&limit=5&fields=*
"""
from enum import Enum
from typing import Callable, Dict, Iterable, Optional

from .errors import EmptyFieldsError, EmptyQueryError, OutOfRangeError

# ---------------------------------------------------------------------------
# Limits accepted by the API
# ---------------------------------------------------------------------------
LIMIT_MIN = 1
LIMIT_MAX = 50
OFFSET_MIN = 0
OFFSET_MAX = 10000

DEFAULT_FIELDS = '*'

QueryParams = Dict[str, str]
Option = Callable[[QueryParams], None]


class Operator(str, Enum):
    """Filter postfix operators."""

    EQUALS = 'eq'
    NOT_EQUALS = 'not_eq'
    GREATER_THAN = 'gt'
    GREATER_THAN_EQUAL = 'gte'
    LESS_THAN = 'lt'
    LESS_THAN_EQUAL = 'lte'
    PREFIX = 'prefix'
    EXISTS = 'exists'
    NOT_EXISTS = 'not_exists'
    IN = 'in'
    NOT_IN = 'not_in'
    CONTAINS_AT_LEAST = 'any'
    CONTAINS_ALL = 'all'


class Order(str, Enum):
    ASC = 'asc'
    DESC = 'desc'


class SubFilter(str, Enum):
    """Aggregations applied to an array field before sorting on it."""

    MIN = 'min'
    MAX = 'max'
    AVG = 'avg'
    SUM = 'sum'
    MEDIAN = 'median'


def _join_fields(fields: Iterable[str]) -> str:
    fields = [str(f).strip() for f in fields]
    if not fields or any(not f for f in fields):
        raise EmptyFieldsError()
    return ','.join(fields)


def _value(v) -> str:
    if isinstance(v, bool):
        return 'true' if v else 'false'
    # Enum members (e.g. TestDummyEnum) are sent by value
    return str(getattr(v, 'value', v)).strip()


def new_params() -> QueryParams:
    """Return a fresh parameter container holding the API defaults."""
    return {'fields': DEFAULT_FIELDS}


def apply_options(params: QueryParams, options: Iterable[Option]) -> QueryParams:
    """Apply *options* to *params* in order and return *params*.

    Raises:
        OutOfRangeError, EmptyFieldsError, EmptyQueryError: an option is invalid.
    """
    for opt in options:
        opt(params)
    return params


# ---------------------------------------------------------------------------
# Option factories
# ---------------------------------------------------------------------------

def set_fields(*fields: str) -> Option:
    """Restrict the response to *fields*.  ``'*'`` requests every field."""
    def _opt(params: QueryParams) -> None:
        params['fields'] = _join_fields(fields)
    return _opt


def set_expand(*fields: str) -> Option:
    """Expand the related-entity ID lists named by *fields* into full objects."""
    def _opt(params: QueryParams) -> None:
        params['expand'] = _join_fields(fields)
    return _opt


def set_filter(field: str, op: Operator, *values) -> Option:
    """Filter results on *field* using *op*.

    Several values are sent comma-separated, which is how the membership
    operators (``in``, ``any``, ``all``...) take their arguments.  Filters on
    the same field with different operators combine.
    """
    def _opt(params: QueryParams) -> None:
        name = str(field).strip()
        if not name:
            raise EmptyFieldsError()
        vals = [_value(v) for v in values]
        if not vals or any(not v for v in vals):
            raise EmptyQueryError()
        params[f'filter[{name}][{Operator(op).value}]'] = ','.join(vals)
    return _opt


def set_order(field: str, order: Order = Order.ASC,
              subfilter: Optional[SubFilter] = None) -> Option:
    """Sort results on *field* in *order*, optionally aggregating an array field."""
    def _opt(params: QueryParams) -> None:
        name = str(field).strip()
        if not name:
            raise EmptyFieldsError()
        value = f'{name}:{Order(order).value}'
        if subfilter is not None:
            value += f':{SubFilter(subfilter).value}'
        params['order'] = value
    return _opt


def set_limit(limit: int) -> Option:
    """Return at most *limit* results (1-50)."""
    def _opt(params: QueryParams) -> None:
        if not LIMIT_MIN <= limit <= LIMIT_MAX:
            raise OutOfRangeError(
                f'limit {limit} outside range {LIMIT_MIN}-{LIMIT_MAX}')
        params['limit'] = str(limit)
    return _opt


def set_offset(offset: int) -> Option:
    """Skip the first *offset* results (0-10000)."""
    def _opt(params: QueryParams) -> None:
        if not OFFSET_MIN <= offset <= OFFSET_MAX:
            raise OutOfRangeError(
                f'offset {offset} outside range {OFFSET_MIN}-{OFFSET_MAX}')
        params['offset'] = str(offset)
    return _opt


def set_search(query: str) -> Option:
    """Full-text search on the resource's searchable fields."""
    def _opt(params: QueryParams) -> None:
        q = (query or '').strip()
        if not q:
            raise EmptyQueryError()
        params['search'] = q
    return _opt
