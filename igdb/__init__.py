"""
IGDB client package.

Layout:

  igdb/client.py    - HTTP client: query building, GET dispatch, response
                      classification.
  igdb/services/    - one service per IGDB resource (Get / List / Index /
                      Search / Count / Fields), all built on ``BaseService``.
  igdb/options.py   - composable query options (fields, filter, order,
                      limit, offset, search).
  igdb/models.py    - immutable typed records decoded from responses.
  igdb/errors.py    - sentinel and server errors.

``Client`` is the integration point: it creates one service per resource and
exposes them as public attributes (e.g. ``client.platforms``).
"""
from .client import Client
from .config import load_config
from .errors import (
    ConfigError, EmptyFieldsError, EmptyIDsError, EmptyQueryError, IGDBError,
    InvalidJSONError, NegativeIDError, NoResultsError, OutOfRangeError,
    RequestError, ServerError,
)
from .log import setup_logging
from .options import (
    Operator, Order, SubFilter, set_expand, set_fields, set_filter,
    set_limit, set_offset, set_order, set_search,
)

__all__ = [
    'Client',
    'load_config',
    'setup_logging',
    'IGDBError',
    'ConfigError',
    'EmptyFieldsError',
    'EmptyIDsError',
    'EmptyQueryError',
    'InvalidJSONError',
    'NegativeIDError',
    'NoResultsError',
    'OutOfRangeError',
    'RequestError',
    'ServerError',
    'Operator',
    'Order',
    'SubFilter',
    'set_expand',
    'set_fields',
    'set_filter',
    'set_limit',
    'set_offset',
    'set_order',
    'set_search',
]
