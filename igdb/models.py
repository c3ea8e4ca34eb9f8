"""Typed IGDB records (pydantic v2).

Records mirror the JSON shapes the API returns.  They are frozen: a record is
only ever built by decoding a response, never edited afterwards.  Every field
is optional because the ``fields`` option decides which keys the server
sends; list fields decode into tuples and default to empty.

Timestamps (``created_at``, ``updated_at`` ...) are Unix epoch milliseconds.
"""
from enum import IntEnum
from typing import Optional, Tuple

from pydantic import BaseModel, Field, StrictInt
from pydantic.config import ConfigDict


class Record(BaseModel):
    """Base for all decoded records: immutable, unknown keys ignored."""

    model_config = ConfigDict(frozen=True, extra='ignore')


class Image(Record):
    """Image metadata embedded in logos, covers and pulse images."""

    url: Optional[str] = None
    cloudinary_id: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None


class Platform(Record):
    """Hardware or service games are released on (consoles, PC, web...)."""

    id: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None
    url: Optional[str] = None
    created_at: Optional[int] = None
    updated_at: Optional[int] = None
    logo: Optional[Image] = None
    website: Optional[str] = None
    summary: Optional[str] = None
    alternative_name: Optional[str] = None
    generation: Optional[int] = None
    games: Tuple[int, ...] = ()
    versions: Tuple[int, ...] = ()


class PulseGroup(Record):
    """A group of news articles (pulses) about the same event or game."""

    id: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None
    url: Optional[str] = None
    created_at: Optional[int] = None
    updated_at: Optional[int] = None
    tags: Tuple[int, ...] = ()
    pulses: Tuple[int, ...] = ()
    game: Tuple[int, ...] = ()


class Pulse(Record):
    """A single news article."""

    id: Optional[int] = None
    pulse_source: Optional[int] = None
    category: Optional[int] = None
    title: Optional[str] = None
    summary: Optional[str] = None
    url: Optional[str] = None
    uid: Optional[str] = None
    created_at: Optional[int] = None
    updated_at: Optional[int] = None
    published_at: Optional[int] = None
    image: Optional[str] = None
    author: Optional[str] = None
    tags: Tuple[int, ...] = ()


class Game(Record):
    id: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None
    url: Optional[str] = None
    created_at: Optional[int] = None
    updated_at: Optional[int] = None
    summary: Optional[str] = None
    storyline: Optional[str] = None
    rating: Optional[float] = None
    popularity: Optional[float] = None
    first_release_date: Optional[int] = None
    genres: Tuple[int, ...] = ()
    platforms: Tuple[int, ...] = ()
    tags: Tuple[int, ...] = ()
    cover: Optional[Image] = None


class Genre(Record):
    id: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None
    url: Optional[str] = None
    created_at: Optional[int] = None
    updated_at: Optional[int] = None
    games: Tuple[int, ...] = ()


class Company(Record):
    """A developer or publisher."""

    id: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None
    url: Optional[str] = None
    created_at: Optional[int] = None
    updated_at: Optional[int] = None
    description: Optional[str] = None
    country: Optional[int] = None
    website: Optional[str] = None
    developed: Tuple[int, ...] = ()
    published: Tuple[int, ...] = ()


class TestDummyEnum(IntEnum):
    ENUM1 = 1
    ENUM2 = 2


class TestDummy(Record):
    """Synthetic resource IGDB exposes for exercising every field type."""

    id: Optional[int] = None
    bool_value: Optional[bool] = None
    created_at: Optional[int] = None
    enum_test: Optional[TestDummyEnum] = None
    float_value: Optional[float] = None
    game: Optional[int] = None
    integer_array: Tuple[int, ...] = ()
    integer_value: Optional[int] = None
    name: Optional[str] = None
    new_integer_value: Optional[int] = None
    private: Optional[bool] = None
    slug: Optional[str] = None
    string_array: Tuple[str, ...] = ()
    test_dummies: Tuple[int, ...] = ()
    test_dummy: Optional[int] = None
    updated_at: Optional[int] = None
    url: Optional[str] = None
    user: Optional[int] = None


class Count(Record):
    """Envelope returned by the ``<endpoint>/count`` call."""

    count: StrictInt = Field(..., ge=0)
