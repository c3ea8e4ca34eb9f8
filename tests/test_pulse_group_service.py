#!/usr/bin/env python3
"""
Tests for PulseGroupService, including full-text search.

Run with:
    python -m pytest tests/test_pulse_group_service.py
"""
import json
import os
import sys
import unittest
from unittest.mock import MagicMock, patch

from pydantic import ValidationError

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from igdb import Client
from igdb.errors import (
    EmptyQueryError, InvalidJSONError, NegativeIDError, NoResultsError,
    OutOfRangeError,
)
from igdb.models import PulseGroup
from igdb.options import Order, set_limit, set_offset, set_order

TEST_DATA = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'test_data')
FAKE_API_KEY = 'TEST_API_KEY_12345'


def _read(name: str) -> str:
    with open(os.path.join(TEST_DATA, name)) as f:
        return f.read()


def _make_response(body: str, status: int = 200):
    resp = MagicMock()
    resp.status_code = status
    resp.text = body
    return resp


PULSE_GROUP_GET = _read('pulse_group_get.json')
PULSE_GROUP_LIST = _read('pulse_group_list.json')


class TestPulseGroupServiceGet(unittest.TestCase):

    @patch('igdb.client.requests.Session.get')
    def test_valid_response(self, mock_get):
        mock_get.return_value = _make_response(PULSE_GROUP_GET)
        group = Client(api_key=FAKE_API_KEY).pulse_groups.get(5000)
        want = PulseGroup.model_validate(json.loads(PULSE_GROUP_GET)[0])
        self.assertEqual(group, want)
        self.assertEqual(group.pulses, (245012, 245104))
        self.assertEqual(group.game, (11198,))

    @patch('igdb.client.requests.Session.get')
    def test_endpoint(self, mock_get):
        mock_get.return_value = _make_response(PULSE_GROUP_GET)
        Client(api_key=FAKE_API_KEY).pulse_groups.get(5000)
        self.assertEqual(mock_get.call_args[0][0],
                         'https://api-endpoint.igdb.com/pulse_groups/')

    @patch('igdb.client.requests.Session.get')
    def test_negative_id(self, mock_get):
        with self.assertRaises(NegativeIDError):
            Client(api_key=FAKE_API_KEY).pulse_groups.get(-5)
        mock_get.assert_not_called()

    @patch('igdb.client.requests.Session.get')
    def test_wrong_shape_is_invalid_json(self, mock_get):
        mock_get.return_value = _make_response('[{"id": "not-a-number"}]')
        with self.assertRaises(InvalidJSONError):
            Client(api_key=FAKE_API_KEY).pulse_groups.get(5000)

    @patch('igdb.client.requests.Session.get')
    def test_object_instead_of_array_is_invalid_json(self, mock_get):
        mock_get.return_value = _make_response('{"id": 5000}')
        with self.assertRaises(InvalidJSONError):
            Client(api_key=FAKE_API_KEY).pulse_groups.get(5000)

    @patch('igdb.client.requests.Session.get')
    def test_records_are_frozen(self, mock_get):
        mock_get.return_value = _make_response(PULSE_GROUP_GET)
        group = Client(api_key=FAKE_API_KEY).pulse_groups.get(5000)
        with self.assertRaises(ValidationError):
            group.name = 'changed'


class TestPulseGroupServiceSearch(unittest.TestCase):

    def test_table(self):
        want = [PulseGroup.model_validate(p) for p in json.loads(PULSE_GROUP_LIST)]
        cases = [
            ("Valid response", PULSE_GROUP_LIST, 'zelda', [set_limit(3)], want, None),
            ("Empty query", '', '', [], None, EmptyQueryError),
            ("Blank query", '', '   ', [], None, EmptyQueryError),
            ("Empty response", '', 'zelda', [], None, InvalidJSONError),
            ("Invalid option", '', 'zelda', [set_offset(-1)], None, OutOfRangeError),
            ("No results", '[]', 'no such thing', [], None, NoResultsError),
        ]
        for name, body, query, opts, want_groups, want_err in cases:
            with self.subTest(name), \
                    patch('igdb.client.requests.Session.get') as mock_get:
                mock_get.return_value = _make_response(body)
                c = Client(api_key=FAKE_API_KEY)
                if want_err:
                    with self.assertRaises(want_err):
                        c.pulse_groups.search(query, *opts)
                else:
                    self.assertEqual(c.pulse_groups.search(query, *opts), want_groups)

    @patch('igdb.client.requests.Session.get')
    def test_search_params(self, mock_get):
        mock_get.return_value = _make_response(PULSE_GROUP_LIST)
        Client(api_key=FAKE_API_KEY).pulse_groups.search(
            'zelda', set_order('created_at', Order.DESC))
        self.assertEqual(mock_get.call_args[1]['params'], {
            'fields': '*',
            'order': 'created_at:desc',
            'search': 'zelda',
        })

    @patch('igdb.client.requests.Session.get')
    def test_blank_query_never_dispatched(self, mock_get):
        with self.assertRaises(EmptyQueryError):
            Client(api_key=FAKE_API_KEY).pulse_groups.search('')
        mock_get.assert_not_called()

    @patch('igdb.client.requests.Session.get')
    def test_error_context_names_query(self, mock_get):
        mock_get.return_value = _make_response('[]')
        with self.assertRaises(NoResultsError) as ctx:
            Client(api_key=FAKE_API_KEY).pulse_groups.search('zelda')
        self.assertIn("cannot search PulseGroups for 'zelda'", str(ctx.exception))


class TestPulseGroupServiceList(unittest.TestCase):

    @patch('igdb.client.requests.Session.get')
    def test_valid_response(self, mock_get):
        mock_get.return_value = _make_response(PULSE_GROUP_LIST)
        groups = Client(api_key=FAKE_API_KEY).pulse_groups.list([7300, 7301, 7302])
        self.assertEqual([g.id for g in groups], [7300, 7301, 7302])
        # missing keys fall back to defaults
        self.assertEqual(groups[2].tags, ())


if __name__ == '__main__':
    unittest.main()
