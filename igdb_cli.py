#!/usr/bin/env python3
"""
igdb_cli - query the IGDB video-game metadata API from the terminal.

Examples:
  python3 igdb_cli.py platforms get 48 --fields name,slug
  python3 igdb_cli.py games list 1942,1020 --fields name
  python3 igdb_cli.py games index --filter popularity:gt:75 --order popularity:desc --limit 5
  python3 igdb_cli.py pulse_groups search "zelda"
  python3 igdb_cli.py platforms count --filter generation:eq:8
  python3 igdb_cli.py genres fields
"""
import argparse
import json
import logging
import sys
from typing import List, Optional

from colorama import init, Fore, Style

from igdb import Client, IGDBError, setup_logging
from igdb.config import load_config
from igdb.options import (
    Operator, Option, Order, SubFilter, set_fields, set_filter, set_limit,
    set_offset, set_order,
)

# Initialize colorama for cross-platform colored terminal output
init(autoreset=True)

RESOURCES = (
    'platforms', 'pulse_groups', 'pulses', 'games', 'genres', 'companies',
    'test_dummies',
)

_log = logging.getLogger('igdb.cli')


# ---------------------------------------------------------------------------
# Argument parsing helpers
# ---------------------------------------------------------------------------

def parse_ids(text: str) -> List[int]:
    """Parse a comma-separated list of IGDB IDs ("96,74,133")."""
    try:
        return [int(part) for part in text.split(',') if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid ID list: {text!r}")


def parse_filter(text: str) -> Option:
    """Parse ``field:op:v1,v2`` into a filter option."""
    parts = text.split(':', 2)
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(
            f"filter must look like field:op:value, got {text!r}")
    field, op, values = parts
    try:
        operator = Operator(op)
    except ValueError:
        valid = ', '.join(o.value for o in Operator)
        raise argparse.ArgumentTypeError(f"unknown operator {op!r} (use one of: {valid})")
    return set_filter(field, operator, *values.split(','))


def parse_order(text: str) -> Option:
    """Parse ``field:asc``, ``field:desc`` or ``field:desc:min`` into an order option."""
    parts = text.split(':')
    if len(parts) not in (2, 3):
        raise argparse.ArgumentTypeError(
            f"order must look like field:asc|desc[:subfilter], got {text!r}")
    try:
        order = Order(parts[1])
        sub = SubFilter(parts[2]) if len(parts) == 3 else None
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))
    return set_order(parts[0], order, sub)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Query the IGDB video-game metadata API',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='Examples:' + __doc__.split('Examples:', 1)[1],
    )
    parser.add_argument(
        '--config', '-c',
        default='config.json',
        help='Path to config file (default: config.json)'
    )
    parser.add_argument(
        '--log-level',
        help='Log level (DEBUG, INFO, WARNING, ERROR); overrides the config file'
    )
    parser.add_argument('resource', choices=RESOURCES, help='IGDB resource to query')

    actions = parser.add_subparsers(dest='action', required=True)

    p_get = actions.add_parser('get', help='Get one record by ID')
    p_get.add_argument('id', type=int)

    p_list = actions.add_parser('list', help='Get records by a comma-separated list of IDs')
    p_list.add_argument('ids', type=parse_ids)

    p_index = actions.add_parser('index', help='Get records chosen by the options only')

    p_search = actions.add_parser('search', help='Full-text search')
    p_search.add_argument('query')

    p_count = actions.add_parser('count', help='Count records (filters apply)')
    actions.add_parser('fields', help='List the field names of the resource')

    for sub in (p_get, p_list, p_index, p_search, p_count):
        sub.add_argument(
            '--filter',
            action='append',
            type=parse_filter,
            default=[],
            metavar='FIELD:OP:VALUES',
            help='Filter results, e.g. popularity:gt:75 (repeatable)'
        )
        if sub is p_count:
            continue
        sub.add_argument(
            '--fields',
            metavar='A,B',
            help='Comma-separated fields to retrieve (default: all)'
        )
        sub.add_argument(
            '--order',
            type=parse_order,
            metavar='FIELD:ASC|DESC',
            help='Sort results, e.g. popularity:desc'
        )
        sub.add_argument('--limit', type=int, metavar='N', help='Maximum results (1-50)')
        sub.add_argument('--offset', type=int, metavar='N', help='Results to skip (0-10000)')

    return parser


def build_options(args: argparse.Namespace) -> List[Option]:
    """Turn parsed CLI flags into query options."""
    opts: List[Option] = list(getattr(args, 'filter', []) or [])
    if getattr(args, 'fields', None):
        opts.append(set_fields(*args.fields.split(',')))
    if getattr(args, 'order', None):
        opts.append(args.order)
    if getattr(args, 'limit', None) is not None:
        opts.append(set_limit(args.limit))
    if getattr(args, 'offset', None) is not None:
        opts.append(set_offset(args.offset))
    return opts


def format_record(record) -> str:
    """Render a record as indented JSON, hiding fields the server did not send."""
    return json.dumps(record.model_dump(mode='json', exclude_defaults=True), indent=2)


# ---------------------------------------------------------------------------
# Command execution
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace, client: Client) -> int:
    """Execute the parsed command against *client* and return an exit code."""
    service = getattr(client, args.resource)
    opts = build_options(args)

    try:
        if args.action == 'get':
            print(format_record(service.get(args.id, *opts)))
        elif args.action == 'list':
            records = service.list(args.ids, *opts)
            print('\n'.join(format_record(r) for r in records))
            print(f"{Fore.GREEN}{len(records)} {service.plural} found")
        elif args.action == 'index':
            records = service.index(*opts)
            print('\n'.join(format_record(r) for r in records))
            print(f"{Fore.GREEN}{len(records)} {service.plural} found")
        elif args.action == 'search':
            records = service.search(args.query, *opts)
            print('\n'.join(format_record(r) for r in records))
            print(f"{Fore.GREEN}{len(records)} {service.plural} found")
        elif args.action == 'count':
            print(service.count(*opts))
        elif args.action == 'fields':
            for name in sorted(service.fields()):
                print(name)
    except IGDBError as e:
        _log.debug("Command %s %s failed", args.resource, args.action, exc_info=True)
        print(f"{Fore.RED}Error: {e}")
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except IGDBError as e:
        print(f"{Fore.RED}Error: {e}")
        print(f"{Fore.YELLOW}Request a free key at: https://api.igdb.com/")
        sys.exit(1)

    setup_logging(args.log_level or config.get('log_level', 'WARNING'))
    client = Client(
        api_key=config['igdb_api_key'],
        root_url=config['igdb_root_url'],
        timeout=config['timeout'],
    )

    try:
        code = run(args, client)
    except KeyboardInterrupt:
        print(f"\n{Fore.YELLOW}Interrupted by user.{Style.RESET_ALL}")
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    main()
