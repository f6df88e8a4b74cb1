import argparse
import sys

from . import load_config, run_server, run_client
from .config import setup_config_json


def port_number(value):
    try:
        port = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f'invalid port: {value!r}')
    if not 0 < port < 65536:
        raise argparse.ArgumentTypeError(f'port out of range: {port}')
    return port


def period_seconds(value):
    try:
        period = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f'invalid period: {value!r}')
    if period < 0:
        raise argparse.ArgumentTypeError(f'period must not be negative: {value}')
    return period


def client_name(value):
    if not value.strip() or any(ch.isspace() for ch in value):
        raise argparse.ArgumentTypeError(f'invalid client name: {value!r}')
    return value


def build_parser():
    parser = argparse.ArgumentParser(prog='heartbeat_monitor',
                                     description='Heartbeat Monitor')
    parser.add_argument('--config', default='config.json',
                        help='JSON configuration file')
    subparsers = parser.add_subparsers(dest='mode', metavar='mode')
    subparsers.required = True

    server = subparsers.add_parser('server', help='Accept heartbeats')
    server.add_argument('port', type=port_number)

    client = subparsers.add_parser('client', help='Send heartbeats')
    client.add_argument('name', type=client_name)
    client.add_argument('port', type=port_number)
    client.add_argument('period', type=period_seconds)

    subparsers.add_parser('init', help='Write a default config.json')
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.mode == 'init':
        location, exists = setup_config_json(args.config)
        print(f'{location} {"already exists" if exists else "created"}')
        return 0

    config = load_config(args.config)
    if args.mode == 'server':
        try:
            result = run_server(config, args.port)
        except ValueError as err:
            parser.error(f'invalid config {args.config}: {err}')
    else:
        result = run_client(config, args.name, args.port, args.period)
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
