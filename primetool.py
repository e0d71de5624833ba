#!/usr/bin/env python3
"""
primetool.py

A unified CLI with subcommands:
  1) serve                -> Run the prime service (POST /primes)
       --host / --port     => Listening address (default 0.0.0.0:9000)
       --strict-errors     => Answer serialization failures with status 500
       --log-level / --log-file
  2) scan <start> <end>   -> Compute primes in [start..end] locally
       --chunks N          => Split the range over N local processes
       --max-procs N       => Cap on concurrent processes
  3) query <start> <end>  -> Ask a running service for primes in [start..end]
       --url URL           => Service base URL (default http://127.0.0.1:9000)

Environment variables PRIME_SERVICE_HOST, PRIME_SERVICE_PORT,
PRIME_SERVICE_STRICT_ERRORS, PRIME_SERVICE_LOG_LEVEL and PRIME_SERVICE_LOG_FILE
set the defaults for 'serve'; command-line options win.

'scan' and 'query' print:
  Found N prime(s) in range [start..end].
  Primes=[p1, p2, ...]
"""

import sys
import argparse

import requests

from primesvc.config import VERSION, ServiceConfig, configure_logging, parse_port
from primesvc.range_scanner import calculate_primes, calculate_primes_chunked
from primesvc.request_handler import U32_MAX
from prime_service_client import DEFAULT_URL, PrimeServiceClient, PrimeServiceError


def u32(value):
    try:
        num = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if num < 0 or num > U32_MAX:
        raise argparse.ArgumentTypeError(f"must be within [0..{U32_MAX}], got {num}")
    return num


def port_type(value):
    try:
        return parse_port(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def positive_int(value):
    num = int(value)
    if num < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {num}")
    return num


def print_primes(start, end, primes):
    print(f"Found {len(primes)} prime(s) in range [{start}..{end}].")
    print(f"Primes={primes}")


def build_parser():
    parser = argparse.ArgumentParser(description="Prime Service CLI")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    subparsers = parser.add_subparsers(dest="command")

    # Subcommand: serve
    sp_serve = subparsers.add_parser("serve", help="Run the prime service")
    sp_serve.add_argument("--host", default=None, help="Interface to bind (default 0.0.0.0)")
    sp_serve.add_argument("-p", "--port", type=port_type, default=None, help="Port to use (default 9000)")
    sp_serve.add_argument("--strict-errors", action="store_true", default=None,
                          help="Return status 500 when the result cannot be serialized")
    sp_serve.add_argument("--log-level", default=None, help="Logging level (default INFO)")
    sp_serve.add_argument("--log-file", default=None, help="Write the log to this file")

    # Subcommand: scan
    sp_scan = subparsers.add_parser("scan", help="Compute primes in a range locally")
    sp_scan.add_argument("start", type=u32, help="Start of range (inclusive)")
    sp_scan.add_argument("end", type=u32, help="End of range (inclusive)")
    sp_scan.add_argument("--chunks", type=positive_int, default=1, help="Number of local processes")
    sp_scan.add_argument("--max-procs", type=positive_int, default=None, help="Max concurrent processes")

    # Subcommand: query
    sp_query = subparsers.add_parser("query", help="Ask a running service for primes in a range")
    sp_query.add_argument("start", type=u32, help="Start of range (inclusive)")
    sp_query.add_argument("end", type=u32, help="End of range (inclusive)")
    sp_query.add_argument("--url", default=DEFAULT_URL, help="Service base URL")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 0

    if args.command == "serve":
        from primesvc.server import start_server
        try:
            config = ServiceConfig.from_env().override(
                host=args.host,
                port=args.port,
                strict_errors=args.strict_errors,
                log_level=args.log_level,
                log_file=args.log_file,
            )
            configure_logging(config)
        except ValueError as e:
            print(f"Configuration error: {e}", file=sys.stderr)
            return 1
        start_server(config)
        return 0
    elif args.command == "scan":
        if args.chunks > 1:
            primes = calculate_primes_chunked(args.start, args.end, args.chunks, args.max_procs)
        else:
            primes = calculate_primes(args.start, args.end)
        print_primes(args.start, args.end, primes)
        return 0
    elif args.command == "query":
        try:
            with PrimeServiceClient(args.url) as client:
                primes = client.get_primes(args.start, args.end)
        except (requests.RequestException, PrimeServiceError) as e:
            print(f"Query failed: {e}", file=sys.stderr)
            return 1
        print_primes(args.start, args.end, primes)
        return 0
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
