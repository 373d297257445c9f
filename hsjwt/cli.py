"""
hsjwt Command Line Interface.

Provides commands for encoding claims into tokens and decoding tokens back
into claims.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from hsjwt import config
from hsjwt.algorithms import Algorithm
from hsjwt.errors import JWTError
from hsjwt.token import decode, encode

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity."""
    if verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, config.LOG_LEVEL.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(message)s'
    )


def _resolve(args: argparse.Namespace):
    secret = config.get_secret(args.secret)
    if not secret:
        raise ValueError("Missing secret. Set HSJWT_SECRET or use --secret")
    # argv bytes that are not UTF-8 arrive as surrogate escapes
    secret = secret.encode("utf-8", "surrogateescape")

    if args.alg:
        algorithm = Algorithm.from_name(args.alg)
    else:
        algorithm = config.get_default_algorithm()

    return secret, algorithm


def cmd_encode(args: argparse.Namespace) -> int:
    """Encode a JSON object of claims into a signed token."""
    try:
        secret, algorithm = _resolve(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        claims = json.loads(args.claims)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON claims: {e}", file=sys.stderr)
        return 1

    if not isinstance(claims, dict):
        print("Error: Claims must be a JSON object", file=sys.stderr)
        return 1

    try:
        token = encode(claims, secret, algorithm)
    except JWTError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.debug(f"Encoded token with {algorithm.value}")
    print(token)
    return 0


def cmd_decode(args: argparse.Namespace) -> int:
    """Verify a token and print its claims."""
    try:
        secret, algorithm = _resolve(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        claims = decode(args.token, secret, algorithm)
    except JWTError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.pretty:
        print(json.dumps(claims, indent=2, sort_keys=True))
    else:
        print(json.dumps(claims, separators=(",", ":"), sort_keys=True))
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    """Show the effective configuration."""
    config.print_config()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog='hsjwt',
        description='hsjwt CLI - HMAC signed JSON Web Tokens'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose output')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    algorithms = ', '.join(member.value for member in Algorithm)

    # encode command
    p_encode = subparsers.add_parser('encode', help='Encode and sign a JSON object of claims')
    p_encode.add_argument('claims', help='Claims as a JSON object')
    p_encode.add_argument('--secret', help='Shared secret (default: $HSJWT_SECRET)')
    p_encode.add_argument('--alg', help=f'Signing algorithm ({algorithms})')

    # decode command
    p_decode = subparsers.add_parser('decode', help='Verify a token and print its claims')
    p_decode.add_argument('token', help='The token to decode')
    p_decode.add_argument('--secret', help='Shared secret (default: $HSJWT_SECRET)')
    p_decode.add_argument('--alg', help=f'Expected algorithm ({algorithms})')
    p_decode.add_argument('--pretty', action='store_true', help='Indent the claims JSON')

    # config command
    subparsers.add_parser('config', help='Show the effective configuration')

    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command == 'encode':
        return cmd_encode(args)
    elif args.command == 'decode':
        return cmd_decode(args)
    elif args.command == 'config':
        return cmd_config(args)
    else:
        parser.print_help()
        return 0


if __name__ == '__main__':
    sys.exit(main())
