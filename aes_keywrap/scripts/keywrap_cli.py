#!/usr/bin/env python3
"""
AES Key Wrap CLI

Wraps and unwraps hex-encoded keys with RFC 3394 AES Key Wrap.

Usage:
    aes-keywrap wrap --kek 000102030405060708090A0B0C0D0E0F --key 00112233445566778899AABBCCDDEEFF
    aes-keywrap unwrap --kek 000102030405060708090A0B0C0D0E0F --wrapped 1FA68B0A8112B447AEF34BD8FB5A7B829D3E862371D2CFE5

Exit codes:
    0  success
    1  integrity check failed (wrong kek or modified ciphertext)
    2  invalid input (bad hex or wrong lengths)
"""

import argparse
import logging
import sys
from typing import List
from typing import Optional

from aes_keywrap.config import get_config
from aes_keywrap.errors import KeyWrapError
from aes_keywrap.keywrap import unwrap_key
from aes_keywrap.keywrap import wrap_key
from aes_keywrap.logging_config import setup_loki_logging
from aes_keywrap.utils import parse_hex


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INTEGRITY_FAILURE = 1
EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aes-keywrap", description="RFC 3394 AES Key Wrap")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    wrap_parser = subparsers.add_parser("wrap", help="Wrap a key under a KEK")
    wrap_parser.add_argument("--kek", required=True, help="Key-encrypting key (hex, 16/24/32 bytes)")
    wrap_parser.add_argument("--key", required=True, help="Key to wrap (hex, same length as the KEK)")

    unwrap_parser = subparsers.add_parser("unwrap", help="Unwrap a wrapped key")
    unwrap_parser.add_argument("--kek", required=True, help="Key-encrypting key (hex, 16/24/32 bytes)")
    unwrap_parser.add_argument("--wrapped", required=True, help="Wrapped key (hex, KEK length + 8 bytes)")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_INVALID_INPUT

    config = get_config()
    setup_loki_logging(config, "aes-keywrap")

    source = args.key if args.command == "wrap" else args.wrapped
    try:
        kek = parse_hex(args.kek)
        data = parse_hex(source)
    except ValueError as e:
        logger.error(f"Invalid hex input for {args.command}: {e}")
        return EXIT_INVALID_INPUT

    try:
        if args.command == "wrap":
            print(wrap_key(data, kek).hex().upper())
            return EXIT_OK
        unwrapped = unwrap_key(data, kek)
    except KeyWrapError as e:
        logger.error(f"Invalid input length for {args.command}: {e}")
        return EXIT_INVALID_INPUT

    if unwrapped is None:
        logger.error("Integrity check failed: wrong kek or modified wrapped key")
        return EXIT_INTEGRITY_FAILURE

    print(unwrapped.hex().upper())
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
