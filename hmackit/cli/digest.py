import logging
import os
import sys
from argparse import ArgumentParser

import curio

from hmackit import Config, HmacAlgorithm, HmacError, SecretKeySpec, create_hmac
from hmackit.hash import BACKENDS


def build_parser():
    parser = ArgumentParser(prog="pyhmac")
    parser.add_argument("-v", "--verbose", help="verbose output", action="store_true")
    parser.add_argument(
        "-b", "--backend", help="hash backend to use", choices=list(BACKENDS), default="hashlib"
    )
    parser.add_argument(
        "--async", dest="use_async", help="run through the curio adapter", action="store_true"
    )
    commands = parser.add_subparsers(dest="command", required=True)
    algorithms = [a.hash_name for a in HmacAlgorithm]

    digest = commands.add_parser("digest", help="print the hex tag of a message")
    verify = commands.add_parser("verify", help="check a hex tag, exit status 1 on mismatch")
    genkey = commands.add_parser("genkey", help="print a fresh hex key")
    for cmd in (digest, verify, genkey):
        cmd.add_argument("-a", "--algorithm", choices=algorithms, default="sha256")
    for cmd in (digest, verify):
        group = cmd.add_mutually_exclusive_group(required=True)
        group.add_argument("-k", "--key", help="key as text")
        group.add_argument("-K", "--hex-key", help="key as hex")
        cmd.add_argument("message", nargs="?", help="message, read from stdin when omitted")
    verify.add_argument("-t", "--tag", required=True, help="expected tag as hex")
    return parser


def read_key(args) -> SecretKeySpec:
    if args.hex_key is not None:
        return SecretKeySpec.from_hex(args.hex_key, args.algorithm)
    return SecretKeySpec(os.fsencode(args.key), args.algorithm)


def read_message(args) -> bytes:
    if args.message is None:
        return sys.stdin.buffer.read()
    return os.fsencode(args.message)


async def run_async(hmac, args):
    if args.command == "genkey":
        return await hmac.generate_key(args.algorithm)
    key, message = read_key(args), read_message(args)
    if args.command == "verify":
        return await hmac.verify(key, message, bytes.fromhex(args.tag))
    return await hmac.digest(key, message)


def run_sync(hmac, args):
    if args.command == "genkey":
        return hmac.generate_key(args.algorithm)
    key, message = read_key(args), read_message(args)
    if args.command == "verify":
        return hmac.verify(key, message, bytes.fromhex(args.tag))
    return hmac.digest(key, message)


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    config = Config(backend=args.backend, mode="async" if args.use_async else "sync")
    hmac = create_hmac(config)
    try:
        if args.use_async:
            result = curio.run(run_async, hmac, args)
        else:
            result = run_sync(hmac, args)
    except (HmacError, ValueError) as e:
        sys.stderr.write("pyhmac: %s\n" % e)
        return 1
    if args.command == "verify":
        sys.stdout.write("OK\n" if result else "FAILED\n")
        return 0 if result else 1
    if args.command == "genkey":
        result = result.key
    sys.stdout.write(result.hex() + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
