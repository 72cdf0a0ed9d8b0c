"""Command line entry points."""

from __future__ import annotations

import argparse

from .checker import ResourceChecker
from .config import Settings, load_settings
from .exceptions import ArnGuardException
from .resource import parse_resource


def parse_vars(pairs: list[str]) -> dict[str, list[str]]:
    values: dict[str, list[str]] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {pair!r}")
        values.setdefault(key, []).append(value)
    return values


def _settings(args: argparse.Namespace) -> Settings:
    if args.config:
        return load_settings(args.config)
    return Settings()


def run_match(args: argparse.Namespace) -> int:
    checker = ResourceChecker(_settings(args))
    decision = checker.check(args.resource, args.target, parse_vars(args.var))
    if not decision.allowed:
        print("DENY:", decision.reason)
        return 1
    print("ALLOW")
    return 0


def run_bucket(args: argparse.Namespace) -> int:
    checker = ResourceChecker(_settings(args))
    decision = checker.check_bucket(args.resource, args.bucket)
    if not decision.allowed:
        print("DENY:", decision.reason)
        return 1
    print("ALLOW")
    return 0


def run_validate(args: argparse.Namespace) -> int:
    status = 0
    for arn in args.arns:
        try:
            parse_resource(arn).validate()
        except ArnGuardException as exc:
            print(f"INVALID: {arn}: {exc}")
            status = 1
            continue
        print(f"VALID: {arn}")
    return status


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="arnguard", description="S3 resource pattern checker")
    sub = parser.add_subparsers(dest="command")

    match_cmd = sub.add_parser("match", help="Match a bucket/object path against a resource")
    match_cmd.add_argument("--resource", required=True)
    match_cmd.add_argument("--target", required=True)
    match_cmd.add_argument("--var", action="append", default=[], metavar="KEY=VALUE")
    match_cmd.add_argument("--config")

    bucket_cmd = sub.add_parser("bucket", help="Check that a resource covers a bucket")
    bucket_cmd.add_argument("--resource", required=True)
    bucket_cmd.add_argument("--bucket", required=True)
    bucket_cmd.add_argument("--config")

    validate_cmd = sub.add_parser("validate", help="Validate resource ARNs")
    validate_cmd.add_argument("arns", nargs="+")

    return parser


def cli_main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        if args.command == "match":
            return run_match(args)
        if args.command == "bucket":
            return run_bucket(args)
        if args.command == "validate":
            return run_validate(args)
    except argparse.ArgumentTypeError as exc:
        parser.error(str(exc))
    except ArnGuardException as exc:
        print("ERROR:", exc)
        return 1
    parser.print_help()
    return 2
