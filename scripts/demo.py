"""Command-line demo: parse, display and encode UNC amounts.

Commands:
  parse   "<amount> <unit>" -> yocto-UNC count, display string, JSON and borsh hex
  format  <yocto count>     -> display string (tiered, rounded up)
  tiers                     -> walk the display tiers around their boundaries

Examples:
  python scripts/demo.py parse "1.5 UNC" "123456 yn"
  python scripts/demo.py format 1000000000000000000001
  python scripts/demo.py tiers
"""
from __future__ import annotations

from typing import List, Optional
import argparse
import sys

from unc_token import UncToken, UncTokenError, format_amount
from unc_token.core import ONE_MILLIUNC, ONE_UNC, U128_MAX, AmountDomainError, format_tier
from unc_token.adapters import from_text, to_bytes, to_json

# ---------- pretty printers ----------

def describe(token: UncToken) -> str:
    return (
        f"yocto={token.as_yoctounc()} display={format_amount(token)!r} "
        f"tier={format_tier(token)} json={to_json(token)} borsh={to_bytes(token).hex()}"
    )


def cmd_parse(values: List[str]) -> int:
    rc = 0
    for raw in values:
        try:
            token = UncToken.from_str(raw)
        except UncTokenError as err:
            print(f"{raw!r}: error: {err}")
            rc = 1
            continue
        print(f"{raw!r}: {describe(token)}")
    return rc


def cmd_format(values: List[str]) -> int:
    rc = 0
    for raw in values:
        try:
            token = from_text(raw)
        except AmountDomainError as err:
            print(f"{raw!r}: error: {err}")
            rc = 1
            continue
        print(f"{raw}: {format_amount(token)}")
    return rc


def cmd_tiers() -> int:
    samples = [
        0,
        1,
        ONE_MILLIUNC - 1,
        ONE_MILLIUNC,
        ONE_MILLIUNC + 1,
        999 * ONE_MILLIUNC,
        999 * ONE_MILLIUNC + 1,
        ONE_UNC,
        ONE_UNC + 1,
        1234 * ONE_MILLIUNC,
        U128_MAX,
    ]
    for yocto in samples:
        print(describe(UncToken.from_yoctounc(yocto)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="UNC token amount demo")
    sub = parser.add_subparsers(dest="command", required=True)
    p_parse = sub.add_parser("parse", help="Parse human-readable amounts such as '1.5 UNC'")
    p_parse.add_argument("values", nargs="+")
    p_format = sub.add_parser("format", help="Display raw yocto-UNC counts")
    p_format.add_argument("values", nargs="+")
    sub.add_parser("tiers", help="Show display tiers around their boundaries")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    if args.command == "parse":
        return cmd_parse(args.values)
    if args.command == "format":
        return cmd_format(args.values)
    return cmd_tiers()


# ---------- run ----------
if __name__ == "__main__":
    sys.exit(main())
