"""Command line search for SLH-DSA parameter sets."""

from __future__ import annotations

import argparse
import csv
import io
import math
import sys
from collections.abc import Sequence

from tabulate import tabulate

from slushfind.params import ParameterSet
from slushfind.search import SearchParameters, search

TABLE_FORMATS = ("console", "markdown", "csv")


def format_hashes(count: int) -> str:
    """Format a hash count with a B, M or K suffix."""
    if count > 1e9:
        return f"{count / 1e9:.3g}B"
    if count > 1e6:
        return f"{count / 1e6:.3g}M"
    if count > 1e3:
        return f"{count / 1e3:.3g}K"
    return str(count)


def render_table(
    header: Sequence[object],
    rows: Sequence[Sequence[object]],
    title: str,
    table_format: str,
) -> str:
    """Render rows as a console, markdown or csv table."""
    style = table_format.lower()
    if style == "console":
        return f"{title}\n{tabulate(rows, headers=list(header), tablefmt='rounded_outline')}"
    if style == "markdown":
        return f"# {title}\n\n{tabulate(rows, headers=list(header), tablefmt='github')}"
    if style == "csv":
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(header)
        writer.writerows(rows)
        return buffer.getvalue().rstrip("\n")
    raise ValueError(f"unrecognized table format: {table_format}")


def _option(parser: argparse.ArgumentParser, name: str, **kwargs) -> None:
    parser.add_argument(f"-{name}", f"--{name}", dest=name, **kwargs)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the command."""
    parser = argparse.ArgumentParser(
        prog="slushfind",
        description="Search the SLH-DSA parameter space.",
        allow_abbrev=False,
    )
    _option(parser, "target_security_level", type=int, default=128,
            help="target security (in bits)")
    _option(parser, "fallback_security_level", type=int, default=112,
            help="security level to calculate overuse")
    _option(parser, "min_sig_count", type=float, default=20.0,
            help="log_2 of the minimum number of signatures at the required security level")
    _option(parser, "max_sig_size", type=int, default=4000,
            help="maximum signature size (in bytes)")
    _option(parser, "min_sig_hashes", type=int, default=900000000,
            help="minimum number of hashes to compute a signature")
    _option(parser, "max_sig_hashes", type=int, default=2000000000,
            help="maximum number of hashes to compute a signature")
    _option(parser, "max_verify_hashes", type=int, default=2000,
            help="maximum number of hashes to verify a signature")
    _option(parser, "eval_sig_size", type=float, default=0.5,
            help="how much to consider signature size in the evaluation function")
    _option(parser, "eval_sig_hashes", type=float, default=0.0,
            help="how much to consider signature cost in hashes in the evaluation function")
    _option(parser, "eval_verify_hashes", type=float, default=0.5,
            help="how much to consider verification cost in the evaluation function")
    _option(parser, "table_format", default="console",
            help="style for the output, one of ('console', 'markdown', 'csv')")
    _option(parser, "name_prefix", default="",
            help="prefix to use for parameter set ID")
    parser.add_argument("extra", nargs="*", help=argparse.SUPPRESS)
    return parser


def _make_compare(size_weight: float, hashes_weight: float, verify_weight: float):
    def cost(p: ParameterSet) -> float:
        total = 0.0
        if size_weight != 0:
            total += size_weight * math.log(p.signature_size())
        if hashes_weight != 0:
            total += hashes_weight * math.log(p.signature_hashes())
        if verify_weight != 0:
            total += verify_weight * math.log(p.verify_hashes())
        return total

    def compare(a: ParameterSet, b: ParameterSet) -> bool:
        return cost(a) < cost(b)

    return compare


def main(argv: Sequence[str] | None = None) -> int:
    """Run the search and print the result table; return the exit status."""
    args = build_parser().parse_args(argv)
    if args.extra:
        print(f"unrecognized arguments: {', '.join(args.extra)}", file=sys.stderr)
        return 1
    if args.table_format.lower() not in TABLE_FORMATS:
        print(f"unrecognized table format: {args.table_format}", file=sys.stderr)
        return 1

    params = SearchParameters(
        target_security_level=args.target_security_level,
        min_signatures=2.0**args.min_sig_count,
        h_prime=range(1, 31),
        d=range(1, 31),
        lg_w=range(1, 9),
        k=range(1, 31),
        t=range(1, 31),
        signature_size=lambda size: size <= args.max_sig_size,
        signature_hashes=lambda h: args.min_sig_hashes < h < args.max_sig_hashes,
        verify_hashes=lambda h: h < args.max_verify_hashes,
        compare=_make_compare(
            args.eval_sig_size, args.eval_sig_hashes, args.eval_verify_hashes
        ),
        candidate_count=20,
    )
    results = search(params)

    header = [
        "id", "h", "d", "h'", "a", "k", "w", "m",
        "sig bytes", "sign time", "verify time",
        f"sigs at {args.fallback_security_level}",
    ]
    rows = [
        [
            f"{args.name_prefix}{number}",
            result.hypertree_height(),
            result.d,
            result.h_prime,
            result.t,
            result.k,
            result.lg_w,
            result.m(),
            result.signature_size(),
            format_hashes(result.signature_hashes()),
            result.verify_hashes(),
            result.signatures_at_level(args.fallback_security_level),
        ]
        for number, result in enumerate(results, start=1)
    ]
    title = (
        f"Target security level {args.target_security_level}, "
        f"2^{args.min_sig_count:.1f} signatures"
    )
    print(render_table(header, rows, title, args.table_format))
    return 0


if __name__ == "__main__":
    sys.exit(main())