"""
Command line entry point.

  ll1-check GRAMMAR TOKENS [ERRFILE]

Prints YES and exits 0 when the tokens parse, otherwise prints NO, writes one
diagnostic line to ERRFILE (stderr when omitted) and exits 1.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, TextIO

from pydantic import ValidationError

from .config import ConflictPolicy, Settings
from .errors import LL1Error
from .grammar import load_grammar
from .logger import setup_logger
from .parser import ParseResult
from .pipeline import check
from .tokens import load_tokens

EXIT_ACCEPT = 0
EXIT_REJECT = 1
EXIT_ERROR = 2


def build_arg_parser() -> argparse.ArgumentParser:
	ap = argparse.ArgumentParser(prog="ll1-check", description="Check a token stream against an LL(1) grammar.")
	ap.add_argument("grammar", help="grammar file, one 'LHS -> SYMBOLS' rule per line")
	ap.add_argument("tokens", help="token file, one 'LINE TYPE VALUE' token per line")
	ap.add_argument("errfile", nargs="?", help="file that receives the syntax error line (default: stderr)")
	ap.add_argument(
		"--conflict-policy",
		choices=[p.value for p in ConflictPolicy],
		default=None,
		help="rule kept when two rules claim one table cell (default: last)",
	)
	ap.add_argument("--strict-grammar", action="store_true", default=None, help="fail on malformed grammar lines")
	ap.add_argument("--strict-ll1", action="store_true", help="exit 2 when the grammar has LL(1) conflicts")
	ap.add_argument("--trace", action="store_true", default=None, help="print every parser step")
	ap.add_argument("--log-level", default=None, help="console log level (default: WARNING)")
	ap.add_argument("--log-file", default=None, help="also write a debug log to this file")
	return ap


def print_trace(result: ParseResult, out: TextIO) -> None:
	for step in result.steps:
		out.write(f"STACK: {' '.join(step.stack)} | IN: {' '.join(step.remaining_input)} | ACT: {step.action}\n")


def main(argv: Optional[List[str]] = None) -> int:
	args = build_arg_parser().parse_args(argv)

	try:
		settings = Settings.from_env(
			conflict_policy=args.conflict_policy,
			strict_grammar=args.strict_grammar,
			trace=args.trace,
			log_level=args.log_level,
			log_file=args.log_file,
		)
	except ValidationError as exc:
		print(f"ll1-check: invalid settings: {exc}", file=sys.stderr)
		return EXIT_ERROR

	log = setup_logger(console_level=settings.log_level, log_file=settings.log_file)

	try:
		grammar = load_grammar(args.grammar, strict=settings.strict_grammar)
		tokens = load_tokens(args.tokens)
	except (LL1Error, OSError) as exc:
		print(f"ll1-check: {exc}", file=sys.stderr)
		return EXIT_ERROR

	if args.errfile:
		with open(args.errfile, "w", encoding="utf-8") as err:
			outcome = check(grammar, tokens, settings, sink=err)
	else:
		outcome = check(grammar, tokens, settings, sink=sys.stderr)

	if settings.trace:
		print_trace(outcome.result, sys.stdout)

	conflicts = outcome.analysis.table.conflicts
	if conflicts:
		log.warning("grammar is not LL(1): %d conflicting table cells", len(conflicts))

	print("YES" if outcome.accepted else "NO")
	if args.strict_ll1 and conflicts:
		return EXIT_ERROR
	return EXIT_ACCEPT if outcome.accepted else EXIT_REJECT


if __name__ == "__main__":
	sys.exit(main())
