"""
Print FIRST/FOLLOW sets, LL(1) table entries, conflicts and, optionally, the
parse trace for a grammar file.

Usage:
  python gen_ll1_logs.py GRAMMAR [TOKENS]
"""

from __future__ import annotations

import sys
from typing import List, Optional

from ll1lab.grammar import load_grammar
from ll1lab.pipeline import analyze
from ll1lab.parser import parse_tokens
from ll1lab.tokens import load_tokens


def main(argv: Optional[List[str]] = None) -> int:
	args = sys.argv[1:] if argv is None else argv
	if not args:
		print("Usage: gen_ll1_logs.py GRAMMAR [TOKENS]")
		return 2

	g = load_grammar(args[0])
	analysis = analyze(g)

	print("=== GRAMMAR ===")
	for p in g.productions:
		print(p)

	print("\n=== FIRST ===")
	for nt, syms in sorted(analysis.first.items()):
		print(f"{nt}: {sorted(syms)}")

	print("\n=== FOLLOW ===")
	for nt, syms in sorted(analysis.follow.items()):
		print(f"{nt}: {sorted(syms)}")

	print("\n=== LL(1) TABLE (non-empty cells) ===")
	for nt in sorted(g.nonterminals):
		row = analysis.table.row(nt)
		for t in sorted(row):
			print(f"M[{nt}, {t}] = {row[t]}")

	print("\n=== Conflicts ===")
	for c in analysis.table.conflicts:
		print(c)
	if analysis.table.is_ll1:
		print("none")

	if len(args) > 1:
		r = parse_tokens(g, analysis.table, load_tokens(args[1]), trace=True)
		print("\n=== Parse ===")
		print("accepted:", r.accepted)
		print("error:", r.diagnostic)
		print("steps:", len(r.steps))
		for s in r.steps:
			print("STACK:", " ".join(s.stack), "| IN:", " ".join(s.remaining_input), "| ACT:", s.action)

	return 0


if __name__ == "__main__":
	sys.exit(main())
