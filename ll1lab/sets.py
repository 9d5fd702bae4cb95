"""FIRST and FOLLOW set computation."""

from __future__ import annotations

from types import MappingProxyType
from typing import AbstractSet, Dict, FrozenSet, List, Mapping, Optional, Sequence, Set, Tuple

from .grammar import EOF, EPS, Grammar
from .logger import get_logger

SymbolSets = Mapping[str, FrozenSet[str]]
# One entry per pass that changed something: nonterminal -> symbols added.
Working = List[Dict[str, List[str]]]

log = get_logger("sets")


def _freeze(sets: Mapping[str, Set[str]]) -> SymbolSets:
	return MappingProxyType({nt: frozenset(syms) for nt, syms in sets.items()})


def first_of(seq: Sequence[str], first: Mapping[str, AbstractSet[str]], grammar: Grammar) -> FrozenSet[str]:
	"""
	FIRST(seq) computed left-to-right.
	Returns terminals plus EPS if the entire sequence can derive epsilon,
	so an empty sequence yields {EPS}.
	"""
	out: Set[str] = set()

	for sym in seq:
		if sym == EPS:
			continue
		if not grammar.is_nonterminal(sym):
			out.add(sym)
			return frozenset(out)

		f = first.get(sym, ())
		out |= set(f) - {EPS}
		if EPS not in f:
			return frozenset(out)

	out.add(EPS)
	return frozenset(out)


def _compute_first(grammar: Grammar, passes: Optional[Working]) -> SymbolSets:
	first: Dict[str, Set[str]] = {nt: set() for nt in grammar.nonterminals}

	changed = True
	rounds = 0
	while changed:
		changed = False
		rounds += 1
		pass_changes: Dict[str, List[str]] = {}
		for p in grammar.productions:
			before = set(first[p.lhs])
			first[p.lhs] |= first_of(p.rhs, first, grammar)

			added = sorted(first[p.lhs] - before)
			if added:
				pass_changes.setdefault(p.lhs, []).extend(added)
				changed = True

		if passes is not None and pass_changes:
			passes.append(pass_changes)

	log.debug("FIRST sets converged after %d passes", rounds)
	return _freeze(first)


def compute_first_sets(grammar: Grammar) -> SymbolSets:
	return _compute_first(grammar, None)


def compute_first_sets_with_trace(grammar: Grammar) -> Tuple[SymbolSets, Working]:
	"""
	Compute FIRST sets and also return an iteration log.
	The log is a list of passes; each pass maps Nonterminal -> list of newly-added symbols.
	"""
	passes: Working = []
	return _compute_first(grammar, passes), passes


def follow_of(
	nonterminal: str,
	first: Mapping[str, AbstractSet[str]],
	follow: Mapping[str, AbstractSet[str]],
	grammar: Grammar,
) -> FrozenSet[str]:
	"""FOLLOW(nonterminal) derived once from the current FIRST and FOLLOW sets."""
	out: Set[str] = set()
	if nonterminal == grammar.start:
		out.add(EOF)

	for p in grammar.productions:
		for i, sym in enumerate(p.rhs):
			if sym != nonterminal:
				continue
			beta = p.rhs[i + 1 :]
			if beta:
				first_beta = first_of(beta, first, grammar)
				out |= first_beta - {EPS}
				if EPS in first_beta:
					out |= follow.get(p.lhs, set())
			else:
				out |= follow.get(p.lhs, set())

	return frozenset(out)


def _compute_follow(grammar: Grammar, first: SymbolSets, passes: Optional[Working]) -> SymbolSets:
	follow: Dict[str, Set[str]] = {nt: set() for nt in grammar.nonterminals}
	follow[grammar.start].add(EOF)

	changed = True
	rounds = 0
	while changed:
		changed = False
		rounds += 1
		pass_changes: Dict[str, List[str]] = {}
		for p in grammar.productions:
			for sym in p.rhs:
				if not grammar.is_nonterminal(sym):
					continue

				before = set(follow[sym])
				follow[sym] |= follow_of(sym, first, follow, grammar)

				added = sorted(follow[sym] - before)
				if added:
					pass_changes.setdefault(sym, []).extend(added)
					changed = True

		if passes is not None and pass_changes:
			passes.append(pass_changes)

	log.debug("FOLLOW sets converged after %d passes", rounds)
	return _freeze(follow)


def compute_follow_sets(grammar: Grammar, first: SymbolSets) -> SymbolSets:
	return _compute_follow(grammar, first, None)


def compute_follow_sets_with_trace(grammar: Grammar, first: SymbolSets) -> Tuple[SymbolSets, Working]:
	"""
	Compute FOLLOW sets and also return an iteration log.
	The log is a list of passes; each pass maps Nonterminal -> list of newly-added symbols.
	"""
	passes: Working = []
	return _compute_follow(grammar, first, passes), passes
