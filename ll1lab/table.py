from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from .config import ConflictPolicy
from .grammar import EOF, EPS, Grammar, Production
from .logger import get_logger
from .sets import SymbolSets, first_of

Cell = Tuple[str, str]

log = get_logger("table")


@dataclass(frozen=True)
class Conflict:
	nonterminal: str
	lookahead: str
	existing: Production
	incoming: Production
	kept: Production

	def __str__(self) -> str:
		return f"Conflict at M[{self.nonterminal}, {self.lookahead}]: {self.existing} vs {self.incoming} (kept {self.kept})"


@dataclass(frozen=True)
class ParseTable:
	"""
	Predictive parse table: (nonterminal, lookahead terminal or $) -> rule.

	A missing cell is reported as None, never as an empty default.
	"""

	cells: Mapping[Cell, Production]
	conflicts: Tuple[Conflict, ...] = ()

	def get(self, nonterminal: str, lookahead: str) -> Optional[Production]:
		return self.cells.get((nonterminal, lookahead))

	def __contains__(self, key: object) -> bool:
		return key in self.cells

	def __len__(self) -> int:
		return len(self.cells)

	@property
	def is_ll1(self) -> bool:
		return not self.conflicts

	def row(self, nonterminal: str) -> Dict[str, Production]:
		return {t: p for (nt, t), p in self.cells.items() if nt == nonterminal}

	def lookaheads(self, nonterminal: str) -> List[str]:
		return sorted(t for (nt, t) in self.cells if nt == nonterminal)


def build_ll1_table(
	grammar: Grammar,
	first: SymbolSets,
	follow: SymbolSets,
	policy: ConflictPolicy = ConflictPolicy.LAST_WINS,
) -> ParseTable:
	"""
	Fill M[N, t] for every rule N -> a:
	  - t in FIRST(a) minus epsilon
	  - t in FOLLOW(N), $ included, when epsilon is in FIRST(a)

	Rules are visited in grammar order. Whenever a second rule claims an
	occupied cell a Conflict is recorded and the policy picks the rule that
	stays in the cell.
	"""
	cells: Dict[Cell, Production] = {}
	conflicts: List[Conflict] = []

	def claim(p: Production, lookahead: str) -> None:
		key = (p.lhs, lookahead)
		existing = cells.get(key)
		if existing is None or existing == p:
			cells[key] = p
			return
		kept = p if policy is ConflictPolicy.LAST_WINS else existing
		conflict = Conflict(p.lhs, lookahead, existing, p, kept)
		log.warning("%s", conflict)
		conflicts.append(conflict)
		cells[key] = kept

	for p in grammar.productions:
		first_rhs = first_of(p.rhs, first, grammar)

		for a in sorted(first_rhs - {EPS}):
			claim(p, a)

		if EPS in first_rhs:
			for b in sorted(follow.get(p.lhs, frozenset())):
				claim(p, b)

	log.debug("parse table has %d cells, %d conflicts", len(cells), len(conflicts))
	return ParseTable(cells=MappingProxyType(cells), conflicts=tuple(conflicts))


def terminal_columns(grammar: Grammar) -> List[str]:
	"""Sorted lookahead columns of the table: every terminal plus $."""
	return sorted(grammar.terminals | {EOF})
