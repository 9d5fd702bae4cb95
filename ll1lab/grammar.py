from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import FrozenSet, Iterable, List, Sequence, Tuple, Union

from .errors import GrammarError
from .logger import get_logger

EPS = "epsilon"
EOF = "$"
ARROW = "->"

log = get_logger("grammar")


class SymbolKind(Enum):
	TERMINAL = auto()
	NONTERMINAL = auto()
	EPSILON = auto()
	END = auto()


@dataclass(frozen=True)
class Production:
	lhs: str
	rhs: Tuple[str, ...]
	# Position in the grammar; keeps duplicate rules distinct.
	index: int = 0

	@property
	def is_epsilon(self) -> bool:
		return len(self.rhs) == 0

	def __str__(self) -> str:
		if self.is_epsilon:
			return f"{self.lhs} {ARROW} {EPS}"
		return f"{self.lhs} {ARROW} " + " ".join(self.rhs)


@dataclass(frozen=True)
class Grammar:
	start: str
	terminals: FrozenSet[str]
	nonterminals: FrozenSet[str]
	productions: Tuple[Production, ...]

	@classmethod
	def from_rules(cls, rules: Iterable[Tuple[str, Sequence[str]]]) -> "Grammar":
		"""
		Build a grammar from ordered (lhs, rhs) pairs.

		A symbol is a nonterminal iff it is the lhs of some rule, wherever that
		rule appears; every other rhs symbol is a terminal. The start symbol is
		the lhs of the first rule.
		"""
		pairs = [(lhs, list(rhs)) for lhs, rhs in rules]
		if not pairs:
			raise GrammarError("grammar has no rules")

		nonterminals = frozenset(lhs for lhs, _ in pairs)
		for lhs in nonterminals:
			if lhs in (EPS, EOF):
				raise GrammarError(f"reserved symbol used as a rule name: {lhs!r}")

		productions: List[Production] = []
		terminals = set()
		for index, (lhs, rhs) in enumerate(pairs):
			syms = tuple(s for s in rhs if s != EPS)
			for sym in syms:
				if sym == EOF:
					raise GrammarError(f"end marker {EOF!r} cannot appear in a rule: {lhs} {ARROW} {' '.join(rhs)}")
				if sym not in nonterminals:
					terminals.add(sym)
			productions.append(Production(lhs, syms, index))

		return cls(
			start=pairs[0][0],
			terminals=frozenset(terminals),
			nonterminals=nonterminals,
			productions=tuple(productions),
		)

	def kind_of(self, symbol: str) -> SymbolKind:
		if symbol == EPS:
			return SymbolKind.EPSILON
		if symbol == EOF:
			return SymbolKind.END
		if symbol in self.nonterminals:
			return SymbolKind.NONTERMINAL
		return SymbolKind.TERMINAL

	def is_terminal(self, symbol: str) -> bool:
		return symbol in self.terminals

	def is_nonterminal(self, symbol: str) -> bool:
		return symbol in self.nonterminals

	def productions_for(self, lhs: str) -> List[Production]:
		return [p for p in self.productions if p.lhs == lhs]


def parse_grammar_lines(lines: Iterable[str], *, strict: bool = False) -> Grammar:
	"""
	Parse grammar text, one rule per line:

	  S -> A b
	  A -> a
	  A -> epsilon

	Blank lines and lines starting with '#' are ignored. Symbols are separated
	by whitespace, and the arrow must be the second word of the line. Malformed
	lines are skipped with a warning, or raise GrammarError when strict is set.
	"""
	rules: List[Tuple[str, List[str]]] = []

	for line_no, raw_line in enumerate(lines, start=1):
		line = (raw_line or "").strip()
		if not line or line.startswith("#"):
			continue
		parts = line.split()
		if len(parts) < 3 or parts[1] != ARROW:
			if strict:
				raise GrammarError(f"expected 'LHS {ARROW} SYMBOLS...'", line_no, raw_line)
			log.warning("skipping malformed grammar line %d: %r", line_no, line)
			continue
		rules.append((parts[0], parts[2:]))

	grammar = Grammar.from_rules(rules)
	log.debug(
		"loaded %d rules: %d nonterminals, %d terminals, start %s",
		len(grammar.productions),
		len(grammar.nonterminals),
		len(grammar.terminals),
		grammar.start,
	)
	return grammar


def load_grammar(path: Union[str, Path], *, strict: bool = False) -> Grammar:
	try:
		text = Path(path).read_text(encoding="utf-8")
	except UnicodeDecodeError as exc:
		raise GrammarError(f"{path}: not valid UTF-8 text ({exc.reason} at byte {exc.start})") from exc
	return parse_grammar_lines(text.splitlines(), strict=strict)
