"""The load -> FIRST -> FOLLOW -> table -> parse run."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional, Sequence, TextIO

from .config import Settings
from .grammar import Grammar
from .logger import get_logger
from .parser import ParseResult, parse_tokens
from .sets import SymbolSets, Working, compute_first_sets, compute_first_sets_with_trace, compute_follow_sets, compute_follow_sets_with_trace
from .table import ParseTable, build_ll1_table
from .tokens import Token

log = get_logger("pipeline")


@dataclass(frozen=True)
class Analysis:
	grammar: Grammar
	first: SymbolSets
	follow: SymbolSets
	table: ParseTable
	first_working: Optional[Working] = None
	follow_working: Optional[Working] = None
	duration_ms: float = 0.0


@dataclass(frozen=True)
class CheckOutcome:
	analysis: Analysis
	result: ParseResult

	@property
	def accepted(self) -> bool:
		return self.result.accepted


def analyze(grammar: Grammar, settings: Optional[Settings] = None, *, include_working: bool = False) -> Analysis:
	settings = settings or Settings()
	start = time.perf_counter()

	first_working = follow_working = None
	if include_working:
		first, first_working = compute_first_sets_with_trace(grammar)
		follow, follow_working = compute_follow_sets_with_trace(grammar, first)
	else:
		first = compute_first_sets(grammar)
		follow = compute_follow_sets(grammar, first)
	table = build_ll1_table(grammar, first, follow, settings.conflict_policy)

	duration_ms = (time.perf_counter() - start) * 1000
	log.debug("grammar analysed in %.2f ms", duration_ms)
	return Analysis(
		grammar=grammar,
		first=first,
		follow=follow,
		table=table,
		first_working=first_working,
		follow_working=follow_working,
		duration_ms=duration_ms,
	)


def check(
	grammar: Grammar,
	tokens: Sequence[Token],
	settings: Optional[Settings] = None,
	*,
	sink: Optional[TextIO] = None,
	include_working: bool = False,
) -> CheckOutcome:
	settings = settings or Settings()
	analysis = analyze(grammar, settings, include_working=include_working)
	result = parse_tokens(grammar, analysis.table, tokens, sink=sink, trace=settings.trace)
	return CheckOutcome(analysis=analysis, result=result)
