from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, TextIO

from .grammar import EOF, EPS, Grammar
from .logger import get_logger
from .table import ParseTable
from .tokens import END_TOKEN, NO_TOKEN, Token

log = get_logger("parser")


@dataclass(frozen=True)
class ParseStep:
	stack: List[str]
	remaining_input: List[str]
	action: str


@dataclass(frozen=True)
class ParseResult:
	accepted: bool
	diagnostic: Optional[str] = None
	# Which rejection rule fired; None on success.
	error_kind: Optional[str] = None
	steps: List[ParseStep] = field(default_factory=list)


# Rejection kinds reported in ParseResult.error_kind and the trace.
MISMATCH = "mismatch"
NO_ENTRY = "no-entry"
# No table cell, but the row admits one terminal, so it is reported as a mismatch.
SINGLE_LOOKAHEAD = "single-lookahead"


def mismatch_message(expected: str, found: Token) -> str:
	return f"Syntax error at line {found.line}: expected '{expected}' but found '{found.value}'"


def unexpected_message(found: Token) -> str:
	return f"Syntax error at line {found.line}: unexpected token '{found.value}'"


def parse_tokens(
	grammar: Grammar,
	table: ParseTable,
	tokens: Sequence[Token],
	*,
	sink: Optional[TextIO] = None,
	trace: bool = False,
) -> ParseResult:
	"""
	Table-driven LL(1) parsing with a stack.

	The end-of-input token is appended to `tokens`. Parsing stops at the first
	syntax error; its diagnostic is returned and, if `sink` is given, written
	to it as a single line. Nothing is written on success.
	"""
	inp: List[Token] = list(tokens) + [END_TOKEN]
	stack: List[str] = [EOF, grammar.start]
	steps: List[ParseStep] = []
	i = 0

	def snapshot(action: str) -> None:
		if not trace:
			return
		steps.append(ParseStep(stack=list(stack), remaining_input=[t.type for t in inp[i:]], action=action))

	def reject(kind: str, message: str) -> ParseResult:
		snapshot(f"error: {kind}")
		log.info("rejected: %s", message)
		if sink is not None:
			sink.write(message + "\n")
		return ParseResult(accepted=False, diagnostic=message, error_kind=kind, steps=steps)

	def previous_if_end(tok: Token) -> Token:
		# Never point a diagnostic at the synthetic end marker.
		if not tok.is_end:
			return tok
		return inp[i - 1] if i > 0 else NO_TOKEN

	snapshot("init")

	while stack:
		top = stack[-1]
		cur = inp[i]

		if top == EOF and cur.type == EOF:
			snapshot("accept")
			log.info("accepted %d tokens", len(inp) - 1)
			return ParseResult(accepted=True, steps=steps)

		# Only terminals are matched against the input; a nonterminal always
		# goes through the table, even when a token type spells its name.
		if top == cur.type and grammar.is_terminal(top):
			stack.pop()
			i += 1
			snapshot(f"match {top}")
			continue

		if grammar.is_terminal(top):
			return reject(MISMATCH, mismatch_message(top, cur))

		prod = table.get(top, cur.type)
		if prod is None:
			# A row with a single terminal lookahead expects exactly that terminal.
			expected = table.lookaheads(top)
			if not cur.is_end and len(expected) == 1 and expected[0] != EOF:
				return reject(SINGLE_LOOKAHEAD, mismatch_message(expected[0], cur))
			return reject(NO_ENTRY, unexpected_message(previous_if_end(cur)))

		stack.pop()
		# Push RHS in reverse order so the leftmost symbol is on top.
		for sym in reversed(prod.rhs):
			if sym != EPS:
				stack.append(sym)
		snapshot(str(prod))

	return reject(NO_ENTRY, unexpected_message(previous_if_end(inp[i])))
