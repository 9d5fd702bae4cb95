from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Union

from .errors import TokenStreamError
from .grammar import EOF
from .logger import get_logger

log = get_logger("tokens")


@dataclass(frozen=True)
class Token:
	line: int
	type: str
	value: str

	@property
	def is_end(self) -> bool:
		return self.type == EOF


END_TOKEN = Token(-1, EOF, EOF)
# Stands in for "the previous token" when the input holds no real token.
NO_TOKEN = Token(0, EOF, EOF)


def parse_token_lines(lines: Iterable[str]) -> List[Token]:
	"""
	Parse a pre-tokenized stream, one token per line:

	  LINE TYPE VALUE

	Blank lines are skipped; fields past the third are ignored.
	"""
	tokens: List[Token] = []
	for line_no, raw_line in enumerate(lines, start=1):
		parts = (raw_line or "").split()
		if not parts:
			continue
		if len(parts) < 3:
			raise TokenStreamError("expected 'LINE TYPE VALUE'", line_no, raw_line)
		try:
			source_line = int(parts[0])
		except ValueError:
			raise TokenStreamError(f"line number is not an integer: {parts[0]!r}", line_no, raw_line) from None
		tokens.append(Token(source_line, parts[1], parts[2]))

	log.debug("loaded %d tokens", len(tokens))
	return tokens


def load_tokens(path: Union[str, Path]) -> List[Token]:
	try:
		text = Path(path).read_text(encoding="utf-8")
	except UnicodeDecodeError as exc:
		raise TokenStreamError(f"{path}: not valid UTF-8 text ({exc.reason} at byte {exc.start})") from exc
	return parse_token_lines(text.splitlines())


def tokens_from_types(source: str, line: int = 1) -> List[Token]:
	"""Tokens for a bare space-separated list of terminal names, e.g. "id = num ;"."""
	return [Token(line, t, t) for t in source.split()]
