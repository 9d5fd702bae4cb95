"""LL(1) grammar analysis and table-driven syntax checking."""

from .config import ConflictPolicy, Settings
from .errors import GrammarError, LL1Error, TokenStreamError
from .grammar import EOF, EPS, Grammar, Production, SymbolKind, load_grammar, parse_grammar_lines
from .parser import ParseResult, ParseStep, parse_tokens
from .pipeline import Analysis, CheckOutcome, analyze, check
from .sets import compute_first_sets, compute_follow_sets, first_of, follow_of
from .table import Conflict, ParseTable, build_ll1_table
from .tokens import Token, load_tokens, parse_token_lines, tokens_from_types

__all__ = [
	"Analysis",
	"CheckOutcome",
	"Conflict",
	"ConflictPolicy",
	"EOF",
	"EPS",
	"Grammar",
	"GrammarError",
	"LL1Error",
	"ParseResult",
	"ParseStep",
	"ParseTable",
	"Production",
	"Settings",
	"SymbolKind",
	"Token",
	"TokenStreamError",
	"analyze",
	"build_ll1_table",
	"check",
	"compute_first_sets",
	"compute_follow_sets",
	"first_of",
	"follow_of",
	"load_grammar",
	"load_tokens",
	"parse_grammar_lines",
	"parse_token_lines",
	"parse_tokens",
	"tokens_from_types",
]
