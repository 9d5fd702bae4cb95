from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from .config import ConflictPolicy, Settings
from .errors import LL1Error
from .grammar import parse_grammar_lines
from .pipeline import check
from .table import terminal_columns
from .tokens import parse_token_lines, tokens_from_types


app = FastAPI(title="LL(1) Grammar Checker", version="1.0.0")

app.add_middleware(
	CORSMiddleware,
	allow_origins=["*"],
	allow_credentials=True,
	allow_methods=["*"],
	allow_headers=["*"],
)


class LL1Request(BaseModel):
	# Example: ["S -> A b", "A -> a", "A -> epsilon"]
	grammar_lines: List[str]
	# Either bare terminal names ("a b") or full "LINE TYPE VALUE" lines.
	tokens: Optional[str] = None
	token_lines: Optional[List[str]] = None
	trace: bool = True
	# Include FIRST/FOLLOW iteration logs ("show working").
	include_working: bool = False
	conflict_policy: ConflictPolicy = ConflictPolicy.LAST_WINS
	strict_grammar: bool = False


@app.get("/health")
def health() -> Dict[str, str]:
	return {"status": "ok"}


@app.post("/api/ll1")
def ll1_check(req: LL1Request) -> Dict[str, Any]:
	"""FIRST/FOLLOW/LL(1) table for the posted grammar plus a table-driven parse of the posted tokens."""
	settings = Settings(conflict_policy=req.conflict_policy, strict_grammar=req.strict_grammar, trace=req.trace)
	try:
		grammar = parse_grammar_lines(req.grammar_lines, strict=settings.strict_grammar)
		if req.token_lines is not None:
			tokens = parse_token_lines(req.token_lines)
		else:
			tokens = tokens_from_types(req.tokens or "")
	except LL1Error as exc:
		raise HTTPException(status_code=400, detail=str(exc)) from exc

	outcome = check(grammar, tokens, settings, include_working=req.include_working)
	analysis = outcome.analysis
	result = outcome.result

	# Serialize table as strings for JSON output
	columns = terminal_columns(grammar)
	table_out: Dict[str, Dict[str, str]] = {}
	for nt in sorted(grammar.nonterminals):
		row: Dict[str, str] = {}
		for t in columns:
			p = analysis.table.get(nt, t)
			row[t] = str(p) if p is not None else ""
		table_out[nt] = row

	return {
		"grammar": {
			"start": grammar.start,
			"nonterminals": sorted(grammar.nonterminals),
			"terminals": sorted(grammar.terminals),
			"productions": [str(p) for p in grammar.productions],
		},
		"first": {k: sorted(v) for k, v in sorted(analysis.first.items())},
		"follow": {k: sorted(v) for k, v in sorted(analysis.follow.items())},
		"working": {
			"first_passes": analysis.first_working,
			"follow_passes": analysis.follow_working,
		}
		if req.include_working
		else None,
		"table": table_out,
		"is_ll1": analysis.table.is_ll1,
		"conflicts": [str(c) for c in analysis.table.conflicts],
		"input": {
			"tokens": [{"line": t.line, "type": t.type, "value": t.value} for t in tokens],
		},
		"result": {
			"accepted": result.accepted,
			"error": result.diagnostic,
			"steps": [
				{
					"stack": step.stack,
					"remaining_input": step.remaining_input,
					"action": step.action,
				}
				for step in result.steps
			],
		},
	}
