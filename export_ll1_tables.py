"""
Export LL(1) artifacts (grammar, FIRST, FOLLOW, parse table) for a grammar file
into Excel-friendly files.

Outputs (always):
  - LL1_Grammar.csv
  - LL1_FIRST.csv
  - LL1_FOLLOW.csv
  - LL1_ParseTable.csv

Optional (only if openpyxl is installed):
  - LL1_Parse_Table.xlsx  (multiple sheets)

Run:
  python export_ll1_tables.py GRAMMAR [OUTDIR]
"""

from __future__ import annotations

import csv
import sys
from pathlib import Path
from typing import List, Optional

from ll1lab.grammar import Grammar, load_grammar
from ll1lab.pipeline import Analysis, analyze
from ll1lab.sets import SymbolSets
from ll1lab.table import ParseTable, terminal_columns


def grammar_rows(grammar: Grammar) -> List[List[str]]:
	rows = [["Start symbol", grammar.start]]
	rows.append(["Nonterminals", " ".join(sorted(grammar.nonterminals))])
	rows.append(["Terminals", " ".join(sorted(grammar.terminals))])
	rows.append([])
	rows.append(["Productions (one per line)", ""])
	for p in grammar.productions:
		rows.append(["", str(p)])
	return rows


def set_rows(title: str, sets: SymbolSets) -> List[List[str]]:
	rows = [[title, "Symbols (sorted)"]]
	for nt, syms in sorted(sets.items()):
		rows.append([nt, " ".join(sorted(syms))])
	return rows


def table_rows(grammar: Grammar, table: ParseTable) -> List[List[str]]:
	terms = terminal_columns(grammar)
	rows = [["NonTerminal"] + terms]
	for nt in sorted(grammar.nonterminals):
		row: List[str] = [nt]
		for t in terms:
			p = table.get(nt, t)
			row.append(str(p) if p is not None else "")
		rows.append(row)
	return rows


def write_csv(path: Path, rows: List[List[str]]) -> None:
	with path.open("w", newline="", encoding="utf-8") as f:
		w = csv.writer(f)
		w.writerows(rows)


def try_export_xlsx(analysis: Analysis, out_path: Path) -> bool:
	try:
		import openpyxl  # type: ignore
		from openpyxl.utils import get_column_letter  # type: ignore
	except ImportError:
		return False

	wb = openpyxl.Workbook()
	wb.remove(wb.active)

	sheets = [
		("Grammar", grammar_rows(analysis.grammar)),
		("FIRST", set_rows("NonTerminal", analysis.first)),
		("FOLLOW", set_rows("NonTerminal", analysis.follow)),
		("ParseTable", table_rows(analysis.grammar, analysis.table)),
	]
	for title, rows in sheets:
		ws = wb.create_sheet(title)
		for row in rows:
			ws.append(row)

	# Basic column sizing
	for sheet in wb.worksheets:
		for col in range(1, sheet.max_column + 1):
			letter = get_column_letter(col)
			sheet.column_dimensions[letter].width = 22 if col == 1 else 18

	wb.save(out_path)
	return True


def export(grammar: Grammar, out_dir: Path) -> List[Path]:
	out_dir.mkdir(parents=True, exist_ok=True)
	analysis = analyze(grammar)

	written = []
	for name, rows in [
		("LL1_Grammar.csv", grammar_rows(grammar)),
		("LL1_FIRST.csv", set_rows("FIRST", analysis.first)),
		("LL1_FOLLOW.csv", set_rows("FOLLOW", analysis.follow)),
		("LL1_ParseTable.csv", table_rows(grammar, analysis.table)),
	]:
		write_csv(out_dir / name, rows)
		written.append(out_dir / name)

	xlsx_path = out_dir / "LL1_Parse_Table.xlsx"
	if try_export_xlsx(analysis, xlsx_path):
		written.append(xlsx_path)
	return written


def main(argv: Optional[List[str]] = None) -> int:
	args = sys.argv[1:] if argv is None else argv
	if not args:
		print("Usage: export_ll1_tables.py GRAMMAR [OUTDIR]")
		return 2

	grammar = load_grammar(args[0])
	out_dir = Path(args[1]) if len(args) > 1 else Path.cwd()
	written = export(grammar, out_dir)

	print("Wrote:", ", ".join(p.name for p in written))
	return 0


if __name__ == "__main__":
	sys.exit(main())
