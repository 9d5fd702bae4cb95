import logging

from ll1lab.config import ConflictPolicy
from ll1lab.grammar import EOF, parse_grammar_lines
from ll1lab.sets import compute_first_sets, compute_follow_sets
from ll1lab.table import build_ll1_table, terminal_columns


def table_for(grammar, policy=ConflictPolicy.LAST_WINS):
	first = compute_first_sets(grammar)
	follow = compute_follow_sets(grammar, first)
	return build_ll1_table(grammar, first, follow, policy)


def test_expression_table_cells(expr_grammar):
	table = table_for(expr_grammar)
	assert table.is_ll1
	assert str(table.get("E", "id")) == "E -> T E'"
	assert str(table.get("E'", "+")) == "E' -> + T E'"
	assert str(table.get("E'", ")")) == "E' -> epsilon"
	assert str(table.get("E'", EOF)) == "E' -> epsilon"
	assert str(table.get("T'", "+")) == "T' -> epsilon"
	assert str(table.get("F", "(")) == "F -> ( E )"
	assert len(table) == 13


def test_missing_cell_is_none(expr_grammar):
	table = table_for(expr_grammar)
	assert table.get("E", "+") is None
	assert table.get("F", EOF) is None
	assert ("E", "+") not in table


def test_epsilon_rule_fills_follow_cells(optional_a_grammar):
	table = table_for(optional_a_grammar)
	assert str(table.get("A", "b")) == "A -> epsilon"
	assert str(table.get("A", "a")) == "A -> a"
	assert table.lookaheads("S") == ["a", "b"]


def test_table_build_is_stable(expr_grammar):
	assert dict(table_for(expr_grammar).cells) == dict(table_for(expr_grammar).cells)


def test_conflict_last_rule_wins_by_default(caplog):
	g = parse_grammar_lines(["S -> a", "S -> a b"])
	with caplog.at_level(logging.WARNING, logger="ll1lab"):
		table = table_for(g)
	assert not table.is_ll1
	(conflict,) = table.conflicts
	assert (conflict.nonterminal, conflict.lookahead) == ("S", "a")
	assert str(conflict.existing) == "S -> a"
	assert str(conflict.incoming) == "S -> a b"
	assert table.get("S", "a") == g.productions[1]
	assert conflict.kept == g.productions[1]
	assert "Conflict at M[S, a]" in caplog.text


def test_conflict_first_rule_wins_when_configured():
	g = parse_grammar_lines(["S -> a", "S -> a b"])
	table = table_for(g, ConflictPolicy.FIRST_WINS)
	assert table.get("S", "a") == g.productions[0]
	assert table.conflicts[0].kept == g.productions[0]


def test_first_follow_conflict_is_reported():
	g = parse_grammar_lines(["S -> A a", "A -> a", "A -> epsilon"])
	table = table_for(g)
	assert [(c.nonterminal, c.lookahead) for c in table.conflicts] == [("A", "a")]
	assert str(table.get("A", "a")) == "A -> epsilon"


def test_terminal_columns_include_end_marker(optional_a_grammar):
	assert terminal_columns(optional_a_grammar) == ["$", "a", "b"]
