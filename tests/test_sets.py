from ll1lab.grammar import EOF, EPS, parse_grammar_lines
from ll1lab.sets import (
	compute_first_sets,
	compute_first_sets_with_trace,
	compute_follow_sets,
	compute_follow_sets_with_trace,
	first_of,
	follow_of,
)


def test_first_sets_expression_grammar(expr_grammar):
	first = compute_first_sets(expr_grammar)
	assert first["E"] == {"(", "id"}
	assert first["T"] == {"(", "id"}
	assert first["F"] == {"(", "id"}
	assert first["E'"] == {"+", EPS}
	assert first["T'"] == {"*", EPS}


def test_follow_sets_expression_grammar(expr_grammar):
	first = compute_first_sets(expr_grammar)
	follow = compute_follow_sets(expr_grammar, first)
	assert follow["E"] == {")", EOF}
	assert follow["E'"] == {")", EOF}
	assert follow["T"] == {"+", ")", EOF}
	assert follow["T'"] == {"+", ")", EOF}
	assert follow["F"] == {"*", "+", ")", EOF}


def test_first_of_empty_sequence_is_epsilon(expr_grammar):
	first = compute_first_sets(expr_grammar)
	assert first_of((), first, expr_grammar) == {EPS}


def test_first_of_stops_at_terminal(expr_grammar):
	first = compute_first_sets(expr_grammar)
	assert first_of(("+", "T"), first, expr_grammar) == {"+"}


def test_first_of_skips_vanishing_nonterminals(optional_a_grammar):
	first = compute_first_sets(optional_a_grammar)
	assert first_of(("A", "b"), first, optional_a_grammar) == {"a", "b"}
	assert first_of(("A",), first, optional_a_grammar) == {"a", EPS}


def test_epsilon_propagates_through_chains():
	g = parse_grammar_lines(["S -> A B c", "A -> B", "B -> b", "B -> epsilon"])
	first = compute_first_sets(g)
	assert first["B"] == {"b", EPS}
	assert first["A"] == {"b", EPS}
	assert first["S"] == {"b", "c"}


def test_first_sets_are_idempotent(expr_grammar):
	assert dict(compute_first_sets(expr_grammar)) == dict(compute_first_sets(expr_grammar))


def test_sets_are_read_only(expr_grammar):
	first = compute_first_sets(expr_grammar)
	try:
		first["E"] = frozenset()
	except TypeError:
		pass
	else:
		raise AssertionError("FIRST sets must not be writable")
	assert isinstance(first["E"], frozenset)


def test_trace_passes_grow_monotonically(expr_grammar):
	first, passes = compute_first_sets_with_trace(expr_grammar)
	assert dict(first) == dict(compute_first_sets(expr_grammar))
	seen = {nt: set() for nt in expr_grammar.nonterminals}
	for pass_changes in passes:
		for nt, added in pass_changes.items():
			# Each pass only adds symbols that were not there before.
			assert not (set(added) & seen[nt])
			seen[nt] |= set(added)
	assert seen == {nt: set(syms) for nt, syms in first.items()}


def test_follow_trace_matches_plain(expr_grammar):
	first = compute_first_sets(expr_grammar)
	follow, passes = compute_follow_sets_with_trace(expr_grammar, first)
	assert dict(follow) == dict(compute_follow_sets(expr_grammar, first))
	assert passes


def test_start_follow_contains_end_marker():
	# Start symbol also appears on a right-hand side.
	g = parse_grammar_lines(["S -> ( S )", "S -> epsilon"])
	first = compute_first_sets(g)
	follow = compute_follow_sets(g, first)
	assert follow["S"] == {")", EOF}


def test_follow_through_vanishing_suffix(optional_a_grammar):
	first = compute_first_sets(optional_a_grammar)
	follow = compute_follow_sets(optional_a_grammar, first)
	assert follow["A"] == {"b"}
	assert follow["S"] == {EOF}


def test_follow_inherits_lhs_when_suffix_vanishes():
	g = parse_grammar_lines(["S -> X c", "X -> A B", "A -> a", "B -> b", "B -> epsilon"])
	first = compute_first_sets(g)
	follow = compute_follow_sets(g, first)
	assert follow["A"] == {"b", "c"}
	assert follow["B"] == {"c"}


def test_follow_of_single_step(optional_a_grammar):
	first = compute_first_sets(optional_a_grammar)
	empty = {nt: set() for nt in optional_a_grammar.nonterminals}
	assert follow_of("S", first, empty, optional_a_grammar) == {EOF}
	assert follow_of("A", first, empty, optional_a_grammar) == {"b"}


def test_unused_nonterminal_has_empty_follow():
	g = parse_grammar_lines(["S -> a", "U -> b"])
	follow = compute_follow_sets(g, compute_first_sets(g))
	assert follow["U"] == frozenset()


def test_left_recursive_grammar_terminates():
	g = parse_grammar_lines(["E -> E + T", "E -> T", "T -> id"])
	first = compute_first_sets(g)
	follow = compute_follow_sets(g, first)
	assert first["E"] == {"id"}
	assert follow["E"] == {"+", EOF}
