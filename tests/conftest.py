import logging

import pytest

from ll1lab.grammar import parse_grammar_lines
from ll1lab.logger import LOGGER_NAME

EXPR_GRAMMAR = [
	"E -> T E'",
	"E' -> + T E'",
	"E' -> epsilon",
	"T -> F T'",
	"T' -> * F T'",
	"T' -> epsilon",
	"F -> ( E )",
	"F -> id",
]


@pytest.fixture(autouse=True)
def reset_logger():
	yield
	log = logging.getLogger(LOGGER_NAME)
	for handler in list(log.handlers):
		log.removeHandler(handler)
		handler.close()
	log.setLevel(logging.NOTSET)


@pytest.fixture
def expr_grammar():
	return parse_grammar_lines(EXPR_GRAMMAR)


@pytest.fixture
def optional_a_grammar():
	return parse_grammar_lines(["S -> A b", "A -> a", "A -> epsilon"])


@pytest.fixture
def write_file(tmp_path):
	def write(name, lines):
		path = tmp_path / name
		path.write_text("\n".join(lines) + "\n", encoding="utf-8")
		return path
	return write
