import pytest
from pydantic import ValidationError

from ll1lab.config import ConflictPolicy, Settings


def test_defaults():
	settings = Settings()
	assert settings.conflict_policy is ConflictPolicy.LAST_WINS
	assert settings.strict_grammar is False
	assert settings.log_level == "WARNING"
	assert settings.log_file is None


def test_from_env():
	env = {"LL1LAB_CONFLICT_POLICY": "first", "LL1LAB_STRICT_GRAMMAR": "true", "LL1LAB_LOG_LEVEL": "debug"}
	settings = Settings.from_env(env)
	assert settings.conflict_policy is ConflictPolicy.FIRST_WINS
	assert settings.strict_grammar is True
	assert settings.log_level == "DEBUG"


def test_overrides_win_over_env():
	env = {"LL1LAB_CONFLICT_POLICY": "first", "LL1LAB_TRACE": "1"}
	settings = Settings.from_env(env, conflict_policy="last", trace=None)
	assert settings.conflict_policy is ConflictPolicy.LAST_WINS
	assert settings.trace is True


def test_invalid_values():
	with pytest.raises(ValidationError):
		Settings(log_level="LOUD")
	with pytest.raises(ValidationError):
		Settings.from_env({"LL1LAB_CONFLICT_POLICY": "random"})
