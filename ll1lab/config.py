from __future__ import annotations

import os
from enum import Enum
from typing import Mapping, Optional

from pydantic import BaseModel, field_validator

ENV_PREFIX = "LL1LAB_"


class ConflictPolicy(str, Enum):
	# Which rule keeps a table cell that two rules claim.
	LAST_WINS = "last"
	FIRST_WINS = "first"


class Settings(BaseModel):
	conflict_policy: ConflictPolicy = ConflictPolicy.LAST_WINS
	strict_grammar: bool = False
	log_level: str = "WARNING"
	log_file: Optional[str] = None
	trace: bool = False

	@field_validator("log_level")
	@classmethod
	def check_log_level(cls, value: str) -> str:
		level = value.strip().upper()
		if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
			raise ValueError(f"unknown log level: {value}")
		return level

	@classmethod
	def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides: object) -> "Settings":
		"""
		Build settings from LL1LAB_* environment variables.

		Keyword overrides (e.g. from CLI flags) win over the environment; a
		value of None means "not given" and is ignored.
		"""
		env = os.environ if environ is None else environ
		data = {}
		for name in cls.model_fields:
			raw = env.get(ENV_PREFIX + name.upper())
			if raw is not None and raw != "":
				data[name] = raw
		for name, value in overrides.items():
			if value is not None:
				data[name] = value
		return cls(**data)
