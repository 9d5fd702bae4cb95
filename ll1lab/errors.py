"""Exceptions raised by the LL(1) checker."""

from __future__ import annotations

from typing import Optional


class LL1Error(Exception):
	"""Base class for every error raised by ll1lab."""


class GrammarError(LL1Error):
	def __init__(self, message: str, line_no: Optional[int] = None, text: Optional[str] = None) -> None:
		self.line_no = line_no
		self.text = text
		if line_no is not None:
			message = f"grammar line {line_no}: {message}"
		super().__init__(message)


class TokenStreamError(LL1Error):
	def __init__(self, message: str, line_no: Optional[int] = None, text: Optional[str] = None) -> None:
		self.line_no = line_no
		self.text = text
		if line_no is not None:
			message = f"token line {line_no}: {message}"
		super().__init__(message)
