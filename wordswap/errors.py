"""Exception types raised by wordswap."""

from pathlib import Path
from typing import Optional


class WordswapError(Exception):
	"""Base class for all wordswap errors."""


class ConfigurationError(WordswapError):
	"""Replacement mapping or config file is missing or malformed."""


class PreconditionError(WordswapError):
	"""A required directory is missing or there is nothing to process."""


class FileProcessingError(WordswapError):
	"""Failure tied to a single input or output file."""

	def __init__(self, path: str | Path, reason: str, cause: Optional[BaseException] = None):
		self.path = Path(path)
		self.reason = reason
		self.cause = cause
		super().__init__(f'{self.path}: {reason}')


class ParseError(FileProcessingError):
	"""Input file could not be read or is not valid JSON."""


class WriteError(FileProcessingError):
	"""Output file could not be written."""
