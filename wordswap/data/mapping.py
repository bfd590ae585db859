"""Replacement mapping loading and lookup."""

import json
import logging
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Dict, Iterator, Optional

import yaml

from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

# A word token is a maximal run of letters, digits and underscores
WORD_TOKEN = re.compile(r'\w+')

YAML_SUFFIXES = {'.yaml', '.yml'}


def is_single_word(term: str) -> bool:
	"""Check whether a term is exactly one word token."""
	return WORD_TOKEN.fullmatch(term) is not None


def is_phrase(term: str) -> bool:
	"""Check whether a term spans several words (contains whitespace)."""
	return any(char.isspace() for char in term)


class ReplacementMap(Mapping):
	"""Immutable, case-insensitive mapping of source terms to replacements.

	Keys are stored lowercased and keep their insertion order. They fall
	into three groups:

	* words: a single word token, matched against whole tokens only;
	* phrases: keys containing whitespace, matched as a literal,
	  case-insensitive substring anywhere in the text;
	* bounded terms: any other key ("e-mail", "c++"), matched literally but
	  only where it is not preceded or followed by a word character.
	"""

	def __init__(self, pairs: Optional[Dict[str, str]] = None):
		"""Build a map from source/replacement pairs.

		Args:
			pairs: Dictionary of source term -> replacement term

		Raises:
			ConfigurationError: If a key is empty or a key/value is not a string
		"""
		self._pairs: Dict[str, str] = {}
		for key, value in (pairs or {}).items():
			if not isinstance(key, str) or not key:
				raise ConfigurationError(f'Replacement keys must be non-empty strings, got {key!r}')
			if not isinstance(value, str):
				raise ConfigurationError(f'Replacement for {key!r} must be a string, got {type(value).__name__}')

			lowered = key.lower()
			if lowered in self._pairs and self._pairs[lowered] != value:
				logger.warning(
					"Duplicate replacement key %r (as %r): '%s' overrides '%s'",
					key,
					lowered,
					value,
					self._pairs[lowered],
				)
				# Re-insert so the later entry also takes the later position
				del self._pairs[lowered]
			self._pairs[lowered] = value

		self.words = frozenset(key for key in self._pairs if is_single_word(key))
		self.phrases = tuple(key for key in self._pairs if is_phrase(key))
		self.bounded = tuple(
			key for key in self._pairs if key not in self.words and not is_phrase(key)
		)

		# Longest terms first so the alternation prefers the longest match
		# at any given start position
		literals = sorted(self.phrases + self.bounded, key=len, reverse=True)
		self.literal_pattern = None
		if literals:
			alternatives = [
				re.escape(term) if is_phrase(term) else rf'(?<!\w){re.escape(term)}(?!\w)'
				for term in literals
			]
			self.literal_pattern = re.compile('|'.join(alternatives), re.IGNORECASE)
		self._folded_literals = {term.casefold(): term for term in literals}

	def __getitem__(self, term: str) -> str:
		return self._pairs[term.lower()]

	def __contains__(self, term: object) -> bool:
		return isinstance(term, str) and term.lower() in self._pairs

	def __iter__(self) -> Iterator[str]:
		return iter(self._pairs)

	def __len__(self) -> int:
		return len(self._pairs)

	def __repr__(self) -> str:
		return f'ReplacementMap({self._pairs!r})'

	def kind(self, term: str) -> str:
		"""Return 'word', 'phrase' or 'bounded' for a configured term."""
		lowered = term.lower()
		if lowered in self.words:
			return 'word'
		if lowered in self.phrases:
			return 'phrase'
		return 'bounded'

	def literal_key(self, matched: str) -> str:
		"""Find the phrase or bounded key a literal_pattern match belongs to.

		The regex engine folds case a little more generously than
		str.lower(), so fall back to casefold() when the plain lowercase form
		is not a key.
		"""
		lowered = matched.lower()
		if lowered in self._pairs:
			return lowered
		return self._folded_literals[matched.casefold()]


def _parse_mapping_file(path: Path):
	with open(path, 'r', encoding='utf-8-sig') as f:
		if path.suffix.lower() in YAML_SUFFIXES:
			return yaml.safe_load(f)
		return json.load(f)


def load_replacement_map(replacement_path: str | Path) -> ReplacementMap:
	"""Load replacement mapping from a JSON or YAML file.

	Args:
		replacement_path: Path to replacement.json (or .yaml/.yml)

	Returns:
		ReplacementMap of source term -> replacement term

	Raises:
		ConfigurationError: If the file is missing, unreadable or not a
			mapping of non-empty strings to strings
	"""
	path = Path(replacement_path)
	if not path.is_file():
		raise ConfigurationError(f'Replacement file not found: {path}')

	try:
		data = _parse_mapping_file(path)
	except (OSError, UnicodeDecodeError) as e:
		raise ConfigurationError(f'Cannot read replacement file {path}: {e}') from e
	except (json.JSONDecodeError, yaml.YAMLError) as e:
		raise ConfigurationError(f'Malformed replacement file {path}: {e}') from e

	if not isinstance(data, dict):
		raise ConfigurationError(
			f'Replacement file {path} must contain a mapping of terms, got {type(data).__name__}'
		)

	replacement_map = ReplacementMap(data)
	logger.info('Loaded %d replacement(s) from %s', len(replacement_map), path)
	return replacement_map
