"""Case variants of a term and case-pattern detection for matched text."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CasePattern(Enum):
	"""Observed case pattern of a matched span."""

	LOWER = 'lower'
	CAPITALIZED = 'capitalized'
	UPPER = 'upper'


@dataclass(frozen=True)
class CaseVariant:
	"""Lower, capitalized and upper forms of a term."""

	lower: str
	capitalized: str
	upper: str

	def for_pattern(self, pattern: CasePattern) -> str:
		"""Pick the form matching a case pattern."""
		if pattern is CasePattern.UPPER:
			return self.upper
		if pattern is CasePattern.CAPITALIZED:
			return self.capitalized
		return self.lower


def capitalize_first(term: str) -> str:
	"""Upper-case the first character and lower-case the rest.

	Unlike str.title(), only the very first character of a phrase is
	upper-cased: "NEW york" -> "New york".
	"""
	return term[:1].upper() + term[1:].lower()


def get_case_variations(term: str) -> CaseVariant:
	"""Build the case variants of a term.

	Args:
		term: Word or phrase

	Returns:
		CaseVariant with lower, capitalized and upper forms
	"""
	return CaseVariant(
		lower=term.lower(),
		capitalized=capitalize_first(term),
		upper=term.upper(),
	)


def _first_cased(text: str) -> Optional[str]:
	for char in text:
		if char.isupper() or char.islower():
			return char
	return None


def classify_case(matched: str) -> CasePattern:
	"""Classify the case pattern of a matched span.

	All-upper is checked first, so a single upper-case letter ("I") is
	classified as UPPER rather than CAPITALIZED. Characters without case
	(digits, punctuation, spaces) are ignored.

	Args:
		matched: Text of the match as it appears in the input

	Returns:
		The detected CasePattern
	"""
	if matched.isupper():
		return CasePattern.UPPER

	# Leading case is read from the first cased character, not matched[0],
	# so a match like "2 Cats" still counts as capitalized
	first = _first_cased(matched)
	if first is not None and first.isupper():
		return CasePattern.CAPITALIZED

	return CasePattern.LOWER


def apply_case(matched: str, replacement: str) -> str:
	"""Return the replacement in the case pattern observed in matched."""
	return get_case_variations(replacement).for_pattern(classify_case(matched))
