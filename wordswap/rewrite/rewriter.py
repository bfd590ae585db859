"""Case-preserving word and phrase replacement."""

import re
from typing import Iterator, List, Optional, Tuple

from ..data.mapping import WORD_TOKEN, ReplacementMap
from .case import apply_case


def _span_length(match: re.Match) -> int:
	return match.end() - match.start()


def _word_token_matches(text: str, replacement_map: ReplacementMap) -> List[re.Match]:
	"""Word tokens of text whose lowercase form is a single-word key."""
	if not replacement_map.words:
		return []
	return [m for m in WORD_TOKEN.finditer(text) if m.group().lower() in replacement_map.words]


def iter_matches(text: str, replacement_map: ReplacementMap) -> Iterator[Tuple[int, int, str]]:
	"""Find non-overlapping key occurrences in one left-to-right pass.

	At each step the earliest-starting candidate wins; among candidates
	starting at the same position the longest wins, so a phrase beats a
	single word that is its prefix. Phrases may match inside a word; bounded
	terms such as "e-mail" must not touch a word character on either side.
	Text consumed by a match is never matched again, and a word token that
	starts inside a consumed span is skipped as a whole.

	Args:
		text: Input text
		replacement_map: Terms to look for

	Yields:
		(start, end, key) for every match, in order
	"""
	tokens = _word_token_matches(text, replacement_map)
	pattern = replacement_map.literal_pattern

	token_index = 0
	literal = pattern.search(text) if pattern is not None else None
	pos = 0

	while True:
		while token_index < len(tokens) and tokens[token_index].start() < pos:
			token_index += 1
		if literal is not None and literal.start() < pos:
			literal = pattern.search(text, pos)

		token = tokens[token_index] if token_index < len(tokens) else None
		candidates = [m for m in (literal, token) if m is not None]
		if not candidates:
			return

		best = min(candidates, key=lambda m: (m.start(), -_span_length(m)))
		if best is token:
			key = token.group().lower()
		else:
			key = replacement_map.literal_key(best.group())

		yield best.start(), best.end(), key

		# Zero-width matches cannot happen (keys are non-empty), so this
		# always moves forward
		pos = best.end()


def rewrite(text: str, replacement_map: Optional[ReplacementMap]) -> str:
	"""Replace every configured term in text, preserving its case pattern.

	"CAT" -> "DOG", "Cat" -> "Dog", "cat" -> "dog" for a cat -> dog map.
	Text that matches no key is copied through unchanged.

	Args:
		text: Input text
		replacement_map: Source term -> replacement term

	Returns:
		Rewritten text
	"""
	if not text or not replacement_map:
		return text

	pieces = []
	pos = 0
	for start, end, key in iter_matches(text, replacement_map):
		pieces.append(text[pos:start])
		pieces.append(apply_case(text[start:end], replacement_map[key]))
		pos = end

	if not pieces:
		return text

	pieces.append(text[pos:])
	return ''.join(pieces)


def count_matches(text: str, replacement_map: Optional[ReplacementMap]) -> int:
	"""Count how many replacements rewrite() would make in text."""
	if not text or not replacement_map:
		return 0
	return sum(1 for _ in iter_matches(text, replacement_map))
