"""Tests for the text rewriter."""

import pytest

from wordswap.data.mapping import ReplacementMap
from wordswap.rewrite.rewriter import count_matches, iter_matches, rewrite


@pytest.fixture
def cat_map():
	return ReplacementMap({'cat': 'dog'})


def test_empty_map_returns_text():
	"""Text is unchanged with an empty map."""
	empty = ReplacementMap()
	for text in ['', 'cat', 'Hello, World!', 'NEW YORK']:
		assert rewrite(text, empty) == text
	assert rewrite('cat', None) == 'cat'


def test_empty_text(cat_map):
	assert rewrite('', cat_map) == ''


def test_text_without_keys_unchanged(cat_map):
	text = 'The quick brown fox jumps over the lazy dog.'
	assert rewrite(text, cat_map) == text


def test_case_preservation(cat_map):
	"""Replacement follows the case of each occurrence."""
	assert rewrite('Cat', cat_map) == 'Dog'
	assert rewrite('CAT', cat_map) == 'DOG'
	assert rewrite('cat', cat_map) == 'dog'
	assert rewrite('Hello CAT, hello Cat, hello cat', cat_map) == 'Hello DOG, hello Dog, hello dog'


def test_no_partial_token_match(cat_map):
	"""Single words only match whole tokens."""
	assert rewrite('Concatenate', cat_map) == 'Concatenate'
	assert rewrite('cats', cat_map) == 'cats'
	assert rewrite('cat_food', cat_map) == 'cat_food'
	assert rewrite('cat9', cat_map) == 'cat9'


def test_word_boundaries_at_punctuation(cat_map):
	assert rewrite('(cat)', cat_map) == '(dog)'
	assert rewrite('cat-like', cat_map) == 'dog-like'
	assert rewrite("the cat's toy", cat_map) == "the dog's toy"
	assert rewrite('cat\ncat', cat_map) == 'dog\ndog'


def test_phrase_precedence():
	"""A phrase wins over a single word that is its prefix."""
	replacement_map = ReplacementMap({'new york': 'Metropolis', 'new': 'old'})
	assert rewrite('New York is new', replacement_map) == 'Metropolis is old'
	assert rewrite('NEW YORK', replacement_map) == 'METROPOLIS'
	assert rewrite('new york', replacement_map) == 'metropolis'


def test_phrase_precedence_independent_of_order():
	replacement_map = ReplacementMap({'new': 'old', 'new york': 'Metropolis'})
	assert rewrite('New York is new', replacement_map) == 'Metropolis is old'


def test_phrase_matches_mid_word():
	"""Phrases are literal substrings, not bounded by word boundaries."""
	replacement_map = ReplacementMap({'a b': 'c'})
	assert rewrite('xa by', replacement_map) == 'xcy'


def test_phrase_capitalizes_first_character_only():
	replacement_map = ReplacementMap({'big apple': 'new york city'})
	assert rewrite('Big Apple', replacement_map) == 'New york city'
	assert rewrite('Big apple', replacement_map) == 'New york city'


def test_token_overlapping_phrase_not_matched():
	"""A word token partially consumed by a phrase is not matched on its own."""
	replacement_map = ReplacementMap({'red ca': 'blue', 'cat': 'dog'})
	assert rewrite('red cat', replacement_map) == 'bluet'


def test_overlapping_phrases_earliest_then_longest():
	replacement_map = ReplacementMap({'a b': 'X', 'b c': 'Y', 'a b c': 'Z'})
	assert rewrite('a b c', replacement_map) == 'z'
	replacement_map = ReplacementMap({'a b': 'X', 'b c': 'Y'})
	assert rewrite('a b c', replacement_map) == 'x c'


def test_empty_replacement_deletes_term():
	replacement_map = ReplacementMap({'very': ''})
	assert rewrite('a very big cat', replacement_map) == 'a  big cat'


def test_single_pass_no_cascade():
	"""Replacement values are not scanned again."""
	replacement_map = ReplacementMap({'cat': 'dog', 'dog': 'wolf'})
	assert rewrite('cat dog', replacement_map) == 'dog wolf'


def test_idempotent_when_values_share_no_keys():
	replacement_map = ReplacementMap({'cat': 'dog', 'new york': 'metropolis'})
	text = 'A Cat in NEW YORK, concatenated with another cat.'
	once = rewrite(text, replacement_map)
	assert rewrite(once, replacement_map) == once


def test_key_case_is_ignored():
	replacement_map = ReplacementMap({'Cat': 'Dog'})
	assert rewrite('cat CAT Cat', replacement_map) == 'dog DOG Dog'


def test_non_ascii_words():
	replacement_map = ReplacementMap({'café': 'bar'})
	assert rewrite('Café and CAFÉ and cafés', replacement_map) == 'Bar and BAR and cafés'


def test_regex_characters_in_phrase():
	replacement_map = ReplacementMap({'c++ code': 'rust code'})
	assert rewrite('Write C++ code now', replacement_map) == 'Write Rust code now'


def test_punctuated_key_matched_at_word_boundaries():
	"""Keys like "e-mail" match whole, never inside a longer word."""
	replacement_map = ReplacementMap({'e-mail': 'email'})
	assert rewrite('Send an E-mail', replacement_map) == 'Send an Email'
	assert rewrite('(e-mail)', replacement_map) == '(email)'
	assert rewrite('Send a re-mail', replacement_map) == 'Send a re-mail'
	assert rewrite('e-mails', replacement_map) == 'e-mails'


def test_punctuated_key_precedence_over_word():
	replacement_map = ReplacementMap({'e': 'x', 'e-mail': 'email'})
	assert rewrite('e-mail e', replacement_map) == 'email x'


def test_iter_matches_spans():
	replacement_map = ReplacementMap({'new york': 'Metropolis', 'new': 'old'})
	matches = list(iter_matches('New York is new', replacement_map))
	assert matches == [(0, 8, 'new york'), (12, 15, 'new')]


def test_count_matches(cat_map):
	assert count_matches('Hello CAT, hello Cat, concatenate', cat_map) == 2
	assert count_matches('', cat_map) == 0
