"""Tests for recursive document rewriting."""

from wordswap.data.mapping import ReplacementMap
from wordswap.rewrite.traversal import count_node_matches, rewrite_node


CAT_MAP = ReplacementMap({'cat': 'dog'})


def test_structural_fidelity():
	"""Only string leaves change, structure and other leaves stay the same."""
	document = {'a': 'cat', 'b': [1, 'Cat', None]}
	assert rewrite_node(document, CAT_MAP) == {'a': 'dog', 'b': [1, 'Dog', None]}


def test_keys_not_rewritten_and_order_kept():
	document = {'cat': 'cat', 'z': 'CAT', 'a': {'nested': ['cat', True, 2.5]}}
	result = rewrite_node(document, CAT_MAP)
	assert list(result) == ['cat', 'z', 'a']
	assert result == {'cat': 'dog', 'z': 'DOG', 'a': {'nested': ['dog', True, 2.5]}}


def test_input_not_modified():
	document = {'a': ['cat']}
	rewrite_node(document, CAT_MAP)
	assert document == {'a': ['cat']}


def test_scalar_roots():
	assert rewrite_node('Cat', CAT_MAP) == 'Dog'
	assert rewrite_node(42, CAT_MAP) == 42
	assert rewrite_node(None, CAT_MAP) is None
	assert rewrite_node(False, CAT_MAP) is False


def test_count_node_matches():
	"""Every replacement in every string leaf is counted."""
	document = {'cat': 'cat', 'b': [1, 'Cat', 'bird'], 'c': {'d': 'cat CAT'}}
	assert count_node_matches(document, CAT_MAP) == 4
	assert count_node_matches({'a': [None, 3]}, CAT_MAP) == 0
