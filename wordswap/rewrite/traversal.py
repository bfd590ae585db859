"""Recursive rewriting of parsed JSON documents."""

from typing import Any

from ..data.mapping import ReplacementMap
from .rewriter import count_matches, rewrite


def rewrite_node(node: Any, replacement_map: ReplacementMap) -> Any:
	"""Rewrite every string leaf of a parsed JSON value.

	Lists and dicts are rebuilt in their original order with rewritten
	children; dict keys, numbers, booleans and None are returned as they
	are.

	Args:
		node: Parsed JSON value
		replacement_map: Source term -> replacement term

	Returns:
		New JSON value with rewritten strings
	"""
	if isinstance(node, str):
		return rewrite(node, replacement_map)
	elif isinstance(node, list):
		return [rewrite_node(item, replacement_map) for item in node]
	elif isinstance(node, dict):
		return {key: rewrite_node(value, replacement_map) for key, value in node.items()}
	return node


def count_node_matches(node: Any, replacement_map: ReplacementMap) -> int:
	"""Count the replacements rewrite_node() makes across all string leaves."""
	if isinstance(node, str):
		return count_matches(node, replacement_map)
	elif isinstance(node, list):
		return sum(count_node_matches(item, replacement_map) for item in node)
	elif isinstance(node, dict):
		return sum(count_node_matches(value, replacement_map) for value in node.values())
	return 0
