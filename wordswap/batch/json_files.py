"""Reading and writing localization JSON files."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from ..errors import ParseError, WriteError


def read_json(path: str | Path) -> Any:
	"""Read and parse a JSON file, ignoring a leading byte order mark.

	Args:
		path: Path to JSON file

	Returns:
		Parsed JSON value

	Raises:
		ParseError: If the file cannot be read or is not valid JSON
	"""
	try:
		with open(path, 'r', encoding='utf-8-sig') as f:
			content = f.read()
	except UnicodeDecodeError as e:
		raise ParseError(path, f'not valid UTF-8 ({e})', e) from e
	except OSError as e:
		raise ParseError(path, f'cannot read file ({e.strerror or e})', e) from e

	try:
		return json.loads(content)
	except json.JSONDecodeError as e:
		raise ParseError(path, f'invalid JSON: {e}', e) from e


def dump_json(data: Any, indent: str | int = '\t') -> str:
	"""Serialize a JSON value the way output files are written."""
	return json.dumps(data, indent=indent, ensure_ascii=False)


def write_json(data: Any, path: str | Path, indent: str | int = '\t'):
	"""Write a JSON value to a file (no trailing newline).

	The value is serialized before the file is opened, and a partially
	written file is removed if writing fails.

	Args:
		data: JSON value
		path: Output file path
		indent: Indentation passed to json.dumps (tab by default)

	Raises:
		WriteError: If the file cannot be written
	"""
	path = Path(path)
	try:
		content = dump_json(data, indent=indent)
	except (TypeError, ValueError) as e:
		raise WriteError(path, f'cannot serialize JSON ({e})', e) from e

	try:
		with open(path, 'w', encoding='utf-8') as f:
			f.write(content)
	except OSError as e:
		if path.is_file():
			with suppress(OSError):
				path.unlink()
		raise WriteError(path, f'cannot write file ({e.strerror or e})', e) from e
