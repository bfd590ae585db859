"""Run configuration loading."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigurationError

DEFAULT_INPUT_DIR = 'original-texts/en'
DEFAULT_OUTPUT_DIR = 'modified-texts/en'
DEFAULT_REPLACEMENT_PATH = 'replacement.json'
DEFAULT_PATTERN = '*.json'
DEFAULT_INDENT = '\t'


@dataclass
class RewriteSettings:
	"""Resolved settings for one batch run."""

	input_dir: Path = Path(DEFAULT_INPUT_DIR)
	output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
	replacement_path: Path = Path(DEFAULT_REPLACEMENT_PATH)
	pattern: str = DEFAULT_PATTERN
	indent: str | int = DEFAULT_INDENT


def load_config(config_path: str | Path) -> Dict[str, Any]:
	"""Load YAML configuration file.

	Args:
		config_path: Path to YAML config file

	Returns:
		Configuration dictionary (empty for an empty file)

	Raises:
		ConfigurationError: If the file is missing, unreadable or not a mapping
	"""
	try:
		with open(config_path, 'r', encoding='utf-8') as f:
			config = yaml.safe_load(f)
	except OSError as e:
		raise ConfigurationError(f'Cannot read config file {config_path}: {e}') from e
	except yaml.YAMLError as e:
		raise ConfigurationError(f'Malformed config file {config_path}: {e}') from e

	if config is None:
		return {}
	if not isinstance(config, dict):
		raise ConfigurationError(f'Config file {config_path} must contain a mapping')
	return config


def parse_indent(value: Any) -> str | int:
	"""Turn an indent setting into something json.dumps accepts.

	'tab' (or '\\t') means a tab, integers and digit strings mean that many
	spaces, any other string of spaces and tabs is used literally.
	"""
	if isinstance(value, bool):
		raise ConfigurationError(f'Invalid indent: {value!r}')
	if isinstance(value, int):
		if value < 0:
			raise ConfigurationError(f'Indent must not be negative: {value}')
		return value
	if isinstance(value, str):
		if value.lower() in ('tab', '\\t'):
			return '\t'
		if value.isdigit():
			return int(value)
		# Anything else would end up inside the JSON output
		if value.strip(' \t'):
			raise ConfigurationError(f'Indent must be spaces or tabs, got {value!r}')
		return value
	raise ConfigurationError(f'Invalid indent: {value!r}')


def resolve_settings(config: Optional[Dict[str, Any]] = None, **overrides: Any) -> RewriteSettings:
	"""Merge defaults, the config 'rewrite' section and command-line overrides.

	Overrides that are None are ignored, so unset CLI flags fall back to the
	config file and then to the defaults.

	Args:
		config: Loaded YAML config (optional)
		**overrides: Setting values from the command line

	Returns:
		RewriteSettings
	"""
	section = (config or {}).get('rewrite') or {}
	if not isinstance(section, dict):
		raise ConfigurationError("Config section 'rewrite' must be a mapping")

	known = {f.name for f in fields(RewriteSettings)}
	unknown = set(section) - known
	if unknown:
		raise ConfigurationError(f"Unknown settings in 'rewrite' section: {', '.join(sorted(unknown))}")

	values = dict(section)
	values.update({k: v for k, v in overrides.items() if v is not None})

	settings = RewriteSettings()
	for name in ('input_dir', 'output_dir', 'replacement_path'):
		if name in values:
			setattr(settings, name, Path(values[name]))
	if 'pattern' in values:
		settings.pattern = str(values['pattern'])
	if 'indent' in values:
		settings.indent = parse_indent(values['indent'])

	return settings
