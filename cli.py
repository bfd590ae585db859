"""CLI interface for case-preserving term replacement in JSON localization files."""

import argparse
import logging
import sys

from wordswap.batch.walker import run
from wordswap.config import load_config, resolve_settings
from wordswap.data.mapping import load_replacement_map
from wordswap.errors import ConfigurationError, PreconditionError
from wordswap.rewrite.case import get_case_variations
from wordswap.rewrite.rewriter import rewrite

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_PARTIAL = 2


def _settings_from_args(args):
	config = load_config(args.config) if args.config else {}
	return resolve_settings(
		config,
		input_dir=getattr(args, 'input', None),
		output_dir=getattr(args, 'output', None),
		replacement_path=args.replacements,
		pattern=getattr(args, 'pattern', None),
		indent=getattr(args, 'indent', None),
	)


def cmd_rewrite(args) -> int:
	"""Rewrite every JSON file of the input directory."""
	settings = _settings_from_args(args)

	print(f'Input: {settings.input_dir}')
	print(f'Output: {settings.output_dir}')
	print(f'Replacements: {settings.replacement_path}')

	summary = run(settings, show_progress=not args.no_progress)

	print(f'\nProcessed {len(summary.results)} file(s): {summary.succeeded} succeeded, {summary.failed} failed')
	if not summary.ok:
		print('✗ Some files could not be processed')
		return EXIT_PARTIAL

	print('✓ All files processed successfully!')
	return EXIT_OK


def cmd_text(args) -> int:
	"""Rewrite a single string."""
	settings = _settings_from_args(args)
	replacement_map = load_replacement_map(settings.replacement_path)
	print(rewrite(args.text, replacement_map))
	return EXIT_OK


def cmd_show_mapping(args) -> int:
	"""List the configured terms with their case variants."""
	settings = _settings_from_args(args)
	replacement_map = load_replacement_map(settings.replacement_path)

	print(f'{len(replacement_map)} replacement(s) in {settings.replacement_path}')
	for term, replacement in replacement_map.items():
		kind = replacement_map.kind(term)
		variants = get_case_variations(replacement)
		print(f"{term!r} ({kind}) -> {variants.lower!r} / {variants.capitalized!r} / {variants.upper!r}")
	return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(description='Case-preserving term replacement for JSON localization files')
	parser.add_argument(
		'--log-level', type=str, default='WARNING', help='Logging level (DEBUG/INFO/WARNING/ERROR)'
	)
	subparsers = parser.add_subparsers(dest='command', help='Command to run')

	# rewrite
	rewrite_parser = subparsers.add_parser('rewrite', help='Rewrite all JSON files of a directory')
	rewrite_parser.add_argument('--input', type=str, help='Directory with original JSON files')
	rewrite_parser.add_argument('--output', type=str, help='Directory for rewritten JSON files')
	rewrite_parser.add_argument('--replacements', type=str, help='Path to replacement.json')
	rewrite_parser.add_argument('--pattern', type=str, help='Glob pattern for input files (default: *.json)')
	rewrite_parser.add_argument('--indent', type=str, help="Output indentation: 'tab' or a number of spaces")
	rewrite_parser.add_argument('--config', type=str, help='Config YAML')
	rewrite_parser.add_argument('--no-progress', action='store_true', help='Disable the progress bar')

	# text
	text_parser = subparsers.add_parser('text', help='Rewrite a single string')
	text_parser.add_argument('text', type=str, help='Text to rewrite')
	text_parser.add_argument('--replacements', type=str, help='Path to replacement.json')
	text_parser.add_argument('--config', type=str, help='Config YAML')

	# show-mapping
	show_parser = subparsers.add_parser('show-mapping', help='List configured replacements')
	show_parser.add_argument('--replacements', type=str, help='Path to replacement.json')
	show_parser.add_argument('--config', type=str, help='Config YAML')

	return parser


def main(argv=None) -> int:
	parser = build_parser()
	args = parser.parse_args(argv)

	logging.basicConfig(
		level=getattr(logging, args.log_level.upper(), logging.WARNING),
		format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
	)

	commands = {
		'rewrite': cmd_rewrite,
		'text': cmd_text,
		'show-mapping': cmd_show_mapping,
	}
	command = commands.get(args.command)
	if command is None:
		parser.print_help()
		return EXIT_FATAL

	try:
		return command(args)
	except (ConfigurationError, PreconditionError) as e:
		print(f'Error: {e}', file=sys.stderr)
		return EXIT_FATAL


if __name__ == '__main__':
	sys.exit(main())
