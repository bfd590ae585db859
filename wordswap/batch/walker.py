"""Batch rewriting of a directory of JSON localization files."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from ..config import RewriteSettings
from ..data.mapping import ReplacementMap, load_replacement_map
from ..errors import ConfigurationError, FileProcessingError, PreconditionError
from ..rewrite.traversal import count_node_matches, rewrite_node
from .json_files import read_json, write_json

logger = logging.getLogger(__name__)


@dataclass
class FileResult:
	"""Outcome of rewriting one file."""

	input_path: Path
	output_path: Path
	ok: bool
	replacements: int = 0
	error: Optional[FileProcessingError] = None


@dataclass
class BatchSummary:
	"""Outcome of a batch run."""

	results: List[FileResult] = field(default_factory=list)

	@property
	def succeeded(self) -> int:
		return sum(1 for r in self.results if r.ok)

	@property
	def failed(self) -> int:
		return sum(1 for r in self.results if not r.ok)

	@property
	def ok(self) -> bool:
		return self.failed == 0


def check_preconditions(input_dir: str | Path, output_dir: str | Path, replacement_path: str | Path):
	"""Check that the input/output directories and the replacement file exist.

	Raises:
		PreconditionError: If the input or output directory is missing
		ConfigurationError: If the replacement file is missing
	"""
	if not Path(input_dir).is_dir():
		raise PreconditionError(f'Original texts folder not found: {input_dir}')
	if not Path(output_dir).is_dir():
		raise PreconditionError(f'Modified texts folder not found: {output_dir}')
	if not Path(replacement_path).is_file():
		raise ConfigurationError(f'Replacement file not found: {replacement_path}')


def list_input_files(input_dir: str | Path, pattern: str = '*.json') -> List[Path]:
	"""List the files of input_dir matching pattern, sorted by name.

	Raises:
		PreconditionError: If no file matches
	"""
	files = sorted(p for p in Path(input_dir).glob(pattern) if p.is_file())
	if not files:
		raise PreconditionError(f'No files matching {pattern} found in {input_dir}')
	return files


def process_file(
	input_path: str | Path,
	output_path: str | Path,
	replacement_map: ReplacementMap,
	indent: str | int = '\t',
) -> FileResult:
	"""Read, rewrite and write a single JSON file.

	Parse and write failures are recorded in the result instead of being
	raised, so one bad file does not stop a batch.

	Args:
		input_path: Source JSON file
		output_path: Destination file
		replacement_map: Source term -> replacement term
		indent: Output indentation

	Returns:
		FileResult
	"""
	input_path = Path(input_path)
	output_path = Path(output_path)

	try:
		data = read_json(input_path)
		rewritten = rewrite_node(data, replacement_map)
		write_json(rewritten, output_path, indent=indent)
	except FileProcessingError as e:
		logger.warning('Skipping %s: %s', input_path, e.reason)
		return FileResult(input_path, output_path, ok=False, error=e)

	replacements = count_node_matches(data, replacement_map)
	logger.debug('%s: %d replacement(s)', input_path.name, replacements)
	return FileResult(input_path, output_path, ok=True, replacements=replacements)


def process_directory(
	input_dir: str | Path,
	output_dir: str | Path,
	replacement_map: ReplacementMap,
	pattern: str = '*.json',
	indent: str | int = '\t',
	show_progress: bool = True,
) -> BatchSummary:
	"""Rewrite every matching file of input_dir into output_dir.

	Files are processed one after another; each output file has the same
	name as its input.

	Args:
		input_dir: Directory with original files
		output_dir: Directory for rewritten files
		replacement_map: Source term -> replacement term
		pattern: Glob pattern selecting input files
		indent: Output indentation
		show_progress: Whether to show a progress bar

	Returns:
		BatchSummary with one FileResult per input file
	"""
	files = list_input_files(input_dir, pattern)
	output_dir = Path(output_dir)

	summary = BatchSummary()
	for input_path in tqdm(files, desc='Rewriting', unit='file', disable=not show_progress):
		result = process_file(input_path, output_dir / input_path.name, replacement_map, indent=indent)
		summary.results.append(result)

		if result.ok:
			tqdm.write(f'  ✓ {input_path.name} ({result.replacements} replacement(s))')
		else:
			tqdm.write(f'  ✗ Error processing {input_path}: {result.error.reason}')

	return summary


def run(settings: RewriteSettings, show_progress: bool = True) -> BatchSummary:
	"""Check preconditions, load the mapping and rewrite the input directory.

	Raises:
		PreconditionError: If a directory is missing or there are no input files
		ConfigurationError: If the replacement mapping is missing or malformed
	"""
	check_preconditions(settings.input_dir, settings.output_dir, settings.replacement_path)
	replacement_map = load_replacement_map(settings.replacement_path)

	# Fail on an empty input directory before printing anything
	files = list_input_files(settings.input_dir, settings.pattern)
	print(f'Found {len(files)} file(s) to process')
	print(f"Replacements to apply: {', '.join(replacement_map)}\n")

	return process_directory(
		settings.input_dir,
		settings.output_dir,
		replacement_map,
		pattern=settings.pattern,
		indent=settings.indent,
		show_progress=show_progress,
	)
