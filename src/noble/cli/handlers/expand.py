"""
Expand Command Handler.

Implements ``noble expand``:
1. Configuration loading (pyproject.toml + CLI overrides).
2. Decoding of item documents.
3. Expansion via the Engine.
4. Output writing and a summary report.
"""

import sys
from pathlib import Path
from typing import Dict, Optional

from rich.markup import escape
from rich.table import Table

from noble.compiler.registry import output_suffix
from noble.config import RuntimeConfig
from noble.core.engine import ExpansionEngine, ExpansionResult
from noble.utils.console import console, log_error, log_info, log_success, log_warning

DOCUMENT_GLOB = "*.json"


def handle_expand(
  input_path: Path,
  output_path: Optional[Path],
  output_format: Optional[str],
  strict: Optional[bool],
  idempotent: Optional[bool],
  workers: Optional[int],
) -> int:
  """
  Handles the 'expand' command execution.

  Args:
      input_path: Item document or directory of documents.
      output_path: Destination file (single input) or directory (directory input).
          When omitted for a single file, the result is written to stdout.
      output_format: Override for the output format ('rust' or 'json').
      strict: Override for strict mode.
      idempotent: Override for idempotent expansion.
      workers: Override for the per-unit worker count.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  if not input_path.exists():
    log_error(f"Input not found: [path]{escape(str(input_path))}[/path]")
    return 1

  try:
    config = RuntimeConfig.load(
      output_format=output_format,
      strict_mode=strict,
      idempotent=idempotent,
      max_workers=workers,
      search_path=input_path if input_path.is_dir() else input_path.parent,
    )
  except ValueError as e:
    log_error(escape(str(e)))
    return 1

  engine = ExpansionEngine(config=config)
  batch_results: Dict[str, ExpansionResult] = {}

  if input_path.is_file():
    result = _expand_single_file(input_path, output_path, engine)
    batch_results[input_path.name] = result
    _print_batch_summary(batch_results)
    return 0 if result.success else 1

  if not output_path:
    log_error("Directory expansion requires --out destination directory.")
    return 1

  documents = sorted(input_path.rglob(DOCUMENT_GLOB))
  if not documents:
    log_warning(f"No item documents found in [path]{escape(str(input_path))}[/path]")
    return 0

  log_info(f"Processing {len(documents)} documents from [path]{escape(str(input_path))}[/path]...")
  suffix = output_suffix(config.output_format)

  for src_file in documents:
    rel_path = src_file.relative_to(input_path)
    dest_file = (output_path / rel_path).with_suffix(suffix)
    batch_results[str(rel_path)] = _expand_single_file(src_file, dest_file, engine)

  _print_batch_summary(batch_results)
  return 0 if all(r.success for r in batch_results.values()) else 1


def _expand_single_file(input_path: Path, output_path: Optional[Path], engine: ExpansionEngine) -> ExpansionResult:
  """
  Expands one item document and writes the result.

  Args:
      input_path: Source document.
      output_path: Destination file, or None for stdout.
      engine: The configured engine.

  Returns:
      ExpansionResult: Result object containing status and code.
  """
  try:
    text = input_path.read_text(encoding="utf-8")
  except OSError as e:
    log_error(f"Failed to read [path]{escape(str(input_path))}[/path]: {escape(str(e))}")
    return ExpansionResult(success=False, errors=[str(e)])

  result = engine.run(text, file_name=str(input_path))
  if not result.success:
    return result

  if output_path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(result.code, encoding="utf-8")
    log_success(f"Expanded: [path]{escape(str(input_path))}[/path] -> [path]{escape(str(output_path))}[/path]")
  else:
    sys.stdout.write(result.code)

  return result


def _print_batch_summary(results: Dict[str, ExpansionResult]) -> None:
  """
  Renders a summary table of expansion results to the console.

  Args:
      results: Dictionary mapping filenames to expansion results.
  """
  total = len(results)
  clean = sum(1 for r in results.values() if r.success and not r.has_errors)
  items = sum(r.expanded for r in results.values())

  if clean == total:
    log_success(f"Expanded {items} annotated items in {total} file(s).")
    return

  table = Table(title="Expansion Report")
  table.add_column("File", style="cyan")
  table.add_column("Status", justify="center")
  table.add_column("Issues", style="red")

  for filename, res in results.items():
    if res.success and not res.has_errors:
      continue
    status = "❌ Failed" if not res.success else "⚠️ Errors"
    table.add_row(escape(filename), status, escape("; ".join(res.errors) or "Unknown Error"))

  console.print(table)
  console.print(f"\n[bold]Summary:[/bold] {clean} clean, {total - clean} with issues, {items} items expanded.")
