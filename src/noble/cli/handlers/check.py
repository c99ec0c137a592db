"""
Check Command Handler.

Implements ``noble check``: lists every annotated item of a document together
with the kind transformer that would handle it, without writing any output.
"""

from pathlib import Path
from typing import List, Tuple

from rich.markup import escape
from rich.table import Table

from noble.compiler.frontends.document import load_unit_file
from noble.config import RuntimeConfig
from noble.core.annotation import find_annotation
from noble.errors import DocumentError
from noble.utils.console import console, log_error, log_info, log_success

DOCUMENT_GLOB = "*.json"


def handle_check(input_path: Path) -> int:
  """
  Handles the 'check' command execution.

  Args:
      input_path: Item document or directory of documents.

  Returns:
      int: 0 if every annotated item is expandable, 1 otherwise.
  """
  if not input_path.exists():
    log_error(f"Input not found: [path]{escape(str(input_path))}[/path]")
    return 1

  try:
    config = RuntimeConfig.load(search_path=input_path if input_path.is_dir() else input_path.parent)
  except ValueError as e:
    log_error(escape(str(e)))
    return 1

  files = [input_path] if input_path.is_file() else sorted(input_path.rglob(DOCUMENT_GLOB))
  rows: List[Tuple[str, str, str, bool]] = []
  failed = False

  for path in files:
    try:
      unit = load_unit_file(path)
    except (DocumentError, OSError) as e:
      log_error(f"[path]{escape(str(path))}[/path]: {escape(str(e))}")
      failed = True
      continue

    for item in unit.items:
      if find_annotation(item, config.attribute) is None:
        continue
      supported = item.KIND is not None
      rows.append((str(item.span), item.name, item.observed_kind, supported))

  if not rows:
    log_info("No annotated items found.")
    return 1 if failed else 0

  table = Table(title="Annotated Items")
  table.add_column("Location", style="span")
  table.add_column("Item", style="cyan")
  table.add_column("Kind", style="kind")
  table.add_column("Status", justify="center")
  for location, name, kind, supported in rows:
    table.add_row(escape(location), escape(name), kind, "✅" if supported else "❌ unsupported")
  console.print(table)

  unsupported = sum(1 for r in rows if not r[3])
  if unsupported:
    log_error(f"{unsupported} annotated item(s) cannot be expanded.")
    return 1

  if not failed:
    log_success(f"All {len(rows)} annotated items can be expanded.")
  return 1 if failed else 0
