"""
Runtime Configuration Store.

Settings are read from the ``[tool.noble]`` table of the nearest
``pyproject.toml`` and can be overridden from the command line.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError, field_validator

from noble.enums import OutputFormat

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

TOOL_SECTION = "noble"


class RuntimeConfig(BaseModel):
  """
  Global configuration container for the expansion engine.
  """

  attribute: str = Field("noble", description="Name of the annotation attribute (e.g. 'noble' for #[noble]).")
  output_format: OutputFormat = Field(OutputFormat.RUST, description="Serialization target for expanded units.")
  strict_mode: bool = Field(False, description="If True, unsupported annotated items fail the run.")
  idempotent: bool = Field(
    True,
    description="If True, already wrapped bodies and existing generated constructors are left alone.",
  )
  mark_trait_impls_unsafe: bool = Field(True, description="If True, 'impl Trait for T' becomes 'unsafe impl'.")
  constructor_docs: bool = Field(True, description="Emit a doc comment on generated constructors.")
  indent_width: int = Field(4, ge=1, le=8, description="Spaces per indentation level in Rust output.")
  max_workers: int = Field(1, ge=1, description="Thread pool size for expanding items of one unit.")

  @field_validator("attribute")
  @classmethod
  def validate_attribute(cls, v: str) -> str:
    """
    Ensures the annotation name is a bare identifier.

    Args:
        v (str): Raw attribute name.

    Returns:
        str: The stripped attribute name.

    Raises:
        ValueError: If the value is empty or contains path separators or brackets.
    """
    v_clean = v.strip()
    if not v_clean or not v_clean.replace("_", "a").isalnum():
      raise ValueError(f"Invalid attribute name: '{v}'. Expected an identifier like 'noble'.")
    return v_clean

  @classmethod
  def load(
    cls,
    output_format: Optional[str] = None,
    strict_mode: Optional[bool] = None,
    idempotent: Optional[bool] = None,
    max_workers: Optional[int] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Args:
        output_format (Optional[str]): Override for the output format.
        strict_mode (Optional[bool]): Override for strict mode.
        idempotent (Optional[bool]): Override for idempotent expansion.
        max_workers (Optional[int]): Override for the worker count.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.

    Raises:
        ValueError: If the merged settings fail validation.
    """
    start_dir = search_path or Path.cwd()
    toml_config, _ = _load_toml_settings(start_dir)

    overrides: Dict[str, Any] = {
      "output_format": output_format,
      "strict_mode": strict_mode,
      "idempotent": idempotent,
      "max_workers": max_workers,
    }
    merged = {**toml_config, **{k: v for k, v in overrides.items() if v is not None}}

    try:
      return cls.model_validate(merged)
    except ValidationError as e:
      raise ValueError(f"Invalid noble configuration: {e}")


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches parents for 'pyproject.toml' and extracts the ``[tool.noble]`` table.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError):
        return {}, None

      tool_section = data.get("tool", {})
      return tool_section.get(TOOL_SECTION, {}), parent

  return {}, None
