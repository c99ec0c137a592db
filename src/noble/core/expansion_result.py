"""
Data structures representing the output of the expansion pipeline.

This module defines the `Diagnostic` and `ExpansionResult` Pydantic models,
which carry the emitted code and every item-scoped problem encountered.
"""

from typing import List

from pydantic import BaseModel, Field

from noble.enums import Severity


class Diagnostic(BaseModel):
  """
  A compile-time message tied to the span of one item.
  """

  span: str = Field(description="Location of the item, formatted as file:line:column.")
  kind: str = Field(description="Observed item kind (e.g. 'type').")
  message: str
  severity: Severity = Severity.ERROR

  def __str__(self) -> str:
    return f"{self.severity.value}: {self.message}"


class ExpansionResult(BaseModel):
  """
  Container for the results of expanding one compilation unit.
  """

  code: str = Field(default="", description="The emitted source or document.")
  errors: List[str] = Field(default_factory=list, description="Error messages, one per failed item.")
  diagnostics: List[Diagnostic] = Field(default_factory=list)
  expanded: int = Field(default=0, description="Number of annotated items successfully transformed.")
  success: bool = Field(default=True, description="False on fatal errors, or on any error in strict mode.")

  @property
  def has_errors(self) -> bool:
    """
    Check if the result contains any error messages.

    Returns:
        True if one or more errors are present.
    """
    return len(self.errors) > 0
