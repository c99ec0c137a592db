"""
Annotation Detection.

Recognizes the ``#[noble]`` attribute on an item and consumes it. Accepted
spellings are ``#[noble]``, ``#[noble(...)]`` and ``#[noble::noble]``.
Arguments are accepted and ignored.
"""

import dataclasses
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from noble.compiler.ir import Item, Span

_ATTR_RE = re.compile(
  r"^#\[\s*(?:(?P<crate>[A-Za-z_]\w*)\s*::\s*)?(?P<name>[A-Za-z_]\w*)\s*(?:\((?P<args>.*)\))?\s*\]$",
  re.DOTALL,
)


@dataclass(frozen=True)
class Annotation:
  """
  A parsed ``#[noble]`` attribute.

  Attributes:
      text (str): The attribute exactly as written.
      args (str): Text between the parentheses, empty when absent.
      span (Span): Location of the annotated item.
  """

  text: str
  args: str = ""
  span: Span = Span()


def match_annotation(attr: str, attribute: str = "noble") -> Optional[Annotation]:
  """
  Parses one attribute string and checks whether it is the annotation.

  Args:
      attr (str): An outer attribute such as ``#[derive(Debug)]``.
      attribute (str): Annotation name to look for.

  Returns:
      Optional[Annotation]: The parsed annotation, or None for other attributes.
  """
  m = _ATTR_RE.match(attr.strip())
  if not m or m.group("name") != attribute:
    return None
  crate = m.group("crate")
  if crate is not None and crate != attribute:
    return None
  return Annotation(text=attr, args=(m.group("args") or "").strip())


def find_annotation(item: Item, attribute: str = "noble") -> Optional[Annotation]:
  """Returns the first matching annotation on ``item``, if any."""
  for attr in item.attrs:
    found = match_annotation(attr, attribute)
    if found is not None:
      return dataclasses.replace(found, span=item.span)
  return None


def consume_annotation(item: Item, attribute: str = "noble") -> Tuple[Item, Optional[Annotation]]:
  """
  Removes the annotation from an item.

  Only the first matching attribute is consumed; every other attribute keeps
  its position.

  Args:
      item (Item): The classified item.
      attribute (str): Annotation name.

  Returns:
      Tuple[Item, Optional[Annotation]]: The stripped item and its annotation.
      Unannotated items are returned unchanged with None.
  """
  for idx, attr in enumerate(item.attrs):
    found = match_annotation(attr, attribute)
    if found is not None:
      attrs = item.attrs[:idx] + item.attrs[idx + 1 :]
      return dataclasses.replace(item, attrs=attrs), dataclasses.replace(found, span=item.span)
  return item, None
