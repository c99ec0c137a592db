"""
Tests for annotation detection.

Verifies:
1. Accepted spellings (`#[noble]`, with arguments, path-qualified).
2. Other attributes are ignored.
3. Consuming removes only the annotation and keeps attribute order.
"""

import pytest

from noble.compiler.ir import Function, Span
from noble.core.annotation import consume_annotation, find_annotation, match_annotation


@pytest.mark.parametrize("attr", ["#[noble]", "#[ noble ]", "#[noble(fast)]", "#[noble::noble]"])
def test_accepted_spellings(attr):
  assert match_annotation(attr) is not None


@pytest.mark.parametrize("attr", ["#[inline]", "#[noble_extra]", "#[other::noble]", "/// noble", "#![noble]"])
def test_rejected_attributes(attr):
  assert match_annotation(attr) is None


def test_arguments_captured():
  assert match_annotation("#[noble(a, b = 1)]").args == "a, b = 1"
  assert match_annotation("#[noble]").args == ""


def test_custom_attribute_name():
  assert match_annotation("#[wrap]", attribute="wrap") is not None
  assert match_annotation("#[noble]", attribute="wrap") is None


def test_consume_keeps_other_attributes():
  fn = Function(name="f", attrs=["#[inline]", "#[noble]", "#[must_use]"], span=Span("a.rs", 2, 0))
  stripped, annotation = consume_annotation(fn)

  assert stripped.attrs == ["#[inline]", "#[must_use]"]
  assert annotation.text == "#[noble]"
  assert annotation.span == fn.span
  assert fn.attrs == ["#[inline]", "#[noble]", "#[must_use]"]


def test_consume_only_first():
  fn = Function(name="f", attrs=["#[noble]", "#[noble]"])
  stripped, _ = consume_annotation(fn)
  assert stripped.attrs == ["#[noble]"]


def test_unannotated_item_untouched(simple_fn):
  stripped, annotation = consume_annotation(simple_fn)
  assert annotation is None
  assert stripped is simple_fn
  assert find_annotation(simple_fn) is None
