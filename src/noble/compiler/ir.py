"""
Item Model (IR).

This module defines the language-level data structures the expander works on:
classified items (functions, records, operation groups, sum types, contracts),
their signatures, fields and statement blocks.

It acts as the contract between the Frontend (item documents produced by a host
parser) and the Backends (Rust source text, item documents).

Items are treated as values. Transformers build new instances with
``dataclasses.replace`` and fresh lists; they never mutate their input.
"""

from dataclasses import dataclass, field
from typing import ClassVar, List, Optional, Union

from noble.enums import FieldStyle, GenericKind, ItemKind


@dataclass(frozen=True)
class Span:
  """
  Source location of an item, used for diagnostics only.
  """

  file: str = "<unknown>"
  """Path of the source file."""

  line: int = 0
  """1-indexed start line (0 = unknown)."""

  column: int = 0
  """0-indexed start column."""

  end_line: int = 0
  end_column: int = 0

  def __str__(self) -> str:
    return f"{self.file}:{self.line}:{self.column}"


# --- Generics ---


@dataclass
class GenericParam:
  """
  A single generic parameter (``'a``, ``T: Clone = u8`` or ``const N: usize``).
  """

  name: str
  """Parameter name, including the leading quote for lifetimes."""

  kind: GenericKind = GenericKind.TYPE

  bounds: List[str] = field(default_factory=list)
  """Trait or lifetime bounds, in declaration order."""

  const_type: Optional[str] = None
  """Declared type for const generics."""

  default: Optional[str] = None
  """Default argument (only legal on the item declaration, not on impls)."""


@dataclass
class Generics:
  """
  Generic parameter list plus where-clause predicates.
  """

  params: List[GenericParam] = field(default_factory=list)
  where_clauses: List[str] = field(default_factory=list)
  """Predicates without the ``where`` keyword (e.g. ``T: Debug``)."""

  @property
  def is_empty(self) -> bool:
    return not self.params and not self.where_clauses


# --- Statements ---


@dataclass
class Stmt:
  """Base for all statements. Abstract."""


@dataclass
class RawStmt(Stmt):
  """
  An opaque statement (or tail expression) carried verbatim.

  The expander performs no semantic analysis, so statement text is never
  inspected or rewritten.
  """

  text: str


@dataclass
class Block:
  """Ordered statement sequence enclosed in braces."""

  stmts: List[Stmt] = field(default_factory=list)


@dataclass
class UnsafeBlock(Stmt):
  """
  A restricted-safety region: ``unsafe { ... }``.
  """

  body: Block = field(default_factory=Block)


@dataclass
class Construct(Stmt):
  """
  Instance construction expression emitted by generated constructors.

  Renders as ``Self { a, b }``, ``Self(field_0)``, ``Self::Variant`` and so on.
  """

  path: str
  """Constructor path (``Self`` or ``Self::Variant``)."""

  style: FieldStyle = FieldStyle.UNIT

  fields: List[str] = field(default_factory=list)
  """Field names for NAMED construction, empty otherwise."""

  args: List[str] = field(default_factory=list)
  """Parameter names feeding each field, in field order."""


def is_wrapped(block: Optional[Block]) -> bool:
  """
  Checks whether a block is already a single restricted-safety region.

  Args:
      block: The block to inspect.

  Returns:
      bool: True if the block holds exactly one `UnsafeBlock`.
  """
  return block is not None and len(block.stmts) == 1 and isinstance(block.stmts[0], UnsafeBlock)


# --- Signatures ---


@dataclass
class Param:
  """
  A function parameter. Receivers (``&self``, ``mut self``) have no type.
  """

  name: str
  ty: Optional[str] = None

  @property
  def is_receiver(self) -> bool:
    return self.ty is None


@dataclass
class Qualifiers:
  """Function qualifiers, in Rust's canonical order."""

  is_const: bool = False
  is_async: bool = False
  is_unsafe: bool = False
  abi: Optional[str] = None
  """ABI string for ``extern "C"`` functions."""


@dataclass
class Signature:
  """
  Parameter list, return type and qualifiers of a function or method.
  """

  params: List[Param] = field(default_factory=list)
  ret: Optional[str] = None
  qualifiers: Qualifiers = field(default_factory=Qualifiers)


# --- Fields and Variants ---


@dataclass
class Field:
  """
  A record or variant field.

  Named fields carry ``name``; positional fields only carry their ``index``.
  """

  ty: str
  name: Optional[str] = None
  index: int = 0
  vis: str = ""
  attrs: List[str] = field(default_factory=list)

  @property
  def param_name(self) -> str:
    """
    Name used for the matching constructor parameter.

    Returns:
        str: The field name, or ``field_<index>`` for positional fields.
    """
    return self.name if self.name is not None else f"field_{self.index}"


@dataclass
class Variant:
  """
  One alternative of a sum type.
  """

  name: str
  style: FieldStyle = FieldStyle.UNIT
  fields: List[Field] = field(default_factory=list)
  discriminant: Optional[str] = None
  attrs: List[str] = field(default_factory=list)


# --- Members ---


@dataclass
class Method:
  """
  A function bound to an operation group or contract.

  ``body`` is None for required contract methods.
  """

  name: str
  vis: str = ""
  attrs: List[str] = field(default_factory=list)
  generics: Generics = field(default_factory=Generics)
  sig: Signature = field(default_factory=Signature)
  body: Optional[Block] = None
  span: Span = field(default_factory=Span)

  @property
  def is_required(self) -> bool:
    return self.body is None


@dataclass
class AssocItem:
  """
  Non-method member (associated const, type or macro call), passed through verbatim.
  """

  text: str
  kind: str = "raw"


Member = Union[Method, AssocItem]


# --- Items ---


@dataclass
class Item:
  """
  Base for all classified items.

  Attributes shared by every shape: name, visibility, outer attributes,
  generics (with where clauses) and the original span.
  """

  KIND: ClassVar[Optional[ItemKind]] = None

  name: str
  vis: str = ""
  attrs: List[str] = field(default_factory=list)
  generics: Generics = field(default_factory=Generics)
  span: Span = field(default_factory=Span)

  @property
  def observed_kind(self) -> str:
    return self.KIND.value if self.KIND else "item"


@dataclass
class Function(Item):
  """A free function."""

  KIND: ClassVar[Optional[ItemKind]] = ItemKind.FUNCTION

  sig: Signature = field(default_factory=Signature)
  body: Block = field(default_factory=Block)


@dataclass
class DataRecord(Item):
  """
  A struct. ``operations`` holds the inherent methods generated for it.
  """

  KIND: ClassVar[Optional[ItemKind]] = ItemKind.DATA_RECORD

  style: FieldStyle = FieldStyle.UNIT
  fields: List[Field] = field(default_factory=list)
  operations: List[Method] = field(default_factory=list)


@dataclass
class SumType(Item):
  """
  An enum. ``operations`` holds the per-variant constructors generated for it.
  """

  KIND: ClassVar[Optional[ItemKind]] = ItemKind.SUM_TYPE

  variants: List[Variant] = field(default_factory=list)
  operations: List[Method] = field(default_factory=list)


@dataclass
class OperationGroup(Item):
  """
  An impl block. ``name`` is the target type as written (e.g. ``Wrapper<T>``).
  """

  KIND: ClassVar[Optional[ItemKind]] = ItemKind.OPERATION_GROUP

  trait_ref: Optional[str] = None
  """Implemented contract path for ``impl Trait for Type``."""

  is_unsafe: bool = False
  members: List[Member] = field(default_factory=list)


@dataclass
class Contract(Item):
  """A trait."""

  KIND: ClassVar[Optional[ItemKind]] = ItemKind.CONTRACT

  supertraits: List[str] = field(default_factory=list)
  is_unsafe: bool = False
  members: List[Member] = field(default_factory=list)


@dataclass
class OpaqueItem(Item):
  """
  Any item shape outside the five supported kinds (module, const, type alias...).

  It is carried as verbatim source text so it can always be re-emitted.
  """

  kind: str = "item"
  text: str = ""

  @property
  def observed_kind(self) -> str:
    return self.kind


@dataclass
class CompilationUnit:
  """
  An ordered sequence of items from one source file.
  """

  file: str = "<unknown>"
  items: List[Item] = field(default_factory=list)
