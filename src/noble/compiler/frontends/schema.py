"""
Pydantic Schemas for Item Documents.

An item document is the JSON hand-off between a host parser and noble. It
describes one compilation unit as an ordered list of classified items:

.. code-block:: json

    {
      "file": "src/lib.rs",
      "items": [
        {"kind": "fn", "name": "poke", "attrs": ["#[noble]"],
         "sig": {"params": [{"name": "p", "ty": "*mut u8"}]},
         "body": ["*p = 0;"]},
        {"kind": "type", "name": "Alias", "text": "type Alias = u8;"}
      ]
    }

Item kinds ``fn``, ``struct``, ``impl``, ``enum`` and ``trait`` are decoded
into their dedicated schemas. Any other kind is kept as an opaque item whose
``text`` is re-emitted verbatim (outer attributes live in ``attrs``).
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from noble.enums import FieldStyle, GenericKind


class SpanDocument(BaseModel):
  """Source location of an item."""

  file: Optional[str] = None
  line: int = Field(0, ge=0)
  column: int = Field(0, ge=0)
  end_line: int = Field(0, ge=0)
  end_column: int = Field(0, ge=0)


class GenericParamDocument(BaseModel):
  """A generic parameter."""

  name: str
  kind: GenericKind = GenericKind.TYPE
  bounds: List[str] = Field(default_factory=list)
  const_type: Optional[str] = None
  default: Optional[str] = None

  @model_validator(mode="after")
  def check_const_type(self) -> "GenericParamDocument":
    if self.kind == GenericKind.CONST and not self.const_type:
      raise ValueError(f"const generic '{self.name}' requires 'const_type'")
    return self


class GenericsDocument(BaseModel):
  """Generic parameters and where-clause predicates."""

  params: List[GenericParamDocument] = Field(default_factory=list)
  where: List[str] = Field(default_factory=list, description="Predicates without the 'where' keyword.")


class ParamDocument(BaseModel):
  """Function parameter. Receivers such as '&self' omit 'ty'."""

  name: str
  ty: Optional[str] = None


class SignatureDocument(BaseModel):
  """Parameters, return type and qualifiers."""

  model_config = ConfigDict(populate_by_name=True)

  params: List[ParamDocument] = Field(default_factory=list)
  ret: Optional[str] = None
  is_const: bool = Field(False, alias="const")
  is_async: bool = Field(False, alias="async")
  is_unsafe: bool = Field(False, alias="unsafe")
  abi: Optional[str] = None


# --- Statements ---


class ConstructDocument(BaseModel):
  """Instance construction expression produced by generated constructors."""

  path: str
  style: FieldStyle = FieldStyle.UNIT
  fields: List[str] = Field(default_factory=list)
  args: List[str] = Field(default_factory=list)


class UnsafeStmtDocument(BaseModel):
  """``{"unsafe": [...]}``: a restricted-safety block."""

  model_config = ConfigDict(extra="forbid")

  unsafe: List["StmtDocument"] = Field(default_factory=list)


class ConstructStmtDocument(BaseModel):
  """``{"construct": {...}}``."""

  model_config = ConfigDict(extra="forbid", populate_by_name=True)

  construction: ConstructDocument = Field(alias="construct")


StmtDocument = Union[str, UnsafeStmtDocument, ConstructStmtDocument]
"""A statement: raw text, an unsafe block, or a construction expression."""

UnsafeStmtDocument.model_rebuild()


# --- Fields ---


class FieldDocument(BaseModel):
  """A struct or variant field. Positional fields omit 'name'."""

  ty: str
  name: Optional[str] = None
  vis: str = ""
  attrs: List[str] = Field(default_factory=list)


def _check_field_style(owner: str, style: FieldStyle, fields: List[FieldDocument]) -> None:
  """
  Verifies that a field list matches its declared style.

  Raises:
      ValueError: On unit style with fields, or a mix of named and unnamed fields.
  """
  if style == FieldStyle.UNIT and fields:
    raise ValueError(f"'{owner}' has unit style but declares {len(fields)} fields")
  if style == FieldStyle.NAMED and any(f.name is None for f in fields):
    raise ValueError(f"'{owner}' has named style but contains unnamed fields")
  if style == FieldStyle.POSITIONAL and any(f.name is not None for f in fields):
    raise ValueError(f"'{owner}' has positional style but contains named fields")


class VariantDocument(BaseModel):
  """An enum variant."""

  name: str
  style: FieldStyle = FieldStyle.UNIT
  fields: List[FieldDocument] = Field(default_factory=list)
  discriminant: Optional[str] = None
  attrs: List[str] = Field(default_factory=list)

  @model_validator(mode="after")
  def check_style(self) -> "VariantDocument":
    _check_field_style(self.name, self.style, self.fields)
    return self


# --- Members ---


class MethodDocument(BaseModel):
  """A method of an impl block or trait. Required trait methods omit 'body'."""

  kind: Literal["fn"] = "fn"
  name: str
  vis: str = ""
  attrs: List[str] = Field(default_factory=list)
  generics: GenericsDocument = Field(default_factory=GenericsDocument)
  sig: SignatureDocument = Field(default_factory=SignatureDocument)
  body: Optional[List[StmtDocument]] = None
  span: Optional[SpanDocument] = None


class AssocDocument(BaseModel):
  """Associated const, type or macro call, carried verbatim."""

  kind: Literal["const", "type", "macro", "raw"]
  text: str


MemberDocument = Annotated[Union[MethodDocument, AssocDocument], Field(discriminator="kind")]


# --- Items ---


class ItemDocument(BaseModel):
  """Attributes shared by every item."""

  name: str
  vis: str = ""
  attrs: List[str] = Field(default_factory=list)
  generics: GenericsDocument = Field(default_factory=GenericsDocument)
  span: Optional[SpanDocument] = None


class FunctionDocument(ItemDocument):
  kind: Literal["fn"] = "fn"
  sig: SignatureDocument = Field(default_factory=SignatureDocument)
  body: List[StmtDocument] = Field(default_factory=list)


class StructDocument(ItemDocument):
  kind: Literal["struct"] = "struct"
  style: FieldStyle = FieldStyle.UNIT
  fields: List[FieldDocument] = Field(default_factory=list)
  operations: List[MethodDocument] = Field(default_factory=list)

  @model_validator(mode="after")
  def check_style(self) -> "StructDocument":
    _check_field_style(self.name, self.style, self.fields)
    return self


class EnumDocument(ItemDocument):
  kind: Literal["enum"] = "enum"
  variants: List[VariantDocument] = Field(min_length=1)
  operations: List[MethodDocument] = Field(default_factory=list)


class ImplDocument(ItemDocument):
  """An impl block. 'name' is the target type as written, e.g. 'Wrapper<T>'."""

  model_config = ConfigDict(populate_by_name=True)

  kind: Literal["impl"] = "impl"
  trait_ref: Optional[str] = Field(None, alias="trait")
  is_unsafe: bool = Field(False, alias="unsafe")
  members: List[MemberDocument] = Field(default_factory=list)


class TraitDocument(ItemDocument):
  model_config = ConfigDict(populate_by_name=True)

  kind: Literal["trait"] = "trait"
  supertraits: List[str] = Field(default_factory=list)
  is_unsafe: bool = Field(False, alias="unsafe")
  members: List[MemberDocument] = Field(default_factory=list)


class OpaqueDocument(BaseModel):
  """Any other item kind (mod, const, static, type, use, union, macro...)."""

  kind: str
  name: str = ""
  attrs: List[str] = Field(default_factory=list)
  text: str = ""
  span: Optional[SpanDocument] = None


class UnitDocument(BaseModel):
  """
  Top-level document. Items are validated individually so that errors can
  point at the failing index.
  """

  file: str = "<unknown>"
  items: List[Dict[str, Any]] = Field(default_factory=list)
