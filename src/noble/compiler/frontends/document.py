"""
Item Document Frontend.

Decodes item documents (see `noble.compiler.frontends.schema`) into the item
model. Each item is validated on its own so that a failure reports the index
of the offending item.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ValidationError

from noble.compiler.frontends.schema import (
  AssocDocument,
  ConstructStmtDocument,
  EnumDocument,
  FieldDocument,
  FunctionDocument,
  GenericsDocument,
  ImplDocument,
  MethodDocument,
  OpaqueDocument,
  SignatureDocument,
  SpanDocument,
  StmtDocument,
  StructDocument,
  TraitDocument,
  UnitDocument,
  UnsafeStmtDocument,
)
from noble.compiler.ir import (
  AssocItem,
  Block,
  CompilationUnit,
  Construct,
  Contract,
  DataRecord,
  Field,
  Function,
  GenericParam,
  Generics,
  Item,
  Member,
  Method,
  OpaqueItem,
  OperationGroup,
  Param,
  Qualifiers,
  RawStmt,
  Signature,
  Span,
  Stmt,
  SumType,
  UnsafeBlock,
  Variant,
)
from noble.errors import DocumentError

logger = logging.getLogger(__name__)

_ITEM_SCHEMAS: Dict[str, Type[BaseModel]] = {
  "fn": FunctionDocument,
  "struct": StructDocument,
  "impl": ImplDocument,
  "enum": EnumDocument,
  "trait": TraitDocument,
}


def load_unit(text: str, file_name: Optional[str] = None) -> CompilationUnit:
  """
  Parses a JSON item document.

  Args:
      text (str): The document contents.
      file_name (Optional[str]): Fallback file name when the document has none.

  Returns:
      CompilationUnit: The decoded unit.

  Raises:
      DocumentError: If the JSON is invalid or an item fails validation.
  """
  try:
    raw = json.loads(text)
  except json.JSONDecodeError as e:
    raise DocumentError(f"invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})")

  return load_unit_data(raw, file_name)


def load_unit_file(path: Path) -> CompilationUnit:
  """Reads and decodes an item document from disk."""
  return load_unit(path.read_text(encoding="utf-8"), file_name=str(path))


def load_unit_data(raw: Any, file_name: Optional[str] = None) -> CompilationUnit:
  """
  Decodes an already parsed document.

  Args:
      raw (Any): The JSON value (expected to be an object).
      file_name (Optional[str]): Fallback file name.

  Returns:
      CompilationUnit: The decoded unit.

  Raises:
      DocumentError: On schema violations.
  """
  try:
    doc = UnitDocument.model_validate(raw)
  except ValidationError as e:
    raise DocumentError(_first_error(e))

  file = doc.file if "file" in doc.model_fields_set else (file_name or doc.file)
  items = [lower_item(entry, file, f"items[{idx}]") for idx, entry in enumerate(doc.items)]
  logger.debug("Loaded %d items from %s", len(items), file)
  return CompilationUnit(file=file, items=items)


def lower_item(raw: Dict[str, Any], file: str = "<unknown>", location: str = "") -> Item:
  """
  Validates one raw item and converts it to the item model.

  Args:
      raw (Dict[str, Any]): The JSON object for the item.
      file (str): File name used for spans without an explicit file.
      location (str): Pointer used in error messages.

  Returns:
      Item: The decoded item. Unknown kinds become `OpaqueItem`.

  Raises:
      DocumentError: If the item is malformed.
  """
  kind = raw.get("kind")
  if not isinstance(kind, str) or not kind:
    raise DocumentError("missing item 'kind'", location)

  schema = _ITEM_SCHEMAS.get(kind, OpaqueDocument)
  try:
    doc = schema.model_validate(raw)
  except ValidationError as e:
    raise DocumentError(_first_error(e), location)

  span = _span(doc.span, file)

  if isinstance(doc, OpaqueDocument):
    return OpaqueItem(name=doc.name, attrs=list(doc.attrs), span=span, kind=doc.kind, text=doc.text)

  common = dict(
    name=doc.name,
    vis=doc.vis,
    attrs=list(doc.attrs),
    generics=_generics(doc.generics),
    span=span,
  )

  if isinstance(doc, FunctionDocument):
    return Function(**common, sig=_signature(doc.sig), body=_block(doc.body))

  if isinstance(doc, StructDocument):
    return DataRecord(
      **common,
      style=doc.style,
      fields=_fields(doc.fields),
      operations=[_method(m, file) for m in doc.operations],
    )

  if isinstance(doc, EnumDocument):
    variants = [
      Variant(
        name=v.name,
        style=v.style,
        fields=_fields(v.fields),
        discriminant=v.discriminant,
        attrs=list(v.attrs),
      )
      for v in doc.variants
    ]
    return SumType(**common, variants=variants, operations=[_method(m, file) for m in doc.operations])

  if isinstance(doc, ImplDocument):
    return OperationGroup(
      **common,
      trait_ref=doc.trait_ref,
      is_unsafe=doc.is_unsafe,
      members=[_member(m, file) for m in doc.members],
    )

  return Contract(
    **common,
    supertraits=list(doc.supertraits),
    is_unsafe=doc.is_unsafe,
    members=[_member(m, file) for m in doc.members],
  )


# --- Helpers ---


def _first_error(e: ValidationError) -> str:
  err = e.errors()[0]
  loc = ".".join(str(p) for p in err.get("loc", ()))
  return f"{loc}: {err['msg']}" if loc else err["msg"]


def _span(doc: Optional[SpanDocument], file: str) -> Span:
  if doc is None:
    return Span(file=file)
  return Span(
    file=doc.file or file,
    line=doc.line,
    column=doc.column,
    end_line=doc.end_line,
    end_column=doc.end_column,
  )


def _generics(doc: GenericsDocument) -> Generics:
  params = [
    GenericParam(name=p.name, kind=p.kind, bounds=list(p.bounds), const_type=p.const_type, default=p.default)
    for p in doc.params
  ]
  return Generics(params=params, where_clauses=list(doc.where))


def _signature(doc: SignatureDocument) -> Signature:
  return Signature(
    params=[Param(name=p.name, ty=p.ty) for p in doc.params],
    ret=doc.ret,
    qualifiers=Qualifiers(is_const=doc.is_const, is_async=doc.is_async, is_unsafe=doc.is_unsafe, abi=doc.abi),
  )


def _fields(docs: List[FieldDocument]) -> List[Field]:
  return [Field(ty=f.ty, name=f.name, index=idx, vis=f.vis, attrs=list(f.attrs)) for idx, f in enumerate(docs)]


def _stmt(doc: StmtDocument) -> Stmt:
  if isinstance(doc, str):
    return RawStmt(text=doc)
  if isinstance(doc, UnsafeStmtDocument):
    return UnsafeBlock(body=_block(doc.unsafe))
  if isinstance(doc, ConstructStmtDocument):
    c = doc.construction
    return Construct(path=c.path, style=c.style, fields=list(c.fields), args=list(c.args))
  raise TypeError(f"Unexpected statement document: {doc!r}")


def _block(docs: List[StmtDocument]) -> Block:
  return Block(stmts=[_stmt(d) for d in docs])


def _method(doc: MethodDocument, file: str) -> Method:
  return Method(
    name=doc.name,
    vis=doc.vis,
    attrs=list(doc.attrs),
    generics=_generics(doc.generics),
    sig=_signature(doc.sig),
    body=_block(doc.body) if doc.body is not None else None,
    span=_span(doc.span, file),
  )


def _member(doc: Any, file: str) -> Member:
  if isinstance(doc, AssocDocument):
    return AssocItem(text=doc.text, kind=doc.kind)
  return _method(doc, file)
