"""
Item Document Backend.

Serializes an expanded compilation unit back into the JSON item document
format read by `noble.compiler.frontends.document`, so that host tooling can
consume the expansion without parsing Rust.
"""

import json
from typing import Any, Callable, Dict, List

from pydantic import BaseModel

from noble.compiler.backend import CompilerBackend
from noble.compiler.frontends.schema import (
  AssocDocument,
  ConstructDocument,
  ConstructStmtDocument,
  EnumDocument,
  FieldDocument,
  FunctionDocument,
  GenericParamDocument,
  GenericsDocument,
  ImplDocument,
  MethodDocument,
  OpaqueDocument,
  ParamDocument,
  SignatureDocument,
  SpanDocument,
  StmtDocument,
  StructDocument,
  TraitDocument,
  UnsafeStmtDocument,
  VariantDocument,
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
  Generics,
  Item,
  Member,
  Method,
  OpaqueItem,
  OperationGroup,
  RawStmt,
  Signature,
  Span,
  Stmt,
  SumType,
  UnsafeBlock,
)
from noble.enums import ItemKind


class DocumentBackend(CompilerBackend):
  """
  Emits a JSON item document.
  """

  def __init__(self, indent_width: int = 2) -> None:
    self.indent_width = indent_width
    self._raisers: Dict[ItemKind, Callable[[Any, Dict[str, Any]], BaseModel]] = {
      ItemKind.FUNCTION: self._function,
      ItemKind.DATA_RECORD: self._record,
      ItemKind.OPERATION_GROUP: self._group,
      ItemKind.SUM_TYPE: self._sum_type,
      ItemKind.CONTRACT: self._contract,
    }
    missing = set(ItemKind) - set(self._raisers)
    if missing:
      raise RuntimeError(f"DocumentBackend cannot emit item kinds: {sorted(k.value for k in missing)}")

  def compile(self, unit: CompilationUnit) -> str:
    """
    Serializes the unit to a JSON string.

    Args:
        unit (CompilationUnit): The unit to emit.

    Returns:
        str: The JSON document, newline terminated.
    """
    return json.dumps(self.to_data(unit), indent=self.indent_width) + "\n"

  def to_data(self, unit: CompilationUnit) -> Dict[str, Any]:
    """
    Converts the unit into plain JSON-compatible data.

    Returns:
        Dict[str, Any]: ``{"file": ..., "items": [...]}``.
    """
    items = [self.item_document(item).model_dump(mode="json", by_alias=True, exclude_none=True) for item in unit.items]
    return {"file": unit.file, "items": items}

  def item_document(self, item: Item) -> BaseModel:
    """Builds the schema model for one item."""
    if isinstance(item, OpaqueItem):
      return OpaqueDocument(kind=item.kind, name=item.name, attrs=list(item.attrs), text=item.text, span=_span(item.span))

    common = dict(
      name=item.name,
      vis=item.vis,
      attrs=list(item.attrs),
      generics=_generics(item.generics),
      span=_span(item.span),
    )
    return self._raisers[item.KIND](item, common)

  # --- Per kind ---

  def _function(self, item: Function, common: Dict[str, Any]) -> BaseModel:
    return FunctionDocument(**common, sig=_signature(item.sig), body=_block(item.body))

  def _record(self, item: DataRecord, common: Dict[str, Any]) -> BaseModel:
    return StructDocument(
      **common,
      style=item.style,
      fields=_fields(item.fields),
      operations=[_method(m) for m in item.operations],
    )

  def _sum_type(self, item: SumType, common: Dict[str, Any]) -> BaseModel:
    variants = [
      VariantDocument(
        name=v.name,
        style=v.style,
        fields=_fields(v.fields),
        discriminant=v.discriminant,
        attrs=list(v.attrs),
      )
      for v in item.variants
    ]
    return EnumDocument(**common, variants=variants, operations=[_method(m) for m in item.operations])

  def _group(self, item: OperationGroup, common: Dict[str, Any]) -> BaseModel:
    return ImplDocument(
      **common,
      trait_ref=item.trait_ref,
      is_unsafe=item.is_unsafe,
      members=[_member(m) for m in item.members],
    )

  def _contract(self, item: Contract, common: Dict[str, Any]) -> BaseModel:
    return TraitDocument(
      **common,
      supertraits=list(item.supertraits),
      is_unsafe=item.is_unsafe,
      members=[_member(m) for m in item.members],
    )


# --- Helpers ---


def _span(span: Span) -> SpanDocument:
  return SpanDocument(
    file=span.file,
    line=span.line,
    column=span.column,
    end_line=span.end_line,
    end_column=span.end_column,
  )


def _generics(generics: Generics) -> GenericsDocument:
  params = [
    GenericParamDocument(name=p.name, kind=p.kind, bounds=list(p.bounds), const_type=p.const_type, default=p.default)
    for p in generics.params
  ]
  return GenericsDocument(params=params, where=list(generics.where_clauses))


def _signature(sig: Signature) -> SignatureDocument:
  q = sig.qualifiers
  return SignatureDocument(
    params=[ParamDocument(name=p.name, ty=p.ty) for p in sig.params],
    ret=sig.ret,
    is_const=q.is_const,
    is_async=q.is_async,
    is_unsafe=q.is_unsafe,
    abi=q.abi,
  )


def _fields(fields: List[Field]) -> List[FieldDocument]:
  return [FieldDocument(ty=f.ty, name=f.name, vis=f.vis, attrs=list(f.attrs)) for f in fields]


def _stmt(stmt: Stmt) -> StmtDocument:
  if isinstance(stmt, RawStmt):
    return stmt.text
  if isinstance(stmt, UnsafeBlock):
    return UnsafeStmtDocument(unsafe=_block(stmt.body))
  if isinstance(stmt, Construct):
    construction = ConstructDocument(path=stmt.path, style=stmt.style, fields=list(stmt.fields), args=list(stmt.args))
    return ConstructStmtDocument(construction=construction)
  raise TypeError(f"Cannot serialize statement of type {type(stmt).__name__}")


def _block(block: Block) -> List[StmtDocument]:
  return [_stmt(s) for s in block.stmts]


def _method(method: Method) -> MethodDocument:
  return MethodDocument(
    name=method.name,
    vis=method.vis,
    attrs=list(method.attrs),
    generics=_generics(method.generics),
    sig=_signature(method.sig),
    body=_block(method.body) if method.body is not None else None,
    span=_span(method.span),
  )


def _member(member: Member) -> Any:
  if isinstance(member, AssocItem):
    return AssocDocument(kind=member.kind, text=member.text)
  return _method(member)
