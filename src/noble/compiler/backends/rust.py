"""
Rust Backend.

Serializes a compilation unit back into Rust source text. Each item is emitted
at its original position; items are separated by a blank line.

Formatting follows rustfmt conventions closely enough for readable output but
does not attempt to reflow long lines.
"""

from typing import Callable, Dict, List, Optional

from noble.compiler.backend import CompilerBackend
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
  Param,
  RawStmt,
  Signature,
  Stmt,
  SumType,
  UnsafeBlock,
  Variant,
)
from noble.enums import FieldStyle, GenericKind, ItemKind


def _vis(vis: str) -> str:
  return f"{vis} " if vis else ""


def render_generics(generics: Generics, with_defaults: bool = True) -> str:
  """
  Renders a generic parameter list for a declaration.

  Args:
      generics (Generics): The parameters.
      with_defaults (bool): Include ``= Default`` arguments. Impl headers must not.

  Returns:
      str: e.g. ``<'a, T: Clone, const N: usize>`` or an empty string.
  """
  if not generics.params:
    return ""
  parts = []
  for p in generics.params:
    if p.kind == GenericKind.CONST:
      text = f"const {p.name}: {p.const_type}"
    else:
      text = p.name
      if p.bounds:
        text += ": " + " + ".join(p.bounds)
    if with_defaults and p.default is not None:
      text += f" = {p.default}"
    parts.append(text)
  return "<" + ", ".join(parts) + ">"


def render_type_args(generics: Generics) -> str:
  """
  Renders the generic arguments used to name the type, e.g. ``<'a, T, N>``.
  """
  if not generics.params:
    return ""
  return "<" + ", ".join(p.name for p in generics.params) + ">"


def render_where(generics: Generics) -> str:
  if not generics.where_clauses:
    return ""
  return " where " + ", ".join(generics.where_clauses)


def render_params(params: List[Param]) -> str:
  return ", ".join(p.name if p.is_receiver else f"{p.name}: {p.ty}" for p in params)


def render_signature(name: str, vis: str, generics: Generics, sig: Signature) -> str:
  """
  Renders a function header without body: ``pub const unsafe fn f<T>(x: T) -> T where ..``.
  """
  q = sig.qualifiers
  head = _vis(vis)
  if q.is_const:
    head += "const "
  if q.is_async:
    head += "async "
  if q.is_unsafe:
    head += "unsafe "
  if q.abi is not None:
    head += f'extern "{q.abi}" '
  ret = f" -> {sig.ret}" if sig.ret else ""
  return f"{head}fn {name}{render_generics(generics)}({render_params(sig.params)}){ret}{render_where(generics)}"


def render_construct(node: Construct) -> str:
  """
  Renders a constructor expression (``Self { a, b }``, ``Self(field_0)``, ``Self``).
  """
  if node.style == FieldStyle.NAMED:
    if not node.fields:
      return f"{node.path} {{}}"
    inits = [f if f == a else f"{f}: {a}" for f, a in zip(node.fields, node.args)]
    return f"{node.path} {{ {', '.join(inits)} }}"
  if node.style == FieldStyle.POSITIONAL:
    return f"{node.path}({', '.join(node.args)})"
  return node.path


class _Writer:
  """Line buffer with indentation tracking."""

  def __init__(self, indent: str) -> None:
    self.indent = indent
    self.level = 0
    self.lines: List[str] = []

  def line(self, text: str = "") -> None:
    if not text:
      self.lines.append("")
      return
    for part in text.splitlines():
      self.lines.append(f"{self.indent * self.level}{part}" if part else "")

  def text(self) -> str:
    return "\n".join(self.lines)


class RustBackend(CompilerBackend):
  """
  Emits Rust source text for a compilation unit.
  """

  def __init__(self, indent_width: int = 4) -> None:
    self.indent = " " * indent_width
    self._emitters: Dict[ItemKind, Callable[[_Writer, Item], None]] = {
      ItemKind.FUNCTION: self._emit_function,
      ItemKind.DATA_RECORD: self._emit_record,
      ItemKind.OPERATION_GROUP: self._emit_group,
      ItemKind.SUM_TYPE: self._emit_sum_type,
      ItemKind.CONTRACT: self._emit_contract,
    }
    missing = set(ItemKind) - set(self._emitters)
    if missing:
      raise RuntimeError(f"RustBackend cannot emit item kinds: {sorted(k.value for k in missing)}")

  def compile(self, unit: CompilationUnit) -> str:
    """
    Renders every item of the unit, in order.

    Args:
        unit (CompilationUnit): The (expanded) unit.

    Returns:
        str: Rust source text ending with a newline.
    """
    chunks = [self.emit_item(item) for item in unit.items]
    return "\n\n".join(chunks) + "\n" if chunks else ""

  def emit_item(self, item: Item) -> str:
    """
    Renders a single item.

    Args:
        item (Item): Any item, including opaque ones.

    Returns:
        str: Rust source text without trailing newline.
    """
    w = _Writer(self.indent)
    if isinstance(item, OpaqueItem):
      self._emit_attrs(w, item.attrs)
      w.line(item.text)
    else:
      self._emitters[item.KIND](w, item)
    return w.text()

  # --- Items ---

  def _emit_attrs(self, w: _Writer, attrs: List[str]) -> None:
    for attr in attrs:
      w.line(attr)

  def _emit_function(self, w: _Writer, item: Function) -> None:
    self._emit_attrs(w, item.attrs)
    header = render_signature(item.name, item.vis, item.generics, item.sig)
    self._emit_block(w, header, item.body)

  def _emit_record(self, w: _Writer, item: DataRecord) -> None:
    self._emit_attrs(w, item.attrs)
    head = f"{_vis(item.vis)}struct {item.name}{render_generics(item.generics)}"
    where = render_where(item.generics)

    if item.style == FieldStyle.NAMED:
      w.line(f"{head}{where} {{")
      w.level += 1
      for f in item.fields:
        self._emit_named_field(w, f)
      w.level -= 1
      w.line("}")
    elif item.style == FieldStyle.POSITIONAL:
      w.line(f"{head}({self._positional_fields(item.fields)}){where};")
    else:
      w.line(f"{head}{where};")

    self._emit_operations(w, item, item.operations)

  def _emit_sum_type(self, w: _Writer, item: SumType) -> None:
    self._emit_attrs(w, item.attrs)
    w.line(f"{_vis(item.vis)}enum {item.name}{render_generics(item.generics)}{render_where(item.generics)} {{")
    w.level += 1
    for v in item.variants:
      self._emit_variant(w, v)
    w.level -= 1
    w.line("}")
    self._emit_operations(w, item, item.operations)

  def _emit_group(self, w: _Writer, item: OperationGroup) -> None:
    self._emit_attrs(w, item.attrs)
    head = "unsafe impl" if item.is_unsafe else "impl"
    head += render_generics(item.generics, with_defaults=False)
    target = f"{item.trait_ref} for {item.name}" if item.trait_ref else item.name
    self._emit_members(w, f"{head} {target}{render_where(item.generics)}", item.members)

  def _emit_contract(self, w: _Writer, item: Contract) -> None:
    self._emit_attrs(w, item.attrs)
    head = f"{_vis(item.vis)}{'unsafe ' if item.is_unsafe else ''}trait {item.name}"
    head += render_generics(item.generics)
    if item.supertraits:
      head += ": " + " + ".join(item.supertraits)
    self._emit_members(w, head + render_where(item.generics), item.members)

  # --- Pieces ---

  def _emit_operations(self, w: _Writer, item: Item, operations: List[Method]) -> None:
    if not operations:
      return
    impl_head = f"impl{render_generics(item.generics, with_defaults=False)} {item.name}"
    impl_head += render_type_args(item.generics) + render_where(item.generics)
    w.line()
    self._emit_members(w, impl_head, operations)

  def _emit_members(self, w: _Writer, header: str, members: List[Member]) -> None:
    if not members:
      w.line(f"{header} {{}}")
      return
    w.line(f"{header} {{")
    w.level += 1
    for idx, member in enumerate(members):
      if idx:
        w.line()
      if isinstance(member, AssocItem):
        w.line(member.text)
      else:
        self._emit_method(w, member)
    w.level -= 1
    w.line("}")

  def _emit_method(self, w: _Writer, method: Method) -> None:
    self._emit_attrs(w, method.attrs)
    header = render_signature(method.name, method.vis, method.generics, method.sig)
    if method.body is None:
      w.line(f"{header};")
    else:
      self._emit_block(w, header, method.body)

  def _emit_named_field(self, w: _Writer, f: Field) -> None:
    self._emit_attrs(w, f.attrs)
    w.line(f"{_vis(f.vis)}{f.name}: {f.ty},")

  def _positional_fields(self, fields: List[Field]) -> str:
    return ", ".join(" ".join([*f.attrs, f"{_vis(f.vis)}{f.ty}"]) for f in fields)

  def _emit_variant(self, w: _Writer, v: Variant) -> None:
    self._emit_attrs(w, v.attrs)
    disc = f" = {v.discriminant}" if v.discriminant is not None else ""
    if v.style == FieldStyle.NAMED:
      w.line(f"{v.name} {{")
      w.level += 1
      for f in v.fields:
        self._emit_named_field(w, f)
      w.level -= 1
      w.line(f"}}{disc},")
    elif v.style == FieldStyle.POSITIONAL:
      w.line(f"{v.name}({self._positional_fields(v.fields)}){disc},")
    else:
      w.line(f"{v.name}{disc},")

  def _emit_block(self, w: _Writer, header: Optional[str], block: Block) -> None:
    prefix = f"{header} " if header else ""
    if not block.stmts:
      w.line(f"{prefix}{{}}")
      return
    w.line(f"{prefix}{{")
    w.level += 1
    for stmt in block.stmts:
      self._emit_stmt(w, stmt)
    w.level -= 1
    w.line("}")

  def _emit_stmt(self, w: _Writer, stmt: Stmt) -> None:
    if isinstance(stmt, UnsafeBlock):
      self._emit_block(w, "unsafe", stmt.body)
    elif isinstance(stmt, Construct):
      w.line(render_construct(stmt))
    elif isinstance(stmt, RawStmt):
      w.line(stmt.text)
    else:
      raise TypeError(f"Cannot emit statement of type {type(stmt).__name__}")
