"""Structured descriptions of generated methods."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from .model import VariantStyle


class MethodKind(str, Enum):
    IS = "is"
    AS = "as"
    AS_MUT = "as_mut"
    INTO = "into"


class Access(str, Enum):
    SHARED = "shared"  # &T
    EXCLUSIVE = "exclusive"  # &mut T
    OWNED = "owned"  # T


class ReturnKind(str, Enum):
    BOOL = "bool"
    OPTIONAL = "optional"
    VALUE = "value"


class PayloadShape(str, Enum):
    SINGLE = "single"
    TUPLE = "tuple"


class BodyKind(str, Enum):
    MATCH_FLAG = "match_flag"  # true iff the variant matches
    MATCH_VIEW = "match_view"  # present(view) / absent
    MATCH_EXTRACT_OR_ABORT = "match_extract_or_abort"  # payload / fatal abort


class TypeRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    token: str
    access: Access

    def __str__(self) -> str:
        if self.access == Access.SHARED:
            return f"&{self.token}"
        if self.access == Access.EXCLUSIVE:
            return f"&mut {self.token}"
        return self.token


class ReturnType(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ReturnKind
    shape: PayloadShape | None = None
    elements: tuple[TypeRef, ...] = ()

    def __str__(self) -> str:
        if self.kind == ReturnKind.BOOL:
            return "bool"
        inner = (
            str(self.elements[0])
            if self.shape == PayloadShape.SINGLE
            else "(" + ", ".join(str(e) for e in self.elements) + ")"
        )
        if self.kind == ReturnKind.OPTIONAL:
            return f"Option<{inner}>"
        return inner


class Param(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type_token: str


class MethodBody(BaseModel):
    """Body pattern: match the receiver against one variant."""

    model_config = ConfigDict(frozen=True)

    kind: BodyKind
    variant: str
    style: VariantStyle
    arity: int = 0
    bindings: tuple[str, ...] = ()
    binding_access: Access = Access.OWNED


class MethodDef(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    kind: MethodKind
    variant: str
    receiver: Access
    params: tuple[Param, ...] = ()
    returns: ReturnType
    body: MethodBody
    doc: str | None = None

    def __str__(self) -> str:
        receiver = {
            Access.SHARED: "&self",
            Access.EXCLUSIVE: "&mut self",
            Access.OWNED: "self",
        }[self.receiver]
        params = ", ".join(
            [receiver] + [f"{p.name}: {p.type_token}" for p in self.params]
        )
        return f"{self.name}({params}) -> {self.returns}"


class MethodBundle(BaseModel):
    """All generated methods for one type, in declaration order."""

    model_config = ConfigDict(frozen=True)

    type_name: str
    generic_params: tuple[str, ...] = ()
    generic_args: tuple[str, ...] = ()
    where_clause: str = ""
    methods: tuple[MethodDef, ...] = ()

    def names(self) -> list[str]:
        return [m.name for m in self.methods]

    def method(self, name: str) -> MethodDef | None:
        return next((m for m in self.methods if m.name == name), None)

    def for_variant(self, variant: str) -> list[MethodDef]:
        return [m for m in self.methods if m.variant == variant]

    def __str__(self) -> str:
        return "\n".join(
            [self.type_name] + [f"  {method}" for method in self.methods]
        )
