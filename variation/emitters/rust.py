"""RustEmitter -- MethodBundle -> `impl` block source text."""

from __future__ import annotations

import logging

from ..bundle import (
    Access,
    BodyKind,
    MethodBody,
    MethodBundle,
    MethodDef,
    PayloadShape,
)
from ..model import VariantStyle
from ._base import Emitter

logger = logging.getLogger(__name__)

INDENT = "    "

_RECEIVERS: dict[Access, str] = {
    Access.SHARED: "&self",
    Access.EXCLUSIVE: "&mut self",
    Access.OWNED: "self",
}

_BINDING_MODES: dict[Access, str] = {
    Access.SHARED: "ref ",
    Access.EXCLUSIVE: "ref mut ",
    Access.OWNED: "",
}


class RustEmitter(Emitter):
    """Serializes a bundle into one ``impl`` block attached to the type.

    Bodies are ``match`` expressions over ``self``; the into-accessor's
    fallback arm is a ``panic!``.
    """

    def emit(self, bundle: MethodBundle) -> str:
        logger.info(
            "Emitting Rust impl for %s (%d methods)",
            bundle.type_name,
            len(bundle.methods),
        )
        methods = "\n\n".join(self._method(bundle, m) for m in bundle.methods)
        return f"{self._header(bundle)} {{\n{methods}\n}}\n"

    def _header(self, bundle: MethodBundle) -> str:
        params = f"<{', '.join(bundle.generic_params)}>" if bundle.generic_params else ""
        args = f"<{', '.join(bundle.generic_args)}>" if bundle.generic_args else ""
        where = f" {bundle.where_clause}" if bundle.where_clause else ""
        return f"impl{params} {bundle.type_name}{args}{where}"

    def _pattern(self, type_name: str, body: MethodBody) -> str:
        path = f"{type_name}::{body.variant}"
        if body.kind == BodyKind.MATCH_FLAG:
            if body.style == VariantStyle.UNIT:
                return path
            return f"{path}({', '.join('_' for _ in range(body.arity))})"
        mode = _BINDING_MODES[body.binding_access]
        return f"{path}({', '.join(mode + b for b in body.bindings)})"

    def _payload(self, method: MethodDef) -> str:
        bindings = method.body.bindings
        if method.returns.shape == PayloadShape.SINGLE:
            return bindings[0]
        return f"({', '.join(bindings)})"

    def _arms(self, bundle: MethodBundle, method: MethodDef) -> list[str]:
        body = method.body
        pattern = self._pattern(bundle.type_name, body)
        if body.kind == BodyKind.MATCH_FLAG:
            return [f"{pattern} => true,", "_ => false,"]
        if body.kind == BodyKind.MATCH_VIEW:
            return [f"{pattern} => Some({self._payload(method)}),", "_ => None,"]
        message = (
            f"called `{bundle.type_name}::{method.name}()` "
            f"on a non-`{body.variant}` variant"
        )
        return [f"{pattern} => {self._payload(method)},", f'_ => panic!("{message}"),']

    def _method(self, bundle: MethodBundle, method: MethodDef) -> str:
        lines: list[str] = []
        if method.doc:
            lines.extend(
                f"/// {line}" if line else "///" for line in method.doc.splitlines()
            )
        params = ", ".join(
            [_RECEIVERS[method.receiver]]
            + [f"{p.name}: {p.type_token}" for p in method.params]
        )
        visibility = f"{self._config.visibility} " if self._config.visibility else ""
        lines.append(f"{visibility}fn {method.name}({params}) -> {method.returns} {{")
        lines.append(f"{INDENT}match self {{")
        lines.extend(f"{INDENT * 2}{arm}" for arm in self._arms(bundle, method))
        lines.append(f"{INDENT}}}")
        lines.append("}")
        return "\n".join(f"{INDENT}{line}" for line in lines)
