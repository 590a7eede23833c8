"""PythonEmitter -- MethodBundle -> Python method source text.

The emitted functions operate on ``variation.runtime.TaggedUnion`` values:
``self._variant`` holds the active variant name and ``self._payload`` the
mutable list of payload fields. The text expects ``PayloadRef`` and
``VariantMismatch`` in its globals.
"""

from __future__ import annotations

import logging

from ..bundle import Access, BodyKind, MethodBundle, MethodDef, PayloadShape
from ._base import Emitter

logger = logging.getLogger(__name__)

INDENT = "    "


class PythonEmitter(Emitter):
    def emit(self, bundle: MethodBundle) -> str:
        logger.info(
            "Emitting Python methods for %s (%d methods)",
            bundle.type_name,
            len(bundle.methods),
        )
        return "\n\n".join(self._function(bundle, m) for m in bundle.methods)

    def _docstring(self, method: MethodDef) -> list[str]:
        if not method.doc:
            return []
        doc_lines = method.doc.splitlines()
        if len(doc_lines) == 1:
            return [f'"""{doc_lines[0]}"""']
        return [f'"""{doc_lines[0]}'] + doc_lines[1:] + ['"""']

    def _result(self, method: MethodDef) -> str:
        bindings = method.body.bindings
        if method.returns.shape == PayloadShape.SINGLE:
            return bindings[0]
        return f"({', '.join(bindings)})"

    def _unpack(self, method: MethodDef, source: str) -> str:
        bindings = method.body.bindings
        if len(bindings) == 1:
            return f"({bindings[0]},) = {source}"
        return f"{', '.join(bindings)} = {source}"

    def _statements(self, bundle: MethodBundle, method: MethodDef) -> list[str]:
        body = method.body
        variant = repr(body.variant)
        if body.kind == BodyKind.MATCH_FLAG:
            return ["self._ensure_live()", f"return self._variant == {variant}"]

        guard = [
            "self._ensure_live()",
            f"if self._variant != {variant}:",
        ]
        if body.kind == BodyKind.MATCH_EXTRACT_OR_ABORT:
            mismatch = f"raise VariantMismatch({bundle.type_name!r}, {variant}, self._variant)"
            return guard + [
                f"{INDENT}{mismatch}",
                self._unpack(method, "self._consume()"),
                f"return {self._result(method)}",
            ]

        guard.append(f"{INDENT}return None")
        if body.binding_access == Access.EXCLUSIVE:
            views = [
                f"{binding} = PayloadRef(self, {index})"
                for index, binding in enumerate(body.bindings)
            ]
        else:
            views = [self._unpack(method, "self._payload")]
        return guard + views + [f"return {self._result(method)}"]

    def _function(self, bundle: MethodBundle, method: MethodDef) -> str:
        lines = [f"def {method.name}(self):"]
        lines.extend(f"{INDENT}{line}" for line in self._docstring(method))
        lines.extend(f"{INDENT}{line}" for line in self._statements(bundle, method))
        return "\n".join(lines) + "\n"
