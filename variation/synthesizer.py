"""Method synthesis — TaggedUnionDef → MethodBundle."""

from __future__ import annotations

import logging

from .bundle import (
    Access,
    BodyKind,
    MethodBody,
    MethodBundle,
    MethodDef,
    MethodKind,
    PayloadShape,
    ReturnKind,
    ReturnType,
    TypeRef,
)
from .config import GeneratorConfig
from .describe import VariantDescription, describe
from .errors import NameCollision, UnsupportedDefinitionKind
from .model import Definition, TaggedUnionDef, VariantDef, VariantStyle
from .naming import OperationNames, derive_names
from . import constants

logger = logging.getLogger(__name__)


def _bindings(arity: int) -> tuple[str, ...]:
    return tuple(f"{constants.BINDING_PREFIX}{i}" for i in range(arity))


def _payload_return(
    kind: ReturnKind, desc: VariantDescription, access: Access
) -> ReturnType:
    """Single view/value for arity 1, ordered tuple for arity >= 2."""
    shape = PayloadShape.SINGLE if desc.arity == 1 else PayloadShape.TUPLE
    return ReturnType(
        kind=kind,
        shape=shape,
        elements=tuple(TypeRef(token=t, access=access) for t in desc.field_types),
    )


def _is_check(desc: VariantDescription, names: OperationNames) -> MethodDef:
    return MethodDef(
        name=names.is_name,
        kind=MethodKind.IS,
        variant=desc.variant,
        receiver=Access.SHARED,
        returns=ReturnType(kind=ReturnKind.BOOL),
        body=MethodBody(
            kind=BodyKind.MATCH_FLAG,
            variant=desc.variant,
            style=desc.style,
            arity=desc.arity,
            bindings=(),
        ),
    )


def _view_accessor(
    desc: VariantDescription, name: str, kind: MethodKind, access: Access
) -> MethodDef:
    return MethodDef(
        name=name,
        kind=kind,
        variant=desc.variant,
        receiver=access,
        returns=_payload_return(ReturnKind.OPTIONAL, desc, access),
        body=MethodBody(
            kind=BodyKind.MATCH_VIEW,
            variant=desc.variant,
            style=desc.style,
            arity=desc.arity,
            bindings=_bindings(desc.arity),
            binding_access=access,
        ),
    )


def _into_accessor(
    desc: VariantDescription, names: OperationNames, config: GeneratorConfig
) -> MethodDef:
    doc = (
        f"{constants.INTO_DOC}\n\n{constants.INTO_PANICS_DOC}"
        if config.emit_docs
        else None
    )
    return MethodDef(
        name=names.into_name,
        kind=MethodKind.INTO,
        variant=desc.variant,
        receiver=Access.OWNED,
        returns=_payload_return(ReturnKind.VALUE, desc, Access.OWNED),
        body=MethodBody(
            kind=BodyKind.MATCH_EXTRACT_OR_ABORT,
            variant=desc.variant,
            style=desc.style,
            arity=desc.arity,
            bindings=_bindings(desc.arity),
            binding_access=Access.OWNED,
        ),
        doc=doc,
    )


def synthesize_variant(
    variant: VariantDef,
    type_name: str = "",
    config: GeneratorConfig = GeneratorConfig(),
) -> list[MethodDef]:
    """Generate the methods for a single variant.

    Arity-0 variants only get the is-check; every other variant also gets
    the as, as-mut and into accessors.
    """
    if variant.style == VariantStyle.STRUCT:
        raise UnsupportedDefinitionKind(
            type_name,
            f"variant '{variant.name}' has named fields; "
            "only unit and tuple variants are supported",
        )
    names = derive_names(variant.name, type_name)
    desc = describe(variant)
    methods = [_is_check(desc, names)]
    if desc.arity > 0:
        methods.append(
            _view_accessor(desc, names.as_name, MethodKind.AS, Access.SHARED)
        )
        methods.append(
            _view_accessor(
                desc, names.as_mut_name, MethodKind.AS_MUT, Access.EXCLUSIVE
            )
        )
        methods.append(_into_accessor(desc, names, config))
    return methods


def synthesize(
    definition: Definition, config: GeneratorConfig = GeneratorConfig()
) -> MethodBundle:
    """Generate the accessor bundle for a tagged-union definition.

    Args:
        definition: The parsed type definition.
        config: Generation settings.

    Returns:
        A MethodBundle with the methods of every variant, in declaration
        order.

    Raises:
        UnsupportedDefinitionKind: If *definition* is not a tagged union or
            has a struct-like variant.
        InvalidVariantName: If a variant name yields no valid method name.
        NameCollision: If two variants derive the same method name.
    """
    if not isinstance(definition, TaggedUnionDef):
        raise UnsupportedDefinitionKind(
            definition.name,
            f"expected a tagged union, got a {definition.kind} definition",
        )
    logger.info(
        "Synthesizing accessors for %s (%d variants)",
        definition.name,
        len(definition.variants),
    )
    owners: dict[str, str] = {}
    methods: list[MethodDef] = []
    for variant in definition.variants:
        for method in synthesize_variant(variant, definition.name, config):
            if method.name in owners:
                raise NameCollision(
                    definition.name, method.name, owners[method.name], variant.name
                )
            owners[method.name] = variant.name
            methods.append(method)
        logger.debug(
            "Variant %s::%s (arity %d) done",
            definition.name,
            variant.name,
            variant.arity,
        )
    return MethodBundle(
        type_name=definition.name,
        generic_params=definition.generic_params,
        generic_args=definition.generic_args,
        where_clause=definition.where_clause,
        methods=tuple(methods),
    )
