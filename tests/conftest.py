"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from metagraph import (
    InMemoryDeclarationModel,
    MethodDeclaration,
    Role,
    TypeDeclaration,
    TypeReference,
)

API = "spoon.reflect"
IMPL = "spoon.support.reflect"

STRING = TypeReference("java.lang.String")
T = TypeReference.variable("T")


def ref(qualified_name: str, *args: TypeReference) -> TypeReference:
    return TypeReference(qualified_name, tuple(args))


def list_of(item: TypeReference) -> TypeReference:
    return ref("java.util.List", item)


def set_of(item: TypeReference) -> TypeReference:
    return ref("java.util.Set", item)


def plain(name: str, returns: TypeReference | None = None, *params: TypeReference):
    """Method without accessor annotations."""
    return MethodDeclaration(name, returns, tuple(params))


def build_spoon_model() -> InMemoryDeclarationModel:
    """Small Spoon-shaped model: API interfaces plus *Impl classes.

    CtElement <- CtNamedElement <- CtType, CtMethod (also CtModifiable)
    CtElement <- CtComment
    CtElement <- CtReference <- CtTypeReference
    CtModifiable has no implementation class.
    """
    model = InMemoryDeclarationModel()
    element = ref(f"{API}.declaration.CtElement")
    named = ref(f"{API}.declaration.CtNamedElement")
    comment = ref(f"{API}.code.CtComment")
    modifiable = ref(f"{API}.declaration.CtModifiable")
    method = ref(f"{API}.declaration.CtMethod")
    ctype = ref(f"{API}.declaration.CtType")
    reference = ref(f"{API}.reference.CtReference")
    type_ref = ref(f"{API}.reference.CtTypeReference")

    # API interfaces
    iface = model.add_type(
        TypeDeclaration.interface(
            element.qualified_name,
            extends=(ref("java.lang.Cloneable"), ref("spoon.reflect.visitor.CtVisitable")),
        )
    )
    iface.add_method(MethodDeclaration.getter("getComments", list_of(comment), Role.COMMENT))
    iface.add_method(MethodDeclaration.setter("setComments", list_of(comment), Role.COMMENT, T))
    iface.add_method(plain("getParent", element))

    iface = model.add_type(TypeDeclaration.interface(comment.qualified_name, extends=(element,)))
    iface.add_method(MethodDeclaration.getter("getContent", STRING, Role.COMMENT_CONTENT))
    iface.add_method(MethodDeclaration.setter("setContent", STRING, Role.COMMENT_CONTENT, T))

    iface = model.add_type(TypeDeclaration.interface(named.qualified_name, extends=(element,)))
    iface.add_method(MethodDeclaration.getter("getSimpleName", STRING, Role.NAME))
    iface.add_method(MethodDeclaration.setter("setSimpleName", STRING, Role.NAME, T))

    iface = model.add_type(TypeDeclaration.interface(modifiable.qualified_name))
    iface.add_method(
        MethodDeclaration.getter(
            "getModifiers", set_of(ref(f"{API}.declaration.ModifierKind")), Role.MODIFIER
        )
    )

    iface = model.add_type(
        TypeDeclaration.interface(method.qualified_name, extends=(named, modifiable))
    )
    iface.add_method(MethodDeclaration.getter("getType", type_ref, Role.TYPE))
    iface.add_method(MethodDeclaration.setter("setType", type_ref, Role.TYPE, T))

    iface = model.add_type(TypeDeclaration.interface(ctype.qualified_name, extends=(named,)))
    iface.add_method(MethodDeclaration.getter("getMethods", set_of(method), Role.METHOD))

    iface = model.add_type(TypeDeclaration.interface(reference.qualified_name, extends=(element,)))
    iface.add_method(MethodDeclaration.getter("getSimpleName", STRING, Role.NAME))

    model.add_type(TypeDeclaration.interface(type_ref.qualified_name, extends=(reference,)))

    # Implementation classes
    element_impl = ref(f"{IMPL}.declaration.CtElementImpl")
    named_impl = ref(f"{IMPL}.declaration.CtNamedElementImpl")
    reference_impl = ref(f"{IMPL}.reference.CtReferenceImpl")

    cls = model.add_type(
        TypeDeclaration.klass(
            element_impl.qualified_name, implements=(element, ref("java.io.Serializable"))
        )
    )
    cls.add_method(plain("getComments", list_of(comment)))
    cls.add_method(plain("setComments", T, list_of(comment)))
    cls.add_method(plain("toString", STRING))

    cls = model.add_type(
        TypeDeclaration.klass(f"{IMPL}.code.CtCommentImpl", element_impl, (comment,))
    )
    cls.add_method(plain("getContent", STRING))

    cls = model.add_type(TypeDeclaration.klass(named_impl.qualified_name, element_impl, (named,)))
    cls.add_method(plain("getSimpleName", STRING))
    cls.add_method(plain("setSimpleName", T, STRING))

    cls = model.add_type(
        TypeDeclaration.klass(f"{IMPL}.declaration.CtMethodImpl", named_impl, (method,))
    )
    cls.add_method(plain("getType", type_ref))
    cls.add_method(plain("setType", T, type_ref))
    cls.add_method(plain("isOverriding", ref("boolean"), method))

    cls = model.add_type(TypeDeclaration.klass(f"{IMPL}.declaration.CtTypeImpl", named_impl, (ctype,)))
    cls.add_method(plain("getMethods", set_of(method)))

    cls = model.add_type(
        TypeDeclaration.klass(reference_impl.qualified_name, element_impl, (reference,))
    )
    cls.add_method(plain("getSimpleName", STRING))

    model.add_type(
        TypeDeclaration.klass(f"{IMPL}.reference.CtTypeReferenceImpl", reference_impl, (type_ref,))
    )
    return model


@pytest.fixture
def spoon_model() -> InMemoryDeclarationModel:
    """Fresh Spoon-shaped declaration model."""
    return build_spoon_model()


def empty_model() -> InMemoryDeclarationModel:
    """Model with all default API and implementation packages but no types."""
    model = InMemoryDeclarationModel()
    for package in ("code", "declaration", "reference"):
        model.add_package(f"{API}.{package}")
        model.add_package(f"{IMPL}.{package}")
    return model


@pytest.fixture
def bare_model() -> InMemoryDeclarationModel:
    return empty_model()
