"""Tests for role tokens and the role classifier."""

from enum import Enum

import pytest
from conftest import STRING, T, plain, ref

from metagraph import (
    AccessorKind,
    AnnotationUsage,
    InMemoryDeclarationModel,
    MethodDeclaration,
    Role,
    RoleClassifier,
    TypeDeclaration,
)
from metagraph.core.roles import as_role, role_field_name


class ForeignRole(Enum):
    NAME = 1
    CUSTOM_THING = 2


def test_role_values_equal_member_names():
    assert Role.TYPE_MEMBER == "TYPE_MEMBER"
    assert {Role.NAME: 1}["NAME"] == 1


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (Role.NAME, Role.NAME),
        ("NAME", Role.NAME),
        (ForeignRole.NAME, Role.NAME),
        (ForeignRole.CUSTOM_THING, "CUSTOM_THING"),
        (None, None),
    ],
)
def test_as_role_normalizes_tokens(raw, expected):
    assert as_role(raw) == expected


def test_unknown_tokens_are_interned():
    a = as_role("".join(["MY", "_ROLE"]))
    b = as_role("MY_ROLE")

    assert a is b


def test_role_field_name_is_camel_case():
    assert role_field_name(Role.NAME) == "name"
    assert role_field_name(Role.TYPE_MEMBER) == "typeMember"
    assert role_field_name("IS_FINAL") == "isFinal"


@pytest.fixture
def hierarchy():
    """Base declares annotated accessors, Middle and Leaf override without annotations."""
    model = InMemoryDeclarationModel()
    base = model.add_type(TypeDeclaration.interface("m.Base"))
    base.add_method(MethodDeclaration.getter("getName", STRING, Role.NAME))
    base.add_method(MethodDeclaration.setter("setName", STRING, Role.NAME, T))
    middle = model.add_type(TypeDeclaration.interface("m.Middle", extends=(base.reference(),)))
    leaf = model.add_type(TypeDeclaration.klass("m.Leaf", implements=(middle.reference(),)))
    leaf_getter = leaf.add_method(plain("getName", STRING))
    leaf_setter = leaf.add_method(plain("setName", T, STRING))
    leaf_other = leaf.add_method(plain("getDisplayName", STRING))
    return model, base, middle, leaf, leaf_getter, leaf_setter, leaf_other


def test_direct_getter_annotation(hierarchy):
    model, base, *_ = hierarchy
    classifier = RoleClassifier(model)

    accessor = classifier.classify(base.methods[0])

    assert accessor is not None
    assert accessor.role is Role.NAME
    assert accessor.kind is AccessorKind.GETTER
    assert accessor.method is base.methods[0]


def test_direct_setter_annotation(hierarchy):
    model, base, *_ = hierarchy
    classifier = RoleClassifier(model)

    accessor = classifier.classify(base.methods[1])

    assert accessor is not None
    assert accessor.kind is AccessorKind.SETTER


def test_role_inherited_through_multiple_levels(hierarchy):
    model, _, _, _, leaf_getter, leaf_setter, _ = hierarchy
    classifier = RoleClassifier(model)

    getter = classifier.classify(leaf_getter)
    setter = classifier.classify(leaf_setter)

    assert classifier.role_of(leaf_getter) is Role.NAME
    assert getter is not None and getter.kind is AccessorKind.GETTER
    assert getter.method is leaf_getter
    assert setter is not None and setter.kind is AccessorKind.SETTER


def test_unannotated_method_has_no_role(hierarchy):
    model, *_, leaf_other = hierarchy

    assert RoleClassifier(model).role_of(leaf_other) is None


def test_direct_getter_wins_over_setter_annotation():
    iface = TypeDeclaration.interface("m.Odd")
    method = iface.add_method(
        MethodDeclaration(
            "value",
            STRING,
            (),
            (
                AnnotationUsage("spoon.reflect.annotations.PropertySetter", {"role": "VALUE"}),
                AnnotationUsage("spoon.reflect.annotations.PropertyGetter", {"role": "NAME"}),
            ),
        )
    )
    model = InMemoryDeclarationModel([iface])

    accessor = RoleClassifier(model).classify(method)

    assert accessor is not None
    assert accessor.role is Role.NAME
    assert accessor.kind is AccessorKind.GETTER


def test_annotation_without_role_is_ignored():
    iface = TypeDeclaration.interface("m.Odd")
    method = iface.add_method(
        MethodDeclaration(
            "getX", STRING, (), (AnnotationUsage("spoon.reflect.annotations.PropertyGetter"),)
        )
    )

    assert RoleClassifier(InMemoryDeclarationModel([iface])).role_of(method) is None


def test_signature_mismatch_not_inherited():
    model = InMemoryDeclarationModel()
    base = model.add_type(TypeDeclaration.interface("m.Base"))
    base.add_method(MethodDeclaration.setter("setName", STRING, Role.NAME))
    sub = model.add_type(TypeDeclaration.interface("m.Sub", extends=(base.reference(),)))
    overload = sub.add_method(plain("setName", None, ref("java.lang.Object")))

    assert RoleClassifier(model).role_of(overload) is None


def test_unresolvable_supertypes_are_skipped():
    model = InMemoryDeclarationModel()
    iface = model.add_type(
        TypeDeclaration.interface("m.Foo", extends=(ref("java.lang.Cloneable"),))
    )
    method = iface.add_method(plain("clone", ref("m.Foo")))
    classifier = RoleClassifier(model)

    assert classifier.role_of(method) is None
    assert classifier.supertype_closure(iface) == ()


def test_supertype_closure_is_breadth_first_and_unique(spoon_model):
    classifier = RoleClassifier(spoon_model)
    method_impl = spoon_model.get_type("spoon.support.reflect.declaration.CtMethodImpl")

    names = [t.simple_name for t in classifier.supertype_closure(method_impl)]

    assert names[:2] == ["CtNamedElementImpl", "CtMethod"]
    assert len(names) == len(set(names))
    assert set(names) == {
        "CtNamedElementImpl",
        "CtMethod",
        "CtElementImpl",
        "CtNamedElement",
        "CtModifiable",
        "CtElement",
    }


def test_supertype_closure_terminates_on_cycles():
    model = InMemoryDeclarationModel()
    a = model.add_type(TypeDeclaration.interface("m.A", extends=(ref("m.B"),)))
    b = model.add_type(TypeDeclaration.interface("m.B", extends=(ref("m.A"),)))
    classifier = RoleClassifier(model)

    assert classifier.supertype_closure(a) == (b,)
    assert classifier.supertype_closure(b) == (a,)


def test_supertype_closure_is_memoized(spoon_model):
    classifier = RoleClassifier(spoon_model)
    named = spoon_model.get_type("spoon.reflect.declaration.CtNamedElement")

    assert classifier.supertype_closure(named) is classifier.supertype_closure(named)
    assert classifier.depth_of(named) == 1
