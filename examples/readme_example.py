from metagraph import (
    InMemoryDeclarationModel,
    MethodDeclaration,
    Role,
    SpoonMetaModel,
    TypeDeclaration,
    TypeReference,
)

API = "spoon.reflect.declaration"
IMPL = "spoon.support.reflect.declaration"

STRING = TypeReference("java.lang.String")


def build_model() -> InMemoryDeclarationModel:
    """A named element and a method, each with an implementation class."""
    model = InMemoryDeclarationModel()
    for package in ("code", "reference"):
        model.add_package(f"spoon.reflect.{package}")
        model.add_package(f"spoon.support.reflect.{package}")

    named = model.add_type(
        TypeDeclaration.interface(
            f"{API}.CtNamedElement", extends=(TypeReference("java.lang.Cloneable"),)
        )
    )
    named.add_method(MethodDeclaration.getter("getSimpleName", STRING, Role.NAME))
    named.add_method(MethodDeclaration.setter("setSimpleName", STRING, Role.NAME))

    method = model.add_type(
        TypeDeclaration.interface(f"{API}.CtMethod", extends=(named.reference(),))
    )
    method.add_method(
        MethodDeclaration.getter(
            "getParameters",
            TypeReference("java.util.List", (TypeReference(f"{API}.CtParameter"),)),
            Role.PARAMETER,
        )
    )

    named_impl = model.add_type(
        TypeDeclaration.klass(f"{IMPL}.CtNamedElementImpl", implements=(named.reference(),))
    )
    named_impl.add_method(MethodDeclaration("getSimpleName", STRING))
    model.add_type(
        TypeDeclaration.klass(
            f"{IMPL}.CtMethodImpl", named_impl.reference(), (method.reference(),)
        )
    )
    return model


if __name__ == "__main__":
    meta = SpoonMetaModel(build_model())
    for mm_type in meta:
        supers = ", ".join(t.name for t in mm_type.super_types) or "-"
        print(f"{mm_type.name} (extends {supers})")
        for field in mm_type.fields.values():
            print(f"  {field.name}: {field.value_type} [{len(field.methods)} accessors]")
