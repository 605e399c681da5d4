"""
Uniqueness of the parent references attached to a route.
"""
from . import field

SECTION_REQUIRED_MSG = (
    "sectionNames or port must be specified when more than one parentRef "
    "refers to the same parent"
)
SECTION_UNIQUE_MSG = (
    "must be unique when ParentRefs includes 2 or more references to the same parent")


def validate_parent_refs(parent_refs, path):
    """
    Two references to the same parent (name, namespace and kind) must each be
    qualified by a ``sectionName`` or ``port`` and the qualifiers must differ.
    Stops at the first problem found.
    """
    errs = field.ErrorList()
    if len(parent_refs) <= 1:
        return errs
    qualifiers = {}
    for i, parent_ref in enumerate(parent_refs):
        parent = (parent_ref.name, parent_ref.namespace or "", parent_ref.kind or "")
        qualifier = (parent_ref.section_name or "", parent_ref.port or 0)
        section_path = path.child("parentRefs").index(i).child("sectionName")
        if parent not in qualifiers:
            qualifiers[parent] = [qualifier]
            continue
        seen = qualifiers[parent]
        if seen[0] == ("", 0) or qualifier == ("", 0):
            errs.append(field.required(section_path, SECTION_REQUIRED_MSG))
            return errs
        if qualifier in seen:
            errs.append(field.invalid(section_path, parent_ref.section_name, SECTION_UNIQUE_MSG))
            return errs
        seen.append(qualifier)
    return errs
