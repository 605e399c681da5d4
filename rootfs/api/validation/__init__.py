"""
Semantic validation of Gateway API HTTPRoute objects.
"""
from .field import ErrorList, FieldError, Path  # noqa
from .httproute import validate_httproute, validate_httproute_spec  # noqa
from .parentrefs import validate_parent_refs  # noqa
from .types import route_from_dict, spec_from_dict  # noqa
