"""
Consistency checks for HTTPRoute rules that a JSON schema cannot express.

Every check appends to an :class:`~api.validation.field.ErrorList` and never
raises; a route is valid when the returned list is empty.
"""
import logging
import string
from collections import Counter

from . import field
from .parentrefs import validate_parent_refs
from .types import (
    FILTER_REQUEST_HEADER_MODIFIER, FILTER_RESPONSE_HEADER_MODIFIER,
    FILTER_REQUEST_REDIRECT, FILTER_URL_REWRITE,
)

logger = logging.getLogger(__name__)

MULTIPLE_ACTIONS_MSG = "cannot specify multiple actions for header"
REDIRECT_AND_REWRITE_MSG = (
    "may specify either httpRouteFilterRequestRedirect or "
    "httpRouteFilterRequestRewrite, but not both"
)
DUPLICATE_HEADER_MATCH_MSG = "cannot match the same header multiple times in the same rule"
DUPLICATE_QUERY_PARAM_MATCH_MSG = (
    "cannot match the same query parameter multiple times in the same rule")

TOKEN_CHARS = frozenset(string.ascii_letters + string.digits + "!#$%&'*+-.^_`|~")


def header_identity(name):
    # Header names are case-insensitive.
    return name.lower()


def query_param_identity(name):
    # Query parameter names are case-sensitive.
    return name


def canonical_header_key(name):
    """
    Return the canonical MIME form of a header name: the first letter and any
    letter following a hyphen upper case, the rest lower case.

    >>> canonical_header_key("x-forwarded-for")
    'X-Forwarded-For'
    >>> canonical_header_key("bad header")
    'bad header'
    """
    if not name or any(c not in TOKEN_CHARS for c in name):
        return name
    chars, upper = [], True
    for c in name:
        chars.append(c.upper() if upper else c.lower())
        upper = c == "-"
    return "".join(chars)


def validate_httproute(route, parent_refs_validator=validate_parent_refs):
    """Validate a whole HTTPRoute object, reporting paths under ``spec``."""
    return validate_httproute_spec(
        route.spec, field.Path.new("spec"), parent_refs_validator)


def validate_httproute_spec(spec, path, parent_refs_validator=validate_parent_refs):
    errs = field.ErrorList()
    for i, rule in enumerate(spec.rules):
        rule_path = path.child("rules").index(i)
        errs.extend(validate_httproute_filters(rule.filters, rule_path))
        for j, backend_ref in enumerate(rule.backend_refs):
            errs.extend(validate_httproute_filters(
                backend_ref.filters, rule_path.child("backendRefs").index(j)))
        for j, match in enumerate(rule.matches):
            match_path = rule_path.child("matches").index(j)
            if len(match.headers) > 0:
                errs.extend(validate_header_matches(
                    match.headers, match_path.child("headers")))
            if len(match.query_params) > 0:
                errs.extend(validate_query_param_matches(
                    match.query_params, match_path.child("queryParams")))
    errs.extend(parent_refs_validator(spec.parent_refs, path))
    logger.debug("validated %d rules under %s: %d errors", len(spec.rules), path, len(errs))
    return errs


def validate_httproute_filters(filters, path):
    """
    Validate one filter list: a request may not be both redirected and
    rewritten, and each header modifier must act at most once per header.
    """
    errs = field.ErrorList()
    counts = Counter()
    for i, route_filter in enumerate(filters):
        counts[route_filter.type] += 1
        filter_path = path.child("filters").index(i)
        if route_filter.type == FILTER_REQUEST_HEADER_MODIFIER:
            if route_filter.request_header_modifier is not None:
                errs.extend(validate_header_modifier(
                    route_filter.request_header_modifier,
                    filter_path.child("requestHeaderModifier")))
        elif route_filter.type == FILTER_RESPONSE_HEADER_MODIFIER:
            if route_filter.response_header_modifier is not None:
                errs.extend(validate_header_modifier(
                    route_filter.response_header_modifier,
                    filter_path.child("responseHeaderModifier")))
        # other kinds only contribute to the counts

    if counts[FILTER_REQUEST_REDIRECT] > 0 and counts[FILTER_URL_REWRITE] > 0:
        errs.append(field.invalid(
            path.child("filters"), FILTER_REQUEST_REDIRECT, REDIRECT_AND_REWRITE_MSG))
    return errs


def validate_header_modifier(modifier, path):
    """
    Report each header name that receives more than one action.

    A name seen once is pending; its next occurrence in ``add``, ``set`` or
    ``remove`` is reported at that list and clears it, later ones are ignored.
    """
    errs = field.ErrorList()
    pending = {}
    actions = (
        ("add", [(header.name, header) for header in modifier.add]),
        ("set", [(header.name, header) for header in modifier.set]),
        ("remove", [(name, name) for name in modifier.remove]),
    )
    for list_name, entries in actions:
        for name, entry in entries:
            key = header_identity(name)
            if key not in pending:
                pending[key] = True
            elif pending[key]:
                errs.append(field.invalid(path.child(list_name), entry, MULTIPLE_ACTIONS_MSG))
                pending[key] = False
    return errs


def validate_unique_names(names, path, identity, display, detail):
    """
    Report every name occurring more than once under ``identity``, once per
    name, in order of first occurrence.
    """
    errs = field.ErrorList()
    counts = Counter(identity(name) for name in names)
    for key, count in counts.items():
        if count > 1:
            errs.append(field.invalid(path, display(key), detail))
    return errs


def validate_header_matches(matches, path):
    return validate_unique_names(
        [match.name for match in matches], path,
        header_identity, canonical_header_key, DUPLICATE_HEADER_MATCH_MSG)


def validate_query_param_matches(matches, path):
    return validate_unique_names(
        [match.name for match in matches], path,
        query_param_identity, str, DUPLICATE_QUERY_PARAM_MATCH_MSG)
