"""
Read-only model of a Gateway API ``HTTPRoute`` spec.

Routes are stored and exchanged as JSON documents with camelCase keys; the
``from_dict`` helpers turn such a document into the tuples the validators walk.
Unknown keys are ignored, structural checks belong to the JSON schema.
"""
from typing import NamedTuple, Optional, Tuple

FILTER_REQUEST_HEADER_MODIFIER = "RequestHeaderModifier"
FILTER_RESPONSE_HEADER_MODIFIER = "ResponseHeaderModifier"
FILTER_REQUEST_REDIRECT = "RequestRedirect"
FILTER_URL_REWRITE = "URLRewrite"
FILTER_REQUEST_MIRROR = "RequestMirror"
FILTER_EXTENSION_REF = "ExtensionRef"
FILTER_TYPES = (
    FILTER_REQUEST_HEADER_MODIFIER,
    FILTER_RESPONSE_HEADER_MODIFIER,
    FILTER_REQUEST_REDIRECT,
    FILTER_URL_REWRITE,
    FILTER_REQUEST_MIRROR,
    FILTER_EXTENSION_REF,
)

PATH_MODIFIER_FULL_PATH = "ReplaceFullPath"
PATH_MODIFIER_PREFIX_MATCH = "ReplacePrefixMatch"
PATH_MODIFIER_TYPES = (PATH_MODIFIER_FULL_PATH, PATH_MODIFIER_PREFIX_MATCH)

MATCH_EXACT = "Exact"
MATCH_PATH_PREFIX = "PathPrefix"
MATCH_REGULAR_EXPRESSION = "RegularExpression"


class HTTPHeader(NamedTuple):
    name: str
    value: str = ""

    def __repr__(self):
        """Render as `{Name: n, Value: v}`, the struct form shown in invalid value errors."""
        return "{Name: %s, Value: %s}" % (self.name, self.value)


class HTTPHeaderFilter(NamedTuple):
    add: Tuple[HTTPHeader, ...] = ()
    set: Tuple[HTTPHeader, ...] = ()
    remove: Tuple[str, ...] = ()


class HTTPPathModifier(NamedTuple):
    type: str
    replace_full_path: Optional[str] = None
    replace_prefix_match: Optional[str] = None


class HTTPRequestRedirectFilter(NamedTuple):
    scheme: Optional[str] = None
    hostname: Optional[str] = None
    path: Optional[HTTPPathModifier] = None
    port: Optional[int] = None
    status_code: Optional[int] = None


class HTTPURLRewriteFilter(NamedTuple):
    hostname: Optional[str] = None
    path: Optional[HTTPPathModifier] = None


class BackendObjectReference(NamedTuple):
    name: str
    group: Optional[str] = None
    kind: Optional[str] = None
    namespace: Optional[str] = None
    port: Optional[int] = None


class HTTPRequestMirrorFilter(NamedTuple):
    backend_ref: BackendObjectReference


class LocalObjectReference(NamedTuple):
    group: str
    kind: str
    name: str


class HTTPRouteFilter(NamedTuple):
    """
    Tagged variant: ``type`` names the kind, only the matching payload is set.
    """
    type: str
    request_header_modifier: Optional[HTTPHeaderFilter] = None
    response_header_modifier: Optional[HTTPHeaderFilter] = None
    request_redirect: Optional[HTTPRequestRedirectFilter] = None
    url_rewrite: Optional[HTTPURLRewriteFilter] = None
    request_mirror: Optional[HTTPRequestMirrorFilter] = None
    extension_ref: Optional[LocalObjectReference] = None


class HTTPPathMatch(NamedTuple):
    type: str = MATCH_PATH_PREFIX
    value: str = "/"


class HTTPHeaderMatch(NamedTuple):
    name: str
    value: str = ""
    type: str = MATCH_EXACT


class HTTPQueryParamMatch(NamedTuple):
    name: str
    value: str = ""
    type: str = MATCH_EXACT


class HTTPRouteMatch(NamedTuple):
    path: Optional[HTTPPathMatch] = None
    headers: Tuple[HTTPHeaderMatch, ...] = ()
    query_params: Tuple[HTTPQueryParamMatch, ...] = ()
    method: Optional[str] = None


class HTTPBackendRef(NamedTuple):
    name: str
    group: Optional[str] = None
    kind: Optional[str] = None
    namespace: Optional[str] = None
    port: Optional[int] = None
    weight: Optional[int] = None
    filters: Tuple[HTTPRouteFilter, ...] = ()


class HTTPRouteRule(NamedTuple):
    matches: Tuple[HTTPRouteMatch, ...] = ()
    filters: Tuple[HTTPRouteFilter, ...] = ()
    backend_refs: Tuple[HTTPBackendRef, ...] = ()


class ParentReference(NamedTuple):
    name: str
    group: Optional[str] = None
    kind: Optional[str] = None
    namespace: Optional[str] = None
    section_name: Optional[str] = None
    port: Optional[int] = None


class HTTPRouteSpec(NamedTuple):
    parent_refs: Tuple[ParentReference, ...] = ()
    hostnames: Tuple[str, ...] = ()
    rules: Tuple[HTTPRouteRule, ...] = ()


class HTTPRoute(NamedTuple):
    name: str
    namespace: Optional[str]
    spec: HTTPRouteSpec


def _optional(data, key, parse):
    value = data.get(key)
    if value is None:
        return None
    return parse(value)


def _items(data, key, parse):
    return tuple(parse(item) for item in data.get(key) or ())


def header_from_dict(data):
    return HTTPHeader(name=data["name"], value=data.get("value", ""))


def header_filter_from_dict(data):
    return HTTPHeaderFilter(
        add=_items(data, "add", header_from_dict),
        set=_items(data, "set", header_from_dict),
        remove=tuple(data.get("remove") or ()),
    )


def path_modifier_from_dict(data):
    return HTTPPathModifier(
        type=data["type"],
        replace_full_path=data.get("replaceFullPath"),
        replace_prefix_match=data.get("replacePrefixMatch"),
    )


def backend_object_reference_from_dict(data):
    return BackendObjectReference(
        name=data["name"],
        group=data.get("group"),
        kind=data.get("kind"),
        namespace=data.get("namespace"),
        port=data.get("port"),
    )


def filter_from_dict(data):
    return HTTPRouteFilter(
        type=data["type"],
        request_header_modifier=_optional(
            data, "requestHeaderModifier", header_filter_from_dict),
        response_header_modifier=_optional(
            data, "responseHeaderModifier", header_filter_from_dict),
        request_redirect=_optional(data, "requestRedirect", lambda item: HTTPRequestRedirectFilter(
            scheme=item.get("scheme"),
            hostname=item.get("hostname"),
            path=_optional(item, "path", path_modifier_from_dict),
            port=item.get("port"),
            status_code=item.get("statusCode"),
        )),
        url_rewrite=_optional(data, "urlRewrite", lambda item: HTTPURLRewriteFilter(
            hostname=item.get("hostname"),
            path=_optional(item, "path", path_modifier_from_dict),
        )),
        request_mirror=_optional(data, "requestMirror", lambda item: HTTPRequestMirrorFilter(
            backend_ref=backend_object_reference_from_dict(item["backendRef"]),
        )),
        extension_ref=_optional(data, "extensionRef", lambda item: LocalObjectReference(
            group=item.get("group", ""), kind=item["kind"], name=item["name"],
        )),
    )


def match_from_dict(data):
    return HTTPRouteMatch(
        path=_optional(data, "path", lambda item: HTTPPathMatch(
            type=item.get("type", MATCH_PATH_PREFIX), value=item.get("value", "/"))),
        headers=_items(data, "headers", lambda item: HTTPHeaderMatch(
            name=item["name"], value=item.get("value", ""), type=item.get("type", MATCH_EXACT))),
        query_params=_items(data, "queryParams", lambda item: HTTPQueryParamMatch(
            name=item["name"], value=item.get("value", ""), type=item.get("type", MATCH_EXACT))),
        method=data.get("method"),
    )


def backend_ref_from_dict(data):
    return HTTPBackendRef(
        name=data["name"],
        group=data.get("group"),
        kind=data.get("kind"),
        namespace=data.get("namespace"),
        port=data.get("port"),
        weight=data.get("weight"),
        filters=_items(data, "filters", filter_from_dict),
    )


def rule_from_dict(data):
    return HTTPRouteRule(
        matches=_items(data, "matches", match_from_dict),
        filters=_items(data, "filters", filter_from_dict),
        backend_refs=_items(data, "backendRefs", backend_ref_from_dict),
    )


def parent_ref_from_dict(data):
    return ParentReference(
        name=data["name"],
        group=data.get("group"),
        kind=data.get("kind"),
        namespace=data.get("namespace"),
        section_name=data.get("sectionName"),
        port=data.get("port"),
    )


def spec_from_dict(data):
    return HTTPRouteSpec(
        parent_refs=_items(data, "parentRefs", parent_ref_from_dict),
        hostnames=tuple(data.get("hostnames") or ()),
        rules=_items(data, "rules", rule_from_dict),
    )


def route_from_dict(data):
    metadata = data.get("metadata") or {}
    return HTTPRoute(
        name=metadata.get("name", ""),
        namespace=metadata.get("namespace"),
        spec=spec_from_dict(data.get("spec") or {}),
    )
