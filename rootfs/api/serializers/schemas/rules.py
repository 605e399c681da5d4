from api.validation import types

HEADER_NAME_REGEX = r"^[A-Za-z0-9!#$%&'*+\-.^_\x60|~]+$"
HOSTNAME_REGEX = r'^(\*\.)?[a-z0-9]([-a-z0-9]*[a-z0-9])?(\.[a-z0-9]([-a-z0-9]*[a-z0-9])?)*$'
PATH_MATCH_TYPES = (types.MATCH_EXACT, types.MATCH_PATH_PREFIX, types.MATCH_REGULAR_EXPRESSION)
VALUE_MATCH_TYPES = (types.MATCH_EXACT, types.MATCH_REGULAR_EXPRESSION)
PORT_SCHEMA = {"type": "integer", "minimum": 1, "maximum": 65535}
HEADER_NAME_SCHEMA = {
    "type": "string", "minLength": 1, "maxLength": 256, "pattern": HEADER_NAME_REGEX,
}
HTTP_HEADER_SCHEMA = {
    "type": "object",
    "properties": {
        "name": HEADER_NAME_SCHEMA,
        "value": {"type": "string", "minLength": 1, "maxLength": 4096},
    },
    "required": ["name", "value"],
}
HEADER_FILTER_SCHEMA = {
    "type": "object",
    "properties": {
        "add": {"type": "array", "maxItems": 16, "items": HTTP_HEADER_SCHEMA},
        "set": {"type": "array", "maxItems": 16, "items": HTTP_HEADER_SCHEMA},
        "remove": {"type": "array", "maxItems": 16, "items": HEADER_NAME_SCHEMA},
    },
}
PATH_MODIFIER_SCHEMA = {
    "type": "object",
    "properties": {
        "type": {"enum": list(types.PATH_MODIFIER_TYPES)},
        "replaceFullPath": {"type": "string", "maxLength": 1024},
        "replacePrefixMatch": {"type": "string", "maxLength": 1024},
    },
    "required": ["type"],
}
BACKEND_OBJECT_REF_PROPERTIES = {
    "group": {"type": "string", "maxLength": 253},
    "kind": {"type": "string", "minLength": 1, "maxLength": 63},
    "name": {"type": "string", "minLength": 1, "maxLength": 253},
    "namespace": {"type": "string", "minLength": 1, "maxLength": 63},
    "port": PORT_SCHEMA,
}
# payload key carried by each filter kind
FILTER_PAYLOADS = {
    types.FILTER_REQUEST_HEADER_MODIFIER: "requestHeaderModifier",
    types.FILTER_RESPONSE_HEADER_MODIFIER: "responseHeaderModifier",
    types.FILTER_REQUEST_REDIRECT: "requestRedirect",
    types.FILTER_URL_REWRITE: "urlRewrite",
    types.FILTER_REQUEST_MIRROR: "requestMirror",
    types.FILTER_EXTENSION_REF: "extensionRef",
}
FILTER_SCHEMA = {
    "type": "object",
    "properties": {
        "type": {"enum": list(types.FILTER_TYPES)},
        "requestHeaderModifier": HEADER_FILTER_SCHEMA,
        "responseHeaderModifier": HEADER_FILTER_SCHEMA,
        "requestRedirect": {
            "type": "object",
            "properties": {
                "scheme": {"enum": ["http", "https"]},
                "hostname": {"type": "string", "pattern": HOSTNAME_REGEX},
                "path": PATH_MODIFIER_SCHEMA,
                "port": PORT_SCHEMA,
                "statusCode": {"enum": [301, 302]},
            },
        },
        "urlRewrite": {
            "type": "object",
            "properties": {
                "hostname": {"type": "string", "pattern": HOSTNAME_REGEX},
                "path": PATH_MODIFIER_SCHEMA,
            },
        },
        "requestMirror": {
            "type": "object",
            "properties": {
                "backendRef": {
                    "type": "object",
                    "properties": BACKEND_OBJECT_REF_PROPERTIES,
                    "required": ["name"],
                },
            },
            "required": ["backendRef"],
        },
        "extensionRef": {
            "type": "object",
            "properties": {
                "group": {"type": "string", "maxLength": 253},
                "kind": {"type": "string", "minLength": 1, "maxLength": 63},
                "name": {"type": "string", "minLength": 1, "maxLength": 253},
            },
            "required": ["group", "kind", "name"],
        },
    },
    "required": ["type"],
    # a filter carries the payload named by its type
    "allOf": [
        {
            "if": {"properties": {"type": {"const": kind}}, "required": ["type"]},
            "then": {"required": [payload]},
        } for kind, payload in FILTER_PAYLOADS.items()
    ],
}
FILTERS_SCHEMA = {"type": "array", "maxItems": 16, "items": FILTER_SCHEMA}
MATCH_SCHEMA = {
    "type": "object",
    "properties": {
        "path": {
            "type": "object",
            "properties": {
                "type": {"enum": list(PATH_MATCH_TYPES)},
                "value": {"type": "string", "maxLength": 1024},
            },
        },
        "headers": {
            "type": "array",
            "maxItems": 16,
            "items": {
                "type": "object",
                "properties": {
                    "type": {"enum": list(VALUE_MATCH_TYPES)},
                    "name": HEADER_NAME_SCHEMA,
                    "value": {"type": "string", "maxLength": 4096},
                },
                "required": ["name", "value"],
            },
        },
        "queryParams": {
            "type": "array",
            "maxItems": 16,
            "items": {
                "type": "object",
                "properties": {
                    "type": {"enum": list(VALUE_MATCH_TYPES)},
                    "name": {"type": "string", "minLength": 1, "maxLength": 256},
                    "value": {"type": "string", "minLength": 1, "maxLength": 1024},
                },
                "required": ["name", "value"],
            },
        },
        "method": {
            "enum": [
                "GET", "HEAD", "POST", "PUT", "DELETE", "CONNECT", "OPTIONS", "TRACE", "PATCH",
            ],
        },
    },
}
BACKEND_REF_SCHEMA = {
    "type": "object",
    "properties": dict(
        BACKEND_OBJECT_REF_PROPERTIES,
        weight={"type": "integer", "minimum": 0, "maximum": 1000000},
        filters=FILTERS_SCHEMA,
    ),
    "required": ["name"],
}
SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "description": "Rules are a list of HTTP matchers, filters and actions.",
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            "matches": {"type": "array", "maxItems": 64, "items": MATCH_SCHEMA},
            "filters": FILTERS_SCHEMA,
            "backendRefs": {"type": "array", "maxItems": 16, "items": BACKEND_REF_SCHEMA},
        },
    },
}
PARENT_REFS_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "array",
    "maxItems": 32,
    "items": {
        "type": "object",
        "properties": {
            "group": {"type": "string", "maxLength": 253},
            "kind": {"type": "string", "minLength": 1, "maxLength": 63},
            "namespace": {"type": "string", "minLength": 1, "maxLength": 63},
            "name": {"type": "string", "minLength": 1, "maxLength": 253},
            "sectionName": {"type": "string", "minLength": 1, "maxLength": 253},
            "port": PORT_SCHEMA,
        },
        "required": ["name"],
    },
}
HOSTNAMES_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "array",
    "maxItems": 16,
    "items": {"type": "string", "minLength": 1, "maxLength": 253, "pattern": HOSTNAME_REGEX},
}
