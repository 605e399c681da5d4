"""
Classes to serialize the RESTful representation of routecheck API objects.
"""
import logging
import re

from django.conf import settings
from rest_framework import serializers

from api.utils import validate_json
from api.validation import Path, spec_from_dict, validate_httproute_spec
from .schemas.rules import (
    SCHEMA as RULES_SCHEMA, PARENT_REFS_SCHEMA, HOSTNAMES_SCHEMA)


logger = logging.getLogger(__name__)
ROUTE_KIND_MATCH = re.compile(r'^HTTPRoute$')
ROUTE_KIND_MISMATCH_MSG = (
    "the route kind only supports: %s" % ROUTE_KIND_MATCH.pattern)
ROUTE_NAME_MATCH = re.compile(r'^[a-z0-9]([-a-z0-9]*[a-z0-9])?(\.[a-z0-9]([-a-z0-9]*[a-z0-9])?)*$')
ROUTE_NAME_MISMATCH_MSG = (
    "Route names can only contain a-z (lowercase), 0-9, hyphens and dots")
ROUTE_RULES_LIMIT_MSG = "a route may have at most {} rules"


class RouteSerializer(serializers.Serializer):
    kind = serializers.CharField(max_length=15, required=False, default="HTTPRoute")
    name = serializers.CharField(max_length=253, required=True)
    hostnames = serializers.JSONField(required=False)
    parent_refs = serializers.JSONField(required=False)
    rules = serializers.JSONField(required=False)

    @staticmethod
    def validate_kind(value):
        if not re.match(ROUTE_KIND_MATCH, value):
            raise serializers.ValidationError(ROUTE_KIND_MISMATCH_MSG)
        return value

    @staticmethod
    def validate_name(value):
        if not re.match(ROUTE_NAME_MATCH, value):
            raise serializers.ValidationError(ROUTE_NAME_MISMATCH_MSG)
        return value

    @staticmethod
    def validate_hostnames(value):
        return validate_json(value, HOSTNAMES_SCHEMA, serializers.ValidationError)

    @staticmethod
    def validate_parent_refs(value):
        return validate_json(value, PARENT_REFS_SCHEMA, serializers.ValidationError)

    @staticmethod
    def validate_rules(value):
        validate_json(value, RULES_SCHEMA, serializers.ValidationError)
        if value is not None and len(value) > settings.ROUTECHECK_MAX_RULES:
            raise serializers.ValidationError(
                ROUTE_RULES_LIMIT_MSG.format(settings.ROUTECHECK_MAX_RULES))
        return value

    def validate(self, attrs):
        spec = spec_from_dict({
            "hostnames": attrs.get("hostnames"),
            "parentRefs": attrs.get("parent_refs"),
            "rules": attrs.get("rules"),
        })
        errors = {}
        for error in validate_httproute_spec(spec, Path.new("spec")):
            key = "parent_refs" if error.field.startswith("spec.parentRefs") else "rules"
            errors.setdefault(key, []).append(str(error))
        if errors:
            logger.debug("route %s failed validation: %s", attrs.get("name"), errors)
            raise serializers.ValidationError(errors)
        return attrs
