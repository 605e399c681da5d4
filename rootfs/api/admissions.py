import logging

from rest_framework.request import Request

from api.serializers.schemas.rules import (
    SCHEMA as RULES_SCHEMA, PARENT_REFS_SCHEMA, HOSTNAMES_SCHEMA)
from api.utils import validate_json
from api.validation import route_from_dict, validate_httproute

logger = logging.getLogger(__name__)

GATEWAY_GROUP = "gateway.networking.k8s.io"
VALIDATED_OPERATIONS = ("CREATE", "UPDATE")


class BaseHandler(object):

    def __init__(self):
        self.message = ""

    def detect(self, request: Request) -> bool:
        raise NotImplementedError()

    def handle(self, request: Request) -> bool:
        raise NotImplementedError()


class HTTPRoutesHandler(BaseHandler):

    def detect(self, request: Request) -> bool:
        group = request.get("resource", {}).get("group", None)
        resource = request.get("resource", {}).get("resource", None)
        if (group, resource) == (GATEWAY_GROUP, "httproutes"):
            return True
        return False

    def handle(self, request: Request) -> bool:
        if request.get("operation") not in VALIDATED_OPERATIONS:
            return True
        obj = request["object"]
        spec = obj.get("spec") or {}
        try:
            validate_json(spec.get("rules"), RULES_SCHEMA, ValueError)
            validate_json(spec.get("parentRefs"), PARENT_REFS_SCHEMA, ValueError)
            validate_json(spec.get("hostnames"), HOSTNAMES_SCHEMA, ValueError)
        except ValueError as e:
            self.message = "spec: {}".format(e)
            return False
        errs = validate_httproute(route_from_dict(obj))
        if errs:
            metadata = obj.get("metadata", {})
            logger.info("rejected httproute %s/%s with %d errors",
                        metadata.get("namespace"), metadata.get("name"), len(errs))
            self.message = "; ".join(errs.messages())
        return not errs
