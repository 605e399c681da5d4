"""
RESTful view classes for validating Gateway API routes.
"""
import json
import logging

import jsonschema
from django.conf import settings
from django.http import HttpResponse
from django.views.generic import View
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from api import admissions, serializers, utils
from api.exceptions import ServiceUnavailable
from api.serializers.schemas.rules import (
    SCHEMA as RULES_SCHEMA, PARENT_REFS_SCHEMA, HOSTNAMES_SCHEMA)

logger = logging.getLogger(__name__)


class ReadinessCheckView(View):
    """
    Simple readiness check view to determine the route schemas are usable.
    """

    def get(self, request):
        try:
            for schema in (RULES_SCHEMA, PARENT_REFS_SCHEMA, HOSTNAMES_SCHEMA):
                utils.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ServiceUnavailable("Route schema check failed") from e

        return HttpResponse("OK")
    head = get


class LivenessCheckView(View):
    """
    Simple liveness check view to determine if the server
    is responding to HTTP requests.
    """

    def get(self, request):
        return HttpResponse("OK")
    head = get


class AdmissionWebhookViewSet(GenericViewSet):

    admission_classes = (
        admissions.HTTPRoutesHandler,
    )
    permission_classes = (AllowAny, )

    def handle(self, request, **kwargs):
        key = kwargs['key']
        data = json.loads(request.body.decode("utf8"))["request"]
        result = {"uid": data["uid"]}
        if settings.ADMISSION_KEY == key:
            allowed = True
            for admission_class in self.admission_classes:
                admission = admission_class()
                if admission.detect(data):
                    allowed = admission.handle(data)
                    if not allowed:
                        result["status"] = {
                            "code": status.HTTP_422_UNPROCESSABLE_ENTITY,
                            "message": admission.message,
                        }
                    break
        else:
            logger.warning("admission request %s used an unknown key", data["uid"])
            allowed = False
            result["status"] = {
                "code": status.HTTP_403_FORBIDDEN,
                "message": "unknown admission key",
            }
        result["allowed"] = allowed
        return Response({
            "apiVersion": "admission.k8s.io/v1",
            "kind": "AdmissionReview",
            "response": result,
        })


class HTTPRouteViewSet(GenericViewSet):

    serializer_class = serializers.RouteSerializer
    permission_classes = (AllowAny, )

    def validate(self, request, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return Response(serializer.data, status=status.HTTP_200_OK)
