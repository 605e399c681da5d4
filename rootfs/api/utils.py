"""
Helper functions used by the routecheck server.
"""
import logging
import jsonschema
from rest_framework.exceptions import ValidationError

logger = logging.getLogger(__name__)


def check_schema(schema):
    """
    Raise :class:`jsonschema.SchemaError` unless ``schema`` is a valid schema
    for the draft it declares.
    """
    jsonschema.validators.validator_for(schema).check_schema(schema)


def validate_json(value, schema, raise_exception=ValidationError):
    if value is not None:
        try:
            jsonschema.validate(value, schema)
        except jsonschema.ValidationError as e:
            location = "".join("[%s]" % item for item in e.absolute_path)
            raise raise_exception("could not validate value{}: {}".format(location, e.message))
    return value
