from django.test import override_settings

from api.serializers import RouteSerializer
from api.tests import RoutecheckBaseTestCase


class RouteSerializerTest(RoutecheckBaseTestCase):

    def serializer(self, **data):
        data.setdefault("name", "bookstore")
        return RouteSerializer(data=data)

    def test_valid_route(self):
        serializer = self.serializer(
            hostnames=["shop.example.com"],
            parent_refs=[{"name": "gateway", "sectionName": "http"}],
            rules=self.load_json("rules", "weighted.json"),
        )
        self.assertTrue(serializer.is_valid(), serializer.errors)
        self.assertEqual(serializer.validated_data["kind"], "HTTPRoute")

    def test_invalid_kind(self):
        serializer = self.serializer(kind="GRPCRoute")
        self.assertFalse(serializer.is_valid())
        self.assertIn("kind", serializer.errors)

    def test_invalid_name(self):
        serializer = self.serializer(name="Book_Store")
        self.assertFalse(serializer.is_valid())
        self.assertIn("name", serializer.errors)

    def test_rules_schema_error(self):
        serializer = self.serializer(rules=[{"filters": [{"type": "URLRewrite"}]}])
        self.assertFalse(serializer.is_valid())
        self.assertEqual(
            serializer.errors["rules"],
            ["could not validate value[0][filters][0]: 'urlRewrite' is a required property"])

    def test_conflicting_rules(self):
        serializer = self.serializer(rules=[{
            "filters": [{
                "type": "ResponseHeaderModifier",
                "responseHeaderModifier": {
                    "set": [{"name": "Server", "value": "edge"}],
                    "remove": ["server"],
                },
            }],
        }])
        self.assertFalse(serializer.is_valid())
        self.assertEqual(serializer.errors["rules"], [
            'spec.rules[0].filters[0].responseHeaderModifier.remove: Invalid value: "server": '
            'cannot specify multiple actions for header',
        ])
        self.assertNotIn("parent_refs", serializer.errors)

    def test_conflicting_parent_refs(self):
        serializer = self.serializer(parent_refs=[{"name": "gateway"}, {"name": "gateway"}])
        self.assertFalse(serializer.is_valid())
        self.assertEqual(list(serializer.errors), ["parent_refs"])
        self.assertIn("spec.parentRefs[1].sectionName", serializer.errors["parent_refs"][0])

    @override_settings(ROUTECHECK_MAX_RULES=2)
    def test_rules_limit(self):
        serializer = self.serializer(rules=[{}, {}, {}])
        self.assertFalse(serializer.is_valid())
        self.assertEqual(serializer.errors["rules"], ["a route may have at most 2 rules"])
        self.assertTrue(self.serializer(rules=[{}, {}]).is_valid())
