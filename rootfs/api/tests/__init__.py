import json
import logging
import os
import unittest
from os.path import dirname, realpath

from django.test.runner import DiscoverRunner
from rest_framework.test import APISimpleTestCase


# Root of the test directory (for files and such)
TEST_ROOT = dirname(realpath(__file__))


class SilentDjangoTestSuiteRunner(DiscoverRunner):
    """Prevents api log messages from cluttering the console during tests."""

    def run_tests(self, test_labels, **kwargs):
        """Run tests with all but critical log messages disabled."""
        # hide any log messages less than critical
        logging.disable(logging.ERROR)
        return super(SilentDjangoTestSuiteRunner, self).run_tests(
            test_labels, **kwargs)


class RoutecheckBaseTestCase(unittest.TestCase):

    def load_json(self, *parts):
        with open(os.path.join(TEST_ROOT, *parts)) as f:
            return json.loads(f.read())

    def admission_review(self, name):
        return self.load_json("admissions", name)

    def assertErrorMessages(self, errs, expected):
        self.assertEqual([str(error) for error in errs], expected, errs)


class RoutecheckTestCase(RoutecheckBaseTestCase, APISimpleTestCase):
    pass
