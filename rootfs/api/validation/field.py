"""
Field paths and errors used to report route validation problems.

A path renders as ``spec.rules[0].matches[0].headers`` and an error renders as
``<path>: Invalid value: "<value>": <detail>``.
"""
import json

ERROR_TYPE_INVALID = "FieldValueInvalid"
ERROR_TYPE_REQUIRED = "FieldValueRequired"

ERROR_TYPE_LABELS = {
    ERROR_TYPE_INVALID: "Invalid value",
    ERROR_TYPE_REQUIRED: "Required value",
}


class Path(object):
    """An immutable locator of a field inside an object."""

    __slots__ = ("name", "index_", "parent")

    def __init__(self, name, index_=None, parent=None):
        self.name = name
        self.index_ = index_
        self.parent = parent

    @classmethod
    def new(cls, name, *more):
        path = cls(name)
        for item in more:
            path = path.child(item)
        return path

    def child(self, name, *more):
        path = Path(name, parent=self)
        for item in more:
            path = path.child(item)
        return path

    def index(self, index):
        return Path(None, index_=index, parent=self)

    def __str__(self):
        elems = []
        path = self
        while path is not None:
            if path.name is not None:
                elems.append(("." if path.parent is not None else "") + path.name)
            else:
                elems.append("[%s]" % path.index_)
            path = path.parent
        return "".join(reversed(elems))

    def __repr__(self):
        return "Path(%r)" % str(self)

    def __eq__(self, other):
        return isinstance(other, Path) and str(self) == str(other)

    def __hash__(self):
        return hash(str(self))


def format_value(value):
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return json.dumps(value)
    return repr(value)


class FieldError(object):

    __slots__ = ("type", "field", "bad_value", "detail")

    def __init__(self, type_, field, bad_value, detail):
        self.type = type_
        self.field = str(field)
        self.bad_value = bad_value
        self.detail = detail

    def body(self):
        label = ERROR_TYPE_LABELS[self.type]
        if self.type == ERROR_TYPE_INVALID:
            label = "%s: %s" % (label, format_value(self.bad_value))
        if self.detail:
            label = "%s: %s" % (label, self.detail)
        return label

    def __str__(self):
        return "%s: %s" % (self.field, self.body())

    def __repr__(self):
        return "<FieldError %s>" % self

    def __eq__(self, other):
        if not isinstance(other, FieldError):
            return NotImplemented
        return (self.type, self.field, self.bad_value, self.detail) == (
            other.type, other.field, other.bad_value, other.detail)

    def __hash__(self):
        return hash((self.type, self.field, self.detail))


def invalid(field, value, detail):
    return FieldError(ERROR_TYPE_INVALID, field, value, detail)


def required(field, detail):
    return FieldError(ERROR_TYPE_REQUIRED, field, "", detail)


class ErrorList(list):
    """An ordered list of :class:`FieldError`; empty means valid."""

    def messages(self):
        return [str(error) for error in self]

    def filter_type(self, type_):
        return ErrorList(error for error in self if error.type == type_)

    def __str__(self):
        if len(self) == 1:
            return str(self[0])
        return "[%s]" % ", ".join(self.messages())
