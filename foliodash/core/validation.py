"""
Declarative field validation for dashboard forms.

A ``Schema`` maps field names to an ordered list of rules. Each rule is a
predicate plus the message shown when it fails; the first failing rule wins.
"""

import re

from .errors import ValidationFailure

# Same shape the browser-side validators accept: no leading dot, no "..",
# dotted domain with an alphabetic TLD of two or more letters.
EMAIL_PATTERN = re.compile(
    r"^(?!\.)(?!.*\.\.)([A-Z0-9_'+\-.]*)[A-Z0-9_+-]@([A-Z0-9][A-Z0-9\-]*\.)+[A-Z]{2,}$",
    re.IGNORECASE,
)


class Rule:
    """A single validation predicate and its failure message."""

    __slots__ = ('predicate', 'message')

    def __init__(self, predicate, message):
        self.predicate = predicate
        self.message = message

    def __call__(self, value):
        """Return the failure message, or None when the value passes."""
        return None if self.predicate(value) else self.message

    def __repr__(self):
        return f"Rule({self.message!r})"


def _as_text(value):
    return '' if value is None else value


def required(message):
    """Non-empty string. Whitespace counts as content."""
    return Rule(lambda value: isinstance(_as_text(value), str) and len(_as_text(value)) >= 1, message)


def min_length(length, message):
    return Rule(lambda value: isinstance(_as_text(value), str) and len(_as_text(value)) >= length, message)


def email(message):
    return Rule(lambda value: isinstance(value, str) and EMAIL_PATTERN.match(value) is not None, message)


def optional():
    """Accepts anything, including a missing value."""
    return Rule(lambda value: True, '')


class Schema:
    """Field name -> rules mapping, evaluated synchronously."""

    def __init__(self, rules):
        self._rules = {name: tuple(field_rules) for name, field_rules in rules.items()}

    @property
    def fields(self):
        return tuple(self._rules)

    def validate_field(self, name, value):
        for rule in self._rules.get(name, ()):
            message = rule(value)
            if message is not None:
                return message
        return None

    def validate(self, values):
        """Return {field: message} for every failing field; passing fields are absent."""
        errors = {}
        for name in self._rules:
            message = self.validate_field(name, values.get(name))
            if message is not None:
                errors[name] = message
        return errors

    def check(self, values):
        """Like ``validate`` but raises ``ValidationFailure`` on any error."""
        errors = self.validate(values)
        if errors:
            raise ValidationFailure(errors)
