"""
Validation rule tests
=====================

Run with: pytest tests/test_validation.py -v
"""

import pytest

from foliodash.core.errors import ValidationFailure
from foliodash.core.validation import Schema, email, min_length, optional, required
from foliodash.modules.portfolio.controller import PortfolioFormController
from foliodash.modules.signup.controller import SignupFormController


# ---------------------------------------------------------------------------
# Individual rules
# ---------------------------------------------------------------------------

def test_required_rejects_empty_and_none():
    rule = required('Title is required')
    assert rule('') == 'Title is required'
    assert rule(None) == 'Title is required'
    assert rule('x') is None


def test_required_does_not_trim_whitespace():
    """A single space counts as content."""
    assert required('Title is required')(' ') is None


def test_min_length_boundary():
    rule = min_length(5, 'too short')
    assert rule('abcd') == 'too short'
    assert rule('abcde') is None


def test_min_length_rejects_non_strings():
    assert min_length(1, 'bad')(12345) == 'bad'


@pytest.mark.parametrize('value', [
    'm@example.com',
    'first.last+tag@sub.example.co',
    "o'brien@example.org",
])
def test_email_accepts_valid_addresses(value):
    assert email('bad email')(value) is None


@pytest.mark.parametrize('value', [
    '',
    None,
    'plainaddress',
    '@example.com',
    'user@',
    'user@example',
    '.user@example.com',
    'us..er@example.com',
    'user@example.c',
])
def test_email_rejects_invalid_addresses(value):
    assert email('bad email')(value) == 'bad email'


def test_optional_accepts_anything():
    rule = optional()
    assert rule(None) is None
    assert rule(object()) is None


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------

def test_schema_reports_first_failing_rule_per_field():
    schema = Schema({'code': [required('missing'), min_length(3, 'short')]})
    assert schema.validate({'code': ''}) == {'code': 'missing'}
    assert schema.validate({'code': 'ab'}) == {'code': 'short'}
    assert schema.validate({'code': 'abc'}) == {}


def test_schema_treats_missing_field_as_empty():
    schema = Schema({'name': [required('Title is required')]})
    assert schema.validate({}) == {'name': 'Title is required'}


def test_schema_check_raises_with_all_errors():
    schema = Schema({
        'a': [required('a missing')],
        'b': [required('b missing')],
    })
    with pytest.raises(ValidationFailure) as excinfo:
        schema.check({'a': '', 'b': ''})
    assert excinfo.value.errors == {'a': 'a missing', 'b': 'b missing'}


def test_schema_check_passes_silently():
    Schema({'a': [required('a missing')]}).check({'a': 'ok'})


# ---------------------------------------------------------------------------
# Form schemas
# ---------------------------------------------------------------------------

def test_portfolio_schema_messages():
    errors = PortfolioFormController.schema.validate({
        'name': '', 'category': '', 'description': 'abcd', 'image': None,
    })
    assert errors == {
        'name': 'Title is required',
        'category': 'Category is required',
        'description': 'Description is required',
    }


def test_portfolio_schema_image_is_optional():
    errors = PortfolioFormController.schema.validate({
        'name': 'Logo', 'category': 'Branding', 'description': 'A logo project', 'image': None,
    })
    assert errors == {}


def test_signup_schema_messages():
    errors = SignupFormController.schema.validate({
        'name': 'J', 'email': 'not-an-email', 'password': '12345',
    })
    assert errors == {
        'name': 'Full name must be at least 2 characters',
        'email': 'Enter a valid email address',
        'password': 'Password must be at least 6 characters long',
    }


def test_signup_schema_valid():
    errors = SignupFormController.schema.validate({
        'name': 'Jo', 'email': 'jo@example.com', 'password': '123456',
    })
    assert errors == {}
