"""
Signup Form Controller
======================

New account form: full name, email and password, posted to the API as JSON.
"""

from foliodash.core.errors import RequestFailure
from foliodash.core.forms import FormController
from foliodash.core.logging_service import LoggingService
from foliodash.core.validation import Schema, email, min_length

LOGIN_PATH = '/login'
DEFAULT_FAILURE_MESSAGE = 'Signup failed. Please try again.'


class SignupFormController(FormController):
    """Holds one signup form from render to submit."""

    schema = Schema({
        'name': [min_length(2, 'Full name must be at least 2 characters')],
        'email': [email('Enter a valid email address')],
        'password': [min_length(6, 'Password must be at least 6 characters long')],
    })
    defaults = {
        'name': '',
        'email': '',
        'password': '',
    }

    def __init__(self, api, notify=None, navigate=None, redirect_path=LOGIN_PATH):
        super().__init__(api, notify=notify, navigate=navigate)
        self.redirect_path = redirect_path
        self.response = None

    def apply_input(self, form):
        for field in self.defaults:
            if field in form:
                self.set_field(field, form.get(field))

    def on_submit(self, values):
        payload = {
            'name': values['name'],
            'email': values['email'],
            'password': values['password'],
        }

        try:
            self.response = self.api.signup(payload)
        except RequestFailure as e:
            LoggingService.error('signup', 'Signup error', {
                'email': payload['email'],
                'error': str(e),
                'status_code': e.status_code,
            })
            self.notify(e.server_message or DEFAULT_FAILURE_MESSAGE, 'error')
            return False

        if not (isinstance(self.response, dict) and self.response.get('success')):
            message = self.response.get('message') if isinstance(self.response, dict) else None
            LoggingService.warning('signup', 'Signup rejected by API', {'email': payload['email']})
            self.notify(message or DEFAULT_FAILURE_MESSAGE, 'error')
            return False

        LoggingService.log_user_action('signup', 'signup', details={'email': payload['email']})
        self.notify('Signup successful! Redirecting to login...', 'success')
        self.navigate(self.redirect_path)
        return True
