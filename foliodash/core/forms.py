"""
Form State & Controller Base
============================

``FormState`` holds one form's values, inline errors and the in-flight flag.
``FormController`` wires a state to a validation schema and runs the
validate -> dispatch -> cleanup lifecycle shared by every dashboard form.
Subclasses supply ``schema``, ``defaults`` and ``on_submit``.
"""

from .errors import ValidationFailure


class FormState:
    """Current values, validation errors and submitting flag of one form."""

    def __init__(self, defaults):
        self._defaults = dict(defaults)
        self.values = dict(defaults)
        self.errors = {}
        self.submitting = False

    def set_field(self, name, value):
        if name not in self.values:
            raise KeyError(f"Unknown form field: {name}")
        self.values[name] = value

    def reset(self, values=None):
        """Replace every value (defaults, overlaid with ``values``) and clear errors."""
        self.values = dict(self._defaults)
        if values:
            for name, value in values.items():
                self.set_field(name, value)
        self.errors = {}

    def __repr__(self):
        return f"FormState(values={self.values!r}, errors={self.errors!r}, submitting={self.submitting})"


class FormController:
    """Base controller: validation gate plus guaranteed cleanup around dispatch."""

    schema = None
    defaults = {}

    def __init__(self, api, notify=None, navigate=None):
        """
        Args:
            api: ``ApiClient`` (or any object with the same methods).
            notify: ``callable(message, category)`` for transient messages.
            navigate: ``callable(path)`` invoked on successful submit / cancel.
        """
        self.api = api
        self.state = FormState(self.defaults)
        self.submit_count = 0
        self.location = None
        self._notify = notify
        self._navigate = navigate

    # ===== Notifications & navigation =====

    def notify(self, message, category):
        if self._notify is not None:
            self._notify(message, category)

    def navigate(self, path):
        self.location = path
        if self._navigate is not None:
            self._navigate(path)

    # ===== Field editing =====

    def set_field(self, name, value):
        """Change one field; once a submit was attempted, re-check just that field."""
        self.state.set_field(name, value)
        if self.submit_count:
            message = self.schema.validate_field(name, value)
            if message is None:
                self.state.errors.pop(name, None)
            else:
                self.state.errors[name] = message

    def validate(self):
        try:
            self.schema.check(self.state.values)
        except ValidationFailure as e:
            self.state.errors = e.errors
            return False
        self.state.errors = {}
        return True

    # ===== Submission =====

    def handle_submit(self):
        """Validate and dispatch. Returns True only when the submit succeeded."""
        if self.state.submitting:
            return False

        self.submit_count += 1
        if not self.validate():
            return False

        self.state.submitting = True
        try:
            return bool(self.on_submit(dict(self.state.values)))
        finally:
            self.state.submitting = False

    def on_submit(self, values):
        raise NotImplementedError
