"""
Portfolio Form Controller
=========================

Create/edit form for portfolio items.

- `mount()` loads categories and existing portfolio items in parallel
- edit mode (an `id` edit target) prefills the form once from the matching item
- `handle_submit()` posts a multipart create, or puts a multipart update with `_id`
"""

from collections import namedtuple
from concurrent.futures import ThreadPoolExecutor

from foliodash.core.errors import RequestFailure
from foliodash.core.forms import FormController
from foliodash.core.logging_service import LoggingService
from foliodash.core.validation import Schema, min_length, optional, required

LISTING_PATH = '/portfolio'

# Prefill states
UNFILLED = 'unfilled'
FILLED = 'filled'

PREFILL_FIELDS = ('name', 'category', 'description')


class UploadedImage(namedtuple('UploadedImage', 'filename stream content_type')):
    """A freshly chosen local image file."""

    __slots__ = ()

    @classmethod
    def from_file_storage(cls, file_storage):
        """Wrap a werkzeug FileStorage; an empty file input gives None."""
        if file_storage is None or not file_storage.filename:
            return None
        return cls(file_storage.filename, file_storage.stream,
                   file_storage.mimetype or 'application/octet-stream')

    def as_part(self):
        return (self.filename, self.stream, self.content_type)


def should_prefill(edit_target, portfolio_list, prefill_state):
    """True when an edit target is set, items have arrived, and no prefill happened yet."""
    return bool(edit_target) and len(portfolio_list) > 0 and prefill_state == UNFILLED


def find_record(records, record_id):
    return next((item for item in records if item and item.get('_id') == record_id), None)


class PortfolioFormController(FormController):
    """Holds one portfolio form from mount to submit."""

    schema = Schema({
        'name': [required('Title is required')],
        'category': [required('Category is required')],
        'description': [min_length(5, 'Description is required')],
        'image': [optional()],
    })
    defaults = {
        'name': '',
        'category': '',
        'description': '',
        'image': None,
    }

    def __init__(self, api, edit_target=None, notify=None, navigate=None,
                 listing_path=LISTING_PATH):
        super().__init__(api, notify=notify, navigate=navigate)
        self.edit_target = edit_target or None
        self.listing_path = listing_path
        self.category_list = []
        self.portfolio_list = []
        self.prefill_state = UNFILLED
        self.mounted = False
        self._loaded = None

    @property
    def mode(self):
        return 'edit' if self.edit_target else 'create'

    # ===== Reference data =====

    def mount(self, callback=None):
        """Start loading categories and portfolio items.

        Both reads run concurrently; a third task joins them and applies the
        results. Returns a Future resolving to True when data arrived and
        False when loading failed. Calling again returns the same Future.
        """
        if self._loaded is not None:
            return self._loaded

        self.mounted = True
        executor = ThreadPoolExecutor(max_workers=3, thread_name_prefix='foliodash-portfolio')
        categories = executor.submit(self.api.get_categories)
        portfolios = executor.submit(self.api.get_portfolio_list)
        self._loaded = executor.submit(self._receive_reference_data, categories, portfolios)
        executor.shutdown(wait=False)

        if callback is not None:
            self._loaded.add_done_callback(lambda _: callback(self))
        return self._loaded

    def unmount(self):
        """Forget the form; reference data still in flight is discarded on arrival."""
        self.mounted = False

    def _receive_reference_data(self, categories, portfolios):
        try:
            category_list = categories.result()
            portfolio_list = portfolios.result()
        except RequestFailure as e:
            LoggingService.error('portfolio', 'Fetch error', {
                'error': str(e),
                'status_code': e.status_code,
            })
            return False

        if not self.mounted:
            return False

        self.category_list = list(category_list)
        self.portfolio_list = list(portfolio_list)
        self.apply_prefill()
        return True

    # ===== Prefill =====

    def apply_prefill(self):
        """Copy the edited item into the form. Fires at most once per mount."""
        if not should_prefill(self.edit_target, self.portfolio_list, self.prefill_state):
            return False

        portfolio = find_record(self.portfolio_list, self.edit_target)
        if portfolio is None:
            return False

        values = {field: portfolio.get(field) or '' for field in PREFILL_FIELDS}
        values['image'] = None
        self.state.reset(values)
        self.prefill_state = FILLED
        LoggingService.debug('portfolio', f"Prefilled form from portfolio {self.edit_target}")
        return True

    # ===== Input =====

    def apply_input(self, form, files=None):
        """Apply submitted request fields as user edits."""
        for field in PREFILL_FIELDS:
            if field in form:
                self.set_field(field, form.get(field))
        if files is not None:
            self.set_field('image', UploadedImage.from_file_storage(files.get('image')))

    def category_options(self):
        """(value, label) pairs for the category select."""
        return [
            (item.get('categoryName'), item.get('categoryName'))
            for item in self.category_list
            if item and item.get('categoryName')
        ]

    # ===== Submission =====

    def build_parts(self, values):
        """Multipart parts for the outbound request, in field order."""
        parts = [
            ('name', (None, values['name'])),
            ('category', (None, values['category'])),
            ('description', (None, values['description'])),
        ]
        if values.get('image'):
            parts.append(('image', values['image'].as_part()))
        if self.edit_target:
            parts.append(('_id', (None, self.edit_target)))
        return parts

    def on_submit(self, values):
        parts = self.build_parts(values)
        try:
            if self.edit_target:
                self.api.update_portfolio(parts)
                message = 'Portfolio updated successfully'
            else:
                self.api.add_portfolio(parts)
                message = 'Portfolio added successfully'
        except RequestFailure as e:
            LoggingService.error('portfolio', 'Submit error', {
                'mode': self.mode,
                'error': str(e),
                'status_code': e.status_code,
            })
            self.notify('Something went wrong', 'error')
            return False

        LoggingService.log_user_action('portfolio', f"portfolio {self.mode}", details={
            'name': values['name'],
            '_id': self.edit_target,
        })
        self.notify(message, 'success')
        self.navigate(self.listing_path)
        return True

    def cancel(self):
        self.navigate(self.listing_path)
