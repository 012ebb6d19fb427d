"""
Portfolio Routes
================

One request is one mount of a PortfolioFormController: mount, wait for the
reference data, apply posted input, then submit.
"""

from flask import current_app, flash, redirect, render_template, request

from foliodash.core.errors import RequestFailure
from foliodash.core.logging_service import LoggingService
from . import portfolio_bp
from .controller import PortfolioFormController


def get_api_client():
    """The ApiClient configured by the FolioDash extension"""
    return current_app.extensions['foliodash'].get_api_client()


def build_controller(edit_target=None):
    return PortfolioFormController(
        get_api_client(),
        edit_target=edit_target,
        notify=flash,
        listing_path=current_app.config.get('PORTFOLIO_LISTING_PATH', '/portfolio'),
    )


@portfolio_bp.route('')
def list_portfolio():
    """Portfolio listing page"""
    try:
        items = get_api_client().get_portfolio_list()
    except RequestFailure as e:
        LoggingService.error('portfolio', 'Listing fetch error', {'error': str(e)})
        items = []
    return render_template('portfolio/list.html', items=items)


@portfolio_bp.route('/add', methods=['GET', 'POST'])
def add_portfolio():
    """Create form, or edit form when ?id= names an existing item"""
    controller = build_controller(request.args.get('id'))

    if request.method == 'POST' and request.form.get('action') == 'cancel':
        controller.cancel()
        return redirect(controller.location)

    controller.mount().result()
    status = 200

    if request.method == 'POST':
        controller.apply_input(request.form, request.files)
        if controller.handle_submit():
            return redirect(controller.location)
        status = 400 if controller.state.errors else 502

    return render_template('portfolio/form.html', form=controller), status
