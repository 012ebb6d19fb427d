"""
Signup Routes
=============

HTML form posts get flash + redirect; JSON posts get a JSON answer.
"""

from flask import current_app, flash, jsonify, redirect, render_template, request

from . import signup_bp
from .controller import SignupFormController


@signup_bp.route('', methods=['GET', 'POST'])
def signup():
    """Signup page route"""
    wants_json = request.is_json
    messages = []

    def notify(message, category):
        messages.append({'message': message, 'category': category})
        if not wants_json:
            flash(message, category)

    # The API client is only needed to submit; the page renders without one
    api = current_app.extensions['foliodash'].get_api_client() if request.method == 'POST' else None
    controller = SignupFormController(
        api,
        notify=notify,
        redirect_path=current_app.config.get('SIGNUP_REDIRECT_PATH', '/login'),
    )

    if request.method == 'GET':
        return render_template('signup/signup.html', form=controller)

    if wants_json:
        payload = request.get_json(silent=True)
        controller.apply_input(payload if isinstance(payload, dict) else {})
    else:
        controller.apply_input(request.form)
    succeeded = controller.handle_submit()
    status = 200 if succeeded else (400 if controller.state.errors else 502)

    if wants_json:
        body = {
            'success': succeeded,
            'message': messages[-1]['message'] if messages else '',
            'errors': controller.state.errors,
        }
        if succeeded:
            body['redirect'] = controller.location
        return jsonify(body), status

    if succeeded:
        return redirect(controller.location)
    return render_template('signup/signup.html', form=controller), status
