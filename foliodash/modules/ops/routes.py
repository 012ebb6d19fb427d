"""
Ops Routes
==========

Public health endpoint.
"""

import shutil
from datetime import datetime

from flask import current_app, jsonify

from . import ops_health_bp

DISK_WARNING_PERCENT = 90
DISK_CRITICAL_PERCENT = 95


def _get_disk_usage():
    """Get disk usage for root partition."""
    try:
        usage = shutil.disk_usage('/')
        return {
            'total_gb': round(usage.total / (1024 ** 3), 1),
            'used_gb': round(usage.used / (1024 ** 3), 1),
            'free_gb': round(usage.free / (1024 ** 3), 1),
            'percent': round((usage.used / usage.total) * 100, 1),
        }
    except OSError as e:
        return {'total_gb': 0, 'used_gb': 0, 'free_gb': 0, 'percent': 0, 'error': str(e)}


def _get_api_info():
    """Whether the content API origin is configured. No request is made."""
    base_uri = current_app.config.get('API_BASE_URI') or ''
    return {'configured': bool(base_uri), 'base_uri': base_uri}


def _compute_status(disk, api):
    issues = []
    status = 'ok'
    if not api['configured']:
        issues.append('API_BASE_URI is not configured')
        status = 'warning'
    if disk['percent'] >= DISK_CRITICAL_PERCENT:
        issues.append(f"Disk usage at {disk['percent']}%")
        status = 'critical'
    elif disk['percent'] >= DISK_WARNING_PERCENT:
        issues.append(f"Disk usage at {disk['percent']}%")
        if status == 'ok':
            status = 'warning'
    return status, issues


def _build_health_response():
    """Build the health check response dict."""
    disk = _get_disk_usage()
    api = _get_api_info()
    status, issues = _compute_status(disk, api)

    result = {
        'status': status,
        'timestamp': datetime.now().isoformat(),
        'checks': {
            'disk': disk,
            'api': api,
        },
        'issues': issues,
    }
    return result, status


@ops_health_bp.route('/')
@ops_health_bp.route('')
def health_check():
    """Public health endpoint for uptime monitors."""
    data, status = _build_health_response()
    code = 503 if status == 'critical' else 200
    return jsonify(data), code
