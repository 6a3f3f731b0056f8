"""
Ops Routes
==========

Public health endpoint.
"""

import shutil
from datetime import datetime, timedelta

from flask import current_app, jsonify
from sqlalchemy import text

from . import ops_health_bp
from storeadmin.core import db, AppLog


def _check_database():
    """Round-trip a trivial query through the app database."""
    try:
        db.session.execute(text('SELECT 1'))
        return {'ok': True}
    except Exception as e:
        db.session.rollback()
        return {'ok': False, 'error': str(e)}


def _get_disk_usage():
    """Get disk usage for root partition."""
    try:
        usage = shutil.disk_usage('/')
        return {
            'free_gb': round(usage.free / (1024 ** 3), 1),
            'percent': round((usage.used / usage.total) * 100, 1),
        }
    except Exception as e:
        return {'free_gb': 0, 'percent': 0, 'error': str(e)}


def _get_error_count_last_hour():
    """Count ERROR/CRITICAL log rows in the last hour."""
    try:
        cutoff = (datetime.now() - timedelta(hours=1)).isoformat()
        return (
            AppLog.query
            .filter(AppLog.level.in_(['ERROR', 'CRITICAL']))
            .filter(AppLog.timestamp > cutoff)
            .count()
        )
    except Exception as e:
        current_app.logger.debug(f"ops: Could not query recent errors: {e}")
        return 0


def _build_health_response():
    """Build the health check response dict."""
    from storeadmin import __version__

    database = _check_database()
    disk = _get_disk_usage()

    status = 'ok'
    if not database['ok']:
        status = 'critical'
    elif disk.get('percent', 0) >= 90:
        status = 'warning'

    result = {
        'status': status,
        'version': __version__,
        'timestamp': datetime.now().isoformat(),
        'checks': {
            'database': database,
            'disk': disk,
        },
        'error_count_1h': _get_error_count_last_hour(),
    }
    return result, status


@ops_health_bp.route('/')
@ops_health_bp.route('')
def health_check():
    """Public health endpoint for uptime monitors."""
    data, status = _build_health_response()
    code = 503 if status == 'critical' else 200
    return jsonify(data), code
