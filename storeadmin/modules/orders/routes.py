"""
Orders Routes
=============

Fetches up to 250 recent orders from the Admin API and renders the
fulfillment status overview.
"""

import logging

from flask import render_template, jsonify
from flask_cors import cross_origin

from . import orders_bp
from .status import Order, summarize_orders
from storeadmin.core import admin_required, LoggingService

logger = logging.getLogger(__name__)

ORDERS_QUERY = """#graphql
  query OrdersForStatusGraph {
    orders(first: 250, sortKey: CREATED_AT, reverse: true) {
      edges {
        node {
          id
          name
          createdAt
          displayFulfillmentStatus
          fulfillments {
            status
            displayStatus
          }
        }
      }
    }
  }
"""

ACCESS_DENIED_MARKERS = ("Access denied", "not approved", "Order object")

ACCESS_DENIED_MESSAGE = (
    "This app needs to be reinstalled to access orders. "
    "Please uninstall and reinstall the app to grant order permissions."
)


def is_access_denied(message):
    """Whether an Admin API error message means the app lacks order scopes"""
    return bool(message) and any(marker in message for marker in ACCESS_DENIED_MARKERS)


def _access_denied(reason):
    LoggingService.warning('orders', 'Order access denied by Admin API', {'reason': reason})
    return {'error': 'access_denied', 'message': ACCESS_DENIED_MESSAGE}


def load_orders_overview(admin):
    """
    Build the overview view model for the authenticated shop.

    Returns an ``access_denied`` result instead of raising when the Admin API
    refuses order access; any other failure propagates.
    """
    try:
        body = admin.graphql(ORDERS_QUERY)

        errors = body.get('errors') or []
        for error in errors:
            message = error.get('message') if isinstance(error, dict) else str(error)
            if is_access_denied(message):
                return _access_denied(message)

        if errors:
            logger.warning("Orders query returned errors: %s", errors)

        data = body.get('data') or {}
        edges = (data.get('orders') or {}).get('edges') or []
        orders = [Order.from_node(edge['node']) for edge in edges]

    except Exception as e:
        if is_access_denied(str(e)):
            return _access_denied(str(e))
        raise

    return summarize_orders(orders)


@orders_bp.route('/orders')
@admin_required
def orders_overview(admin):
    """Orders status overview page"""
    data = load_orders_overview(admin)

    if data.get('error') == 'access_denied':
        return render_template('orders/access_denied.html', message=data['message'])

    return render_template('orders/overview.html', **data)


@orders_bp.route('/api/orders/summary')
@cross_origin(origins=['https://admin.shopify.com'])
@admin_required
def api_orders_summary(admin):
    """Same view model as the overview page, as JSON"""
    return jsonify(load_orders_overview(admin))
