"""
Per-request admin context.

The host platform's OAuth/session-token exchange happens elsewhere. This
module only turns whatever that collaborator left behind into an explicit
``AdminContext`` handed to each view.
"""

import re
from dataclasses import dataclass, field
from functools import wraps

from flask import abort, current_app, g, request, session

from .admin_api import AdminApiClient
from .config import get_config_value
from .exceptions import NotAuthenticatedError

SHOP_DOMAIN_RE = re.compile(r'^[a-z0-9][a-z0-9-]*\.myshopify\.com$')


@dataclass
class AdminContext:
    shop: str
    access_token: str
    admin: AdminApiClient = field(repr=False)

    @classmethod
    def for_shop(cls, shop, access_token):
        client = AdminApiClient(
            shop,
            access_token,
            api_version=get_config_value('SHOPIFY_API_VERSION'),
            timeout=int(get_config_value('ADMIN_API_TIMEOUT', 30)),
        )
        return cls(shop=shop, access_token=access_token, admin=client)

    def graphql(self, query, variables=None):
        return self.admin.graphql(query, variables)


def is_valid_shop_domain(shop):
    return bool(shop) and SHOP_DOMAIN_RE.match(shop) is not None


def session_authenticator(request):
    """
    Default authenticator: the embedded session, else the offline install from config.

    Shop and token always come from the same source, so the offline token is
    only ever sent to the configured shop.
    """
    if session.get('shop') or session.get('access_token'):
        shop, token = session.get('shop'), session.get('access_token')
    else:
        shop = get_config_value('SHOPIFY_SHOP')
        token = get_config_value('SHOPIFY_ACCESS_TOKEN')

    if not shop or not token:
        raise NotAuthenticatedError("No shop session for this request")

    if not is_valid_shop_domain(shop):
        raise NotAuthenticatedError(f"Rejected shop domain {shop!r}")

    return AdminContext.for_shop(shop, token)


def authenticate_admin(request):
    """Resolve the AdminContext with the authenticator configured on the extension"""
    ext = current_app.extensions.get('storeadmin')
    authenticator = ext.authenticator if ext is not None else session_authenticator
    return authenticator(request)


def admin_required(f):
    """Decorator to require an authenticated shop; passes it to the view as ``admin``"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            context = authenticate_admin(request)
        except NotAuthenticatedError:
            abort(401)

        g.admin = context
        return f(context, *args, **kwargs)
    return decorated_function
