"""
QR Code queries
===============

Reads the shop's QR codes from the database and supplements each with the
live product details from the Admin API.
"""

import logging

from storeadmin.core import QRCode

logger = logging.getLogger(__name__)

PRODUCT_QUERY = """#graphql
  query supplementQRCode($id: ID!) {
    product(id: $id) {
      title
      media(first: 1) {
        nodes {
          preview {
            image {
              altText
              url
            }
          }
        }
      }
    }
  }
"""


def get_qr_codes(shop, graphql):
    """All QR codes for a shop, newest first, supplemented with product data"""
    qr_codes = (
        QRCode.query
        .filter_by(shop=shop)
        .order_by(QRCode.id.desc())
        .all()
    )

    if not qr_codes:
        return []

    return [supplement_qr_code(qr_code, graphql) for qr_code in qr_codes]


def supplement_qr_code(qr_code, graphql):
    """Merge a QRCode row with its product's title and first image"""
    response = graphql(PRODUCT_QUERY, {'id': qr_code.product_id})
    product = ((response or {}).get('data') or {}).get('product')

    image = None
    if product:
        nodes = (product.get('media') or {}).get('nodes') or []
        if nodes:
            image = ((nodes[0] or {}).get('preview') or {}).get('image')
    else:
        logger.info("Product %s for QR code %s no longer exists", qr_code.product_id, qr_code.id)

    return {
        'id': qr_code.id,
        'shop': qr_code.shop,
        'title': qr_code.title,
        'product_id': qr_code.product_id,
        'product_handle': qr_code.product_handle,
        'product_variant_id': qr_code.product_variant_id,
        'destination': qr_code.destination,
        'scans': qr_code.scans,
        'created_at': qr_code.created_at,
        'product_deleted': not product or not product.get('title'),
        'product_title': product.get('title') if product else None,
        'product_image': image.get('url') if image else None,
        'product_alt': image.get('altText') if image else None,
    }
