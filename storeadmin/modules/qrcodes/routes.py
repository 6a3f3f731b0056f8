"""
QR Codes Routes
===============

Index page of the embedded app: lists the shop's QR codes and offers a
sample product generator.
"""

import random

from flask import render_template, redirect, url_for, flash, jsonify

from . import qrcodes_bp
from .models import get_qr_codes
from storeadmin.core import admin_required, LoggingService
from storeadmin.core.boundary import wants_json

COLORS = ["Red", "Orange", "Yellow", "Green"]

CREATE_PRODUCT_MUTATION = """#graphql
  mutation populateProduct($product: ProductCreateInput!) {
    productCreate(product: $product) {
      product {
        id
        title
        handle
        status
        variants(first: 10) {
          edges {
            node {
              id
              price
              barcode
              createdAt
            }
          }
        }
      }
    }
  }
"""

UPDATE_VARIANT_MUTATION = """#graphql
  mutation updateVariant($productId: ID!, $variants: [ProductVariantsBulkInput!]!) {
    productVariantsBulkUpdate(productId: $productId, variants: $variants) {
      productVariants {
        id
        price
        barcode
        createdAt
      }
    }
  }
"""


def populate_product(admin, color=None):
    """
    Create a sample snowboard and price its first variant.

    The variant update depends on the product id returned by the first
    mutation, so the two calls run one after the other.
    """
    color = color or random.choice(COLORS)

    response = admin.graphql(CREATE_PRODUCT_MUTATION, {
        'product': {'title': f"{color} Snowboard"},
    })
    product = response['data']['productCreate']['product']
    variant_id = product['variants']['edges'][0]['node']['id']

    variant_response = admin.graphql(UPDATE_VARIANT_MUTATION, {
        'productId': product['id'],
        'variants': [{'id': variant_id, 'price': '100.00'}],
    })

    LoggingService.info('qrcodes', f"Created sample product {product['title']}",
                        {'product_id': product['id']})

    return {
        'product': product,
        'variant': variant_response['data']['productVariantsBulkUpdate']['productVariants'],
    }


@qrcodes_bp.route('/')
@admin_required
def index(admin):
    """QR code listing"""
    qr_codes = get_qr_codes(admin.shop, admin.graphql)
    return render_template('qrcodes/index.html', qr_codes=qr_codes)


@qrcodes_bp.route('/', methods=['POST'])
@admin_required
def generate_product(admin):
    """Create a sample product"""
    result = populate_product(admin)

    if wants_json():
        return jsonify(result)

    flash(f"Product {result['product']['title']} created", 'success')
    return redirect(url_for('qrcodes.index'))
