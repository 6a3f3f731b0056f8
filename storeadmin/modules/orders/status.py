"""
Order fulfillment status classification and aggregation.
"""

from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Optional

DELIVERED = "DELIVERED"
NOT_DELIVERED = "NOT_DELIVERED"
FULFILLED = "FULFILLED"
IN_TRANSIT = "IN_TRANSIT"

STATUSES = (DELIVERED, NOT_DELIVERED, FULFILLED, IN_TRANSIT)

# Checked in this order within a single fulfillment
_MATCHED_STATUSES = (DELIVERED, FULFILLED, IN_TRANSIT)


@dataclass
class Fulfillment:
    status: Optional[str] = None
    display_status: Optional[str] = None

    @property
    def effective_status(self) -> Optional[str]:
        return self.display_status or self.status

    @classmethod
    def from_node(cls, node: dict) -> "Fulfillment":
        return cls(status=node.get("status"), display_status=node.get("displayStatus"))


@dataclass
class Order:
    id: str
    name: Optional[str] = None
    created_at: Optional[str] = None
    display_fulfillment_status: Optional[str] = None
    fulfillments: List[Fulfillment] = field(default_factory=list)

    @classmethod
    def from_node(cls, node: dict) -> "Order":
        """Build an Order from an ``orders.edges[].node`` GraphQL object"""
        return cls(
            id=node.get("id"),
            name=node.get("name"),
            created_at=node.get("createdAt"),
            display_fulfillment_status=node.get("displayFulfillmentStatus"),
            fulfillments=[Fulfillment.from_node(f) for f in node.get("fulfillments") or []],
        )


def classify_order(order: Order) -> str:
    """
    Determine the fulfillment status of an order from its fulfillments.

    The first fulfillment whose effective status is DELIVERED, FULFILLED or
    IN_TRANSIT decides the result. Orders without fulfillments, or whose
    fulfillments carry none of those values, are NOT_DELIVERED.
    """
    fulfillments = order.fulfillments or []

    if not fulfillments:
        return NOT_DELIVERED

    for fulfillment in fulfillments:
        effective = fulfillment.effective_status
        if effective in _MATCHED_STATUSES:
            return effective

    # Partial fulfillment
    if any(f.effective_status == FULFILLED for f in fulfillments):
        return FULFILLED

    return NOT_DELIVERED


def percent(count: int, total: int) -> float:
    """count / total as a percentage rounded half-up to 2 decimals, 0 when total is 0"""
    if total <= 0:
        return 0.0
    value = Decimal(count) * 100 / Decimal(total)
    return float(value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def count_statuses(orders: List[Order]) -> Dict[str, int]:
    status_counts = {status: 0 for status in STATUSES}
    for order in orders:
        status_counts[classify_order(order)] += 1
    return status_counts


def summarize_orders(orders: List[Order]) -> dict:
    """Build the orders overview view model"""
    status_counts = count_statuses(orders)

    total_orders = len(orders)
    delivered_count = status_counts[DELIVERED]
    not_delivered_count = (
        status_counts[NOT_DELIVERED] + status_counts[FULFILLED] + status_counts[IN_TRANSIT]
    )

    return {
        'total_orders': total_orders,
        'status_counts': status_counts,
        'delivered_count': delivered_count,
        'not_delivered_count': not_delivered_count,
        'percentages': {
            'delivered': percent(delivered_count, total_orders),
            'not_delivered': percent(not_delivered_count, total_orders),
            'by_status': {
                status: percent(count, total_orders)
                for status, count in status_counts.items()
            },
        },
        'error': None,
    }
