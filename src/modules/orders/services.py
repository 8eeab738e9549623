"""Order service layer (Use Cases).

Orchestrates order creation, queries and cancellation.  All write
operations are atomic: the service defines the unit-of-work boundary.

Business rules enforced:
- The customer must exist before anything else is resolved.
- Every line's beer must exist; the first missing one aborts the order.
- Orders start in NEW; cancellation follows the state machine and is
  refused from terminal states.
- Status writes are version-checked; a stale write is reported, never
  retried.
- Beers and customers are read, never modified.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import transaction

from modules.beers.exceptions import BeerNotFound
from modules.core.exceptions import ConcurrentModification
from modules.customers.exceptions import CustomerNotFound
from modules.orders.constants import OrderStatus
from modules.orders.events import OrderCancelled, OrderPlaced
from modules.orders.exceptions import InvalidOrderState, OrderNotFound
from modules.orders.models import BeerOrder, BeerOrderLine
from modules.orders.state_machine import Rejected, transition
from shared.infrastructure.bus import event_bus as default_event_bus

if TYPE_CHECKING:
    from modules.beers.repositories.interfaces import IBeerRepository
    from modules.customers.repositories.interfaces import ICustomerRepository
    from modules.orders.dtos import CreateBeerOrderDTO
    from modules.orders.repositories.interfaces import IOrderRepository
    from shared.domain.bus import IEventBus

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for BeerOrder use-cases.

    Receives repositories (and optionally the event bus) via constructor
    injection (DIP).
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        customer_repository: ICustomerRepository,
        beer_repository: IBeerRepository,
        event_bus: Optional[IEventBus] = None,
    ) -> None:
        self._order_repo = order_repository
        self._customer_repo = customer_repository
        self._beer_repo = beer_repository
        self._event_bus = event_bus or default_event_bus

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_order(self, dto: CreateBeerOrderDTO) -> BeerOrder:
        """Create a new order with its lines.

        Steps:
        1. Resolve the customer.
        2. Resolve each line's beer, in request order.
        3. Persist order + lines atomically with status NEW.

        Raises:
            CustomerNotFound: the customer does not exist.
            BeerNotFound: a line references a missing beer.
        """
        log = logger.bind(customer_id=dto.customer_id)
        log.info("order.creation_started", line_count=len(dto.beer_order_lines))

        customer = self._customer_repo.get_by_id(dto.customer_id)
        if customer is None:
            log.warning("order.customer_not_found")
            raise CustomerNotFound(dto.customer_id)

        lines: List[BeerOrderLine] = []
        for line_dto in dto.beer_order_lines:
            if line_dto.order_quantity < 1:
                raise ValueError(
                    f"order_quantity must be at least 1, got {line_dto.order_quantity}"
                )
            beer = self._beer_repo.get_by_id(line_dto.beer_id)
            if beer is None:
                log.warning("order.beer_not_found", beer_id=line_dto.beer_id)
                raise BeerNotFound(line_dto.beer_id)
            lines.append(BeerOrderLine(beer=beer, order_quantity=line_dto.order_quantity))

        order = BeerOrder(
            customer=customer,
            order_status=OrderStatus.NEW,
            order_status_callback_url=dto.order_status_callback_url,
        )
        order = self._order_repo.create(order, lines)
        order.add_domain_event(
            OrderPlaced(
                aggregate_id=order.id,
                customer_id=customer.id,
                line_count=len(lines),
                callback_url=order.order_status_callback_url,
            )
        )
        self._event_bus.publish_on_commit(order.pull_domain_events())

        log.info("order.created", order_id=order.id)
        return self._order_repo.get_by_id(order.id) or order

    @transaction.atomic
    def cancel_order(self, order_id: int) -> BeerOrder:
        """Move an order to CANCELLED.

        Raises:
            OrderNotFound: the order does not exist.
            InvalidOrderState: the order is in a terminal state.
            ConcurrentModification: the order was updated since it was read.
        """
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFound(order_id)

        log = logger.bind(order_id=order_id, current_status=order.order_status)

        outcome = transition(order.order_status, OrderStatus.CANCELLED)
        if isinstance(outcome, Rejected):
            log.warning("order.cancel_rejected", reason=outcome.reason)
            raise InvalidOrderState(outcome.current_status, outcome.target_status)

        order.order_status = outcome.new_status
        result = self._order_repo.save(order)
        if result.conflict:
            raise ConcurrentModification("Order", order_id, result.expected_version)

        order.add_domain_event(
            OrderCancelled(
                aggregate_id=order.id,
                previous_status=outcome.previous_status,
                callback_url=order.order_status_callback_url,
            )
        )
        self._event_bus.publish_on_commit(order.pull_domain_events())

        log.info("order.cancelled", version=order.version)
        return order

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, order_id: int) -> BeerOrder:
        """Retrieve a single order by ID.

        Raises:
            OrderNotFound: if the order does not exist.
        """
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFound(order_id)
        return order

    def list_orders(self) -> List[BeerOrder]:
        return self._order_repo.list()

    def list_orders_for_customer(self, customer_id: int) -> List[BeerOrder]:
        """Orders of one customer, oldest first.

        Raises:
            CustomerNotFound: the customer does not exist.
        """
        if self._customer_repo.get_by_id(customer_id) is None:
            raise CustomerNotFound(customer_id)
        return self._order_repo.list_by_customer(customer_id)
