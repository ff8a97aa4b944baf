"""Order submission flow: sends a draft and applies the outcome to the session.

Flow:
    1. begin(draft)  → claim the single in-flight slot, get a ticket
    2. gateway.submit_order(draft)
    3a. success      → clear the cart and return to the catalogue (one effect)
    3b. failure      → leave cart and view untouched so the customer can retry

A response whose ticket is no longer in flight (the submission was abandoned)
is ignored. Failures are never retried automatically.
"""

import structlog
from protean.exceptions import ValidationError

from storefront.gateway.port import OrderResult

logger = structlog.get_logger(__name__)


class SubmissionFlow:
    def __init__(self, gateway, cart, navigator):
        self.gateway = gateway
        self.cart = cart
        self.navigator = navigator
        self.last_result: OrderResult | None = None
        self._in_flight: int | None = None
        self._tickets = 0

    @property
    def in_flight(self) -> bool:
        return self._in_flight is not None

    def begin(self, draft) -> int:
        """Claim the in-flight slot for ``draft`` and return its ticket."""
        if self._in_flight is not None:
            raise ValidationError({"order": ["An order submission is already in progress"]})

        self._tickets += 1
        self._in_flight = self._tickets
        logger.info(
            "Submitting order",
            ticket=self._in_flight,
            line_count=len(draft.lines),
            total=str(draft.totals.total),
        )
        return self._in_flight

    def complete(self, ticket: int, result: OrderResult) -> bool:
        """Apply a submission result. Returns False when the ticket is stale."""
        if ticket != self._in_flight:
            logger.info("Ignoring stale order response", ticket=ticket, in_flight=self._in_flight)
            return False

        self._in_flight = None
        self.last_result = result

        if result.success:
            self.cart.clear()
            self.navigator.reset()
            logger.info("Order placed", order_id=result.order_id)
        else:
            logger.warning("Order not placed", reason=result.failure_reason)
        return True

    def abandon(self) -> None:
        """Release the in-flight slot; its eventual response will be ignored."""
        if self._in_flight is not None:
            logger.info("Abandoning order submission", ticket=self._in_flight)
        self._in_flight = None

    def submit(self, draft) -> OrderResult:
        ticket = self.begin(draft)
        try:
            result = self.gateway.submit_order(draft)
        except Exception:
            self.abandon()
            raise
        self.complete(ticket, result)
        return result
