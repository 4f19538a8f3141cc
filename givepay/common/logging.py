"""JSON logs for the checkout service.

Each record carries the caller's correlation id (`trace_id`) and, once Stripe
has answered, the checkout `session_id`.
"""

import logging
import sys
from contextvars import ContextVar
from uuid import uuid4

from pythonjsonlogger.json import JsonFormatter

from givepay.common.config import settings


trace_id_ctx: ContextVar[str] = ContextVar("trace_id", default="")
session_id_ctx: ContextVar[str] = ContextVar("session_id", default="")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(service_name)s %(trace_id)s %(session_id)s %(message)s"


class CheckoutContextFilter(logging.Filter):
    """Copy the request's correlation and session ids onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.service_name = settings.service_name
        record.trace_id = trace_id_ctx.get()
        record.session_id = session_id_ctx.get()
        return True


def bind_trace_id(correlation_id: str | None) -> str:
    """Use the caller's correlation id for this request, or mint one."""

    trace_id = correlation_id or str(uuid4())
    trace_id_ctx.set(trace_id)
    session_id_ctx.set("")
    return trace_id


def configure_logging(level: str | None = None) -> None:
    """Send all records to stdout as JSON. Call once per process."""

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(CheckoutContextFilter())
    handler.setFormatter(JsonFormatter(LOG_FORMAT))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level or settings.log_level)


logger = logging.getLogger("givepay.checkout")
