# proposal_registry/core/context.py

import contextvars

correlation_id_ctx = contextvars.ContextVar("correlation_id", default=None)
caller_id_ctx = contextvars.ContextVar("caller_id", default=None)
