"""API middleware: correlation ID, caller context, audit trigger."""

import json
import logging
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from proposal_registry.core.context import caller_id_ctx, correlation_id_ctx

logger = logging.getLogger(__name__)

CALLER_HEADER = "X-Caller-ID"
CORRELATION_HEADER = "X-Correlation-ID"

# Paths that act on behalf of a caller and therefore need an identity.
CALLER_SCOPED_PREFIXES = ("/proposals",)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Generate or preserve correlation ID; attach to request.state, response header, and logging context."""

    async def dispatch(self, request: Request, call_next) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())
        request.state.correlation_id = correlation_id
        correlation_id_ctx.set(correlation_id)

        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response


class CallerContextMiddleware(BaseHTTPMiddleware):
    """Extract X-Caller-ID supplied by the host; 400 if missing on caller-scoped paths."""

    async def dispatch(self, request: Request, call_next) -> Response:
        caller_id = (request.headers.get(CALLER_HEADER) or "").strip()
        if not caller_id and request.url.path.startswith(CALLER_SCOPED_PREFIXES):
            return JSONResponse(
                status_code=400,
                content={"detail": "X-Caller-ID header is required"},
            )
        request.state.caller_id = caller_id or None
        caller_id_ctx.set(request.state.caller_id)
        return await call_next(request)


class AuditTriggerMiddleware(BaseHTTPMiddleware):
    """After response: log structured audit event (correlation_id, caller_id, path, method, status_code)."""

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        audit_event = {
            "event": "request_audit",
            "correlation_id": getattr(request.state, "correlation_id", None),
            "caller_id": getattr(request.state, "caller_id", None),
            "path": request.url.path,
            "method": request.method,
            "status_code": response.status_code,
        }
        logger.info(json.dumps(audit_event))
        return response
