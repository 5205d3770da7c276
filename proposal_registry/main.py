# proposal_registry/main.py

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from proposal_registry.api.middleware import (
    AuditTriggerMiddleware,
    CallerContextMiddleware,
    CorrelationIdMiddleware,
)
from proposal_registry.api.routers import health, proposals
from proposal_registry.config.logging import configure_logging
from proposal_registry.config.settings import get_settings
from proposal_registry.domain.exceptions import (
    AccessRejectedError,
    AlreadyVotedError,
    DomainError,
    DomainValidationError,
    NoSuchProposalError,
    ProposalIsNotActiveError,
    UpdateError,
)

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    debug=settings.debug,
)

# Middleware order: last added runs first (outermost). Request flow: CorrelationId -> CallerContext -> AuditTrigger.
app.add_middleware(AuditTriggerMiddleware)
app.add_middleware(CallerContextMiddleware)
app.add_middleware(CorrelationIdMiddleware)


@app.exception_handler(NoSuchProposalError)
async def no_such_proposal_handler(request, exc: NoSuchProposalError):
    return JSONResponse(status_code=404, content={"detail": exc.message, "error": "NoSuchProposal"})


@app.exception_handler(AccessRejectedError)
async def access_rejected_handler(request, exc: AccessRejectedError):
    return JSONResponse(status_code=403, content={"detail": exc.message, "error": "AccessRejected"})


@app.exception_handler(AlreadyVotedError)
async def already_voted_handler(request, exc: AlreadyVotedError):
    return JSONResponse(status_code=409, content={"detail": exc.message, "error": "AlreadyVoted"})


@app.exception_handler(ProposalIsNotActiveError)
async def proposal_not_active_handler(request, exc: ProposalIsNotActiveError):
    return JSONResponse(status_code=409, content={"detail": exc.message, "error": "ProposalIsNotActive"})


@app.exception_handler(UpdateError)
async def update_error_handler(request, exc: UpdateError):
    return JSONResponse(status_code=422, content={"detail": exc.message, "error": "UpdateError"})


@app.exception_handler(DomainValidationError)
async def domain_validation_error_handler(request, exc: DomainValidationError):
    return JSONResponse(status_code=422, content={"detail": exc.message})


@app.exception_handler(DomainError)
async def domain_error_handler(request, exc: DomainError):
    return JSONResponse(status_code=400, content={"detail": exc.message})


@app.exception_handler(Exception)
async def unexpected_error_handler(request, exc: Exception):
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


# Routers: /health, /proposals
app.include_router(health.router)
app.include_router(proposals.router, prefix="/proposals")
