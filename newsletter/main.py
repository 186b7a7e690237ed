import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Response, status

from newsletter.api.exception_handlers import register_exception_handlers
from newsletter.api.middleware import RequestIdMiddleware
from newsletter.api.router import api_router
from newsletter.core.config import settings
from newsletter.core.logging import configure_logging
from newsletter.services.email_client import EmailClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level, json_output=settings.log_json)

    email_client = EmailClient(
        base_url=settings.email_base_url,
        sender=settings.sender(),
        authorization_token=settings.email_authorization_token,
        timeout=settings.email_timeout(),
    )
    app.state.email_client = email_client
    logger.info("Email client ready: %r", email_client)
    try:
        yield
    finally:
        await email_client.aclose()


app = FastAPI(lifespan=lifespan)
app.add_middleware(RequestIdMiddleware)

register_exception_handlers(app)
app.include_router(api_router)


@app.get("/health_check")
def health_check():
    return Response(status_code=status.HTTP_200_OK)
