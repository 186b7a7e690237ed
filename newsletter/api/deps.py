from fastapi import Request

from newsletter.db import SessionLocal
from newsletter.services.email_client import EmailClient


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_email_client(request: Request) -> EmailClient:
    """The application's shared email client, created in the lifespan."""
    return request.app.state.email_client
