import logging
from contextlib import asynccontextmanager
from datetime import timedelta

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain.entities  # noqa: F401  registers tables on SQLModel.metadata
from src.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from src.adapter.services.jwt_token_service import JwtTokenService
from src.adapter.services.local_image_storage import LocalImageStorage
from src.adapter.services.smtp_email_sender import SmtpEmailSender
from .error import (
    ClientError,
    ServerError,
    handle_client_error,
    handle_server_error,
    handle_unexpected_error,
    handle_validation_error,
)
from .middleware import RequestLoggingMiddleware

logger = logging.getLogger(__name__)

UPLOADS_PATH = "/uploads"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect to the store before serving; a store that cannot be reached is fatal."""
    engine = app.state.engine
    try:
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
    except (SQLAlchemyError, OSError) as exc:
        logger.critical(f"Could not connect to database: {exc}")
        raise SystemExit(1) from exc

    logger.info("Connected to database")
    yield
    await engine.dispose()


def create_app(ApplicationConfig) -> FastAPI:
    app = FastAPI(title="Inventory API", version="0.1.0", lifespan=lifespan)

    # Process-wide state, built once from the explicit configuration
    app.state.config = ApplicationConfig
    app.state.engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)
    app.state.session_factory = sessionmaker(
        app.state.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    app.state.password_hasher = BcryptPasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)
    app.state.token_service = JwtTokenService(
        secret=ApplicationConfig.JWT_SECRET,
        ttl=timedelta(hours=ApplicationConfig.SESSION_TOKEN_TTL_HOURS),
    )
    app.state.email_sender = SmtpEmailSender(
        host=ApplicationConfig.SMTP_HOST,
        port=ApplicationConfig.SMTP_PORT,
        username=ApplicationConfig.SMTP_USER,
        password=ApplicationConfig.SMTP_PASSWORD,
        default_from=ApplicationConfig.EMAIL_FROM,
        use_tls=ApplicationConfig.SMTP_USE_TLS,
    )
    app.state.image_storage = LocalImageStorage(
        ApplicationConfig.UPLOAD_DIR, public_prefix=UPLOADS_PATH
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(RequestLoggingMiddleware)

    from src.api.routes import contact, health_check, products, users

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(users.router, prefix=ApplicationConfig.API_PREFIX, tags=["Users"])
    app.include_router(products.router, prefix=ApplicationConfig.API_PREFIX, tags=["Products"])
    app.include_router(contact.router, prefix=ApplicationConfig.API_PREFIX, tags=["Contact"])

    app.mount(
        UPLOADS_PATH,
        StaticFiles(directory=ApplicationConfig.UPLOAD_DIR, check_dir=False),
        name="uploads",
    )

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
