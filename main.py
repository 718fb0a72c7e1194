from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware
from registration_api.core.config import settings
from registration_api.api.endpoints.registration import router as registration_router
from registration_api.api.error_handlers import register_error_handlers
from registration_api.db.session import create_tables
import logging

# Logging setup
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.PROJECT_NAME)

# Signed-cookie sessions, written to by the registration route
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SECRET_KEY,
    session_cookie=settings.SESSION_COOKIE,
    max_age=settings.SESSION_MAX_AGE,
)

# Register routers
app.include_router(registration_router, prefix=f"{settings.API_PREFIX}/register", tags=["registration"])
register_error_handlers(app)

@app.on_event("startup")
async def startup():
    await create_tables()
    logger.info("Startup event completed. Database tables created.")
