# mentorhub/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse

from mentorhub.api import admin, auth, availability, dashboard, mentors, profile, requests, sessions
from mentorhub.config import settings
from mentorhub.database import init_db
from mentorhub.exceptions import Forbidden, Unauthenticated
from mentorhub.utils.rendering import render

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create database tables
    init_db()
    if settings.cookie_secure and settings.SECRET_KEY == "s3cr3t":
        logger.warning("SECRET_KEY is the development default; set it in production")
    yield


# Initialize FastAPI app
app = FastAPI(title="MentorHub", debug=settings.DEBUG, lifespan=lifespan)

# Page routers
app.include_router(auth.router)          # /auth/*
app.include_router(dashboard.router)     # /dashboard
app.include_router(profile.router)       # /profile/*
app.include_router(mentors.router)       # /mentors
app.include_router(requests.router)      # /requests, /my-requests
app.include_router(sessions.router)      # /sessions, /my-sessions
app.include_router(availability.router)  # /availability
app.include_router(admin.router)         # /admin/*


@app.exception_handler(Unauthenticated)
async def unauthenticated_handler(request: Request, exc: Unauthenticated):
    return RedirectResponse(url="/auth/login", status_code=303)


@app.exception_handler(Forbidden)
async def forbidden_handler(request: Request, exc: Forbidden):
    logger.info("Forbidden: %s %s", request.method, request.url.path)
    return render(request, "error.html", {"error": exc.message or "Forbidden"}, status_code=403)


@app.get("/")
def root():
    """Redirect to the dashboard (which in turn requires a login)."""
    return RedirectResponse(url="/dashboard", status_code=303)


@app.get("/health")
def health_check():
    return {
        "status": "healthy",
        "message": "MentorHub is running",
        "version": "1.0.0",
    }
