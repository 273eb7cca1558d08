# app/main.py
import hashlib
import os
from contextlib import asynccontextmanager
from datetime import datetime

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.gzip import GZipMiddleware

# ---- Load env (.env) ----
load_dotenv()

from app.config import get_settings
from app.db.session import dispose_engine
from app.utils.logger import get_logger

# ---- Routers ----
from app.routers import dashboard
from app.routers import health
from app.routers import users

logger = get_logger(__name__)

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
STATIC_DIR = os.path.join(BASE_DIR, "static")
TEMPLATES_DIR = os.path.join(BASE_DIR, "templates")

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    dispose_engine()


app = FastAPI(title=settings.APP_TITLE, lifespan=lifespan)

# =============================================================================
# Middleware
# =============================================================================
app.add_middleware(GZipMiddleware, minimum_size=500)

# =============================================================================
# Static & Templates
# =============================================================================
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
templates = Jinja2Templates(directory=TEMPLATES_DIR)
app.state.templates = templates

templates.env.globals["APP_TITLE"] = settings.APP_TITLE
# Footer/helper: use as {{ now().year }}
templates.env.globals["now"] = lambda: datetime.now()

# ---- CSS cache-busting (no client JS) ----
def _static_file_version(path: str) -> str:
    try:
        with open(path, "rb") as f:
            return hashlib.sha1(f.read()).hexdigest()[:10]
    except OSError:
        try:
            return str(int(os.path.getmtime(path)))
        except OSError:
            return "dev"

SITE_CSS_PATH = os.path.join(STATIC_DIR, "css", "site.css")
STATIC_VERSION = _static_file_version(SITE_CSS_PATH)
templates.env.globals["STATIC_VERSION"] = STATIC_VERSION

# =============================================================================
# Error pages
# =============================================================================
def _wants_html(request: Request) -> bool:
    return "text/html" in (request.headers.get("accept") or "")


@app.exception_handler(SQLAlchemyError)
async def handle_database_error(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path)
    if _wants_html(request):
        return templates.TemplateResponse(
            request,
            "pages/error.html",
            {"title": "Database unavailable", "section": None},
            status_code=503,
        )
    return JSONResponse({"detail": "Database unavailable"}, status_code=503)

# =============================================================================
# Routes
# =============================================================================
app.include_router(dashboard.router)
app.include_router(users.router)
app.include_router(health.router)
