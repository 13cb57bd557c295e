"""querybridge FastAPI application"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from querybridge import __version__
from querybridge.api.search import router as search_router
from querybridge.config import settings
from querybridge.core.errors import DispatchError
from querybridge.core.providers.chat import build_chat_configs
from querybridge.core.providers.search import GOOGLE_PLATFORM

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
# request lines carry query-param credentials
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the read-only chat provider registry on startup."""
    app.state.chat_configs = build_chat_configs(settings)
    platforms = ", ".join([GOOGLE_PLATFORM, *app.state.chat_configs])
    logger.info(f"[Startup] Platforms: {platforms}")
    yield


app = FastAPI(
    title="querybridge",
    description="Relay a query to Google search or a chat-completion API",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.cors_origins.split(",")],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DispatchError)
async def dispatch_error_handler(request: Request, exc: DispatchError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info(f"[search] rejected body: {exc.errors()}")
    return JSONResponse(status_code=400, content={"message": "Platform and query are required"})


app.include_router(search_router, prefix="/api")


@app.get("/")
async def root(request: Request):
    return {
        "message": "querybridge - search and chat relay",
        "version": __version__,
        "docs": "/docs",
        "platforms": [GOOGLE_PLATFORM, *request.app.state.chat_configs],
    }


@app.get("/health")
async def health():
    return {"ok": True, "service": "querybridge"}
