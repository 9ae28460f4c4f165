# Recipe Finder API Main Entry Point
import logging
import sys
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from .settings import settings
from .errors import QueryFailedError, RecipeNotFoundError
from .routers.ready import router as ready_router
from .routers.recipes import router as recipes_router
from .routers.search import router as search_router

# Configure structured logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger("recipe_finder")

# Rate limiter (per-IP)
limiter = Limiter(key_func=get_remote_address, default_limits=["100/minute"])

app = FastAPI(title="Recipe Finder API", version="0.1.0")
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(QueryFailedError)
def query_failed_handler(request: Request, exc: QueryFailedError):
    return JSONResponse(
        status_code=500,
        content={"detail": exc.message, "code": "QUERY_FAILED", "operation": exc.operation},
    )


@app.exception_handler(RecipeNotFoundError)
def not_found_handler(request: Request, exc: RecipeNotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc), "code": "NOT_FOUND"})


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(ready_router, prefix="/api", tags=["ready"])
app.include_router(search_router, prefix="/api", tags=["search"])
app.include_router(recipes_router, prefix="/api", tags=["recipes"])
