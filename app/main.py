import logging
import uvicorn
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.core.config import settings
from app.core.errors import ResolverError, UpstreamFetchError
from app.core.logging_config import setup_logging
from app.models import ErrorResponse, ResolveResponse
from app.resolver import resolver

setup_logging()
logger = logging.getLogger(__name__)


def _as_bool(val: Optional[str], default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in ("1", "true", "yes", "on")


app = FastAPI(
    title="Google Maps Resolver API",
    description="Extract latitude, longitude and place details from Google Maps links (shortlinks and direct links).",
    version="1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ResolverError)
async def resolver_error_handler(request: Request, exc: ResolverError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.get(
    "/api/resolve",
    response_model=ResolveResponse,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def resolve(url: Optional[str] = None, details: Optional[str] = None):
    try:
        return await resolver.resolve(url, details=_as_bool(details))
    except ResolverError:
        raise
    except Exception as e:
        logger.exception(f"Resolve error: {e}")
        raise UpstreamFetchError(str(e)) from e


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    uvicorn.run(app, host=settings.SERVICE_HOST, port=settings.APP_PORT)
