import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from crypto_advisor.delivery.web.routes import router
from crypto_advisor.errors import AdvisorError, InvalidInput
from crypto_advisor.recommend.engine import RecommendationEngine

logger = logging.getLogger(__name__)

INTERNAL_ERROR = {"error": "Internal Server Error"}


async def _invalid_input(request: Request, exc: InvalidInput) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": exc.message})


async def _advisor_error(request: Request, exc: AdvisorError) -> JSONResponse:
    # UpstreamFailure / PolicyConfigurationError: cause is logged, caller sees an opaque 500
    logger.error("Recommendation failed on %s: %s", request.url.path, exc, exc_info=exc)
    return JSONResponse(status_code=500, content=INTERNAL_ERROR)


async def _unhandled(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(status_code=500, content=INTERNAL_ERROR)


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 405:
        body = {"error": "Method not allowed"}
    else:
        body = {"error": str(exc.detail)}
    return JSONResponse(status_code=exc.status_code, content=body, headers=getattr(exc, "headers", None))


def create_app(engine: RecommendationEngine) -> FastAPI:
    app = FastAPI(title="Crypto Advisor", version="0.1.0")
    app.state.engine = engine

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InvalidInput, _invalid_input)
    app.add_exception_handler(AdvisorError, _advisor_error)
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(Exception, _unhandled)

    app.include_router(router)
    return app
