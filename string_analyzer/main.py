from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from string_analyzer import __version__
from string_analyzer.api.routes import router
from string_analyzer.config import settings
from string_analyzer.exceptions import InternalError, StringAnalyzerError
from string_analyzer.schemas import ErrorResponse
from string_analyzer.store import StringStore, get_store

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="String Analyzer Service",
    description="Analyze, store and query string properties",
    version=__version__
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# One store per application instance; routes receive it through get_store
app.state.store = StringStore()

app.include_router(router, tags=["strings"])


@app.on_event("startup")
def on_startup():
    logger.info(f"String Analyzer Service {__version__} starting with an empty in-memory store")


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump()
    )


@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": "String Analyzer Service",
        "version": __version__,
        "endpoints": {
            "POST /strings": "Analyze and store a string",
            "GET /strings/{string_value}": "Get specific string analysis",
            "GET /strings": "Get all strings with optional filters",
            "GET /strings/filter-by-natural-language": "Filter using natural language",
            "DELETE /strings/{string_value}": "Delete a string"
        }
    }


@app.get("/health")
def health_check(store: StringStore = Depends(get_store)):
    """Health check endpoint"""
    return {"status": "healthy", "total_strings": len(store)}


# Domain errors raised by the validator, store and routes
@app.exception_handler(StringAnalyzerError)
async def string_analyzer_exception_handler(request: Request, exc: StringAnalyzerError):
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return error_response(exc.status_code, exc.message)


# Unparseable query parameters
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = []
    for error in exc.errors():
        field = error['loc'][-1]
        details.append(f"{field}: {error['msg']}")

    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "Invalid query parameter values or types (" + "; ".join(details) + ")"
    )


# Unknown routes, wrong methods
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail))


# Generic error handler
@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
    error = InternalError("Internal server error")
    return error_response(error.status_code, error.message)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "string_analyzer.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload
    )
