from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from string_analyzer import __version__, config
from string_analyzer.api.routes import get_store, router
from string_analyzer.errors import MissingFieldError, StringAnalyzerError, TypeMismatchError
from string_analyzer.store import StringStore

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
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
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Load the snapshot once and share the store with every request
@app.on_event("startup")
def on_startup():
    logger.info("Initializing string store...")
    app.state.store = StringStore(data_file=config.DATA_FILE)
    app.state.store.load()
    logger.info(f"String store ready with {len(app.state.store)} records")


app.include_router(router, tags=["strings"])


@app.get("/")
def root(store: StringStore = Depends(get_store)):
    """Root endpoint"""
    return {
        "message": "String Analyzer Service",
        "version": __version__,
        "status": "operational",
        "records": len(store),
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
    return {"status": "healthy", "records": len(store)}


# Domain error handler
@app.exception_handler(StringAnalyzerError)
async def string_analyzer_exception_handler(request: Request, exc: StringAnalyzerError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# Validation error handler
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = {}
    body_missing = False
    body_wrong_type = False
    body_invalid = False

    for error in exc.errors():
        loc = error['loc']
        field = str(loc[-1])
        errors[field] = error['msg']

        if loc[0] == "body":
            body_invalid = True
            if error['type'] == "missing":
                body_missing = True
            # ("body",) alone or json_invalid is a garbled body, not a mistyped field
            elif len(loc) > 1 and (error['type'].endswith("_type") or error['type'] == "value_error"):
                body_wrong_type = True

    if body_missing:
        exc = MissingFieldError("Invalid request body or missing 'value' field", {"details": errors})
    elif body_wrong_type:
        exc = TypeMismatchError("Invalid data type for 'value' (must be string)", {"details": errors})
    else:
        message = "Invalid request body" if body_invalid else "Invalid query parameter values or types"
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": message,
                "details": errors
            }
        )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# HTTPException handler
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # If detail is already a dict with 'error' key, return as is
    if isinstance(exc.detail, dict) and 'error' in exc.detail:
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.detail
        )
    # Otherwise wrap it
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)}
    )


# Generic error handler
@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error"
        }
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("string_analyzer.main:app", host=config.HOST, port=config.PORT)
