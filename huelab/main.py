from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from huelab import __version__
from huelab.api.v1 import router as v1_router
from huelab.schemas import HealthResponse
from huelab.services.colors.errors import ColorEngineError
from huelab.utils.logging import get_logger

log = get_logger()

app = FastAPI(
    title="Huelab Color Engine",
    description="Color conversion, harmony, accessibility and perception API",
    version=__version__
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(v1_router)


@app.exception_handler(ColorEngineError)
async def color_engine_error_handler(request: Request, exc: ColorEngineError):
    """Map engine input errors to 422 responses."""
    log.engine_error(request.url.path, exc)
    return JSONResponse(status_code=422, content=exc.to_dict())


@app.get("/healthz", response_model=HealthResponse)
def health_check():
    """Health check endpoint"""
    return HealthResponse(ok=True, version=__version__)


@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": "Huelab Color Engine API",
        "version": __version__,
        "docs": "/docs"
    }
