# api/main.py
import logging
import os
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from catalog.errors import CatalogError, ServerError
from api.routes import authors, libraries, series, stories, users, volumes

logging.basicConfig(
    level=os.getenv("CATALOG_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Library Catalog")

# CORS configuration
DEFAULT_ORIGINS = [
    "http://localhost:5173",        # Local Vite dev server
    "http://localhost:4173",        # Local Vite preview
    "http://127.0.0.1:5173",
    "http://localhost",             # Local production URL
]
origins = [
    origin.strip()
    for origin in os.getenv("CATALOG_CORS_ORIGINS", ",".join(DEFAULT_ORIGINS)).split(",")
    if origin.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError):
    if isinstance(exc, ServerError):
        logger.exception("%s %s failed", request.method, request.url.path, exc_info=exc)
    else:
        logger.warning("%s %s: %s %s", request.method, request.url.path, type(exc).__name__, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

@app.get("/")
async def root():
    return {"message": "Library Catalog"}

# Include routers
app.include_router(libraries.router)
app.include_router(authors.router)
app.include_router(series.router)
app.include_router(stories.router)
app.include_router(volumes.router)
app.include_router(users.router)
