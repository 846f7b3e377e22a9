# backend/automobile_api/main.py
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
import time
import logging

# Import routers
from .api.v1 import automobiles
from .gql.schema import create_graphql_router

# Import database setup
from .core.config import settings
from .core.database import init_db

# Setup Logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Create FastAPI App
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="API for managing automobiles",
    version="1.0.0",
    docs_url="/api-docs",
    redoc_url="/redoc"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API Routers
logger.info("Registering API routers...")

app.include_router(
    automobiles.router,
    prefix=f"{settings.API_PREFIX}/automobiles",
    tags=["Automobiles"]
)

app.include_router(
    create_graphql_router(),
    prefix="/graphql",
    tags=["GraphQL"]
)

logger.info("All routers registered successfully")

# Root Endpoint
@app.get("/", tags=["System"])
def read_root():
    """Welcome endpoint with API information"""
    return {
        "message": settings.PROJECT_NAME,
        "version": "1.0.0",
        "status": "operational",
        "documentation": "/api-docs",
        "graphql": "/graphql",
        "health_check": "/health"
    }

# Health Check Endpoint
@app.get("/health", tags=["System"])
def health_check():
    """Check that the database answers"""
    from .core.database import SessionLocal

    db = SessionLocal()
    try:
        db.execute(text("SELECT 1"))
        db_status = "connected"
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        db_status = f"error: {str(e)}"
    finally:
        db.close()

    return {
        "status": "healthy" if db_status == "connected" else "degraded",
        "service": settings.PROJECT_NAME,
        "timestamp": time.time(),
        "components": {
            "database": db_status
        }
    }

# Startup Event
@app.on_event("startup")
async def startup_event():
    """Create the automobiles table and list the registered routes"""
    logger.info("Initializing database...")
    try:
        init_db()
        logger.info("Database initialized")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)
        logger.warning("Starting anyway; store operations will fail until the database is reachable")

    for route in app.routes:
        if hasattr(route, "methods"):
            methods = ", ".join(sorted(route.methods))
            logger.info(f"   {methods:12} {route.path}")

    logger.info(f"Server is running on port {settings.PORT}")

# Request Logging Middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all incoming requests"""
    start_time = time.time()

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(
        f"{request.method} {request.url.path} "
        f"- Status: {response.status_code} "
        f"- Time: {process_time:.3f}s"
    )

    return response

# Error Handlers
AUTOMOBILES_PATH = f"{settings.API_PREFIX}/automobiles"


def is_automobiles_path(path: str) -> bool:
    return path == AUTOMOBILES_PATH or path.startswith(f"{AUTOMOBILES_PATH}/")


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed input on the REST routes gets the same envelope as store errors"""
    if is_automobiles_path(request.url.path):
        logger.error(f"Rejected input on {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=500, content={"error": str(exc)})
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(exc.errors())})


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("automobile_api.main:app", host=settings.HOST, port=settings.PORT, reload=settings.RELOAD)
