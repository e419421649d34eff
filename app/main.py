import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.api import api_router
from app.core.config import settings
from app.core.exceptions import ConfigurationError, DatabaseConnectionError
from app.db.connection import DatabaseConnection

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Car rental platform data service: schema bootstrap and database health",
    version="0.1.0",
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
)

# Set CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, replace with specific origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API router
app.include_router(api_router, prefix=settings.API_V1_STR)

@app.get("/")
async def root():
    """Root endpoint with basic service information."""
    return {
        "message": f"Welcome to {settings.PROJECT_NAME}",
        "version": "0.1.0",
        "docs_url": "/docs",
    }

@app.on_event("startup")
def startup_event():
    """Run on application startup."""
    logger.info("Starting data service...")
    app.state.db_connection = DatabaseConnection(settings)
    try:
        app.state.db_connection.connect()
    except (ConfigurationError, DatabaseConnectionError) as e:
        # The health endpoint reports the database as disconnected
        logger.error(f"Database unavailable at startup: {e}")

@app.on_event("shutdown")
def shutdown_event():
    """Run on application shutdown."""
    connection = getattr(app.state, "db_connection", None)
    if connection is not None:
        connection.disconnect()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
