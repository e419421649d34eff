from fastapi import APIRouter, Depends

from app.db.connection import DatabaseConnection, HEALTH_CONNECTED, get_db_connection

router = APIRouter()

@router.get("/")
async def health_check(connection: DatabaseConnection = Depends(get_db_connection)):
    """
    Health check endpoint that verifies API and database status.

    Args:
        connection: Database connection dependency

    Returns:
        dict: Health status of the API and database
    """
    database = connection.health_check()

    health_status = {
        "status": "healthy",
        "api": "online",
        "database": database,
    }
    if database["status"] != HEALTH_CONNECTED:
        health_status["status"] = "unhealthy"

    return health_status
