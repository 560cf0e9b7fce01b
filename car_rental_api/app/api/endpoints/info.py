"""
Information endpoint.

Returns the service name and version so that clients and load
balancers can identify the deployment they are talking to.
"""

from typing import Dict

from fastapi import APIRouter

from car_rental_api.app.core.config import settings

router = APIRouter()


@router.get("", response_model=Dict[str, str])
async def get_info() -> Dict[str, str]:
    """Return the project name and API version."""
    return {"name": settings.project_name, "version": settings.api_version}
