from fastapi import APIRouter

from staff_directory.api.v1.endpoints import directory, employees, form, health

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health.router)
api_router.include_router(directory.router)
api_router.include_router(employees.router)
api_router.include_router(form.router)
