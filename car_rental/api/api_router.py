from fastapi import APIRouter
from .routes import users_routes, vehicles_routes

api_router = APIRouter()

api_router.include_router(users_routes.router, prefix="/users", tags=["Users"])

api_router.include_router(vehicles_routes.router, prefix="/vehicles", tags=["Vehicles"])
