"""Primary API router definition."""

from fastapi import APIRouter

from . import attendance, auth, dashboard, groups, medals, products, purchases, students

api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(groups.router)
api_router.include_router(students.router)
api_router.include_router(attendance.router)
api_router.include_router(medals.router)
api_router.include_router(products.router)
api_router.include_router(purchases.router)
api_router.include_router(dashboard.router)


@api_router.get("/health", tags=["health"])
async def healthcheck() -> dict[str, str]:
    """Basic health probe endpoint."""
    return {"status": "ok"}
