# app/api/v1/router.py
from fastapi import APIRouter
from app.config.settings import settings
from app.modules.sales.router import router as sales_router
from app.modules.customers.router import router as customers_router
from app.modules.products.router import router as products_router
from app.modules.users.router import router as users_router


# Crear router principal de la API v1
api_router = APIRouter()

api_router.include_router(
    sales_router,
    prefix="/ventas",
    tags=["Ventas"]
)

api_router.include_router(
    customers_router,
    prefix="/clientes",
    tags=["Clientes"]
)

api_router.include_router(
    products_router,
    prefix="/productos",
    tags=["Productos"]
)

api_router.include_router(
    users_router,
    prefix="/usuarios",
    tags=["Usuarios"]
)


@api_router.get("/")
async def api_root():
    """Root endpoint de la API"""
    return {
        "message": f"{settings.app_name} v1",
        "version": settings.version,
        "status": "active",
        "docs": "/docs",
        "available_endpoints": {
            "ventas": "/api/v1/ventas",
            "clientes": "/api/v1/clientes",
            "productos": "/api/v1/productos",
            "usuarios": "/api/v1/usuarios"
        }
    }

@api_router.get("/health")
async def health_check():
    """Health check de la API"""
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.version,
        "modules": {
            "ventas": {
                "status": "active",
                "features": [
                    "Registro de ventas con descuento atómico de stock",
                    "Listado de ventas",
                    "Cambio de estado",
                    "Eliminación con reversión de stock"
                ]
            },
            "clientes": {"status": "active"},
            "productos": {"status": "active"},
            "usuarios": {"status": "active"}
        }
    }
