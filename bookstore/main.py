from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from bookstore.core.config import settings
from bookstore.core.middleware_correlation import CorrelationIdMiddleware
from bookstore.core.logging import setup_logging
from bookstore.core.errors import register_exception_handlers
from bookstore.schemas.common import ApiResponse


# Routers
from bookstore.api.routes.auth import router as auth_router
from bookstore.api.routes.genres import router as genres_router
from bookstore.api.routes.books import router as books_router
from bookstore.api.routes.transactions import router as transactions_router


setup_logging(settings.LOG_LEVEL)

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Bookstore back-office API for genres, books, accounts and sales transactions.",
    version="1.0.0",
)

# CORS middleware - allow docs UI to make API requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Middlewares
app.add_middleware(CorrelationIdMiddleware)

# Root endpoint
@app.get("/", response_model=ApiResponse[dict[str, str]])
async def root():
    """API root endpoint with basic information."""
    return ApiResponse[dict[str, str]](
        message=settings.PROJECT_NAME,
        data={
            "version": "1.0.0",
            "docs_url": "/docs",
            "auth": "/auth",
            "genre": "/genre",
            "books": "/books",
            "transactions": "/transactions",
        },
    )

register_exception_handlers(app)

# Mount routers
app.include_router(auth_router)
app.include_router(genres_router)
app.include_router(books_router)
app.include_router(transactions_router)
