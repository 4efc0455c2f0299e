"""
FastAPI application entry point
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.app.api.v1.auth import auth
from backend.app.api.v1.posts import routes as posts
from backend.app.api.v1.profile import routes as profile
from backend.app.api.v1.users import routes as users
from backend.app.core.config import settings
from backend.app.core.exceptions import register_exception_handlers
from backend.app.core.logging_config import setup_logging
from backend.app.db.base import Base
from backend.app.db.session import engine

# Import models so they register with Base.metadata
import backend.app.models  # noqa: F401

logger = setup_logging()

# Create database tables
try:
    Base.metadata.create_all(bind=engine)
except Exception as e:
    logger.exception("Database error: %s", e)

# Initialize FastAPI app
app = FastAPI(
    title=f"{settings.app_name} API",
    description="Developer profiles, posts, comments and likes",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(users.router, prefix="/api/users", tags=["users"])
app.include_router(auth.router, prefix="/api/auth", tags=["authentication"])
app.include_router(profile.router, prefix="/api/profile", tags=["profile"])
app.include_router(posts.router, prefix="/api/posts", tags=["posts"])


@app.get("/")
def read_root():
    """Root endpoint"""
    return {"message": f"{settings.app_name} API", "version": settings.app_version}


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
