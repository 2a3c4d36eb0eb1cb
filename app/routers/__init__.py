from app.routers import api

__all__ = ["api"]
