"""Health check endpoint."""

from typing import Any

from fastapi import APIRouter, Depends

from user_directory.api.http.deps import get_store
from user_directory.core.store import DirectoryStore

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health(store: DirectoryStore = Depends(get_store)) -> dict[str, Any]:
    """Liveness probe; reports the number of stored users. No token required."""
    return {"status": "healthy", "service": "user-directory", "users": store.count()}
