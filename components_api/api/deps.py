# components_api/api/deps.py
from fastapi import HTTPException, Request, status

from components_api.repository.interface import ComponentRepository


def get_repository(request: Request) -> ComponentRepository:
    """
    Dependency that returns the repository chosen at startup.
    Usage:
        repo: ComponentRepository = Depends(get_repository)
    """
    repo = getattr(request.app.state, "repository", None)
    if repo is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Repository not initialised",
        )
    return repo
