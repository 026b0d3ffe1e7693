# routes_root.py
"""
Root / basic endpoints (health, landing).
"""

from urllib.parse import urlencode

from fastapi import APIRouter
from fastapi.responses import RedirectResponse

from categories import Scope
from settings import get_settings

router = APIRouter()


@router.get("/")
def read_root():
    """
    Landing endpoint: open the dashboard on the configured default tab.
    """
    scope = Scope.parse(get_settings().default_scope)
    return RedirectResponse(url="/dashboard?" + urlencode({"scope": scope.value}), status_code=302)


@router.get("/health")
def health():
    """
    Simple health check.
    """
    return {"status": "ok"}
