"""
Read-only HTTP surface for the startup directory.

    GET /health
    GET /startups?page=1&q=%23ai
    GET /startups/{startup_id}

Every /startups route requires `Authorization: Bearer <supabase access token>`.
"""

from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI, Header, HTTPException, Query, Request

from pitchcraft.auth import AuthContext, AuthService
from pitchcraft.config import load_settings
from pitchcraft.errors import StartupNotFound, SupabaseError, ValidationError
from pitchcraft.listing.detail import get_startup
from pitchcraft.listing.pagination import clamp_page, page_window
from pitchcraft.listing.query import build_listing_query
from pitchcraft.supabase_client import SupabaseClient


def create_app(data: Optional[SupabaseClient] = None, auth: Optional[AuthService] = None) -> FastAPI:
    """
    Build the app. Without arguments the clients come from the environment;
    tests pass fakes.
    """
    if data is None or auth is None:
        settings = load_settings()
        data = data or SupabaseClient.from_settings(settings)
        auth = auth or AuthService(data.client, settings)

    app = FastAPI(title="PitchCraft")
    app.state.data = data
    app.state.auth = auth

    def get_data(request: Request) -> SupabaseClient:
        return request.app.state.data

    def require_user(request: Request, authorization: Optional[str] = Header(None)) -> AuthContext:
        if not authorization or not authorization.lower().startswith("bearer "):
            raise HTTPException(status_code=401, detail="Missing bearer token")
        try:
            context = request.app.state.auth.context_for_token(authorization[7:].strip())
        except SupabaseError as e:
            raise HTTPException(status_code=503, detail=str(e))
        if context is None:
            raise HTTPException(status_code=401, detail="Invalid or expired session")
        return context

    @app.get("/health")
    def health_check() -> Dict[str, Any]:
        return {"status": "ok", "supabase_configured": app.state.data.is_configured}

    @app.get("/startups")
    def list_startups(
        page: int = Query(1, ge=1),
        q: str = Query(""),
        _user: AuthContext = Depends(require_user),
        client: SupabaseClient = Depends(get_data),
    ) -> Dict[str, Any]:
        query = build_listing_query(page, q)
        try:
            result = client.fetch_listing_page(query)
        except SupabaseError as e:
            raise HTTPException(status_code=502, detail=str(e))

        window = page_window(clamp_page(result.page, result.total_pages), result.total_pages)
        return {
            "startups": result.rows,
            "page": result.page,
            "page_size": result.page_size,
            "total_count": result.total_count,
            "total_pages": result.total_pages,
            "page_links": window.items(),
        }

    @app.get("/startups/{startup_id}")
    def show_startup(
        startup_id: str,
        _user: AuthContext = Depends(require_user),
        client: SupabaseClient = Depends(get_data),
    ) -> Dict[str, Any]:
        try:
            return dict(get_startup(client, startup_id))
        except ValidationError as e:
            raise HTTPException(status_code=400, detail=str(e))
        except StartupNotFound as e:
            raise HTTPException(status_code=404, detail=str(e))
        except SupabaseError as e:
            raise HTTPException(status_code=502, detail=str(e))

    return app
