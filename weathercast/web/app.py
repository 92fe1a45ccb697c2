"""FastAPI frontend: search form, forecast pages, JSON API and recent lookups."""

import logging
import secrets
from pathlib import Path
from typing import Annotated

from fastapi import Depends, FastAPI, HTTPException, Query, Request, status
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from fastapi.templating import Jinja2Templates

from weathercast import __version__
from weathercast.config.schema import AppConfig
from weathercast.errors import NotFoundError, UpstreamError, WeatherError
from weathercast.models.forecast import WeatherQuery
from weathercast.pipeline.weather_service import WeatherService
from weathercast.storage.city_repo import CityStore
from weathercast.storage.database import connect, run_migrations

logger = logging.getLogger(__name__)

basic_auth = HTTPBasic(realm="Please enter your credentials")
templates = Jinja2Templates(directory=Path(__file__).parent / "templates")


def create_app(
    config: AppConfig | None = None, service: WeatherService | None = None
) -> FastAPI:
    """Build the app. Without a service, one is wired from ``config``."""
    config = config or AppConfig()
    if service is None:
        conn = connect(config.database.path)
        run_migrations(conn)
        service = WeatherService.from_config(config, CityStore(conn))

    app = FastAPI(title="Weathercast", version=__version__)
    app.state.config = config
    app.state.service = service
    _register_exception_handlers(app)
    _register_routes(app)
    return app


def get_service(request: Request) -> WeatherService:
    return request.app.state.service


def require_user(
    request: Request,
    credentials: Annotated[HTTPBasicCredentials, Depends(basic_auth)],
) -> str:
    auth = request.app.state.config.auth
    user_ok = secrets.compare_digest(
        credentials.username.encode(), auth.username.encode()
    )
    password_ok = secrets.compare_digest(
        credentials.password.encode(), auth.password.encode()
    )
    if not (user_ok and password_ok):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": 'Basic realm="Please enter your credentials"'},
        )
    return credentials.username


def _status_for(exc: WeatherError) -> int:
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, UpstreamError):
        return status.HTTP_502_BAD_GATEWAY
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(WeatherError)
    async def weather_error_handler(request: Request, exc: WeatherError):
        code = _status_for(exc)
        if code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=code, content={"error": exc.message})


def _register_routes(app: FastAPI) -> None:
    Service = Annotated[WeatherService, Depends(get_service)]

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request):
        return templates.TemplateResponse(request, "index.html")

    @app.get("/weather", response_class=HTMLResponse)
    def weather(
        request: Request,
        params: Annotated[WeatherQuery, Query()],
        service: Service,
    ):
        display = service.lookup(params.city)
        return templates.TemplateResponse(
            request, "weather.html", {"display": display}
        )

    @app.get("/api/v1/weather/{city}")
    def weather_json(city: str, service: Service):
        return service.lookup(city).to_dict()

    @app.get("/stats", response_class=HTMLResponse)
    def stats(
        request: Request,
        service: Service,
        _user: Annotated[str, Depends(require_user)],
    ):
        cities = service.recent(request.app.state.config.recent_limit)
        return templates.TemplateResponse(request, "stats.html", {"cities": cities})

    @app.get("/api/health")
    def health(service: Service):
        return {"db_ok": service.store.ping()}
