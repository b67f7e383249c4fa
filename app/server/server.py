from typing import Optional

from fastapi import APIRouter, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from infrastructure.i18n import I18n, Opaque, UnsupportedLocaleError
from infrastructure.logging import get_module_logger
from infrastructure.services import get_i18n, get_settings
from infrastructure.services.dependencies import I18nDep
from server.lifespan import lifespan
from server.middleware import LocaleMiddleware

logger = get_module_logger()

health_router = APIRouter(tags=["health"])
pages_router = APIRouter(tags=["pages"])


class LocaleSwitch(BaseModel):
    locale: str


@health_router.get("/health")
def health():
    return {"status": "ok"}


@pages_router.get("/{locale}")
async def home(request: Request, i18n: I18nDep, name: str = "friend"):
    resolution = request.state.i18n
    client = i18n.client
    t = await i18n.server.t_for(resolution.locale)
    nav = await client.scoped_t("nav")
    terms = t("terms", link=Opaque(client.locale_link(href="/terms", children="terms")))
    return {
        "locale": resolution.locale,
        "full_locale": resolution.full_locale,
        "dir": i18n.get_dir(resolution.locale),
        "greeting": t("greeting", name=name),
        "welcome": t("welcome"),
        "terms_html": "".join(
            part if isinstance(part, str) else part.content for part in terms
        ),
        "links": [
            client.locale_link(href="/", children=nav("home")),
            client.locale_link(href="/items", children=nav("items")),
        ],
    }


@pages_router.get("/{locale}/items")
async def items(request: Request, i18n: I18nDep, count: int = 0):
    t = await i18n.server.t_for(request.state.i18n.locale)
    return {"count": count, "message": t("items", count=count)}


@pages_router.post("/{locale}/items")
async def switch_items_locale(body: LocaleSwitch, i18n: I18nDep):
    """Switch the items page to another locale.

    The middleware answers with the queued navigation and locale cookies.
    """
    try:
        target = await i18n.client.change_locale(body.locale)
    except UnsupportedLocaleError as e:
        logger.warning("locale_switch_rejected", requested=body.locale)
        raise HTTPException(status_code=400, detail=str(e)) from e
    return {"target": target}


def create_app(i18n: Optional[I18n] = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        i18n: i18n instance to serve with. Defaults to the ``get_i18n``
            singleton, resolved on first use.
    """
    app = FastAPI(lifespan=lifespan)

    if i18n is not None:
        app.state.i18n = i18n
        app.dependency_overrides[get_i18n] = lambda: i18n

    settings = get_settings()
    allow_origins = (
        [settings.server.BACKEND_URL]
        if settings.is_production
        else [
            "http://localhost:8000",
            "http://127.0.0.1:8000",
        ]
    )
    app.add_middleware(LocaleMiddleware, i18n=i18n)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(pages_router)
    return app


handler = create_app()
