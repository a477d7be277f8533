"""Per-request locale selection middleware."""

from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from gettext_catalogs.i18n.exceptions import CatalogError
from gettext_catalogs.i18n.resolvers import LocaleResolver
from gettext_catalogs.i18n.service import TranslationService
from gettext_catalogs.logging import bind_request_context, get_module_logger

logger = get_module_logger()


class LocaleMiddleware(BaseHTTPMiddleware):
    """Switches the translation service to the locale a request asks for.

    The locale comes from the ``query_param`` query parameter, then the
    session cookie, then the Accept-Language header. Unsupported values are
    ignored and the current locale is kept. A locale chosen through the
    query parameter is stored in the cookie.

    The cookie name defaults to the configured session identifier
    (``GETTEXT_SESSION_IDENTIFIER``).

    The service is exposed on ``request.state.translation``.
    """

    def __init__(
        self,
        app,
        service: TranslationService,
        query_param: str = "locale",
        cookie_name: Optional[str] = None,
    ):
        super().__init__(app)
        self.service = service
        self.query_param = query_param
        self.cookie_name = cookie_name or service.get_session_identifier()

    def select_locale(self, request: Request) -> tuple[str, bool]:
        """Return the locale requested by ``request`` and whether it was explicit.

        When nothing usable is requested the current locale is returned.
        """
        resolver = LocaleResolver(
            self.service.get_supported_locales(), self.service.get_locale()
        )

        requested = request.query_params.get(self.query_param)
        stored = request.cookies.get(self.cookie_name)
        for source, value in (("query", requested), ("cookie", stored)):
            if value and resolver.match(value) is None:
                logger.warning("rejected_locale", requested=value, source=source)

        locale = resolver.resolve(
            requested=requested,
            stored=stored,
            accept_language=request.headers.get("accept-language"),
        )
        return locale, resolver.match(requested) is not None

    async def dispatch(self, request, call_next):
        locale, explicit = self.select_locale(request)

        try:
            self.service.set_locale(locale)
        except CatalogError as e:
            logger.warning("locale_switch_failed", locale=locale, error=str(e))
            explicit = False

        request.state.translation = self.service
        with bind_request_context(
            locale=self.service.get_locale(),
            domain=self.service.get_domain(),
            request_path=request.url.path,
        ):
            response = await call_next(request)

        if explicit:
            response.set_cookie(self.cookie_name, locale, httponly=True, samesite="lax")
        return response
