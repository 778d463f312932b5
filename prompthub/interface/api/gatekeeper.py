"""Request admission and CORS policy.

Every request passes through :func:`decide` before reaching a route. The
decision depends only on the request line, the ``Origin`` header, whether the
caller holds a valid session, and a :class:`GatekeeperPolicy` built once from
settings. :class:`GatekeeperMiddleware` applies the decision.
"""

from enum import Enum
from urllib.parse import urlencode

import logfire
from pydantic import BaseModel, ConfigDict
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, RedirectResponse, Response
from starlette.types import ASGIApp

from prompthub.config import GatekeeperSettings, Settings
from prompthub.util.jwt import has_valid_session


def is_under(path: str, prefix: str) -> bool:
    """Whether ``path`` is ``prefix`` itself or below it, segment-wise.

    Examples:
        >>> is_under("/posts/new", "/posts")
        True
        >>> is_under("/postscript", "/posts")
        False
        >>> is_under("/api/auth/login", "/api/auth/")
        True
    """
    base = prefix.rstrip("/")
    return path == base or path.startswith(base + "/")


class GatekeeperPolicy(BaseModel):
    """Immutable admission policy."""

    model_config = ConfigDict(frozen=True)

    allowed_origins: tuple[str, ...] = ()
    public_prefixes: tuple[str, ...] = ()
    protected_prefixes: tuple[str, ...] = ()
    api_prefix: str = "/api/"
    login_path: str = "/login"
    login_message: str = "Please log in to access this page"
    unauthorized_message: str = "Please log in first"
    allow_methods: tuple[str, ...] = ()
    allow_headers: tuple[str, ...] = ()
    max_age: int = 86400

    @classmethod
    def from_settings(cls, settings: GatekeeperSettings) -> "GatekeeperPolicy":
        return cls(
            allowed_origins=tuple(settings.allowed_origins),
            public_prefixes=tuple(settings.public_prefixes),
            protected_prefixes=tuple(settings.protected_prefixes),
            api_prefix=settings.api_prefix,
            login_path=settings.login_path,
            login_message=settings.login_message,
            unauthorized_message=settings.unauthorized_message,
            allow_methods=tuple(settings.allow_methods),
            allow_headers=tuple(settings.allow_headers),
            max_age=settings.max_age,
        )

    def is_public(self, path: str) -> bool:
        return any(is_under(path, prefix) for prefix in self.public_prefixes)

    def is_protected(self, path: str) -> bool:
        return any(is_under(path, prefix) for prefix in self.protected_prefixes)

    def is_api(self, path: str) -> bool:
        return is_under(path, self.api_prefix)

    def origin_allowed(self, origin: str) -> bool:
        return not self.allowed_origins or origin in self.allowed_origins


class Admission(str, Enum):
    """Outcome of the admission check."""

    PREFLIGHT = "preflight"
    PASS = "pass"
    UNAUTHORIZED = "unauthorized"
    REDIRECT = "redirect"


class GatekeeperDecision(BaseModel):
    """What to do with a request and which headers to attach."""

    model_config = ConfigDict(frozen=True)

    admission: Admission
    headers: dict[str, str]
    location: str | None = None
    body: dict[str, str] | None = None

    @property
    def passes(self) -> bool:
        return self.admission == Admission.PASS


def cors_headers(policy: GatekeeperPolicy, origin: str | None) -> dict[str, str]:
    """Negotiate CORS response headers for a request origin.

    Examples:
        >>> policy = GatekeeperPolicy(allowed_origins=("https://a.example",))
        >>> cors_headers(policy, "https://a.example")["Access-Control-Allow-Origin"]
        'https://a.example'
        >>> "Access-Control-Allow-Origin" in cors_headers(policy, "https://b.example")
        False
        >>> cors_headers(policy, None)["Access-Control-Allow-Origin"]
        '*'
    """
    headers: dict[str, str] = {}
    if origin:
        if policy.origin_allowed(origin):
            headers["Access-Control-Allow-Origin"] = origin
            headers["Access-Control-Allow-Credentials"] = "true"
            headers["Vary"] = "Origin"
    else:
        # Wildcard origin never goes with credentials
        headers["Access-Control-Allow-Origin"] = "*"

    headers["Access-Control-Allow-Methods"] = ", ".join(policy.allow_methods)
    if policy.allow_headers:
        headers["Access-Control-Allow-Headers"] = ", ".join(policy.allow_headers)
    headers["Access-Control-Max-Age"] = str(policy.max_age)
    return headers


def login_redirect_location(policy: GatekeeperPolicy, path: str) -> str:
    query = urlencode({"callbackUrl": path, "error": policy.login_message})
    return f"{policy.login_path}?{query}"


def decide(
    policy: GatekeeperPolicy,
    method: str,
    path: str,
    origin: str | None,
    has_session: bool,
) -> GatekeeperDecision:
    """Decide how to admit a request.

    1. ``OPTIONS`` is answered directly, without an auth check.
    2. Public prefixes always pass.
    3. Protected prefixes without a session get a JSON 401 under the API
       prefix and a login redirect elsewhere.
    4. Everything else passes.

    Args:
        policy: Admission policy
        method: HTTP method
        path: Request path
        origin: ``Origin`` header, if sent
        has_session: Whether the caller holds a valid session

    Returns:
        The decision, carrying the CORS headers for every outcome
    """
    headers = cors_headers(policy, origin)

    if method.upper() == "OPTIONS":
        return GatekeeperDecision(admission=Admission.PREFLIGHT, headers=headers)

    if policy.is_public(path):
        return GatekeeperDecision(admission=Admission.PASS, headers=headers)

    if policy.is_protected(path) and not has_session:
        if policy.is_api(path):
            return GatekeeperDecision(
                admission=Admission.UNAUTHORIZED,
                headers=headers,
                body={"error": policy.unauthorized_message, "code": "UNAUTHORIZED"},
            )
        return GatekeeperDecision(
            admission=Admission.REDIRECT,
            headers=headers,
            location=login_redirect_location(policy, path),
        )

    return GatekeeperDecision(admission=Admission.PASS, headers=headers)


def apply_headers(response: Response, headers: dict[str, str]) -> Response:
    for name, value in headers.items():
        if name == "Vary":
            response.headers.add_vary_header(value)
        else:
            response.headers[name] = value
    return response


class GatekeeperMiddleware(BaseHTTPMiddleware):
    """Applies :func:`decide` to every request."""

    def __init__(self, app: ASGIApp, settings: Settings) -> None:
        super().__init__(app)
        self.settings = settings
        self.policy = GatekeeperPolicy.from_settings(settings.gatekeeper)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        token = request.cookies.get(self.settings.auth.cookie_name)
        decision = decide(
            self.policy,
            method=request.method,
            path=request.url.path,
            origin=request.headers.get("origin"),
            has_session=has_valid_session(token, self.settings.auth),
        )

        if decision.admission == Admission.PREFLIGHT:
            return apply_headers(Response(status_code=200), decision.headers)

        if decision.admission == Admission.UNAUTHORIZED:
            logfire.info("Rejected unauthenticated API request", path=request.url.path)
            return apply_headers(
                JSONResponse(status_code=401, content=decision.body),
                decision.headers,
            )

        if decision.admission == Admission.REDIRECT:
            logfire.info("Redirecting to login", path=request.url.path)
            return apply_headers(
                RedirectResponse(decision.location, status_code=307),
                decision.headers,
            )

        response = await call_next(request)
        return apply_headers(response, decision.headers)
