"""Multilingual site — English by default, Spanish and Czech under a prefix.

Demonstrates named routes per language, positional parameters, an
optional leading segment, and controller-id dispatch.

Serve ``app`` with any ASGI server, e.g. ``uvicorn app:app``.
"""

from babelroute import RouteMatch, Router, RoutingApp

router = Router(default_lang="en")
router.add_route(["get"], "/", "Pages:home", name="home")
router.add_route(["get"], "/", "Pages:home", name="home", lang="es")
router.add_route(["get"], "/", "Pages:home", name="home", lang="cs")
router.add_route(["get"], "/article/([0-9]+)", "Articles:show", name="article")
router.add_route(["get"], "/articulo/([0-9]+)", "Articles:show", name="article", lang="es")
router.add_route(["get"], "/clanek/([0-9]+)", "Articles:show", name="article", lang="cs")
router.add_route(["get", "post"], "/contact", "Pages:contact", name="contact")
router.add_route(["get"], "/([a-z]+)?/reviews", "Reviews:list", name="reviews")


def home(match: RouteMatch) -> str:
    greetings = {"en": "Hello", "es": "Hola", "cs": "Ahoj"}
    return greetings[match.lang]


def show_article(match: RouteMatch) -> str:
    (article_id,) = match.params
    return f"article {article_id} ({match.lang})"


def contact(match: RouteMatch) -> str:
    return "contact"


def list_reviews(match: RouteMatch) -> str:
    (category,) = match.params
    return f"reviews: {category or 'all'}"


CONTROLLERS = {
    "Pages:home": home,
    "Articles:show": show_article,
    "Pages:contact": contact,
    "Reviews:list": list_reviews,
}


async def dispatch(match, scope, receive, send) -> None:
    body = CONTROLLERS[match.controller](match).encode("utf-8")
    await send(
        {
            "type": "http.response.start",
            "status": 200,
            "headers": [
                (b"content-type", b"text/plain; charset=utf-8"),
                (b"content-length", str(len(body)).encode("latin-1")),
                (b"content-language", match.lang.encode("latin-1")),
            ],
        }
    )
    await send({"type": "http.response.body", "body": body})


app = RoutingApp(router, dispatch)
