"""
Site Builder

Maps routes to pages and writes the static site.

Routes:
    /                    home page (hero, ventures, experience, recent posts, contact)
    /blog/               blog index
    /blog/<slug>/        one page per post
    /projects/<slug>/    one page per venture
    /all-projects/       every venture

Any other path, and any identifier absent from the content store, renders the
not-found page with status 404.
"""

import os
import re
import time
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from jinja2 import TemplateError

from vitrine.contexts.content.exceptions import ContentNotFoundError
from vitrine.contexts.content.repository import ContentRepository
from vitrine.contexts.content.selectors import adjacent_posts
from vitrine.contexts.presentation.defaults import HOME_POST_LIMIT, HOME_VENTURE_LIMIT
from vitrine.contexts.presentation.exceptions import TemplateRenderError
from vitrine.contexts.presentation.logger import (
    _log_debug,
    _log_info,
    log_build_result,
    log_build_start,
)
from vitrine.contexts.presentation.site_config import load_site_config
from vitrine.contexts.presentation.template_registry import TemplateRegistry
from vitrine.contexts.presentation.views import (
    experience_item,
    post_card,
    post_page,
    venture_card,
    venture_page,
)
from vitrine.contexts.presentation.widgets import scheduling_embed_url
from vitrine.utils.event_logging import log_build_event

load_dotenv()
OUTPUT_PATH = Path(os.getenv("OUTPUT_PATH", "outs/site"))

NOT_FOUND_FILENAME = "404.html"

POST_ROUTE = re.compile(r"^/blog/(?P<slug>[^/]+)/$")
VENTURE_ROUTE = re.compile(r"^/projects/(?P<slug>[^/]+)/$")


@dataclass
class RenderedPage:
    """
    Result of rendering one route.

    Attributes:
        path: Normalised route
        status: 200 for a known route, 404 otherwise
        html: Page markup
        template: Name of the page template used
    """

    path: str
    status: int
    html: str
    template: str

    @property
    def found(self) -> bool:
        return self.status == 200


@dataclass
class BuildResult:
    """Outcome of Site.build()."""

    output_dir: Path
    pages: List[Path] = field(default_factory=list)
    not_found_page: Optional[Path] = None
    elapsed_s: float = 0.0


def normalize_route(path: str) -> str:
    """
    Normalise a request path: drop query and fragment, ensure leading and trailing slashes.

    Example:
        normalize_route("blog/hello?ref=x")  # "/blog/hello/"
    """
    path = path.split("#", 1)[0].split("?", 1)[0].strip()
    if path.endswith("index.html"):
        path = path[: -len("index.html")]
    path = "/" + path.strip("/")
    return path if path == "/" else path + "/"


def route_output_path(output_dir: Path, route: str) -> Path:
    """File a route is written to: <output>/<route>/index.html."""
    relative = route.strip("/")
    return (output_dir / relative / "index.html") if relative else output_dir / "index.html"


class Site:
    """Renders the portfolio site from a content repository."""

    def __init__(
        self,
        repository: ContentRepository = None,
        config: Dict[str, Any] = None,
        registry: TemplateRegistry = None,
        include_unpublished: bool = False,
    ):
        """
        Args:
            repository: Content source (defaults to the CONTENT_PATH store)
            config: Site settings (defaults to load_site_config())
            registry: Template registry (defaults to the packaged templates)
            include_unpublished: List posts marked published: false
        """
        self.repository = repository or ContentRepository()
        self.config = config if config is not None else load_site_config()
        self.registry = registry or TemplateRegistry()
        self.include_unpublished = include_unpublished

    # Routing

    def routes(self) -> List[str]:
        """
        Every route of the site, in build order.

        Post pages are built for every valid post, including unpublished ones;
        listings only show unpublished posts when include_unpublished is set.
        """
        routes = ["/", "/blog/"]
        routes.extend(f"/blog/{post.slug}/" for post in self.repository.all_posts(include_unpublished=True))
        routes.extend(f"/projects/{venture.slug}/" for venture in self.repository.all_ventures())
        routes.append("/all-projects/")
        return routes

    def render_route(self, path: str) -> RenderedPage:
        """
        Render the page for a request path.

        Returns:
            RenderedPage with status 200, or the not-found page with status 404
        """
        route = normalize_route(path)

        try:
            if route == "/":
                return self._page(route, "home", **self._home_context())
            if route == "/blog/":
                return self._page(route, "blog_index", **self._blog_index_context())
            if route == "/all-projects/":
                return self._page(route, "all_projects", **self._all_projects_context())

            match = POST_ROUTE.match(route)
            if match:
                return self._page(route, "blog_post", **self._post_context(match.group("slug")))

            match = VENTURE_ROUTE.match(route)
            if match:
                return self._page(route, "project", **self._venture_context(match.group("slug")))
        except ContentNotFoundError as e:
            _log_debug(f"Not found: {route} ({e})")
            return self.render_not_found(route)

        _log_debug(f"No route for {route}")
        return self.render_not_found(route)

    def render_not_found(self, route: str = "/404/") -> RenderedPage:
        page = self._page(route, "not_found", requested=route)
        page.status = 404
        return page

    # Build

    def build(self, output_dir: Path = None, record_event: bool = True) -> BuildResult:
        """
        Write every route plus 404.html under output_dir.

        Args:
            output_dir: Destination directory (defaults to OUTPUT_PATH)
            record_event: Append a build_completed event to the build event log

        Returns:
            BuildResult listing the files written
        """
        output_dir = Path(output_dir) if output_dir is not None else OUTPUT_PATH
        log_build_start(self.repository.content_root, output_dir)
        self.repository.loader.reset_reported()
        start = time.time()

        result = BuildResult(output_dir=output_dir)

        for route in self.routes():
            page = self.render_route(route)
            if not page.found:
                # Listed by routes() but unreadable on render; skip rather than publish a 404 at that path
                _log_info(f"Skipping {route}: content no longer available")
                continue
            target = route_output_path(output_dir, route)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(page.html, encoding="utf-8")
            result.pages.append(target)
            _log_debug(f"Wrote {route} -> {target}")

        not_found = self.render_not_found()
        result.not_found_page = output_dir / NOT_FOUND_FILENAME
        output_dir.mkdir(parents=True, exist_ok=True)
        result.not_found_page.write_text(not_found.html, encoding="utf-8")

        result.elapsed_s = time.time() - start
        log_build_result(result, result.elapsed_s)

        if record_event:
            log_build_event(
                event_type="build_completed",
                slug="*",
                source="render",
                output_dir=str(output_dir),
                pages=len(result.pages),
                elapsed_s=round(result.elapsed_s, 3),
            )

        return result

    # Page contexts

    def _home_context(self) -> Dict[str, Any]:
        ventures = self.repository.all_ventures()
        posts = self.repository.all_posts(include_unpublished=self.include_unpublished)
        return {
            "ventures": [venture_card(v) for v in ventures[:HOME_VENTURE_LIMIT]],
            "venture_total": len(ventures),
            "experiences": [experience_item(e) for e in self.repository.all_experiences()],
            "posts": [post_card(p) for p in posts[:HOME_POST_LIMIT]],
            "post_total": len(posts),
            **self._contact_context(),
        }

    def _blog_index_context(self) -> Dict[str, Any]:
        posts = self.repository.all_posts(include_unpublished=self.include_unpublished)
        categories = sorted({p.metadata.category for p in posts}, key=str.lower)
        return {
            "posts": [post_card(p) for p in posts],
            "categories": categories,
        }

    def _all_projects_context(self) -> Dict[str, Any]:
        return {"ventures": [venture_card(v) for v in self.repository.all_ventures()]}

    def _post_context(self, slug: str) -> Dict[str, Any]:
        record = self.repository.post(slug)
        listed = self.repository.all_posts(include_unpublished=self.include_unpublished)
        previous, following = adjacent_posts(listed, slug)
        page = post_page(record, self.config["base_url"], previous=previous, next=following)
        return {"page": page, "title": page.card.title, "description": page.card.description}

    def _venture_context(self, slug: str) -> Dict[str, Any]:
        page = venture_page(self.repository.venture(slug))
        return {"page": page, "title": page.card.name, "description": page.card.description}

    def _contact_context(self) -> Dict[str, Any]:
        scheduling_url = self.config["scheduling_url"]
        return {
            "scheduling_url_light": scheduling_embed_url(scheduling_url, dark=False),
            "scheduling_url_dark": scheduling_embed_url(scheduling_url, dark=True),
        }

    def _page(self, route: str, template_name: str, **context) -> RenderedPage:
        try:
            template = self.registry.get_template(template_name)
            html = template.render(
                site=self.config,
                nav=self.config.get("nav", []),
                current_path=route,
                year=date.today().year,
                **context,
            )
        except TemplateError as e:
            raise TemplateRenderError(
                "Failed to render page",
                template_name=template_name,
                route=route,
                original_error=e,
            ) from e

        return RenderedPage(path=route, status=200, html=html, template=template_name)
