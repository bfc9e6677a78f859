"""Blog: dispatching requests through a routeglob table.

Demonstrates method-aware registration, wildcard patterns, first-match
precedence, query-string stripping, and the "not found" sentinel.

Run:
    python app.py
"""

from routeglob import Routes

POSTS = {"1": "Hello, World!", "2": "Globs all the way down"}


def index(path: str) -> tuple[int, str]:
    return 200, "\n".join(POSTS.values())


def latest(path: str) -> tuple[int, str]:
    return 200, POSTS[max(POSTS)]


def show_post(path: str) -> tuple[int, str]:
    post_id = path.rsplit("/", 1)[-1]
    if post_id not in POSTS:
        return 404, f"No post {post_id}"
    return 200, POSTS[post_id]


def create_post(path: str) -> tuple[int, str]:
    post_id = str(len(POSTS) + 1)
    POSTS[post_id] = f"Post {post_id}"
    return 201, post_id


def delete_post(path: str) -> tuple[int, str]:
    POSTS.pop(path.rsplit("/", 1)[-1], None)
    return 204, ""


def static_file(path: str) -> tuple[int, str]:
    return 200, f"static:{path}"


routes = Routes().add_routes(
    [
        (Routes.GET, "/", index),
        # Registered before the wildcard so it wins for /blog/latest
        (Routes.GET, "/blog/latest", latest),
        (Routes.GET, "/blog/*", show_post),
        (Routes.POST, "/blog", create_post),
        (Routes.DELETE, "/blog/*", delete_post),
        (Routes.GET, "/static/**", static_file),
    ]
)


def dispatch(method: str, url: str) -> tuple[int, str]:
    """Resolve *url* and call its action, or answer 404."""
    action = routes.get_method_action(method, url)
    if action is None:
        return 404, f"Nothing at {url}"
    return action(url.partition("?")[0])


if __name__ == "__main__":
    print(routes)
    for method, url in [("GET", "/blog/1?ref=home"), ("GET", "/blog/latest"), ("PUT", "/blog/1")]:
        print(method, url, "->", dispatch(method, url))
