"""Blog — typed routes for a small site with posts and a calendar.

Demonstrates registering templates, building links through the
registry, dispatching requested paths, and reading typed params inside
a handler.

Run:
    python app.py /calendar/2024/5
"""

import calendar as _calendar
import sys

from wren import Dispatcher, PathRegistry, expects
from wren.navigation import nav_links


def home() -> str:
    lines = ["Welcome to the wren demo"]
    for year, month in [(1800, 11), (1919, 3), (2015, 2), (2022, 1)]:
        href = registry.build("/calendar/:year/:month", {"year": str(year), "month": str(month)})
        lines.append(f"{year}/{month} -> {href}")
    for post_id in [1, 2, 3, 4, 5, 10, 100]:
        lines.append(f"Post #{post_id} -> {registry.build('/post/:id', {'id': str(post_id)})}")
    return "\n".join(lines)


def login() -> str:
    return "Log In"


def signup() -> str:
    return "Sign Up"


@expects("/post/:id")
def post(id: str) -> str:
    return f"Blog Post #{id}"


@expects("/calendar/:year/:month")
def calendar(year: str, month: str) -> str:
    if not month.isdigit() or not 1 <= int(month) <= 12:
        return f"Calendar\nYear {year}\nUnknown month {month}"
    return f"Calendar\nYear {year}\n{_calendar.month_name[int(month)]}"


def not_found() -> str:
    return "Nothing here"


registry = PathRegistry([
    ("/", home),
    ("/login", login),
    ("/signup", signup),
    ("/post/:id", post),
    ("/calendar/:year/:month", calendar),
])

dispatcher = Dispatcher(registry, fallback=not_found)

navbar = nav_links(registry, [
    ("/", None, "Home"),
    ("/login", None, "Log In"),
    ("/signup", None, "Sign Up"),
])


if __name__ == "__main__":
    path = sys.argv[1] if len(sys.argv) > 1 else "/"
    print(" | ".join(f"{item.text} ({item.href})" for item in navbar))
    print(dispatcher.invoke(path))
