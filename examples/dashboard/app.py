"""Dashboard — nested routes, named outlets, and lazy views.

The shell fills two outlets per section: the main content (the default
outlet, rendered as children) and a sidebar. The projects section nests
its own routes under ``/projects``, and its detail page is loaded lazily.

Run:
    python app.py /projects/42/settings
"""

import sys

import anyio

from detour import with_routes
from detour.testing import render_path


def overview():
    return "Overview"


def overview_sidebar():
    return "[stats]"


def project_list():
    return "All projects"


def project_settings(project_id: int):
    return f"Settings for project #{project_id}"


async def load_project_detail():
    # Stands in for an on-demand import
    await anyio.sleep(0)

    def project_detail(project_id: int):
        return f"Project #{project_id}"

    return project_detail


@with_routes([
    {"path": "/", "component": lambda: project_list},
    {"path": r"/:project_id(\d+)/settings", "component": lambda: project_settings},
    {"path": r"/:project_id(\d+)", "component": load_project_detail},
])
def projects(children=None, outlets=None):
    return f"Projects > {children or 'Not found'}"


def projects_sidebar():
    return "[filters]"


@with_routes([
    {"path": "/", "component": {"default": lambda: overview, "sidebar": lambda: overview_sidebar}},
    {"path": "/projects", "component": {"default": lambda: projects, "sidebar": lambda: projects_sidebar}},
])
def shell(children=None, outlets=None):
    sidebar = outlets.get("sidebar") or ""
    return f"{sidebar} {children or 'Page not found'}".strip()


if __name__ == "__main__":
    path = sys.argv[1] if len(sys.argv) > 1 else "/"
    print(anyio.run(render_path, shell, path))
