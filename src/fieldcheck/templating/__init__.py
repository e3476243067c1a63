"""Kida environment setup for fieldcheck forms.

``register_filters()`` binds the form filters onto an existing kida
Environment (for example the one a web framework already built);
``create_environment()`` builds a standalone one::

    env = create_environment(FileSystemLoader("templates"))
    html = env.get_template("signup.html").render({"form": form})
"""

from typing import Any

from kida import Environment

from fieldcheck.templating.filters import BUILTIN_FILTERS

__all__ = ["BUILTIN_FILTERS", "create_environment", "register_filters"]


def register_filters(env: Environment) -> Environment:
    """Register fieldcheck's filters on *env* and return it.

    Existing filters with the same names are replaced.
    """
    env.update_filters(BUILTIN_FILTERS)
    return env


def create_environment(loader: Any = None, *, autoescape: bool = True) -> Environment:
    """Create a kida Environment with fieldcheck's filters registered."""
    if loader is None:
        env = Environment(autoescape=autoescape)
    else:
        env = Environment(loader=loader, autoescape=autoescape)
    return register_filters(env)
