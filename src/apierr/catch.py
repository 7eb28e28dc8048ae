"""Turn failure values into responses.

Start with :func:`stop` (hide the failure, set the status code), then
:func:`transparent_stop` (show the failure as plain text), and finally
:func:`catch`, which the other two are built from. A transformer is meant to
be handed to :meth:`apierr.result.Err.map_err`::

    user = find_user(user_id).map_err(stop(404))
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from .http import StatusCode, StatusLike, resolve_status
from .responses import Response, into_response, render_default, render_transparent

logger = logging.getLogger(__name__)

E = TypeVar("E")

Handle = Callable[[StatusCode, E], Optional[Any]]
DefaultRender = Callable[[StatusCode], Response]


@dataclass(slots=True, frozen=True)
class Catch(Generic[E]):
    """A stateless failure transformer.

    ``default_code`` is already resolved. Calling the transformer gives
    ``handle`` the first chance to build a response; if it returns ``None``
    the response comes from ``default_render(default_code)``.
    """

    default_code: StatusCode
    handle: Handle[E]
    default_render: DefaultRender

    def __call__(self, failure: E) -> Response:
        custom = self.handle(self.default_code, failure)
        if custom is not None:
            # The custom response keeps whatever status the handler chose.
            return into_response(custom)
        logger.debug("custom handler declined, rendering default %d response", self.default_code)
        return self.default_render(self.default_code)

    apply = __call__


def catch(code: StatusLike, handle: Handle[E], default_render: DefaultRender = render_default) -> Catch[E]:
    """Build a transformer that consumes a failure and produces a response.

    ``code`` is resolved immediately, so an invalid code raises
    :class:`~apierr.exceptions.InvalidStatusCode` here rather than while a
    request is being served. ``code`` is only the status used when ``handle``
    declines: a response returned by ``handle`` is served as is, including its
    own status code.
    """

    return Catch(default_code=resolve_status(code), handle=handle, default_render=default_render)


def decline(code: StatusCode, failure: Any) -> None:
    """Custom handler that never produces a response."""

    return None


def stop(code: StatusLike) -> Catch[Any]:
    """Discard the failure and answer with the generic ``<code> <reason>`` body."""

    return catch(code, decline, render_default)


def transparent_stop(code: StatusLike) -> Catch[Any]:
    """Like :func:`stop`, but the body is the failure's ``str()`` form."""

    return catch(code, render_transparent, render_default)


__all__ = ["Catch", "catch", "decline", "stop", "transparent_stop"]
