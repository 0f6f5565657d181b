# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Fire-and-forget hooks for the view layer.

Hooks (on_invoked, on_expand_toggle and the TreeView callbacks) run
after the state change they report has been applied. They are submitted
to an asyncio event loop and never awaited by the tree: their outcome
cannot affect tree consistency.

Hooks may be plain callables or return awaitables (async def):

    >>> async def on_toggle(node):
    ...     await fetch_children(node)
    >>> node = TreeViewNode('remote', lazy=True, on_expand_toggle=on_toggle)
    >>> task = toggle_expanded(node)   # inside a running loop
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from enum import Enum
from typing import Any, Callable

from .exceptions import NoEventLoopError
from .node import TreeViewNode

logger = logging.getLogger(__name__)


class InvocationReason(Enum):
    """Why a node's on_invoked hook fired."""

    PRESSED = 'pressed'
    SELECTION_TOGGLED = 'selection_toggled'
    EXPANDER = 'expander'


async def _run_hook(hook: Callable[..., Any], args: tuple[Any, ...]) -> Any:
    result = hook(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


def _log_failure(future: asyncio.Future[Any]) -> None:
    if future.cancelled():
        return
    exc = future.exception()
    if exc is not None:
        logger.error("Hook failed: %r", exc, exc_info=exc)


def schedule_hook(
    hook: Callable[..., Any] | None,
    *args: Any,
    loop: asyncio.AbstractEventLoop | None = None,
) -> asyncio.Task[Any] | None:
    """Submit hook(*args) to an event loop without waiting for it.

    The loop is the given one, else the running loop. With no loop at
    all a plain hook is called directly and an awaitable result raises
    NoEventLoopError.

    Args:
        hook: The callable to fire, or None.
        *args: Arguments for the hook.
        loop: Optional event loop to submit to.

    Returns:
        The scheduled Task, or None when nothing was scheduled.

    Raises:
        NoEventLoopError: If the hook is async and no loop is available.
    """
    if hook is None:
        return None

    if loop is None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

    if loop is None:
        result = hook(*args)
        if inspect.isawaitable(result):
            if inspect.iscoroutine(result):
                result.close()
            raise NoEventLoopError(
                f"Hook {hook!r} is async but no event loop is available"
            )
        return None

    task = loop.create_task(_run_hook(hook, args))
    task.add_done_callback(_log_failure)
    return task


def toggle_expanded(
    node: TreeViewNode[Any], loop: asyncio.AbstractEventLoop | None = None
) -> asyncio.Task[Any] | None:
    """Flip node.expanded, then fire node.on_expand_toggle(node).

    Nothing happens if the node is not expandable, or if it is expanded
    and not collapsable.

    Returns:
        The scheduled hook Task, or None.
    """
    if not node.is_expandable:
        return None
    if node.expanded and not node.collapsable:
        logger.debug("Refusing to collapse non-collapsable %r", node.content)
        return None

    node.expanded = not node.expanded
    logger.debug("Toggled %r expanded=%r", node.content, node.expanded)
    return schedule_hook(node.on_expand_toggle, node, loop=loop)


def invoke(
    node: TreeViewNode[Any],
    reason: InvocationReason = InvocationReason.PRESSED,
    loop: asyncio.AbstractEventLoop | None = None,
) -> asyncio.Task[Any] | None:
    """Fire node.on_invoked(node, reason)."""
    return schedule_hook(node.on_invoked, node, reason, loop=loop)
