# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeView exceptions."""

from __future__ import annotations


class TreeViewError(Exception):
    """Base exception for TreeView errors."""

    pass


class AttachmentError(TreeViewError):
    """Raised when a node cannot be attached as a child."""

    pass


class AlreadyAttachedError(AttachmentError):
    """Raised when a node that already has a parent is attached again."""

    pass


class CycleError(AttachmentError):
    """Raised when attaching a node would make it its own ancestor."""

    pass


class InvalidSelectionError(TreeViewError, ValueError):
    """Raised when a selection value is not a concrete bool."""

    pass


class SelectionModeError(TreeViewError):
    """Raised when an operation is not allowed in the current selection mode."""

    pass


class NoEventLoopError(TreeViewError):
    """Raised when an async hook is scheduled with no event loop available."""

    pass
