"""File trees whose rows fade in by depth and sibling order."""

from __future__ import annotations

from dataclasses import dataclass

from framecast.timeline.interpolate import clamped_lerp


@dataclass(frozen=True)
class TreeNode:
    label: str
    meta: str = ""
    children: tuple[TreeNode, ...] = ()


@dataclass(frozen=True)
class TreeRow:
    """A flattened tree row at a frame.

    Attributes:
        label: File or directory name.
        meta: Short annotation, empty if none.
        depth: Nesting level, 0 for the roots.
        opacity: Visible opacity. A row sits inside its parent, so this is
            its own fade multiplied by every ancestor's.
        offset_y: Downward offset in pixels, summed over ancestors.
    """

    label: str
    meta: str
    depth: int
    opacity: float
    offset_y: float


@dataclass(frozen=True)
class TreeReveal:
    """When each row appears.

    A row's fade starts at ``depth * depth_delay + index * sibling_delay``,
    where ``index`` is its position among its siblings.
    """

    depth_delay: int
    sibling_delay: int
    fade_frames: int
    rise: float = 0.0


def count_nodes(nodes: tuple[TreeNode, ...]) -> int:
    return sum(1 + count_nodes(node.children) for node in nodes)


def reveal_tree(
    frame: int,
    nodes: tuple[TreeNode, ...],
    reveal: TreeReveal,
) -> tuple[TreeRow, ...]:
    """Flatten ``nodes`` depth-first into rows with their reveal state."""
    rows: list[TreeRow] = []

    def walk(level: tuple[TreeNode, ...], depth: int, opacity: float, offset: float) -> None:
        for index, node in enumerate(level):
            start = depth * reveal.depth_delay + index * reveal.sibling_delay
            own = clamped_lerp(frame, [start, start + reveal.fade_frames], [0.0, 1.0])
            row_opacity = opacity * own
            row_offset = offset + (1.0 - own) * reveal.rise
            rows.append(TreeRow(node.label, node.meta, depth, row_opacity, row_offset))
            walk(node.children, depth + 1, row_opacity, row_offset)

    walk(nodes, 0, 1.0, 0.0)
    return tuple(rows)
