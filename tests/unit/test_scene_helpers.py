"""Unit tests for the building blocks shared between scenes."""

import pytest

from framecast.scenes.showcase import CodeShowcase, showcase_phase
from framecast.scenes.terminal import TerminalLine, line_state, terminal_lines
from framecast.scenes.tree import TreeNode, TreeReveal, count_nodes, reveal_tree
from framecast.timeline import RevealMode

TREE = (
    TreeNode("root/", "top", (TreeNode("a.nix"), TreeNode("b.nix", "second"))),
    TreeNode("flake.lock"),
)


class TestTerminalLine:
    def test_before_start(self) -> None:
        state = line_state(5, TerminalLine("$", "echo hi", 10))
        assert state.text == ""
        assert state.presence == 0.0
        assert not state.typing
        assert not state.cursor

    def test_cursor_only_while_typing(self) -> None:
        line = TerminalLine("$", "echo hi", 20)
        assert line_state(20, line).cursor
        assert not line_state(30, line).cursor
        assert line_state(40, line).cursor
        finished = line_state(60, line)
        assert finished.text == "echo hi"
        assert not finished.cursor

    def test_paste_flash_decays(self) -> None:
        line = TerminalLine("", "done", 100, RevealMode.PASTE)
        assert line_state(100, line).flash == 1.0
        assert line_state(108, line).flash == pytest.approx(0.2)
        assert line_state(140, line).flash == 0.0
        assert line_state(112, line).text == "done"

    def test_every_line_is_reported(self) -> None:
        lines = (TerminalLine("$", "one", 0), TerminalLine("$", "two", 50))
        states = terminal_lines(10, lines)
        assert len(states) == 2
        assert states[1].presence == 0.0


class TestTreeReveal:
    def test_count(self) -> None:
        assert count_nodes(TREE) == 4

    def test_depth_first_order(self) -> None:
        rows = reveal_tree(0, TREE, TreeReveal(10, 6, 15))
        assert [(row.label, row.depth) for row in rows] == [
            ("root/", 0),
            ("a.nix", 1),
            ("b.nix", 1),
            ("flake.lock", 0),
        ]
        assert rows[2].meta == "second"

    def test_sibling_delay(self) -> None:
        rows = reveal_tree(6, TREE, TreeReveal(10, 6, 15))
        assert rows[0].opacity == pytest.approx(6 / 15)
        assert rows[3].opacity == 0.0

    def test_child_never_outshines_parent(self) -> None:
        reveal = TreeReveal(2, 1, 20)
        for frame in range(40):
            rows = reveal_tree(frame, TREE, reveal)
            assert rows[1].opacity <= rows[0].opacity
            assert rows[2].opacity <= rows[0].opacity

    def test_rise_accumulates(self) -> None:
        rows = reveal_tree(0, TREE, TreeReveal(8, 6, 12, rise=18.0))
        assert [row.offset_y for row in rows] == [18.0, 36.0, 36.0, 18.0]


class TestCodeShowcase:
    def test_short_code_does_not_scroll(self) -> None:
        showcase = CodeShowcase("a\nb\nc", pseudo_frames=100, line_height=50)
        assert showcase.line_count == 3
        assert showcase.max_scroll == 0
        assert showcase_phase(50, showcase).code_scroll == 0.0

    def test_phase_around_cut(self) -> None:
        showcase = CodeShowcase("\n".join(["x"] * 30), pseudo_frames=600, line_height=52)
        assert showcase.max_scroll == 30 * 52 + 160 - 1080
        before = showcase_phase(582, showcase)
        assert (before.pseudo_opacity, before.summary_opacity) == (1.0, 0.0)
        assert not before.show_summary
        after = showcase_phase(618, showcase)
        assert (after.pseudo_opacity, after.summary_opacity) == (0.0, 1.0)
        assert after.show_summary
        assert after.code_scroll == pytest.approx(-showcase.max_scroll)
