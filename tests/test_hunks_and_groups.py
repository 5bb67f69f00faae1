import pytest

from diffsplice.core import (
    calculate_last_changed_lines,
    find_change_groups,
    parse_diff,
    parse_hunk_header,
    parse_hunks,
)


SCENARIO = """@@ -10,3 +10,4 @@
 a
-b
+c
+d
 e"""


def _change_indices(hunk):
    return {i for i, line in enumerate(hunk.lines) if i > 0 and line[:1] in ("+", "-")}


def _assert_hunk_invariants(hunk):
    assert hunk.lines[0] == hunk.header
    assert hunk.line_count == len(hunk.lines)
    assert hunk.content == "\n".join(hunk.lines)
    covered = set()
    previous_end = 0
    for group in hunk.change_groups:
        assert previous_end < group.start_index <= group.end_index
        previous_end = group.end_index
        covered.update(range(group.start_index, group.end_index + 1))
    assert covered == _change_indices(hunk)


def test_scenario_line_numbers():
    [hunk] = parse_hunks(SCENARIO)
    assert hunk.old_start_line == 10
    assert hunk.start_line == 10
    assert hunk.declared_old_count == 3
    assert hunk.declared_new_count == 4
    assert len(hunk.change_groups) == 1
    group = hunk.change_groups[0]
    assert (group.start_index, group.end_index) == (2, 4)
    assert group.old_start_line == 11
    assert group.new_start_line == 11
    assert group.end_deletion_line == 11
    # +c is new line 11, +d new line 12
    assert group.end_addition_line == 12
    assert hunk.last_deletion_line == 11
    assert hunk.last_addition_line == 12
    _assert_hunk_invariants(hunk)


def test_parse_hunks_from_file_patch(multi_diff):
    readme = parse_diff(multi_diff)[1]
    hunks = parse_hunks(readme.patch)
    assert [h.header for h in hunks] == ["@@ -1,6 +1,6 @@", "@@ -20,2 +20,3 @@ Usage"]
    first, second = hunks
    assert first.line_count == 9
    assert [(g.start_index, g.end_index) for g in first.change_groups] == [(2, 3), (6, 7)]
    assert [(g.old_start_line, g.new_start_line) for g in first.change_groups] == [(2, 2), (5, 5)]
    assert first.last_addition_line == 5
    assert first.last_deletion_line == 5

    # trailing newline of the patch leaves an empty last line
    assert second.lines[-1] == ""
    assert second.last_addition_line == 21
    assert second.last_deletion_line is None
    [group] = second.change_groups
    assert (group.old_start_line, group.new_start_line) == (21, 21)
    assert group.end_deletion_line is None
    for hunk in hunks:
        _assert_hunk_invariants(hunk)


def test_hunk_without_changes_has_no_groups():
    [hunk] = parse_hunks("@@ -1,2 +1,2 @@\n same\n also same")
    assert hunk.change_groups == ()
    assert hunk.last_addition_line is None
    assert hunk.last_deletion_line is None


@pytest.mark.parametrize("text", ["", "   ", "\n\n\t\n"])
def test_parse_hunks_blank_input(text):
    assert parse_hunks(text) == []


def test_lines_before_first_header_are_ignored():
    assert parse_hunks("diff --git a/x b/x\n--- a/x\n+++ b/x\n") == []


def test_header_without_counts():
    [hunk] = parse_hunks("@@ -7 +9 @@\n-x\n+y")
    assert (hunk.old_start_line, hunk.start_line) == (7, 9)
    assert (hunk.declared_old_count, hunk.declared_new_count) == (1, 1)
    assert hunk.last_deletion_line == 7
    assert hunk.last_addition_line == 9


def test_parse_hunk_header_rejects_other_lines():
    assert parse_hunk_header("@@ wrong @@") is None
    assert parse_hunk_header(" @@ -1 +1 @@") is None
    assert parse_hunk_header("@@ -3,4 +5,6 @@ ctx") == (3, 4, 5, 6)


def test_no_newline_marker_closes_group_without_moving_counters():
    text = "\n".join([
        "@@ -1,2 +1,2 @@",
        " keep",
        "-old",
        "\\ No newline at end of file",
        "+new",
        "\\ No newline at end of file",
    ])
    [hunk] = parse_hunks(text)
    groups = hunk.change_groups
    assert [(g.start_index, g.end_index) for g in groups] == [(2, 2), (4, 4)]
    assert (groups[0].old_start_line, groups[0].new_start_line) == (2, 2)
    assert (groups[1].old_start_line, groups[1].new_start_line) == (3, 2)
    assert hunk.last_deletion_line == 2
    assert hunk.last_addition_line == 2
    _assert_hunk_invariants(hunk)


def test_group_open_at_end_of_hunk_is_closed():
    lines = ["@@ -5,1 +5,2 @@", " ctx", "+one", "+two"]
    [group] = find_change_groups(lines, 5, 5)
    assert (group.start_index, group.end_index) == (2, 3)
    assert group.end_addition_line == 7
    assert calculate_last_changed_lines(lines, 5, 5) == (7, None)


def test_multiple_hunks_each_start_from_their_header():
    text = "@@ -1,1 +1,1 @@\n-a\n+b\n@@ -50,1 +60,2 @@\n x\n+y"
    first, second = parse_hunks(text)
    assert first.lines == ("@@ -1,1 +1,1 @@", "-a", "+b")
    assert second.change_groups[0].new_start_line == 61
    assert second.last_addition_line == 61
