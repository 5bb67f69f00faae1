"""
Rebuild standalone unified diffs from parsed hunks.

Hunks do not keep the file header (diff --git / index / --- / +++), so both
builders take the original full patch of the file to recover it. When the
full patch has no header a minimal one is synthesized from the path.
"""

from __future__ import annotations

from typing import List

from .models import ChangeGroup, Hunk

NO_NEWLINE_MARKER = "\\ No newline"


def extract_diff_header(patch: str) -> str:
    """Everything before the first line starting with "@@"."""
    header_lines: List[str] = []
    for line in patch.split("\n"):
        if line.startswith("@@"):
            break
        header_lines.append(line)
    return "\n".join(header_lines)


def minimal_diff_header(file_path: str) -> str:
    return "\n".join(
        [
            f"diff --git a/{file_path} b/{file_path}",
            f"--- a/{file_path}",
            f"+++ b/{file_path}",
        ]
    )


def create_hunk_patch(file_path: str, hunk: Hunk, full_patch: str) -> str:
    """Single-hunk patch: file header followed by the hunk content."""
    header = extract_diff_header(full_patch) or minimal_diff_header(file_path)
    return f"{header}\n{hunk.content}"


def _is_diff_line(line: str) -> bool:
    return line[:1] in (" ", "+", "-")


def create_change_group_patch(
    file_path: str,
    hunk: Hunk,
    group: ChangeGroup,
    full_patch: str,
) -> str:
    """Single-hunk patch holding only ``group``.

    At most one context line is kept on each side of the group. The @@
    header is recomputed: the group's start lines move back by one when a
    leading context line is included, and the counts come from the lines
    actually emitted.
    """
    header = extract_diff_header(full_patch) or minimal_diff_header(file_path)
    lines = hunk.lines

    context_before = -1
    for i in range(group.start_index - 1, 0, -1):
        if lines[i].startswith(" "):
            context_before = i
            break

    context_after = -1
    for i in range(group.end_index + 1, len(lines)):
        if lines[i].startswith(" "):
            context_after = i
            break

    patch_lines: List[str] = []
    if context_before != -1:
        patch_lines.append(lines[context_before])
    for i in range(group.start_index, group.end_index + 1):
        if _is_diff_line(lines[i]):
            patch_lines.append(lines[i])
    if context_after != -1:
        patch_lines.append(lines[context_after])

    no_newline = ""
    last_included = context_after if context_after != -1 else group.end_index
    if last_included + 1 < len(lines) and lines[last_included + 1].startswith(NO_NEWLINE_MARKER):
        no_newline = "\n" + lines[last_included + 1]

    deletions = additions = context = 0
    for line in patch_lines:
        prefix = line[:1]
        if prefix == "-":
            deletions += 1
        elif prefix == "+":
            additions += 1
        elif prefix == " ":
            context += 1

    old_start = group.old_start_line
    new_start = group.new_start_line
    if context_before != -1:
        # the context line sits one row earlier in both files
        old_start -= 1
        new_start -= 1

    hunk_header = f"@@ -{old_start},{context + deletions} +{new_start},{context + additions} @@"
    body = "\n".join(patch_lines)
    # git apply requires the patch to end with a newline
    return f"{header}\n{hunk_header}\n{body}{no_newline}\n"
