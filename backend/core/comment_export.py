"""
Comment export formats.

Renders a session's comments as CSV, Markdown or JSON for hand-off to the
people fixing the page.

Dependencies: csv, json (stdlib), backend.models
System role: Comment export rendering
"""

import csv
import io
import json
from typing import Iterable

from backend.core.exceptions import ValidationError
from backend.models.comment import Comment
from backend.models.session import AnnotationSession

EXPORT_FORMATS = {
    "csv": "text/csv",
    "markdown": "text/markdown",
    "json": "application/json",
}

CSV_COLUMNS = [
    "id",
    "message",
    "authorName",
    "category",
    "status",
    "viewport",
    "posX",
    "posY",
    "width",
    "height",
    "isCompleted",
    "createdAt",
]


def _row(comment: Comment) -> dict:
    data = comment.model_dump(mode="json", by_alias=True)
    return {column: data.get(column) for column in CSV_COLUMNS}


def to_csv(comments: Iterable[Comment]) -> str:
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=CSV_COLUMNS)
    writer.writeheader()
    for comment in comments:
        row = _row(comment)
        writer.writerow({k: "" if v is None else v for k, v in row.items()})
    return buffer.getvalue()


def _percent(value: float) -> str:
    return f"{value * 100:.1f}%"


def to_markdown(session: AnnotationSession, comments: Iterable[Comment]) -> str:
    """
    Render comments as a Markdown checklist.

    Completed comments are checked; areas list their size next to the anchor.
    """
    lines = [f"# Comments for {session.target_url}", ""]
    count = 0
    for comment in comments:
        count += 1
        box = "x" if comment.completed else " "
        where = f"({_percent(comment.pos_x)}, {_percent(comment.pos_y)})"
        if comment.is_area:
            where += f" {_percent(comment.width)} x {_percent(comment.height)}"
        author = comment.author_name or "Anonymous"
        lines.append(
            f"- [{box}] **{comment.category.value}** / {comment.status.value} "
            f"[{comment.effective_viewport.value}] {where} {author}: {comment.message}"
        )
    if count == 0:
        lines.append("_No comments._")
    return "\n".join(lines) + "\n"


def to_json(comments: Iterable[Comment]) -> str:
    payload = {"comments": [c.model_dump(mode="json", by_alias=True) for c in comments]}
    return json.dumps(payload, indent=2)


def render_export(fmt: str, session: AnnotationSession, comments: list[Comment]) -> tuple[str, str]:
    """
    Render comments in the requested format.

    Args:
        fmt: One of csv, markdown, json
        session: Owning session (used for the Markdown title)
        comments: Comments to export, already filtered

    Returns:
        tuple[str, str]: (body, media_type)

    Raises:
        ValidationError: If the format is unknown
    """
    fmt = fmt.lower()
    if fmt not in EXPORT_FORMATS:
        raise ValidationError(
            f"Unsupported export format: {fmt}",
            field="format",
            details={"supported": sorted(EXPORT_FORMATS)},
        )
    if fmt == "csv":
        body = to_csv(comments)
    elif fmt == "markdown":
        body = to_markdown(session, comments)
    else:
        body = to_json(comments)
    return body, EXPORT_FORMATS[fmt]
