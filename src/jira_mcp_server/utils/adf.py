"""Helpers for the Atlassian Document Format (ADF).

Jira REST API v3 takes and returns rich text (descriptions, comment bodies)
as ADF documents instead of plain strings.
"""

from typing import Any

# Block-level nodes whose text is followed by a line break when flattened
_BLOCK_NODES = {
    "paragraph",
    "heading",
    "blockquote",
    "codeBlock",
    "listItem",
    "rule",
    "panel",
    "tableRow",
}


def text_to_adf(text: str) -> dict[str, Any]:
    """Wrap plain text in a single-paragraph ADF document.

    Args:
        text: The plain text to wrap

    Returns:
        An ADF document with one paragraph holding one text run
    """
    return {
        "type": "doc",
        "version": 1,
        "content": [
            {
                "type": "paragraph",
                "content": [
                    {
                        "type": "text",
                        "text": text,
                    },
                ],
            },
        ],
    }


def adf_to_text(node: Any) -> str:
    """Flatten an ADF document (or any node of one) to plain text.

    Text runs are concatenated, hard breaks and block boundaries become
    newlines, mentions render as their display text. Unknown nodes
    contribute the text of their children.

    Args:
        node: An ADF node, a list of nodes, or a plain string

    Returns:
        The plain text content, stripped of surrounding whitespace
    """
    return _flatten(node).strip()


def _flatten(node: Any) -> str:
    if node is None:
        return ""
    if isinstance(node, str):
        return node
    if isinstance(node, list):
        return "".join(_flatten(child) for child in node)
    if not isinstance(node, dict):
        return str(node)

    node_type = node.get("type")
    if node_type == "text":
        return str(node.get("text", ""))
    if node_type == "hardBreak":
        return "\n"
    if node_type in ("mention", "emoji", "status", "date"):
        attrs = node.get("attrs") or {}
        return str(attrs.get("text") or attrs.get("shortName") or "")
    if node_type in ("inlineCard", "blockCard"):
        return str((node.get("attrs") or {}).get("url", ""))

    text = _flatten(node.get("content"))
    if node_type == "listItem":
        return f"- {text.strip()}\n"
    if node_type in _BLOCK_NODES:
        return f"{text}\n"
    return text
