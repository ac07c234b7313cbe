"""Pure functions converting a NotionDocument into markdown text.

The output always starts with a ``# <title>`` line followed by a blank line,
then one line per block (code blocks and tables span several lines). Nested
children are indented two spaces per level.
"""

from notion_unfurl.models.unfurl import NotionDocument

_INDENT = "  "

_HEADING_LEVELS = {"heading_1": 1, "heading_2": 2, "heading_3": 3}

_MEDIA_TYPES = frozenset({"image", "video", "file", "pdf", "audio"})

_LINK_TYPES = frozenset({"bookmark", "embed", "link_preview"})

# Blocks whose children render at the block's own level
_CONTAINER_TYPES = frozenset({"table", "column_list", "column", "synced_block"})


def plain_text(rich_text: list[dict]) -> str:
    """Concatenate the plain_text of a rich_text array."""
    return "".join(part.get("plain_text", "") for part in rich_text)


def _format_segment(part: dict) -> str:
    """Render one rich_text object with its annotations as markdown."""
    text = part.get("plain_text", "")
    if part.get("type") == "equation":
        return f"${text}$"
    if not text.strip():
        return text

    annotations = part.get("annotations", {})
    if annotations.get("code"):
        text = f"`{text}`"
    if annotations.get("bold"):
        text = f"**{text}**"
    if annotations.get("italic"):
        text = f"_{text}_"
    if annotations.get("strikethrough"):
        text = f"~~{text}~~"
    if part.get("href"):
        text = f"[{text}]({part['href']})"
    return text


def rich_text_to_markdown(rich_text: list[dict]) -> str:
    """Render a rich_text array as inline markdown."""
    return "".join(_format_segment(part) for part in rich_text)


def _file_url(data: dict) -> str:
    """Return the URL of a Notion file object (external or hosted)."""
    kind = data.get("type", "")
    return data.get(kind, {}).get("url", "") if kind in ("external", "file") else ""


def _block_lines(block: dict, number: int) -> list[str]:
    """Render a single block (without children) as one or more lines."""
    kind = block.get("type", "")
    data = block.get(kind, {})
    text = rich_text_to_markdown(data.get("rich_text", []))

    if kind == "paragraph":
        return [text]
    if kind in _HEADING_LEVELS:
        return ["#" * _HEADING_LEVELS[kind] + " " + text]
    if kind in ("bulleted_list_item", "toggle"):
        return [f"- {text}"]
    if kind == "numbered_list_item":
        return [f"{number}. {text}"]
    if kind == "to_do":
        mark = "x" if data.get("checked") else " "
        return [f"- [{mark}] {text}"]
    if kind == "quote":
        return [f"> {text}"]
    if kind == "callout":
        icon = data.get("icon") or {}
        emoji = icon.get("emoji", "") if icon.get("type") == "emoji" else ""
        return [f"> {emoji} {text}" if emoji else f"> {text}"]
    if kind == "code":
        language = data.get("language", "")
        body = plain_text(data.get("rich_text", []))
        return [f"```{language}", *body.split("\n"), "```"]
    if kind == "divider":
        return ["---"]
    if kind == "equation":
        return [f"$${data.get('expression', '')}$$"]
    if kind in ("child_page", "child_database"):
        return [data.get("title", "")]
    if kind == "table_row":
        cells = [rich_text_to_markdown(cell) for cell in data.get("cells", [])]
        return ["| " + " | ".join(cells) + " |"]
    if kind in _MEDIA_TYPES:
        url = _file_url(data)
        caption = plain_text(data.get("caption", [])) or url
        prefix = "!" if kind == "image" else ""
        return [f"{prefix}[{caption}]({url})"] if url else []
    if kind in _LINK_TYPES:
        url = data.get("url", "")
        caption = plain_text(data.get("caption", [])) or url
        return [f"[{caption}]({url})"] if url else []
    # Containers (table, column_list, ...) and unsupported blocks have no own line
    return []


def blocks_to_lines(blocks: list[dict], depth: int = 0) -> list[str]:
    """Render a list of sibling blocks, recursing into fetched children."""
    lines: list[str] = []
    number = 0
    for block in blocks:
        kind = block.get("type", "")
        number = number + 1 if kind == "numbered_list_item" else 0

        prefix = _INDENT * depth
        lines.extend(prefix + line for line in _block_lines(block, number))

        children = block.get("children", [])
        if children:
            child_depth = depth if kind in _CONTAINER_TYPES else depth + 1
            lines.extend(blocks_to_lines(children, child_depth))
    return lines


def document_to_markdown(document: NotionDocument) -> str:
    """Render a whole document: title line, blank separator, then the body.

    Line breaks inside the title are flattened so the header stays two lines.
    """
    title = " ".join(document.title.splitlines())
    lines = [f"# {title}", ""]
    lines.extend(blocks_to_lines(document.blocks))
    return "\n".join(lines)
