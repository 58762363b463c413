import os


def page_label(page_index, last_page) -> str:
    """1-based "Page x/y"; y is "?" when the page count is unknown."""
    total = "?" if last_page is None else last_page + 1
    return f"Page {page_index + 1}/{total}"


def nav_hints(paginator) -> str:
    return "".join(
        [
            "<<" if paginator.has_previous() else "  ",
            " < " if paginator.has_previous() else "   ",
            " > " if paginator.has_next() else "   ",
            ">>" if paginator.has_last() else "  ",
        ]
    )


def render_status(context, width):
    """
    context keys: status_msg, file_path, page_action, paginator, page_start,
                   page_rows, pending_count
    """
    if context.get("status_msg"):
        text = f" {context['status_msg']}"
        return text.ljust(width)[:width]

    fname = context.get("file_path") or ""
    if fname:
        fname = os.path.basename(fname)
    paginator = context["paginator"]
    page_start = context.get("page_start", 0)
    page_rows = context.get("page_rows", 0)

    if page_rows:
        rows = f"rows {page_start}-{page_start + page_rows - 1}"
    else:
        rows = "no rows"
    page_info = f"{page_label(paginator.page_current, paginator.last_page)} {rows}"

    text = f" {context.get('page_action', '')} | {fname} | {page_info} | {nav_hints(paginator)}"
    count = context.get("pending_count")
    if count is not None:
        text += f" | Go to: {count}"
    return text.ljust(width)[:width]
