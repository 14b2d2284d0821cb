"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op``; unknown ops fall back to a
generic key/value listing.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from buildlayout.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from buildlayout.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* to text via Rich."""
    if result.ok and result.op == "export_gradle" and "content" in result.data:
        # The script itself is the output; keep it pipeable.
        return str(result.data["content"]).rstrip("\n")

    console = create_console()
    if result.ok:
        _status_line(console, result)
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result.data, console)
    else:
        _render_error(result, console)

    if verbose and result.meta:
        console.print(Text("meta", style="bl.key"))
        console.print(Text(json.dumps(result.meta, indent=2)))

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output: one value per line where there is an obvious one."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    data = result.data
    if result.op == "output_dir":
        return str(data["path"])
    if result.op == "repositories":
        return "\n".join(item["url"] for item in data.get("items", []))
    if result.op == "order":
        return "\n".join(data.get("evaluation_order", []))
    if result.op == "export_gradle" and "content" in data:
        return str(data["content"]).rstrip("\n")
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="bl.ok"), Text(f"  {result.op}", style="bl.op"))


def _render_error(result: ServiceResult, console: Console) -> None:
    message = result.error.message if result.error else "Unknown error"
    code = result.error.code if result.error else "UNKNOWN"
    console.print(
        Text("ERROR", style="bl.error"),
        Text(f"  {result.op}", style="bl.op"),
        Text(f"  [{code}] {message}"),
    )


def _render_generic(data: dict[str, Any], console: Console) -> None:
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, separators=(",", ":"))
        console.print(Text(f"  {key}: ", style="bl.key"), Text(str(value)), sep="")


def _repository_table(items: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("#", justify="right")
    table.add_column("Name", style="bl.project")
    table.add_column("Kind")
    table.add_column("URL", style="bl.url")
    for i, item in enumerate(items, start=1):
        table.add_row(str(i), item["name"], item["kind"], item["url"])
    return table


def _render_repositories(data: dict[str, Any], console: Console) -> None:
    console.print(_repository_table(data.get("items", [])))


def _render_output_dir(data: dict[str, Any], console: Console) -> None:
    console.print(
        Text(f"  {data['project']}", style="bl.project"),
        Text(" -> "),
        Text(data["path"], style="bl.path"),
        sep="",
    )


def _render_order(data: dict[str, Any], console: Console) -> None:
    for c in data.get("constraints", []):
        console.print(f"  {c['dependent']} after {c['dependency']}")
    order = data.get("evaluation_order", [])
    console.print(Text("  order: ", style="bl.key"), Text(" -> ".join(order)), sep="")


def _render_clean(data: dict[str, Any], console: Console) -> None:
    path = Text(data["path"], style="bl.path")
    if not data.get("exists"):
        console.print(Text("  nothing to clean: "), path, sep="")
        return
    counts = f"{data['files']} files, {data['directories']} directories, {data['bytes']} bytes"
    verb = "would remove" if data.get("dry_run") else "removed"
    console.print(Text(f"  {verb} "), path, Text(f" ({counts})"), sep="")


def _render_describe(data: dict[str, Any], console: Console) -> None:
    console.print(
        Text("  output root: ", style="bl.key"),
        Text(data["root_output_path"], style="bl.path"),
        sep="",
    )
    console.print(_repository_table(data.get("repositories", [])))
    for name, path in data.get("output_directories", {}).items():
        _render_output_dir({"project": name, "path": path}, console)
    _render_order(data, console)
    console.print(Text("  actions: ", style="bl.key"), ", ".join(data.get("actions", [])), sep="")


_OP_RENDERERS: dict[str, Callable[[dict[str, Any], Console], None]] = {
    "describe": _render_describe,
    "repositories": _render_repositories,
    "output_dir": _render_output_dir,
    "order": _render_order,
    "clean": _render_clean,
}
