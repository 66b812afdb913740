"""
ProjectHop CLI — 搜索、点击、项目列表命令
"""
import asyncio
import json
from typing import List, Optional

import typer

from ..explorer import ResultItem, filter_projects, format_project_table
from .common import build_query, console


# ── 内部实现 ──────────────────────────────────────────────

def _dump_items(items: List[ResultItem]) -> str:
    """Alfred Script Filter 格式"""
    return json.dumps(
        {"items": [item.model_dump() for item in items]},
        ensure_ascii=False,
    )


def _do_search(keyword: str, fresh: bool = False, workspace: Optional[str] = None) -> str:
    query = build_query(workspace=workspace)
    if fresh:
        items = asyncio.run(query.query_fresh(keyword))
    else:
        items = asyncio.run(query.query_from_cache(keyword))
    return _dump_items(items)


def _do_hit(path: str, ide: Optional[str] = None) -> bool:
    query = build_query()
    project = asyncio.run(query.record_hit(path, ide))
    if project is None:
        console.print(f"[yellow]缓存中没有该项目: {path}[/yellow]")
        console.print("[dim]运行 projecthop search --fresh 重新扫描[/dim]")
        return False
    console.print(f"[green]✅ {project.name}[/green] 点击数 {project.hits}")
    return True


def _do_projects(keyword: Optional[str] = None):
    query = build_query()
    projects = asyncio.run(query.store.load())

    if keyword:
        projects = filter_projects(projects, keyword)

    if not projects:
        console.print("[yellow]缓存中还没有项目[/yellow]")
        console.print("[dim]运行 projecthop search --fresh 开始扫描[/dim]")
        return

    console.print(format_project_table(projects, title=f"📂 共 {len(projects)} 个项目"))


# ── Typer 子命令 ──────────────────────────────────────────

def register(app: typer.Typer):
    """注册查询相关子命令"""

    @app.command()
    def search(
        keyword: str = typer.Argument("", help="搜索关键词"),
        fresh: bool = typer.Option(False, "--fresh", "-f", help="重新扫描工作目录并更新缓存"),
        workspace: Optional[str] = typer.Option(None, "--workspace", "-w", help="覆盖配置中的工作目录（需配合 --fresh）"),
    ):
        """🔍 搜索项目，输出启动器 JSON"""
        if workspace and not fresh:
            raise typer.BadParameter("只有重新扫描时才会使用工作目录，请同时指定 --fresh", param_hint="--workspace")
        typer.echo(_do_search(keyword, fresh=fresh, workspace=workspace))

    @app.command()
    def hit(
        path: str = typer.Argument(..., help="被选中的项目路径"),
        ide: Optional[str] = typer.Option(None, "--ide", help="关联的编辑器路径"),
    ):
        """👆 记录一次选中"""
        if not _do_hit(path, ide):
            raise typer.Exit(1)

    @app.command()
    def projects(
        keyword: Optional[str] = typer.Argument(None, help="过滤关键词"),
    ):
        """📂 列出缓存中的项目"""
        _do_projects(keyword)
