"""
ProjectHop CLI 入口

模块划分:
  common.py      — 常量、日志、查询对象构造
  query_cmds.py  — 搜索与点击 (search/hit/projects)
"""
import typer

from ..config import settings
from .common import VERSION, console, setup_logging


# ── Typer App ─────────────────────────────────────────────

app = typer.Typer(
    name="projecthop",
    help="🚀 扫描工作目录中的 git 项目，按关键词快速打开",
    no_args_is_help=True,
)


# ── 注册子命令模块 ─────────────────────────────────────────

from . import query_cmds

query_cmds.register(app)


# ── 主入口 callback ────────────────────────────────────────

def _show_version(value: bool):
    if value:
        console.print(f"ProjectHop v{VERSION}")
        raise typer.Exit()


@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", help="输出调试日志"),
    version: bool = typer.Option(
        False, "--version", "-V", help="显示版本",
        callback=_show_version, is_eager=True,
    ),
):
    """
    🚀 ProjectHop - 项目快速启动

      projecthop search foo            从缓存搜索
      projecthop search foo --fresh    重新扫描后搜索
      projecthop hit /path/to/foo      记录一次选中
      projecthop projects              查看缓存
    """
    setup_logging(debug or settings.debug)
