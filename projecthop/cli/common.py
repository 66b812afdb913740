"""
ProjectHop CLI — 公共常量与工具函数
"""
import logging
from pathlib import Path
from typing import Optional

from rich.console import Console

from ..cache import CacheStore
from ..config import Settings, settings
from ..query import ProjectQuery

# ── 全局单例 ──────────────────────────────────────────────
# 标准输出留给启动器 JSON，提示信息走标准错误
console = Console(stderr=True)

# 版本号
VERSION = "0.1.0"


def setup_logging(debug: bool = False):
    """配置日志，输出到标准错误"""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_query(config: Optional[Settings] = None, workspace: Optional[str] = None) -> ProjectQuery:
    """根据配置创建查询对象"""
    config = config or settings
    root = Path(workspace).expanduser().resolve() if workspace else config.resolved_workspace()
    store = CacheStore(config.resolved_cache_path())
    return ProjectQuery(store, root, assets_dir=config.assets_dir)
