"""
查询入口：组合扫描、缓存与排序，输出启动器候选列表
"""
import logging
from pathlib import Path
from typing import List, Optional, Union

from .cache import CacheStore
from .explorer import Project, ResultItem, filter_projects, scan_directory

logger = logging.getLogger(__name__)


class ProjectQuery:
    """项目查询"""

    def __init__(
        self,
        store: CacheStore,
        workspace: Union[str, Path],
        assets_dir: str = "assets",
    ):
        self.store = store
        self.workspace = Path(workspace)
        self.assets_dir = assets_dir

    def present(self, projects: List[Project]) -> List[ResultItem]:
        """转换为启动器候选项"""
        return [ResultItem.from_project(project, self.assets_dir) for project in projects]

    async def query_from_cache(self, keyword: str) -> List[ResultItem]:
        """只从缓存中过滤，不扫描目录"""
        cache = await self.store.load()
        return self.present(filter_projects(cache, keyword))

    async def query_fresh(
        self,
        keyword: str,
        workspace_root: Optional[Union[str, Path]] = None,
    ) -> List[ResultItem]:
        """重新扫描工作目录，合并并保存缓存后再过滤"""
        root = Path(workspace_root) if workspace_root is not None else self.workspace
        logger.info(f"扫描工作目录 {root}")

        projects = await scan_directory(root)
        merged = await self.store.merge(projects)
        await self.store.save(merged)

        # 必须在合并后的列表上排序，否则点击数全为 0
        return self.present(filter_projects(merged, keyword))

    async def record_hit(self, path: str, ide_path: Optional[str] = None) -> Optional[Project]:
        return await self.store.record_hit(path, ide_path)
