"""
项目缓存

缓存文件是一个 JSON 数组，每次保存整体覆盖。
没有文件锁，多个进程同时写入时后写者覆盖先写者。
"""
import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import ValidationError

from .exceptions import CacheError
from .explorer.models import Project

logger = logging.getLogger(__name__)


class CacheStore:
    """读写项目缓存，合并历史点击数"""

    def __init__(self, cache_path: Union[str, Path]):
        self.cache_path = Path(cache_path)

    # ==================== 读写 ====================

    async def load(self) -> List[Project]:
        """
        读取缓存

        文件不存在时写入空缓存并返回空列表；其他读取或解析错误
        只记录日志，按空缓存处理。
        """
        try:
            content = await asyncio.to_thread(self.cache_path.read_text, encoding="utf-8", errors="surrogateescape")
        except FileNotFoundError:
            await self.save([])
            return []
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"读取缓存失败 {self.cache_path}: {e}")
            return []

        try:
            return self._parse(content)
        except CacheError as e:
            logger.warning(f"缓存文件已损坏 {self.cache_path}: {e}")
            return []

    def _parse(self, content: str) -> List[Project]:
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise CacheError(str(e)) from e

        if not isinstance(data, list):
            raise CacheError("根节点不是数组")

        projects: List[Project] = []
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                logger.warning(f"忽略缓存第 {index} 项: 不是对象")
                continue
            try:
                projects.append(Project.from_dict(item))
            except ValidationError as e:
                logger.warning(f"忽略缓存第 {index} 项: {e.error_count()} 个字段无效")
        return projects

    async def save(self, projects: List[Project]) -> None:
        """写入缓存，失败只记录日志，原有缓存保持不变"""
        try:
            # 非 UTF-8 的目录名以代理字符保存，按原字节写回
            content = json.dumps(
                [project.to_dict() for project in projects],
                ensure_ascii=False,
                indent=2,
            ).encode("utf-8", errors="surrogateescape")
            await asyncio.to_thread(self._write, content)
        except (OSError, ValueError) as e:
            logger.error(f"写入缓存失败 {self.cache_path}: {e}")

    def _write(self, content: bytes) -> None:
        self.cache_path.parent.mkdir(parents=True, exist_ok=True)
        # 先写临时文件再替换，写入失败不会截断旧缓存
        fd, tmp_path = tempfile.mkstemp(
            dir=self.cache_path.parent, prefix=f".{self.cache_path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(content)
            os.replace(tmp_path, self.cache_path)
        except OSError:
            os.unlink(tmp_path)
            raise

    # ==================== 合并 ====================

    async def merge(self, fresh: List[Project]) -> List[Project]:
        """
        把历史点击数和编辑器路径合并进新的扫描结果

        新结果中不存在的路径直接丢弃。返回的就是传入的列表（原地修改）。
        """
        cache = await self.load()

        # 只保留有点击记录或关联过编辑器的项目
        history: Dict[str, Project] = {
            item.path: item
            for item in cache
            if item.hits > 0 or item.ide_path
        }

        for project in fresh:
            prior = history.get(project.path)
            if prior is None:
                project.ide_path = ""
                continue
            project.hits = max(project.hits, prior.hits)
            project.ide_path = prior.ide_path

        return fresh

    # ==================== 点击 ====================

    async def record_hit(self, path: str, ide_path: Optional[str] = None) -> Optional[Project]:
        """
        记录一次选中：点击数加一，可同时关联编辑器

        Returns:
            更新后的项目；缓存中没有该路径时返回 None
        """
        projects = await self.load()
        for project in projects:
            if project.path == path:
                project.hits += 1
                if ide_path is not None:
                    project.ide_path = ide_path
                await self.save(projects)
                return project

        logger.warning(f"缓存中没有项目 {path}")
        return None
