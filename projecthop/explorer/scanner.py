"""
探索器 - 目录扫描器
"""
import asyncio
import logging
import os
from pathlib import Path
from typing import List, Union

from ..exceptions import ScanError
from .models import ChildInfo, Project
from .signatures import classify_directory

logger = logging.getLogger(__name__)

# 版本控制根目录标记
VCS_MARKER = ".git"


def _list_children_sync(directory: str) -> List[ChildInfo]:
    children: List[ChildInfo] = []
    with os.scandir(directory) as entries:
        for entry in entries:
            children.append(ChildInfo(
                name=entry.name,
                # 符号链接不当作目录，避免循环
                is_dir=entry.is_dir(follow_symlinks=False),
                path=os.path.join(directory, entry.name),
            ))
    children.sort(key=lambda child: child.name)
    return children


async def list_children(directory: Union[str, Path]) -> List[ChildInfo]:
    """
    列出目录的直接子项（按名称排序）

    Raises:
        OSError: 目录不可读或已消失
    """
    return await asyncio.to_thread(_list_children_sync, str(directory))


async def scan_directory(root_path: Union[str, Path], strict: bool = False) -> List[Project]:
    """
    扫描目录，找出所有 git 项目

    遇到包含 .git 的目录即视为项目根，不再向下扫描；
    否则依次深入每个子目录（深度优先，按名称顺序）。

    Args:
        root_path: 根目录路径
        strict: 为 True 时遇到不可读目录直接抛出 ScanError，
            否则记录警告并跳过该子树

    Returns:
        识别到的项目列表
    """
    projects: List[Project] = []

    async def scan_recursive(current_path: str):
        try:
            children = await list_children(current_path)
        except OSError as e:
            if strict:
                raise ScanError(current_path, e.strerror or str(e)) from e
            logger.warning(f"跳过不可读目录 {current_path}: {e}")
            return

        if any(child.name == VCS_MARKER for child in children):
            project_type = await classify_directory(children)
            projects.append(Project(
                name=os.path.basename(current_path),
                path=current_path,
                type=project_type,
                hits=0,
                ide_path="",
            ))
            logger.debug(f"发现项目 {current_path} ({project_type.value})")
            # 找到项目后不再向下扫描
            return

        for child in children:
            if child.is_dir:
                await scan_recursive(child.path)

    root = os.path.abspath(os.path.expanduser(str(root_path)))
    await scan_recursive(root)

    return projects
