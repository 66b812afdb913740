"""
探索器 - 关键词过滤与排序
"""
import re
from typing import List

from .models import Project


def _by_hits(projects: List[Project]) -> List[Project]:
    # sorted 是稳定排序，点击数相同的保持原有顺序
    return sorted(projects, key=lambda project: project.hits, reverse=True)


def filter_projects(projects: List[Project], keyword: str) -> List[Project]:
    """
    按关键词过滤项目

    排序规则：项目名称以关键词开头的排在最前，两组内部各自按点击数降序。

    Args:
        projects: 项目列表
        keyword: 关键词，名称中任意位置出现即匹配（不区分大小写）

    Returns:
        排序后的项目列表
    """
    pattern = re.compile(re.escape(keyword), re.IGNORECASE)
    matched = [project for project in projects if pattern.search(project.name)]

    start_match: List[Project] = []
    other_match: List[Project] = []
    for project in matched:
        # 前缀判断区分大小写
        if project.name.startswith(keyword):
            start_match.append(project)
        else:
            other_match.append(project)

    return _by_hits(start_match) + _by_hits(other_match)
