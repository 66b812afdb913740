"""
ProjectHop 异常定义
"""
from pathlib import Path
from typing import Union


class ProjectHopError(Exception):
    """所有 ProjectHop 异常的基类"""
    pass


class ScanError(ProjectHopError):
    """扫描目录时无法读取（权限不足、目录消失等）"""

    def __init__(self, path: Union[str, Path], reason: str = ""):
        self.path = str(path)
        self.reason = reason
        message = f"无法读取目录: {self.path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class ManifestError(ProjectHopError):
    """package.json 存在但无法解析"""

    def __init__(self, path: Union[str, Path], reason: str = ""):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"无法解析清单文件: {self.path} {reason}".rstrip())


class CacheError(ProjectHopError):
    """缓存文件内容损坏"""
    pass
