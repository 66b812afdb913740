"""
探索器 - package.json 依赖读取
"""
import asyncio
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..exceptions import ManifestError
from .models import ChildInfo

MANIFEST_NAME = "package.json"


class PackageManifest(BaseModel):
    """package.json 中只关心依赖的部分"""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    dependencies: Dict[str, Any] = Field(default_factory=dict)
    dev_dependencies: Dict[str, Any] = Field(default_factory=dict, alias="devDependencies")

    @field_validator("dependencies", "dev_dependencies", mode="before")
    @classmethod
    def _only_mappings(cls, value: Any) -> Dict[str, Any]:
        # null、数组等非对象写法按没有依赖处理
        return value if isinstance(value, dict) else {}

    def dependency_names(self) -> List[str]:
        """合并 dependencies 与 devDependencies 的键名（只看键，不看版本）"""
        merged = {**self.dependencies, **self.dev_dependencies}
        return list(merged.keys())


def find_manifest(children: List[ChildInfo]) -> Optional[ChildInfo]:
    for child in children:
        if not child.is_dir and child.name.lower() == MANIFEST_NAME:
            return child
    return None


def parse_manifest(content: str, path: str = MANIFEST_NAME) -> PackageManifest:
    """
    解析 package.json 文本

    Raises:
        ManifestError: 不是合法 JSON，或根节点不是对象
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ManifestError(path, str(e)) from e

    if not isinstance(data, dict):
        raise ManifestError(path, "根节点不是对象")

    return PackageManifest.model_validate(data)


async def read_dependency_names(children: List[ChildInfo]) -> List[str]:
    """
    读取目录下 package.json 的依赖名

    Args:
        children: 目录的直接子项

    Returns:
        依赖名列表；没有 package.json 时为空
    """
    manifest = find_manifest(children)
    if manifest is None:
        return []

    try:
        content = await asyncio.to_thread(
            Path(manifest.path).read_text, encoding="utf-8"
        )
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(manifest.path, str(e)) from e

    return parse_manifest(content, manifest.path).dependency_names()
