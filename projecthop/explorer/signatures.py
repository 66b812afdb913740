"""
探索器 - 特征指纹库

按顺序匹配，先命中者胜出。部分特征是其他特征的子集，顺序不能随意调整。
"""
import logging
from dataclasses import dataclass, field
from fnmatch import fnmatchcase
from typing import Iterable, List, Optional, Set

from ..exceptions import ManifestError
from .manifest import MANIFEST_NAME, read_dependency_names
from .models import ChildInfo, ProjectType

logger = logging.getLogger(__name__)

TSCONFIG_NAME = "tsconfig.json"


@dataclass
class ProjectSignature:
    """项目特征签名"""
    type: ProjectType
    description: str
    required_files: List[str] = field(default_factory=list)  # 必须存在的文件/目录（不区分大小写，支持通配符）
    required_dependencies: List[str] = field(default_factory=list)  # package.json 中必须存在的依赖

    def matches(self, names: Set[str], dependencies: Set[str]) -> bool:
        """names 与 dependencies 均已转为小写"""
        for pattern in self.required_files:
            pattern = pattern.lower()
            if "*" in pattern:
                if not any(fnmatchcase(name, pattern) for name in names):
                    return False
            elif pattern not in names:
                return False
        return all(dep.lower() in dependencies for dep in self.required_dependencies)


# 通用项目特征
PROJECT_SIGNATURES: List[ProjectSignature] = [
    ProjectSignature(
        type=ProjectType.RUST,
        description="Rust 项目",
        required_files=["Cargo.toml"],
    ),
    ProjectSignature(
        type=ProjectType.DART,
        description="Dart / Flutter 项目",
        required_files=["pubspec.yaml"],
    ),
    ProjectSignature(
        type=ProjectType.APPLESCRIPT,
        description="Xcode 工程",
        required_files=["*.xcodeproj"],
    ),
    ProjectSignature(
        type=ProjectType.ANDROID,
        description="Android 项目",
        required_files=["app", "gradle"],
    ),
]

# 存在 package.json 时的细分特征，最后一项兜底
JS_SIGNATURES: List[ProjectSignature] = [
    ProjectSignature(
        type=ProjectType.NUXT,
        description="Nuxt 项目",
        required_files=["nuxt.config.js"],
    ),
    ProjectSignature(
        type=ProjectType.VUE,
        description="Vue CLI 项目",
        required_files=["vue.config.js"],
    ),
    ProjectSignature(
        type=ProjectType.VSCODE,
        description="VS Code 扩展",
        required_files=[".vscodeignore"],
    ),
    ProjectSignature(
        type=ProjectType.REACT_TS,
        description="React + TypeScript 项目",
        required_files=[TSCONFIG_NAME],
        required_dependencies=["react"],
    ),
    ProjectSignature(
        type=ProjectType.REACT,
        description="React 项目",
        required_dependencies=["react"],
    ),
    ProjectSignature(
        type=ProjectType.HEXO,
        description="Hexo 博客",
        required_dependencies=["hexo"],
    ),
    ProjectSignature(
        type=ProjectType.TYPESCRIPT,
        description="TypeScript 项目",
        required_files=[TSCONFIG_NAME],
    ),
    ProjectSignature(
        type=ProjectType.JAVASCRIPT,
        description="JavaScript 项目",
    ),
]


def child_names(children: Iterable[ChildInfo]) -> Set[str]:
    return {child.name.lower() for child in children}


def _first_match(
    signatures: List[ProjectSignature],
    names: Set[str],
    dependencies: Set[str],
) -> Optional[ProjectSignature]:
    for signature in signatures:
        if signature.matches(names, dependencies):
            return signature
    return None


def classify(
    children: List[ChildInfo],
    dependencies: Optional[Iterable[str]] = None,
) -> ProjectType:
    """
    根据目录的直接子项判断项目类型

    Args:
        children: 目录的直接子项
        dependencies: package.json 中的依赖名（dependencies + devDependencies）

    Returns:
        项目类型，无法识别时为 unknown
    """
    names = child_names(children)
    deps = {dep.lower() for dep in dependencies or []}

    signature = _first_match(PROJECT_SIGNATURES, names, deps)
    if signature is not None:
        return signature.type

    # js 项目还可以细分
    if MANIFEST_NAME in names:
        signature = _first_match(JS_SIGNATURES, names, deps)
        if signature is not None:
            return signature.type

    return ProjectType.UNKNOWN


def needs_dependencies(children: List[ChildInfo]) -> bool:
    """判断分类结果是否取决于 package.json 的依赖"""
    names = child_names(children)
    if MANIFEST_NAME not in names:
        return False
    if _first_match(PROJECT_SIGNATURES, names, set()) is not None:
        return False

    for signature in JS_SIGNATURES:
        if signature.required_dependencies:
            return True
        if signature.matches(names, set()):
            return False
    return False


async def classify_directory(children: List[ChildInfo]) -> ProjectType:
    """
    判断目录的项目类型，必要时读取 package.json

    package.json 无法解析时返回 unknown，不中断扫描
    """
    if not needs_dependencies(children):
        return classify(children)

    try:
        dependencies = await read_dependency_names(children)
    except ManifestError as e:
        logger.warning(f"解析 package.json 失败，标记为 unknown: {e}")
        return ProjectType.UNKNOWN

    return classify(children, dependencies)
