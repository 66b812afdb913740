"""
探索器 - 项目数据模型
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from rich.table import Table


class ProjectType(str, Enum):
    """项目类型，值同时作为图标文件名"""
    RUST = "rust"
    DART = "dart"
    # Xcode 工程沿用 applescript 标签，图标资源按该名称查找
    APPLESCRIPT = "applescript"
    ANDROID = "android"
    NUXT = "nuxt"
    VUE = "vue"
    VSCODE = "vscode"
    REACT = "react"
    REACT_TS = "react_ts"
    HEXO = "hexo"
    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"
    UNKNOWN = "unknown"


@dataclass
class ChildInfo:
    """扫描时看到的一个目录项"""
    name: str
    is_dir: bool
    path: str


class Project(BaseModel):
    """一个已发现的项目"""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    path: str
    type: ProjectType = ProjectType.UNKNOWN
    hits: int = Field(default=0, ge=0)
    ide_path: str = Field(default="", alias="idePath")

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value: Any) -> ProjectType:
        try:
            return ProjectType(value)
        except ValueError:
            return ProjectType.UNKNOWN

    @field_validator("ide_path", mode="before")
    @classmethod
    def _coerce_ide_path(cls, value: Any) -> str:
        return value or ""

    def to_dict(self) -> Dict[str, Any]:
        """转换为缓存文件中的记录"""
        return {
            "name": self.name,
            "path": self.path,
            "type": self.type.value,
            "hits": self.hits,
            "idePath": self.ide_path,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Project":
        """从缓存记录创建"""
        return cls.model_validate(data)


class ResultItem(BaseModel):
    """输出给启动器的候选项"""
    title: str
    subtitle: str
    arg: str
    valid: bool = True
    icon: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_project(cls, project: Project, assets_dir: str = "assets") -> "ResultItem":
        return cls(
            title=project.name,
            subtitle=project.path,
            arg=project.path,
            valid=True,
            icon={"path": f"{assets_dir}/{project.type.value}.png"},
        )


def format_project_table(projects: List[Project], title: Optional[str] = None) -> Table:
    """格式化项目列表"""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=3)
    table.add_column("项目名", style="bold")
    table.add_column("类型", style="green")
    table.add_column("点击", justify="right")
    table.add_column("路径", style="dim", overflow="fold")
    table.add_column("编辑器", style="dim")

    for i, project in enumerate(projects, 1):
        table.add_row(
            str(i),
            project.name,
            project.type.value,
            str(project.hits),
            project.path,
            project.ide_path or "[dim]无[/dim]",
        )

    return table
