"""
ProjectHop 配置管理
"""
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings


def default_workspace() -> Path:
    return Path.home() / "Documents"


class Settings(BaseSettings):
    """应用配置"""

    # 工作目录：未指定时使用用户目录下的 Documents
    workspace: Path = Field(
        default_factory=default_workspace,
        validation_alias=AliasChoices("workspace", "PROJECTHOP_WORKSPACE"),
    )

    # 缓存路径，相对路径按当前工作目录解析
    cache_path: Path = Field(
        default=Path(".cache.json"),
        validation_alias=AliasChoices("PROJECTHOP_CACHE_PATH", "cache_path"),
    )

    # 图标资源目录
    assets_dir: str = Field(
        default="assets",
        validation_alias=AliasChoices("PROJECTHOP_ASSETS_DIR", "assets_dir"),
    )

    debug: bool = Field(
        default=False,
        validation_alias=AliasChoices("PROJECTHOP_DEBUG", "debug"),
    )

    @field_validator("workspace", mode="before")
    @classmethod
    def _empty_workspace(cls, value: Any) -> Any:
        # workspace= 这种空值同样回退到默认目录
        if value is None or (isinstance(value, str) and not value.strip()):
            return default_workspace()
        return value

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    def resolved_cache_path(self) -> Path:
        """返回绝对缓存路径"""
        path = self.cache_path.expanduser()
        if not path.is_absolute():
            path = Path.cwd() / path
        return path

    def resolved_workspace(self) -> Path:
        """返回绝对工作目录"""
        return self.workspace.expanduser().resolve()


settings = Settings()
