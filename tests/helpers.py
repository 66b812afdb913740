"""
测试辅助函数
"""
import json
from pathlib import Path
from typing import Iterable, Optional

from projecthop.explorer import ChildInfo


def make_project(
    root: Path,
    relative: str,
    files: Iterable[str] = (),
    dirs: Iterable[str] = (),
    package: Optional[dict] = None,
) -> Path:
    """在 root 下创建一个带 .git 的项目目录"""
    project_dir = root / relative
    (project_dir / ".git").mkdir(parents=True)
    for name in files:
        (project_dir / name).write_text("", encoding="utf-8")
    for name in dirs:
        (project_dir / name).mkdir()
    if package is not None:
        (project_dir / "package.json").write_text(json.dumps(package), encoding="utf-8")
    return project_dir


def children_of(*names: str, dirs: Iterable[str] = ()) -> list:
    """构造分类器输入"""
    dir_names = set(dirs)
    return [
        ChildInfo(name=name, is_dir=name in dir_names, path=f"/work/demo/{name}")
        for name in names
    ]
