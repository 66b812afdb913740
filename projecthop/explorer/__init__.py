"""
探索器模块
"""
from .models import ChildInfo, Project, ProjectType, ResultItem, format_project_table
from .ranking import filter_projects
from .scanner import list_children, scan_directory
from .signatures import JS_SIGNATURES, PROJECT_SIGNATURES, classify, classify_directory

__all__ = [
    "ChildInfo",
    "Project",
    "ProjectType",
    "ResultItem",
    "format_project_table",
    "filter_projects",
    "list_children",
    "scan_directory",
    "PROJECT_SIGNATURES",
    "JS_SIGNATURES",
    "classify",
    "classify_directory",
]
