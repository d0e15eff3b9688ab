import os
from pathlib import Path
from typing import Union
from app.core.config import settings


class PathManager:
    """路径管理器，负责应用根目录与日志目录的获取以及路径安全检查"""

    @staticmethod
    def get_app_root() -> Path:
        """获取应用根目录"""
        return Path(settings.get_app_root())

    @staticmethod
    def set_app_root(path: Union[str, Path]) -> None:
        """设置应用根目录"""
        if isinstance(path, str):
            path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Path does not exist: {path}")
        if not path.is_dir():
            raise NotADirectoryError(f"Path is not a directory: {path}")
        settings.set_app_root(path)

    @staticmethod
    def get_logs_dir() -> Path:
        """获取日志目录（不会自动创建）"""
        return Path(settings.get_logs_directory())

    @staticmethod
    def set_logs_dir(path: Union[str, Path]) -> None:
        """设置日志目录"""
        settings.set_logs_directory(str(path))

    @staticmethod
    def is_safe_path(path: Union[str, Path], root: Union[str, Path]) -> bool:
        """检查路径解析后是否位于 root 目录内（防止目录遍历和符号链接逃逸）"""
        try:
            resolved_path = os.path.realpath(path, strict=True)
            resolved_root = os.path.realpath(root, strict=True)
        except (OSError, ValueError):
            return False

        # 带上分隔符比较，避免 logs-old 之类的同前缀目录通过检查
        prefix = resolved_root.rstrip(os.sep) + os.sep
        return resolved_path.startswith(prefix)

    @staticmethod
    def ensure_directory_exists(path: Union[str, Path]) -> Path:
        """确保目录存在，如果不存在则创建"""
        if isinstance(path, str):
            path = Path(path)

        if not path.exists():
            path.mkdir(parents=True, exist_ok=True)

        return path


# 创建全局路径管理器实例
path_manager = PathManager()
