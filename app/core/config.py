import os
import sys
from pathlib import Path
from typing import Optional


class Settings:
    """应用配置类
    """

    # 项目基础设置
    PROJECT_NAME: str = "Logs Viewer API"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "FastAPI backend for browsing, filtering and deleting application log files"

    # 服务器设置
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False

    # 全局静态变量 - 应用根目录与日志目录
    # 未设置时分别读取环境变量 APP_ROOT / LOGS_DIR
    _APP_ROOT: Optional[Path] = None
    LOGS_DIR: Optional[str] = os.getenv("LOGS_DIR") or None

    @classmethod
    def get_app_root(cls) -> str:
        """获取应用根目录（返回使用正斜杠的字符串路径）"""
        if cls._APP_ROOT is None:
            env_root = os.getenv("APP_ROOT")
            if env_root:
                cls._APP_ROOT = Path(env_root)
            else:
                # 默认为仓库根目录（app/core/config.py 向上三级）
                cls._APP_ROOT = Path(__file__).resolve().parent.parent.parent
        return str(cls._APP_ROOT).replace('\\', '/')

    @classmethod
    def set_app_root(cls, path: Path) -> None:
        """设置应用根目录"""
        cls._APP_ROOT = path

    @classmethod
    def get_logs_directory(cls) -> str:
        """获取日志目录（返回使用正斜杠的字符串路径）

        优先使用 LOGS_DIR，否则为 <app-root>/storage/logs
        """
        if cls.LOGS_DIR:
            return str(cls.LOGS_DIR).replace('\\', '/')
        app_root = Path(cls.get_app_root())
        return str(app_root / "storage" / "logs").replace('\\', '/')

    @classmethod
    def set_logs_directory(cls, path: Optional[str]) -> None:
        """设置日志目录，传入 None 时恢复默认值"""
        cls.LOGS_DIR = str(path) if path else None

    # 日志文件扫描设置
    LOG_FILE_PATTERN: str = "*.log"
    DEFAULT_LIMIT: int = 50
    # 大于等于该值的 limit 视为不截断
    UNBOUNDED_LIMIT: int = sys.maxsize

    # 管理后台集成
    ADMIN_PAGE: str = "logs-view"
    ADMIN_PERMISSION: str = "admin.logs.view"

    # 日志设置
    # 格式与日志解析器读取的格式一致，服务自身的 app.log 也能在页面中查看
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = "[%(asctime)s] %(levelname)s: %(message)s | Context: {\"logger\": \"%(name)s\"}"
    LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"
    APP_LOG_FILE: str = "app.log"


settings = Settings()
