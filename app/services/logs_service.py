"""日志查看服务
列出、读取、过滤和删除日志目录下的 *.log 文件
"""
import os
import aiofiles
from pathlib import Path
from typing import List, Optional, Union
import logging
from datetime import datetime

from app.models.logs import (
    LogContentResult,
    LogDeleteResult,
    LogEntry,
    LogFileInfo,
    LogFilters,
)
from app.core.config import settings
from app.core.path_manager import path_manager
from app.utils.file_size import format_file_size
from app.utils.log_parser import parse_log_file


logger = logging.getLogger(__name__)

# 批量删除时使用的特殊文件名
DELETE_ALL = "all"


def apply_filters(entries: List[LogEntry], filters: Optional[LogFilters]) -> List[LogEntry]:
    """按级别、日期范围和关键字过滤日志记录，条件之间为 AND 关系

    没有任何过滤条件时原样返回传入的列表。
    """
    if filters is None or filters.is_empty():
        return entries

    level = filters.level.upper() if filters.level else None
    search = filters.search.lower() if filters.search else None

    def matches(entry: LogEntry) -> bool:
        if level and entry.level.upper() != level:
            return False

        # 时间格式固定且补零，直接按字符串比较日期部分
        entry_date = entry.timestamp[:10]
        if filters.date_from and entry_date < filters.date_from:
            return False
        if filters.date_to and entry_date > filters.date_to:
            return False

        # 只在消息中搜索
        if search and search not in entry.message.lower():
            return False

        return True

    return [entry for entry in entries if matches(entry)]


class LogsService:
    """日志查看服务类"""

    def __init__(self, logs_dir: Optional[Union[str, Path]] = None):
        """初始化日志服务

        Args:
            logs_dir: 日志目录，为None时使用配置中的目录
        """
        if logs_dir is None:
            logs_dir = path_manager.get_logs_dir()
        self.logs_dir = Path(str(logs_dir).rstrip("/\\") or "/")

    def get_logs_dir(self) -> str:
        """获取日志目录（以路径分隔符结尾）"""
        return str(self.logs_dir).rstrip("/\\") + "/"

    def _resolve_file(self, file_name: str) -> Path:
        # 只保留文件名部分，丢弃调用方传入的目录
        return self.logs_dir / os.path.basename(file_name)

    def is_valid_log_file(self, file_path: Union[str, Path]) -> bool:
        """检查文件是否存在且位于日志目录内

        路径和日志目录都会解析符号链接后再比较，
        任何一方解析失败都视为无效。
        """
        file_path = Path(file_path)
        if not file_path.exists() or not file_path.is_file():
            return False

        return path_manager.is_safe_path(file_path, self.logs_dir)

    async def get_log_files(self) -> List[LogFileInfo]:
        """获取日志文件列表，按修改时间倒序（最新的在前）

        Returns:
            List[LogFileInfo]: 日志文件信息列表，目录不存在时为空列表
        """
        if not self.logs_dir.is_dir():
            logger.warning(f"日志目录不存在: {self.logs_dir}")
            return []

        log_files: List[LogFileInfo] = []
        for file_path in sorted(self.logs_dir.glob(settings.LOG_FILE_PATTERN)):
            # 跳过不存在、非文件或不可读的项
            if not file_path.is_file() or not os.access(file_path, os.R_OK):
                continue

            try:
                stat = file_path.stat()
            except OSError as e:
                logger.warning(f"无法读取文件信息 {file_path.name}: {str(e)}")
                continue

            modified_timestamp = max(int(stat.st_mtime), 0)
            modified = (
                datetime.fromtimestamp(modified_timestamp).strftime("%Y-%m-%d %H:%M:%S")
                if modified_timestamp
                else ""
            )

            log_files.append(
                LogFileInfo(
                    name=file_path.name,
                    size=stat.st_size,
                    size_formatted=format_file_size(stat.st_size),
                    modified=modified,
                    modified_timestamp=modified_timestamp,
                )
            )

        # 按修改时间倒序，未知时间(0)排在最后
        log_files.sort(key=lambda x: x.modified_timestamp, reverse=True)

        logger.info(f"成功获取日志文件列表，共 {len(log_files)} 个文件")
        return log_files

    async def get_log_content(
        self,
        file_name: str,
        filters: Optional[LogFilters] = None,
        limit: int = settings.DEFAULT_LIMIT,
    ) -> LogContentResult:
        """读取并解析日志文件

        Args:
            file_name: 日志文件名
            filters: 过滤条件
            limit: 返回的最大记录数，<=0 表示不限制

        Returns:
            LogContentResult: 记录按时间倒序排列；total_lines 为未过滤时的记录总数
        """
        file_path = self._resolve_file(file_name)

        # 安全检查，必须在读取之前完成
        if not self.is_valid_log_file(file_path):
            logger.warning(f"日志文件不存在或不在日志目录内: {file_name}")
            return LogContentResult(error="文件不存在或不可访问")

        if not os.access(file_path, os.R_OK):
            logger.warning(f"日志文件不可读: {file_path}")
            return LogContentResult(error="文件不可读")

        try:
            async with aiofiles.open(file_path, mode="r", encoding="utf-8", errors="ignore") as f:
                content = await f.read()

            entries = apply_filters(parse_log_file(content), filters)

            # 保留最后 limit 条（最新的记录）
            if 0 < limit < settings.UNBOUNDED_LIMIT:
                entries = entries[-limit:]

            # 最新的记录在前
            entries = list(reversed(entries))

            # total_lines 统计未过滤的完整内容
            total_lines = len(parse_log_file(content))

            logger.info(f"成功读取日志文件: {file_path.name}, 返回 {len(entries)}/{total_lines} 条记录")
            return LogContentResult(
                entries=entries,
                total_lines=total_lines,
                file=file_path.name,
            )

        except Exception as e:
            logger.error(f"读取日志文件失败: {file_path}, 错误: {str(e)}")
            return LogContentResult(error=f"读取文件失败: {str(e)}")

    async def delete_log_file(self, file_name: str) -> LogDeleteResult:
        """删除日志文件

        Args:
            file_name: 日志文件名，为 "all" 时删除全部日志文件

        Returns:
            LogDeleteResult: 删除结果
        """
        if file_name == DELETE_ALL:
            return await self._delete_all_log_files()

        file_path = self._resolve_file(file_name)

        if not self.is_valid_log_file(file_path):
            logger.warning(f"拒绝删除日志文件: {file_name}")
            return LogDeleteResult(success=False, message="文件不存在或不可访问")

        if not file_path.exists():
            return LogDeleteResult(success=False, message="文件不存在")

        try:
            file_path.unlink()
            logger.info(f"已删除日志文件: {file_path.name}")
            return LogDeleteResult(success=True, message="文件删除成功")
        except Exception as e:
            logger.error(f"删除日志文件失败: {file_path}, 错误: {str(e)}")
            return LogDeleteResult(success=False, message=f"删除失败: {str(e)}")

    async def _delete_all_log_files(self) -> LogDeleteResult:
        """删除日志目录下的全部日志文件，单个文件失败不影响其他文件"""
        files = await self.get_log_files()
        deleted = 0
        errors: List[str] = []

        for file_info in files:
            file_path = self.logs_dir / file_info.name
            try:
                file_path.unlink()
                deleted += 1
            except Exception as e:
                logger.error(f"删除日志文件失败: {file_path}, 错误: {str(e)}")
                errors.append(file_info.name)

        total = len(files)
        if deleted > 0:
            message = f"已删除 {deleted}/{total} 个文件"
        else:
            message = "未能删除任何文件"

        logger.info(f"批量删除日志文件: {deleted}/{total}")
        return LogDeleteResult(
            success=deleted > 0,
            message=message,
            deleted=deleted,
            total=total,
            errors=errors,
        )


# 创建全局日志服务实例
logs_service = LogsService()
