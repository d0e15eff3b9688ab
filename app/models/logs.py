"""日志查看相关的数据模型
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, List, Optional


class LogFileInfo(BaseModel):
    """日志文件信息模型（每次列出时重新计算的快照）"""
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="文件名(不含目录)")
    size: int = Field(ge=0, description="文件大小(字节)")
    size_formatted: str = Field(description="可读的文件大小，如 1.5 KB")
    modified: str = Field(description="最后修改时间(格式: YYYY-MM-DD HH:MM:SS)，未知时为空字符串")
    modified_timestamp: int = Field(default=0, ge=0, description="最后修改时间戳(秒)，未知时为0")


class LogEntry(BaseModel):
    """单条日志记录模型，可能跨越多行"""
    model_config = ConfigDict(frozen=True)

    timestamp: str = Field(description="时间(格式: YYYY-MM-DD HH:MM:SS)")
    level: str = Field(description="日志级别，大写")
    message: str = Field(description="日志消息")
    ip: Optional[str] = Field(None, description="客户端IP")
    method: Optional[str] = Field(None, description="HTTP方法")
    url: Optional[str] = Field(None, description="请求路径")
    context: Optional[Any] = Field(None, description="上下文，JSON可解析时为解析后的值，否则为原始文本")


class LogFilters(BaseModel):
    """日志过滤条件，空字符串视为未设置"""
    level: Optional[str] = Field(None, description="日志级别(不区分大小写)")
    date_from: Optional[str] = Field(None, description="开始日期 YYYY-MM-DD(包含)")
    date_to: Optional[str] = Field(None, description="结束日期 YYYY-MM-DD(包含)")
    search: Optional[str] = Field(None, description="在消息中搜索的文本(不区分大小写)")

    def is_empty(self) -> bool:
        """是否没有任何有效的过滤条件"""
        return not (self.level or self.date_from or self.date_to or self.search)


class LogContentResult(BaseModel):
    """日志内容读取结果"""
    entries: List[LogEntry] = Field(default_factory=list, description="日志记录，最新的在前")
    total_lines: int = Field(0, description="未过滤时文件中可解析的记录总数")
    file: Optional[str] = Field(None, description="文件名，失败时为None")
    error: Optional[str] = Field(None, description="错误信息")


class LogDeleteResult(BaseModel):
    """日志删除结果"""
    success: bool = Field(description="操作是否成功")
    message: str = Field(description="操作消息")
    deleted: Optional[int] = Field(None, description="已删除的文件数(批量删除)")
    total: Optional[int] = Field(None, description="待删除的文件总数(批量删除)")
    errors: Optional[List[str]] = Field(None, description="删除失败的文件名(批量删除)")


class LogFileListResponse(BaseModel):
    """日志文件列表响应模型"""
    status: str = Field(description="响应状态: ok/error")
    message: Optional[str] = Field(None, description="响应消息")
    data: Optional[List[LogFileInfo]] = Field(None, description="日志文件列表")
    total_count: Optional[int] = Field(None, description="文件总数")


class LogContentResponse(BaseModel):
    """日志内容响应模型"""
    status: str = Field(description="响应状态: ok/error")
    message: Optional[str] = Field(None, description="响应消息")
    data: Optional[LogContentResult] = Field(None, description="日志记录及统计")
