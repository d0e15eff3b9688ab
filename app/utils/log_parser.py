"""
日志文件解析工具
将半结构化的文本日志解析为 LogEntry 列表

日志格式：
    [2025-11-28 20:45:43] LEVEL: message | IP: 172.23.160.1 | GET /path | Context: {...}

IP、请求和 Context 三段均可省略。不以时间戳开头的行属于上一条记录
（多行消息、异常堆栈等）。无法解析的记录直接丢弃。
"""
import json
import logging
import re
from typing import Any, Iterator, List, Optional

from app.models.logs import LogEntry

logger = logging.getLogger(__name__)

# 记录起始行：行首的 [YYYY-MM-DD HH:MM:SS]，只接受 ASCII 数字
ENTRY_START_PATTERN = re.compile(r"^\[(\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})\]", re.ASCII)

# 整条记录（可能跨多行，因此使用 DOTALL）
LOG_ENTRY_PATTERN = re.compile(
    r"^\[(\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})\]\s+(\w+):\s+(.+?)"
    r"(?:\s*\|\s*IP:\s*([^|]+))?"
    r"(?:\s*\|\s*([A-Z]+)\s+(.+?))?"
    r"(?:\s*\|\s*Context:\s*(.+))?$",
    re.DOTALL | re.ASCII,
)


def split_raw_entries(content: str) -> Iterator[str]:
    """按时间戳行把文本切分为原始记录

    Args:
        content: 日志文件全文

    Yields:
        去除首尾空白后的原始记录文本
    """
    current: List[str] = []

    for line in content.split("\n"):
        line = line.rstrip()

        if ENTRY_START_PATTERN.match(line):
            if current:
                raw = "\n".join(current).strip()
                if raw:
                    yield raw
            current = [line]
        else:
            current.append(line)

    if current:
        raw = "\n".join(current).strip()
        if raw:
            yield raw


def _reject_constant(name: str) -> Any:
    # NaN / Infinity / -Infinity 不是合法 JSON
    raise ValueError(f"invalid JSON constant: {name}")


def decode_context(context_str: Optional[str]) -> Any:
    """解析 Context 段：可解析为非 null 的 JSON 时返回解析结果，否则返回原文"""
    if not context_str:
        return None

    try:
        decoded = json.loads(context_str, parse_constant=_reject_constant)
    except ValueError:
        return context_str

    return decoded if decoded is not None else context_str


def _strip_or_none(value: Optional[str]) -> Optional[str]:
    return value.strip() if value is not None else None


def parse_log_entry(raw_entry: str) -> Optional[LogEntry]:
    """解析单条记录

    Args:
        raw_entry: 原始记录文本

    Returns:
        LogEntry，不符合格式时返回 None
    """
    match = LOG_ENTRY_PATTERN.match(raw_entry)
    if not match:
        return None

    timestamp, level, message, ip, method, url, context_str = match.groups()

    return LogEntry(
        timestamp=timestamp,
        level=level.upper(),
        message=message.strip(),
        ip=_strip_or_none(ip),
        method=_strip_or_none(method),
        url=_strip_or_none(url),
        context=decode_context(_strip_or_none(context_str)),
    )


def parse_log_file(content: str) -> List[LogEntry]:
    """解析日志文件内容，返回按文件顺序排列的记录列表"""
    entries: List[LogEntry] = []
    dropped = 0

    for raw_entry in split_raw_entries(content):
        entry = parse_log_entry(raw_entry)
        if entry is None:
            dropped += 1
            continue
        entries.append(entry)

    if dropped:
        logger.debug(f"跳过 {dropped} 条无法解析的日志记录")

    return entries
