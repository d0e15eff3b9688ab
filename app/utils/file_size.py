"""日志文件大小格式化工具"""

SIZE_UNITS = ["B", "KB", "MB", "GB"]


def format_file_size(size: int) -> str:
    """将字节数格式化为可读字符串（1024 进制，最多保留两位小数）

    超过 GB 的文件仍以 GB 表示，例如 2048 GB。
    """
    size = max(size, 0)

    power = 0
    while power < len(SIZE_UNITS) - 1 and size >= 1024 ** (power + 1):
        power += 1

    value = round(size / 1024 ** power, 2)
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {SIZE_UNITS[power]}"
