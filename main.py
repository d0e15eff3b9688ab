#!/usr/bin/env python3
"""
Logs Viewer API 主程序入口

这个文件是项目的启动入口，使用 uvicorn 运行 FastAPI 应用。
"""

import uvicorn
import os
import sys
from pathlib import Path
import argparse

# 添加项目根目录到Python路径
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from app.core.config import settings
from app.core.path_manager import path_manager

def main():
    """主函数"""
    parser = argparse.ArgumentParser(description="Logs Viewer API")
    parser.add_argument(
        "--host",
        default=settings.HOST,
        help=f"服务器主机地址 (默认: {settings.HOST})"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.PORT,
        help=f"服务器端口 (默认: {settings.PORT})"
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="启用自动重载 (开发模式)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="启用调试模式"
    )
    parser.add_argument(
        "--logs-dir",
        type=str,
        help="设置日志目录 (默认: <应用目录>/storage/logs)"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="工作进程数量 (默认: 1)"
    )

    args = parser.parse_args()

    # 设置日志目录；写入环境变量，reload/多进程模式下子进程同样生效
    if args.logs_dir:
        logs_dir = str(Path(args.logs_dir).resolve())
        os.environ["LOGS_DIR"] = logs_dir
        path_manager.set_logs_dir(logs_dir)
        print(f"日志目录设置为: {logs_dir}")

    # 设置调试模式
    if args.debug:
        settings.DEBUG = True
        settings.LOG_LEVEL = "DEBUG"
        os.environ["LOG_LEVEL"] = "DEBUG"

    # 显示启动信息
    print("=" * 60)
    print(f"[START] Starting {settings.PROJECT_NAME} v{settings.VERSION}")
    print(f"[INFO] Description: {settings.DESCRIPTION}")
    print(f"[INFO] Server URL: http://{args.host}:{args.port}")
    print(f"[INFO] API Docs: http://{args.host}:{args.port}/docs")
    print(f"[INFO] App Root: {path_manager.get_app_root()}")
    print(f"[INFO] Logs Directory: {path_manager.get_logs_dir()}")
    if args.reload:
        print("[INFO] Auto-reload: Enabled")
    if args.debug:
        print("[INFO] Debug mode: Enabled")
    print("=" * 60)

    # 启动服务器
    try:
        uvicorn.run(
            "app.main:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
            workers=args.workers if not args.reload else 1,
            log_level="debug" if args.debug else "info",
            access_log=True,
        )
    except KeyboardInterrupt:
        print("\n[STOP] Server stopped")
    except Exception as e:
        print(f"[ERROR] Failed to start: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
