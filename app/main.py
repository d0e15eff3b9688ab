import logging
import logging.handlers
import sys
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from app.core.config import settings
from app.core.path_manager import path_manager
from app.api import logs


# 配置日志
def create_app_log_handler(logs_dir: Path) -> logging.Handler:
    """创建写入 <日志目录>/app.log 的文件处理器

    app.log 可能在日志页面中被删除，WatchedFileHandler 会在文件消失后重新创建。
    """
    return logging.handlers.WatchedFileHandler(
        logs_dir / settings.APP_LOG_FILE, encoding="utf-8", mode="a"
    )


def setup_logging():
    """设置日志配置

    除标准输出外，同时写入日志目录下的 app.log，
    格式与日志解析器一致，可以直接在日志页面中查看。
    """
    logs_dir = path_manager.ensure_directory_exists(path_manager.get_logs_dir())

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format=settings.LOG_FORMAT,
        datefmt=settings.LOG_DATE_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
            create_app_log_handler(logs_dir),
        ],
    )

    # 设置第三方库日志级别
    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("fastapi").setLevel(logging.INFO)


# 应用生命周期管理
@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用启动和关闭时的处理"""
    logger = logging.getLogger(__name__)
    logger.info("=" * 50)
    logger.info(f"启动 {settings.PROJECT_NAME} v{settings.VERSION}")
    logger.info(f"应用目录: {path_manager.get_app_root()}")
    logger.info(f"日志目录: {logs.logs_service.get_logs_dir()}")
    logger.info("=" * 50)

    yield

    logger.info("应用正在关闭...")


# 创建FastAPI应用
def create_app() -> FastAPI:
    """创建FastAPI应用实例"""
    setup_logging()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description=settings.DESCRIPTION,
        version=settings.VERSION,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # 添加CORS中间件
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # 生产环境中应该限制具体的域名
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 添加请求日志中间件
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)

        logger = logging.getLogger("requests")
        logger.info(
            f"{request.method} {request.url.path} - "
            f"状态码: {response.status_code} - "
            f"客户端: {request.client.host if request.client else 'unknown'}"
        )

        return response

    # 注册路由
    app.include_router(logs.router, prefix="/api/v1")

    # 健康检查端点
    @app.get("/healthz", response_class=PlainTextResponse, tags=["健康检查"])
    async def health_check():
        """健康检查端点"""
        return "OK"

    @app.get("/info", tags=["项目信息"])
    async def get_project_info():
        """获取项目信息"""
        return {
            "project_name": settings.PROJECT_NAME,
            "version": settings.VERSION,
            "description": settings.DESCRIPTION,
            "directories": {
                "app_root": str(path_manager.get_app_root()),
                "logs_directory": logs.logs_service.get_logs_dir(),
            },
            "admin": logs.ADMIN_MENU_ITEM,
            "settings": {
                "log_file_pattern": settings.LOG_FILE_PATTERN,
                "default_limit": settings.DEFAULT_LIMIT,
            },
        }

    # 全局异常处理
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """HTTP异常处理"""
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "status": "error",
                "message": exc.detail,
                "status_code": exc.status_code,
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """通用异常处理"""
        logger = logging.getLogger(__name__)
        logger.error(f"未处理的异常: {str(exc)}", exc_info=True)

        return JSONResponse(
            status_code=500,
            content={
                "status": "error",
                "message": "服务器内部错误",
                "status_code": 500,
            },
        )

    return app


# 创建应用实例
app = create_app()
