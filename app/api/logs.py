"""日志查看API接口
"""
import copy
from fastapi import APIRouter, HTTPException, Query
from typing import Any, Dict, List, Optional

from app.core.config import settings
from app.services.logs_service import logs_service
from app.models.logs import LogFileListResponse, LogContentResponse, LogFilters
from app.models.common import BaseResponse


router = APIRouter(prefix="/logs", tags=["日志查看"])


# 管理后台菜单项，权限检查由宿主完成
ADMIN_MENU_ITEM: Dict[str, Any] = {
    "text": "日志",
    "icon": "fas fa-file-alt",
    "href": f"/admin/{settings.ADMIN_PAGE}",
    "page": settings.ADMIN_PAGE,
    "order": 1,
    "permission": settings.ADMIN_PERMISSION,
}


def register_admin_menu(menu: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """把日志页面加入宿主的管理菜单

    已有 "system" 菜单时作为其子菜单加入，否则新建 "system" 菜单。

    Args:
        menu: 宿主当前的菜单列表

    Returns:
        更新后的菜单列表
    """
    item = copy.deepcopy(ADMIN_MENU_ITEM)

    for entry in menu:
        if entry.get("page") == "system":
            entry.setdefault("submenu", []).append(item)
            return menu

    menu.append({
        "text": "系统",
        "icon": "fas fa-server",
        "href": "#",
        "page": "system",
        "order": 60,
        "permission": None,
        "submenu": [item],
    })
    return menu


def register_settings_category(categories: Dict[str, Any], enabled: bool = True) -> Dict[str, Any]:
    """在宿主设置页的 "system" 分类中加入日志入口

    插件未启用或宿主没有 "system" 分类时原样返回。
    """
    if not enabled or "system" not in categories:
        return categories

    categories["system"].setdefault("items", []).append({
        "title": ADMIN_MENU_ITEM["text"],
        "description": "查看系统日志",
        "url": ADMIN_MENU_ITEM["href"],
        "icon": ADMIN_MENU_ITEM["icon"],
        "permission": settings.ADMIN_PERMISSION,
    })
    return categories


@router.get("/dir", response_model=BaseResponse)
async def get_logs_dir():
    """获取日志目录"""
    return BaseResponse(
        status="ok",
        message="成功获取日志目录",
        data={"logs_dir": logs_service.get_logs_dir()}
    )


@router.get("/list", response_model=LogFileListResponse)
async def get_log_files():
    """获取日志文件列表

    返回日志目录下所有 *.log 文件，按修改时间倒序
    """
    try:
        log_files = await logs_service.get_log_files()

        return LogFileListResponse(
            status="ok",
            message=f"成功获取日志文件列表，共 {len(log_files)} 个文件",
            data=log_files,
            total_count=len(log_files)
        )

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"获取日志文件列表失败: {str(e)}")


@router.get("/content", response_model=LogContentResponse)
async def get_log_content(
    file: str = Query(..., description="日志文件名"),
    level: Optional[str] = Query(None, description="日志级别，如 ERROR"),
    date_from: Optional[str] = Query(None, description="开始日期 YYYY-MM-DD"),
    date_to: Optional[str] = Query(None, description="结束日期 YYYY-MM-DD"),
    search: Optional[str] = Query(None, description="在消息中搜索"),
    limit: int = Query(settings.DEFAULT_LIMIT, description="返回的最大记录数，<=0 表示不限制"),
):
    """获取日志文件内容

    解析日志文件并按条件过滤，最新的记录在前
    """
    try:
        if not file:
            raise HTTPException(status_code=400, detail="文件名不能为空")

        filters = LogFilters(level=level, date_from=date_from, date_to=date_to, search=search)
        result = await logs_service.get_log_content(file, filters, limit)

        if result.error:
            raise HTTPException(status_code=400, detail=result.error)

        return LogContentResponse(
            status="ok",
            message=f"成功读取日志文件: {result.file}",
            data=result
        )

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"读取日志文件失败: {str(e)}")


@router.delete("/delete", response_model=BaseResponse)
async def delete_log_file(
    file: str = Query(..., description="日志文件名，all 表示删除全部")
):
    """删除日志文件"""
    try:
        result = await logs_service.delete_log_file(file)

        if result.success:
            return BaseResponse(
                status="ok",
                message=result.message,
                data=result.model_dump(exclude_none=True)
            )
        else:
            raise HTTPException(status_code=400, detail=result.message)

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"删除失败: {str(e)}")
