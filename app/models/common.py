from pydantic import BaseModel, Field
from typing import Optional, Any


class BaseResponse(BaseModel):
    """基础响应模型"""
    status: str = Field(description="响应状态: ok/error")
    message: Optional[str] = Field(None, description="响应消息")
    data: Optional[Any] = Field(None, description="响应数据")
