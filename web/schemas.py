"""
요청 스키마
"""
from typing import Any, List, Optional

from pydantic import BaseModel, Field


class ValidateNationalIdRequest(BaseModel):
    nationalId: Optional[str] = None
    birthDate: Optional[str] = Field(default=None, description="YYYY-MM-DD 또는 DD/MM/YYYY")
    checkDuplicates: bool = True
    verifyExternal: bool = False


class BatchOptions(BaseModel):
    checkDuplicates: bool = False
    verifyExternal: bool = False


class BatchValidateRequest(BaseModel):
    # 항목 타입은 검증하지 않음 (잘못된 항목은 해당 항목만 오류 처리)
    nationalIds: Optional[List[Any]] = None
    options: BatchOptions = Field(default_factory=BatchOptions)
