"""
검증 결과 타입

[역할]
- 오류 코드 (메시지가 아닌 코드, 표시 문자열은 호출 측 책임)
- 생년월일 / 신원 정보 / 검증 결과 / 일괄 검증 결과
- 모든 결과는 불변 값, 호출마다 새로 계산 (캐시 없음)
- to_dict(): HTTP 계층이 사용하는 camelCase JSON 형태
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class ErrorCode(str, Enum):
    """오류 코드 (프로그램 처리용, 메시지 아님)"""

    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_CHECKSUM = "INVALID_CHECKSUM"
    BIRTH_DATE_MISMATCH = "BIRTH_DATE_MISMATCH"
    UNEXTRACTABLE = "UNEXTRACTABLE"
    TOO_MANY_ITEMS = "TOO_MANY_ITEMS"
    MISSING_INPUT = "MISSING_INPUT"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class CenturyBand(str, Enum):
    BAND_2000S = "2000s"
    BAND_1900S = "1900s"
    BAND_2100S = "2100s"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


@dataclass(frozen=True)
class BirthDateInfo:
    """생년월일 정보 (1~6번째 자리)"""

    year: Optional[int]
    month: Optional[int]
    day: Optional[int]
    iso_date: Optional[str]
    valid: bool
    error: Optional[ErrorCode] = None

    @classmethod
    def unextractable(cls) -> "BirthDateInfo":
        return cls(None, None, None, None, False, ErrorCode.UNEXTRACTABLE)

    @property
    def extractable(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        if not self.extractable:
            return {"isValid": False, "error": self.error.value}
        return {
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "fullDate": self.iso_date,
            "isValid": self.valid,
        }


@dataclass(frozen=True)
class IdentityInfo:
    """신원 정보 (세기 구분, 주 코드, 일련번호, 성별)"""

    century_band: Optional[CenturyBand]
    citizen_type: Optional[str]
    province_code: Optional[int]
    sequence_number: Optional[int]
    gender: Optional[Gender]
    error: Optional[ErrorCode] = None

    @classmethod
    def unextractable(cls) -> "IdentityInfo":
        return cls(None, None, None, None, None, ErrorCode.UNEXTRACTABLE)

    @property
    def extractable(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        if not self.extractable:
            return {"isValid": False, "error": self.error.value}
        return {
            "type": self.citizen_type,
            "centuryBand": self.century_band.value,
            "province": self.province_code,
            "sequence": self.sequence_number,
            "gender": self.gender.value,
            "isValid": True,
        }


@dataclass(frozen=True)
class ValidationVerdict:
    """
    단일 신분증 번호 검증 결과

    overall_valid 는 format_valid, checksum_valid, 그리고 생년월일이 주어진 경우
    birth_date_matches 가 모두 참일 때만 참이다.
    """

    overall_valid: bool
    format_valid: bool
    checksum_valid: bool
    birth_date_matches: Optional[bool] = None
    normalized_id: Optional[str] = None
    formatted_id: Optional[str] = None
    birth_info: Optional[BirthDateInfo] = None
    identity_info: Optional[IdentityInfo] = None
    errors: Tuple[ErrorCode, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "isValid": self.overall_valid,
            "nationalId": self.normalized_id,
            "formatted": self.formatted_id,
            "validation": {
                "format": self.format_valid,
                "checksum": self.checksum_valid,
                "birthDate": self.birth_date_matches,
            },
            "extractedInfo": {
                "birthDate": self.birth_info.to_dict() if self.birth_info else None,
                "nationalId": self.identity_info.to_dict() if self.identity_info else None,
            },
            "errors": [code.value for code in self.errors],
        }


@dataclass(frozen=True)
class BatchResult:
    """일괄 검증 결과 (error 가 있으면 처리 전에 거부된 요청)"""

    items: List[ValidationVerdict] = field(default_factory=list)
    error: Optional[ErrorCode] = None

    @classmethod
    def rejected(cls, error: ErrorCode) -> "BatchResult":
        return cls(items=[], error=error)

    @property
    def accepted(self) -> bool:
        return self.error is None

    @property
    def valid_count(self) -> int:
        return sum(1 for item in self.items if item.overall_valid)

    @property
    def invalid_count(self) -> int:
        return len(self.items) - self.valid_count

    def summary(self) -> Dict[str, int]:
        return {
            "total": len(self.items),
            "valid": self.valid_count,
            "invalid": self.invalid_count,
        }
