"""
검증기 패키지

[사용법 - 웹 계층에서]
    from validators import ThaiNationalIdValidator, BatchValidator

    validator = ThaiNationalIdValidator()
    verdict = validator.validate("1-9051-51012-34-7", birth_date="2019-05-15")
    if not verdict.overall_valid:
        codes = verdict.errors

[디버깅/테스트용]
    from validators import normalize, ProvinceLookup
"""
from .base_validator import BaseValidator, normalize
from .thai_id_validator import ThaiNationalIdValidator
from .batch_validator import BatchValidator
from .province import ProvinceLookup, DEFAULT_PROVINCE_NAMES
from .results import (
    BatchResult,
    BirthDateInfo,
    CenturyBand,
    ErrorCode,
    Gender,
    IdentityInfo,
    ValidationVerdict,
)

__all__ = [
    # ============================================
    # 메인 Validators
    # ============================================
    'BaseValidator',
    'ThaiNationalIdValidator',
    'BatchValidator',
    'normalize',

    # ============================================
    # 결과 타입
    # ============================================
    'BatchResult',
    'BirthDateInfo',
    'CenturyBand',
    'ErrorCode',
    'Gender',
    'IdentityInfo',
    'ValidationVerdict',

    # ============================================
    # 주 이름 조회 (표시용)
    # ============================================
    'ProvinceLookup',
    'DEFAULT_PROVINCE_NAMES',
]
