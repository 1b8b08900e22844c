"""
신분증 번호 일괄 검증

[검증 전략]
- 0건 → MISSING_INPUT, 100건 초과 → TOO_MANY_ITEMS (처리 전에 거부)
- 항목마다 독립 검증 (체크섬 + 정보 추출, 생년월일 비교 없음)
- 한 항목의 예외는 해당 항목만 UNKNOWN_ERROR 로 처리, 나머지는 계속 진행
"""
from typing import Optional, Sequence

from utils.logger import get_logger

from .results import BatchResult, ErrorCode, ValidationVerdict
from .thai_id_validator import ThaiNationalIdValidator

logger = get_logger(__name__)


class BatchValidator:
    """일괄 검증기"""

    MAX_ITEMS = 100

    def __init__(self, validator: Optional[ThaiNationalIdValidator] = None):
        self.validator = validator or ThaiNationalIdValidator()

    def validate_batch(self, values: Optional[Sequence[str]]) -> BatchResult:
        """
        일괄 검증

        Args:
            values: 원본 입력 목록 (최대 100건)

        Returns:
            BatchResult (입력 순서 유지, 거부 시 error 설정)
        """
        if not values:
            return BatchResult.rejected(ErrorCode.MISSING_INPUT)

        if len(values) > self.MAX_ITEMS:
            logger.warning(f"일괄 검증 거부: {len(values)}건 (최대 {self.MAX_ITEMS}건)")
            return BatchResult.rejected(ErrorCode.TOO_MANY_ITEMS)

        items = [self._validate_item(index, value) for index, value in enumerate(values)]
        return BatchResult(items=items)

    def _validate_item(self, index: int, value) -> ValidationVerdict:
        try:
            return self.validator.validate(value, check_checksum=True, extract_info=True)
        except Exception as e:
            logger.error(f"일괄 검증 항목 {index} 처리 오류: {e}")
            return ValidationVerdict(
                overall_valid=False,
                format_valid=False,
                checksum_valid=False,
                normalized_id=None,
                errors=(ErrorCode.UNKNOWN_ERROR,),
            )
