"""
검증기 기본 클래스

[역할]
- 숫자 정규화 (숫자 외 문자 제거)
- 고정 길이 확인
- 공통 인터페이스 정의
"""
import re
from abc import ABC, abstractmethod

# ASCII 숫자만 (전각/태국 숫자 제외)
NON_DIGIT_PATTERN = re.compile(r'[^0-9]')


def normalize(value: str) -> str:
    """
    숫자만 추출 (순서 유지, 길이 제한 없음)

    Args:
        value: 임의의 입력 문자열

    Returns:
        숫자 문자만 남긴 문자열 (빈 입력 → 빈 문자열)

    Raises:
        TypeError: 문자열이 아닌 입력 (호출 측 결함)
    """
    if not isinstance(value, str):
        raise TypeError(f"문자열이 아닌 입력: {type(value).__name__}")
    return NON_DIGIT_PATTERN.sub('', value)


class BaseValidator(ABC):
    """검증기 기본 클래스"""

    # 정규화 후 자릿수 (하위 클래스에서 지정)
    LENGTH = 0

    def normalize(self, value: str) -> str:
        return normalize(value)

    def has_valid_length(self, digits: str) -> bool:
        """정규화된 숫자열의 자릿수 확인"""
        return len(digits) == self.LENGTH and digits.isdigit()

    @abstractmethod
    def validate(self, value: str, **options):
        """
        전체 검증

        Args:
            value: 검증할 값 (원본 입력)
            options: 검증기별 옵션

        Returns:
            검증 결과 객체 (잘못된 입력도 예외 없이 결과로 반환)
        """
        pass
