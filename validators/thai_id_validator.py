"""
태국 국민 신분증 번호(เลขบัตรประชาชน) 검증기

[번호 구조] 13자리 숫자
- 1~2번째 자리: 출생년도 (2자리), 첫 자리로 세기 구분
    0~2 → 2000년대, 3~4 → 1900년대, 5~6 → 2100년대, 7~9 → 추출 불가
- 3~4번째 자리: 월 / 5~6번째 자리: 일
- 7~8번째 자리: 주 코드
- 9~12번째 자리: 일련번호 (짝수 → 여성, 홀수 → 남성)
- 13번째 자리: 체크 디짓

[검증 전략]
- 형식: 숫자 외 문자 제거 후 정확히 13자리
- 체크섬: 형식이 맞을 때만 검증, 실패 시 INVALID_CHECKSUM
- 생년월일: 입력된 경우에만 번호에 인코딩된 날짜와 비교
- 잘못된 입력은 예외가 아니라 오류 코드가 담긴 결과로 반환
"""
import re
from datetime import date, datetime
from typing import List, Optional, Union

from .base_validator import BaseValidator
from .results import (
    BirthDateInfo,
    CenturyBand,
    ErrorCode,
    Gender,
    IdentityInfo,
    ValidationVerdict,
)


BirthDateInput = Union[str, date, None]

# 입력 생년월일 형식
ISO_DATE_PATTERN = re.compile(r'^(\d{4})-(\d{1,2})-(\d{1,2})(?:[T ].*)?$')
DAY_FIRST_SLASH_PATTERN = re.compile(r'^(\d{1,2})/(\d{1,2})/(\d{4})$')
YEAR_FIRST_SLASH_PATTERN = re.compile(r'^(\d{4})/(\d{1,2})/(\d{1,2})$')


class ThaiNationalIdValidator(BaseValidator):
    """태국 국민 신분증 번호 검증기"""

    LENGTH = 13

    # 체크섬 가중치 (앞 12자리에 13 → 2)
    CHECKSUM_WEIGHTS = [13, 12, 11, 10, 9, 8, 7, 6, 5, 4, 3, 2]

    # 첫 자리 → (세기 구분, 더할 년도, 시민 유형)
    CENTURY_BANDS = {
        0: (CenturyBand.BAND_2000S, 2000, 'citizen'),
        1: (CenturyBand.BAND_2000S, 2000, 'citizen'),
        2: (CenturyBand.BAND_2000S, 2000, 'citizen'),
        3: (CenturyBand.BAND_1900S, 1900, 'citizen_1900s'),
        4: (CenturyBand.BAND_1900S, 1900, 'citizen_1900s'),
        5: (CenturyBand.BAND_2100S, 2100, 'citizen_future'),
        6: (CenturyBand.BAND_2100S, 2100, 'citizen_future'),
    }

    # 표시 형식 구간: [0:1][1:5][5:10][10:12][12:13]
    GROUP_BOUNDARIES = [(0, 1), (1, 5), (5, 10), (10, 12), (12, 13)]
    FORMAT_SEPARATORS = {
        'dashed': '-',
        'spaced': ' ',
    }
    FORMAT_MODES = ('dashed', 'spaced', 'raw')

    # =========================================================
    # 체크섬
    # =========================================================

    def compute_check_digit(self, prefix: str) -> int:
        """
        앞 12자리로 체크 디짓 계산

        공식: r = Σ(d[i] × (13 - i)) % 11
              r < 2 이면 r, 아니면 11 - r
        """
        if len(prefix) != 12 or not prefix.isdigit():
            raise ValueError(f"12자리 숫자가 필요합니다: {prefix!r}")

        total = sum(int(d) * w for d, w in zip(prefix, self.CHECKSUM_WEIGHTS))
        remainder = total % 11
        return remainder if remainder < 2 else 11 - remainder

    def verify_checksum(self, digits: str) -> bool:
        """체크섬 검증 (13자리가 아니면 False, 예외 없음)"""
        if not isinstance(digits, str) or not self.has_valid_length(digits):
            return False
        return self.compute_check_digit(digits[:12]) == int(digits[12])

    # =========================================================
    # 정보 추출
    # =========================================================

    def extract_birth_date(self, digits: str) -> BirthDateInfo:
        """
        출생일 추출

        Returns:
            BirthDateInfo
            - 첫 자리가 7~9 이거나 13자리가 아니면 추출 불가 (UNEXTRACTABLE)
            - 실제 달력에 없는 날짜(13월, 2월 30일 등)는 valid=False
        """
        if not self.has_valid_length(digits):
            return BirthDateInfo.unextractable()

        band = self.CENTURY_BANDS.get(int(digits[0]))
        if band is None:
            return BirthDateInfo.unextractable()

        _, offset, _ = band
        year = offset + int(digits[0:2])
        month = int(digits[2:4])
        day = int(digits[4:6])

        return BirthDateInfo(
            year=year,
            month=month,
            day=day,
            iso_date=f"{year:04d}-{month:02d}-{day:02d}",
            valid=self._is_valid_date(year, month, day),
        )

    def _is_valid_date(self, year: int, month: int, day: int) -> bool:
        """그레고리력 날짜 유효성"""
        try:
            built = date(year, month, day)
        except ValueError:
            return False
        return (built.year, built.month, built.day) == (year, month, day)

    def extract_identity_info(self, digits: str) -> IdentityInfo:
        """
        주 코드 / 일련번호 / 성별 / 시민 유형 추출

        성별은 일련번호의 홀짝으로만 판단 (짝수 → 여성, 홀수 → 남성)
        """
        if not self.has_valid_length(digits):
            return IdentityInfo.unextractable()

        band = self.CENTURY_BANDS.get(int(digits[0]))
        if band is None:
            return IdentityInfo.unextractable()

        century_band, _, citizen_type = band
        sequence = int(digits[8:12])

        return IdentityInfo(
            century_band=century_band,
            citizen_type=citizen_type,
            province_code=int(digits[6:8]),
            sequence_number=sequence,
            gender=Gender.FEMALE if sequence % 2 == 0 else Gender.MALE,
        )

    # =========================================================
    # 표시 형식
    # =========================================================

    def format(self, digits: str, mode: str = 'dashed') -> str:
        """
        표시용 형식 변환

        Args:
            digits: 13자리 숫자
            mode: 'dashed' (1-2345-67890-12-3), 'spaced', 'raw'

        Returns:
            형식이 적용된 문자열 (13자리 숫자가 아니면 입력 그대로)
        """
        if mode not in self.FORMAT_MODES:
            raise ValueError(f"지원하지 않는 형식: {mode}")

        if not isinstance(digits, str) or not self.has_valid_length(digits):
            return digits

        if mode == 'raw':
            return digits

        groups = [digits[start:end] for start, end in self.GROUP_BOUNDARIES]
        return self.FORMAT_SEPARATORS[mode].join(groups)

    # =========================================================
    # 생년월일 비교
    # =========================================================

    @staticmethod
    def normalize_birth_date(value: BirthDateInput) -> Optional[str]:
        """
        입력 생년월일을 YYYY-MM-DD 로 정규화

        지원 형식: YYYY-MM-DD, DD/MM/YYYY, YYYY/MM/DD, date 객체
        해석할 수 없는 문자열은 그대로 반환 (비교 시 불일치 처리)
        """
        if value is None:
            return None
        if isinstance(value, datetime):
            value = value.date()
        if isinstance(value, date):
            return value.isoformat()

        text = value.strip()
        if not text:
            return None

        match = ISO_DATE_PATTERN.match(text) or YEAR_FIRST_SLASH_PATTERN.match(text)
        if match:
            year, month, day = (int(part) for part in match.groups())
            return f"{year:04d}-{month:02d}-{day:02d}"

        match = DAY_FIRST_SLASH_PATTERN.match(text)
        if match:
            day, month, year = (int(part) for part in match.groups())
            return f"{year:04d}-{month:02d}-{day:02d}"

        return text

    def matches_birth_date(self, birth_info: BirthDateInfo, birth_date: str) -> bool:
        if not birth_info.extractable:
            return False
        return birth_info.iso_date == birth_date

    # =========================================================
    # 전체 검증
    # =========================================================

    def validate(
        self,
        value: Optional[str],
        birth_date: BirthDateInput = None,
        check_checksum: bool = True,
        extract_info: bool = True,
    ) -> ValidationVerdict:
        """
        전체 검증 (형식 + 체크섬 + 생년월일)

        Args:
            value: 원본 입력 (하이픈, 공백 포함 가능)
            birth_date: 비교할 생년월일 (선택)
            check_checksum: False 면 체크섬을 통과로 간주
            extract_info: False 면 신원 정보 추출 생략

        Returns:
            ValidationVerdict
            - errors 순서: INVALID_FORMAT → INVALID_CHECKSUM → BIRTH_DATE_MISMATCH
            - 형식 오류 시 체크섬 오류와 생년월일 비교는 보고하지 않음
        """
        digits = self.normalize(value) if value is not None else None
        format_valid = digits is not None and self.has_valid_length(digits)

        checksum_valid = self.verify_checksum(digits) if check_checksum else True
        supplied_birth_date = self.normalize_birth_date(birth_date)

        birth_info = None
        identity_info = None
        birth_date_matches = None

        if format_valid:
            birth_info = self.extract_birth_date(digits)
            if extract_info:
                identity_info = self.extract_identity_info(digits)
            if supplied_birth_date is not None:
                birth_date_matches = self.matches_birth_date(birth_info, supplied_birth_date)

        errors: List[ErrorCode] = []
        if not format_valid:
            errors.append(ErrorCode.INVALID_FORMAT)
        elif not checksum_valid:
            errors.append(ErrorCode.INVALID_CHECKSUM)
        if birth_date_matches is False:
            errors.append(ErrorCode.BIRTH_DATE_MISMATCH)

        overall_valid = (
            format_valid
            and checksum_valid
            and (supplied_birth_date is None or birth_date_matches is True)
        )

        return ValidationVerdict(
            overall_valid=overall_valid,
            format_valid=format_valid,
            checksum_valid=checksum_valid,
            birth_date_matches=birth_date_matches,
            normalized_id=digits,
            formatted_id=self.format(digits) if format_valid else None,
            birth_info=birth_info,
            identity_info=identity_info,
            errors=tuple(errors),
        )
