"""
주(จังหวัด) 이름 조회

[역할]
- 신분증 7~8번째 자리의 주 코드를 표시용 이름으로 변환
- 검증과 무관한 외부 정적 조회 자원 → 생성자로 주입 가능
- 등록되지 않은 코드는 "จังหวัดรหัส N" 으로 표시
"""
from typing import Dict, Mapping, Optional


# 기본 매핑 (일부만 등록, 전체 목록은 외부에서 주입)
DEFAULT_PROVINCE_NAMES = {
    1: 'กรุงเทพมหานคร',
    2: 'สมุทรปราการ',
    3: 'นนทบุรี',
    4: 'ปทุมธานี',
    5: 'พระนครศรีอยุธยา',
}

UNKNOWN_PROVINCE_LABEL = 'จังหวัดรหัส {code}'


class ProvinceLookup:
    """주 코드 → 이름 조회"""

    def __init__(self, names: Optional[Mapping[int, str]] = None):
        self._names: Dict[int, str] = dict(DEFAULT_PROVINCE_NAMES if names is None else names)

    def get_name(self, code: int) -> str:
        return self._names.get(code, UNKNOWN_PROVINCE_LABEL.format(code=code))

    def is_known(self, code: int) -> bool:
        return code in self._names

    def __len__(self) -> int:
        return len(self._names)
