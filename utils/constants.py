"""
표시용 상수

오류 코드 → 사용자 메시지 (태국어). 검증 코어는 메시지를 만들지 않으며,
이 매핑은 웹 계층에서만 사용한다.
"""

ERROR_MESSAGES = {
    'INVALID_FORMAT': 'เลขบัตรประชาชนต้องเป็นตัวเลข 13 หลัก',
    'INVALID_CHECKSUM': 'เลขบัตรประชาชนไม่ถูกต้อง (checksum ไม่ผ่าน)',
    'BIRTH_DATE_MISMATCH': 'วันเกิดไม่ตรงกับเลขบัตรประชาชน',
    'UNEXTRACTABLE': 'ไม่สามารถดึงข้อมูลจากเลขบัตรประชาชนได้',
    'TOO_MANY_ITEMS': 'ไม่สามารถตรวจสอบได้มากกว่า 100 เลขบัตรประชาชนในครั้งเดียว',
    'MISSING_INPUT': 'เลขบัตรประชาชนเป็นข้อมูลที่จำเป็น',
    'UNKNOWN_ERROR': 'เกิดข้อผิดพลาดในการตรวจสอบ',
    'INVALID_NATIONAL_ID': 'เลขบัตรประชาชนไม่ถูกต้อง',
    'INVALID_REQUEST': 'ข้อมูลที่ส่งมาไม่ถูกต้อง',
    'INTERNAL_ERROR': 'เกิดข้อผิดพลาดในการตรวจสอบเลขบัตรประชาชน',
}

SUCCESS_MESSAGE = 'เลขบัตรประชาชนถูกต้อง'
DUPLICATE_WARNING = 'เลขบัตรประชาชนนี้มีอยู่ในระบบแล้ว'
BATCH_MISSING_MESSAGE = 'กรุณาระบุเลขบัตรประชาชนที่ต้องการตรวจสอบ'


def get_message(code) -> str:
    """오류 코드(문자열 또는 Enum)의 표시 메시지"""
    key = getattr(code, 'value', code)
    return ERROR_MESSAGES.get(key, ERROR_MESSAGES['UNKNOWN_ERROR'])


def mask_national_id(digits: str) -> str:
    """로그용 마스킹 (앞 4자리, 뒤 3자리만 표시)"""
    if not digits or len(digits) < 8:
        return '****'
    return f"{digits[:4]}****{digits[-3:]}"
