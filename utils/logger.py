"""
로깅 설정 모듈

[구조]
- 'NationalIdService' 로거 하나에만 파일/콘솔 핸들러 설정
- 모듈 로거는 get_logger(__name__) → 'NationalIdService.<모듈>' 하위 로거
  (상위 로거의 핸들러로 전달됨)
"""
import logging
import os

ROOT_LOGGER_NAME = 'NationalIdService'


def setup_logger(name: str = ROOT_LOGGER_NAME, log_file: str = None) -> logging.Logger:
    """로거 설정 및 반환"""

    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    if log_file is None:
        log_file = os.environ.get('TIMEBANK_LOG_FILE', 'national_id_service.log')

    logger.setLevel(logging.INFO)

    # 파일 핸들러
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(logging.INFO)

    # 콘솔 핸들러
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)

    # 포맷터
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    file_handler.setFormatter(formatter)
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """모듈 로거 (기본 로거의 하위 로거, 핸들러는 상위에서 처리)"""
    if name is None:
        return logger
    return logger.getChild(name)


# 기본 로거
logger = setup_logger()
