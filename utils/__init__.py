"""
Utils 패키지
"""
from .logger import logger, setup_logger, get_logger
from .constants import ERROR_MESSAGES, get_message, mask_national_id

__all__ = ['logger', 'setup_logger', 'get_logger', 'ERROR_MESSAGES', 'get_message', 'mask_national_id']
