"""
핵심 설정 패키지
"""
from .config import Config

__all__ = [
    'Config',
]
