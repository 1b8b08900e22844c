"""
설정 관리

[우선순위] 환경 변수 > config.json > 기본값

    TIMEBANK_REGISTRY_URL      시민 등록부 데이터 URL
    TIMEBANK_REGISTRY_TIMEOUT  등록부 요청 타임아웃 (초)
    TIMEBANK_LOG_FILE          로그 파일 경로
    TIMEBANK_HOST / TIMEBANK_PORT  웹 서버 주소
"""
import json
import os
from typing import Any, Dict, Optional

from utils.logger import logger


DEFAULT_REGISTRY_URL = (
    'https://pub-f1ab9efe03eb4ce7afd952fc03688236.r2.dev/mock_thai_citizens_with_criminal.json'
)

DEFAULTS = {
    'registry_url': DEFAULT_REGISTRY_URL,
    'registry_timeout': 10,
    'log_file': 'national_id_service.log',
    'host': '127.0.0.1',
    'port': 8000,
}

ENV_KEYS = {
    'registry_url': 'TIMEBANK_REGISTRY_URL',
    'registry_timeout': 'TIMEBANK_REGISTRY_TIMEOUT',
    'log_file': 'TIMEBANK_LOG_FILE',
    'host': 'TIMEBANK_HOST',
    'port': 'TIMEBANK_PORT',
}


class Config:
    """서비스 설정"""

    def __init__(self, config_path: str = None):
        if config_path is None:
            # 기본 경로: 프로그램 폴더 내 config.json
            base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
            config_path = os.path.join(base_dir, 'config.json')

        self.config_path = config_path
        self.values: Dict[str, Any] = dict(DEFAULTS)
        self.load()

    def load(self):
        """설정 파일 + 환경 변수 로드"""
        try:
            if os.path.exists(self.config_path):
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
                self.values.update({k: v for k, v in data.items() if k in DEFAULTS})
                logger.info(f"설정 파일 로드됨: {self.config_path}")
        except (OSError, ValueError) as e:
            logger.warning(f"설정 파일 로드 실패, 기본값 사용: {e}")

        for key, env_name in ENV_KEYS.items():
            env_value = os.environ.get(env_name)
            if env_value is not None:
                self.values[key] = env_value

    def _get(self, key: str) -> Any:
        return self.values.get(key, DEFAULTS[key])

    def _get_number(self, key: str, cast):
        value = self._get(key)
        try:
            return cast(value)
        except (TypeError, ValueError):
            logger.warning(f"잘못된 설정값 {key}={value!r}, 기본값 사용")
            return DEFAULTS[key]

    def get_registry_url(self) -> Optional[str]:
        url = self._get('registry_url')
        return url or None

    def get_registry_timeout(self) -> float:
        return self._get_number('registry_timeout', float)

    def is_registry_configured(self) -> bool:
        return bool(self.get_registry_url())

    def get_log_file(self) -> str:
        return self._get('log_file')

    def get_host(self) -> str:
        return self._get('host')

    def get_port(self) -> int:
        return self._get_number('port', int)
