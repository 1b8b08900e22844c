"""
라우트 공용 의존성

검증기, 주 이름 조회, 등록부 클라이언트를 한 곳에서 생성한다.
테스트에서는 app.dependency_overrides 로 교체한다.
"""
from typing import Optional

from fastapi import Depends, Request

from api.citizen_registry_client import CitizenRegistryClient
from core.config import Config
from validators import BatchValidator, ProvinceLookup, ThaiNationalIdValidator

# 상태가 없으므로 프로세스 전체에서 공유
validator = ThaiNationalIdValidator()
batch_validator = BatchValidator(validator)
province_lookup = ProvinceLookup()


def get_config(request: Request) -> Config:
    return request.app.state.config


def get_validator() -> ThaiNationalIdValidator:
    return validator


def get_batch_validator() -> BatchValidator:
    return batch_validator


def get_province_lookup() -> ProvinceLookup:
    return province_lookup


def get_registry_client(config: Config = Depends(get_config)) -> Optional[CitizenRegistryClient]:
    """등록부가 설정되지 않았으면 None (중복 확인 / 진위확인 생략)"""
    if not config.is_registry_configured():
        return None
    return CitizenRegistryClient(
        data_url=config.get_registry_url(),
        timeout=config.get_registry_timeout(),
    )
