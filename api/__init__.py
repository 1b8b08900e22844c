"""
외부 API 클라이언트 패키지
"""
from .citizen_registry_client import CitizenRegistryClient, RegistryError

__all__ = ['CitizenRegistryClient', 'RegistryError']
