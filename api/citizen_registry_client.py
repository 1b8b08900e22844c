"""
시민 등록부 클라이언트
중복 등록 확인 / 외부 진위확인 (범죄 기록 포함)

등록부 데이터 형식:
    {
        "success": true,
        "data": [
            {"id": 1, "national_id": "1905151012347", "first_name": "...", ...,
             "criminal_record": {...}}
        ]
    }
"""
import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import requests

from utils.constants import mask_national_id
from utils.logger import get_logger

logger = get_logger(__name__)


class RegistryError(Exception):
    """등록부 조회 관련 예외"""

    def __init__(self, code: str, message: str, response: dict = None):
        self.code = code
        self.message = message
        self.response = response or {}
        super().__init__(f"[{code}] {message}")


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class CitizenRegistryClient:
    """시민 등록부 클라이언트"""

    SOURCE_NAME = "mock_citizens_database"

    def __init__(self, data_url: str, timeout: float = 10):
        """
        Args:
            data_url: 등록부 JSON 데이터 URL
            timeout: 요청 타임아웃 (초)
        """
        self.data_url = data_url
        self.timeout = timeout

    def fetch_citizens(self) -> List[Dict[str, Any]]:
        """
        등록부 전체 조회

        Returns:
            시민 레코드 목록

        Raises:
            RegistryError: 네트워크 오류, HTTP 오류, 응답 형식 오류
        """
        try:
            response = requests.get(self.data_url, timeout=self.timeout)
        except requests.exceptions.Timeout:
            logger.error("등록부 요청 타임아웃")
            raise RegistryError("TIMEOUT", "등록부 요청 시간 초과")
        except requests.exceptions.RequestException as e:
            logger.error(f"등록부 요청 오류: {str(e)}")
            raise RegistryError("NETWORK_ERROR", f"네트워크 오류: {str(e)}")

        if response.status_code != 200:
            error_msg = f"등록부 조회 실패: {response.status_code}"
            logger.error(error_msg)
            raise RegistryError("HTTP_ERROR", error_msg)

        try:
            payload = response.json()
        except (json.JSONDecodeError, ValueError):
            logger.error("등록부 응답 파싱 오류")
            raise RegistryError("PARSE_ERROR", "등록부 응답 파싱 실패")

        if not isinstance(payload, dict) or not payload.get("success") \
                or not isinstance(payload.get("data"), list):
            raise RegistryError("BAD_PAYLOAD", "등록부 응답 형식 오류", payload if isinstance(payload, dict) else None)

        return payload["data"]

    def find_citizen(self, national_id: str) -> Optional[Dict[str, Any]]:
        for citizen in self.fetch_citizens():
            if citizen.get("national_id") == national_id:
                return citizen
        return None

    @staticmethod
    def _citizen_info(citizen: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "firstName": citizen.get("first_name"),
            "lastName": citizen.get("last_name"),
            "dateOfBirth": citizen.get("date_of_birth"),
            "gender": citizen.get("gender"),
            "address": citizen.get("address"),
            "contact": citizen.get("contact"),
        }

    def lookup_by_id(self, national_id: str) -> Dict[str, Any]:
        """
        중복 등록 확인

        Returns:
            {
                "exists": bool,
                "userId": 등록된 사용자 ID 또는 None,
                "registeredAt": 조회 시각 또는 None,
                "citizenInfo": 시민 정보 (criminalRecord 포함) 또는 None
            }
        """
        logger.info(f"중복 확인 요청: {mask_national_id(national_id)}")
        return self._duplicate_result(self.find_citizen(national_id))

    def lookup_many(self, national_ids: List[str]) -> Dict[str, Dict[str, Any]]:
        """중복 등록 일괄 확인 (등록부는 한 번만 조회)"""
        logger.info(f"중복 일괄 확인 요청: {len(national_ids)}건")
        citizens = {c.get("national_id"): c for c in self.fetch_citizens()}
        return {nid: self._duplicate_result(citizens.get(nid)) for nid in national_ids}

    def _duplicate_result(self, citizen: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        if citizen is None:
            return {
                "exists": False,
                "userId": None,
                "registeredAt": None,
                "citizenInfo": None,
            }

        info = self._citizen_info(citizen)
        info["criminalRecord"] = citizen.get("criminal_record")
        return {
            "exists": True,
            "userId": citizen.get("id"),
            "registeredAt": _now_iso(),
            "citizenInfo": info,
        }

    def verify(self, national_id: str) -> Dict[str, Any]:
        """
        외부 진위확인 (범죄 기록 조회)

        Returns:
            {
                "verified": bool,
                "source": str,
                "verifiedAt": str,
                "details": {"status": "verified" | "not_found", "message": str, ...}
            }
        """
        logger.info(f"진위확인 요청: {mask_national_id(national_id)}")
        return self._verification_result(self.find_citizen(national_id))

    def verify_many(self, national_ids: List[str]) -> Dict[str, Dict[str, Any]]:
        """외부 진위확인 일괄 처리 (등록부는 한 번만 조회)"""
        logger.info(f"진위확인 일괄 요청: {len(national_ids)}건")
        citizens = {c.get("national_id"): c for c in self.fetch_citizens()}
        return {nid: self._verification_result(citizens.get(nid)) for nid in national_ids}

    def _verification_result(self, citizen: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        if citizen is None:
            return {
                "verified": False,
                "source": self.SOURCE_NAME,
                "verifiedAt": _now_iso(),
                "details": {
                    "status": "not_found",
                    "message": "National ID not found in citizens database",
                },
            }

        return {
            "verified": True,
            "source": self.SOURCE_NAME,
            "verifiedAt": _now_iso(),
            "details": {
                "status": "verified",
                "message": "National ID verified with citizens database",
                "criminalRecord": citizen.get("criminal_record"),
                "citizenInfo": self._citizen_info(citizen),
            },
        }
