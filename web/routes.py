"""
신분증 번호 검증 API

    POST /api/auth/validate-national-id     단건 검증 (+ 중복 확인, 진위확인)
    GET  /api/auth/national-id-info/{id}    정보 추출 (검증 없이)
    POST /api/auth/validate-national-ids    일괄 검증 (최대 100건)

중복 확인 / 진위확인은 부가 기능이다. 등록부 조회가 실패해도 검증 응답은
성공으로 반환하고 해당 필드만 생략한다.
예상치 못한 오류는 엔드포인트마다 500 INTERNAL_ERROR 로 응답한다.
"""
from contextlib import contextmanager
from typing import Any, Callable, Dict, Optional

from fastapi import APIRouter, Depends

from api.citizen_registry_client import CitizenRegistryClient, RegistryError
from utils.constants import (
    BATCH_MISSING_MESSAGE,
    DUPLICATE_WARNING,
    SUCCESS_MESSAGE,
    get_message,
    mask_national_id,
)
from utils.logger import get_logger
from validators import (
    BatchValidator,
    ErrorCode,
    ProvinceLookup,
    ThaiNationalIdValidator,
    normalize,
)

from .deps import get_batch_validator, get_province_lookup, get_registry_client, get_validator
from .errors import ApiError, success_response
from .schemas import BatchValidateRequest, ValidateNationalIdRequest

logger = get_logger(__name__)

router = APIRouter(prefix="/api/auth", tags=["national-id"])


@contextmanager
def internal_error_guard(label: str):
    """ApiError 는 그대로, 그 외 예외는 500 INTERNAL_ERROR 로 변환"""
    try:
        yield
    except ApiError:
        raise
    except Exception:
        logger.exception(f"{label} 오류")
        raise ApiError(500, "INTERNAL_ERROR")


def _best_effort(label: str, call: Callable[[], Any]) -> Optional[Any]:
    """등록부 조회 (실패 시 None)"""
    try:
        return call()
    except RegistryError as e:
        logger.warning(f"{label} 실패, 생략: {e}")
    except Exception:
        logger.exception(f"{label} 중 예상치 못한 오류, 생략")
    return None


def _require_13_digits(national_id: Optional[str]) -> str:
    if national_id is None or not national_id.strip():
        raise ApiError(400, ErrorCode.MISSING_INPUT.value)

    digits = normalize(national_id)
    if len(digits) != ThaiNationalIdValidator.LENGTH:
        raise ApiError(400, ErrorCode.INVALID_FORMAT.value)
    return digits


@router.post("/validate-national-id")
def validate_national_id(
    payload: ValidateNationalIdRequest,
    validator: ThaiNationalIdValidator = Depends(get_validator),
    registry: Optional[CitizenRegistryClient] = Depends(get_registry_client),
):
    """실시간 신분증 번호 검증"""
    with internal_error_guard("신분증 번호 검증"):
        digits = _require_13_digits(payload.nationalId)
        verdict = validator.validate(digits, birth_date=payload.birthDate)

        if not verdict.overall_valid:
            logger.info(f"검증 실패 {mask_national_id(digits)}: {[c.value for c in verdict.errors]}")
            raise ApiError(
                400,
                "INVALID_NATIONAL_ID",
                errors=[code.value for code in verdict.errors],
                messages=[get_message(code) for code in verdict.errors],
                details={
                    "format": verdict.format_valid,
                    "checksum": verdict.checksum_valid,
                    "birthDate": verdict.birth_date_matches,
                },
            )

        result = verdict.to_dict()
        data: Dict[str, Any] = {
            "nationalId": result["nationalId"],
            "formatted": result["formatted"],
            "extractedInfo": result["extractedInfo"],
            "validation": result["validation"],
        }

        if payload.checkDuplicates and registry is not None:
            duplicate = _best_effort("중복 확인", lambda: registry.lookup_by_id(digits))
            if duplicate is not None:
                if duplicate["exists"]:
                    duplicate["warning"] = DUPLICATE_WARNING
                data["duplicateCheck"] = duplicate

        if payload.verifyExternal and registry is not None:
            verification = _best_effort("진위확인", lambda: registry.verify(digits))
            if verification is not None:
                data["externalVerification"] = verification

        return success_response(data, message=SUCCESS_MESSAGE)


@router.get("/national-id-info/{national_id}")
def get_national_id_info(
    national_id: str,
    validator: ThaiNationalIdValidator = Depends(get_validator),
    provinces: ProvinceLookup = Depends(get_province_lookup),
):
    """신분증 번호 정보 추출 (체크섬 검증 없음)"""
    with internal_error_guard("신분증 번호 정보 추출"):
        digits = _require_13_digits(national_id)

        birth_info = validator.extract_birth_date(digits)
        identity_info = validator.extract_identity_info(digits)

        if not birth_info.extractable or not identity_info.extractable:
            raise ApiError(400, ErrorCode.UNEXTRACTABLE.value)

        if not birth_info.valid:
            raise ApiError(
                400,
                "INVALID_NATIONAL_ID",
                details={"birthDate": birth_info.to_dict()},
            )

        return success_response({
            "nationalId": digits,
            "formatted": validator.format(digits),
            "birthDate": birth_info.to_dict(),
            "nationalIdInfo": identity_info.to_dict(),
            "provinceName": provinces.get_name(identity_info.province_code),
        })


@router.post("/validate-national-ids")
def validate_national_ids(
    payload: BatchValidateRequest,
    batch: BatchValidator = Depends(get_batch_validator),
    registry: Optional[CitizenRegistryClient] = Depends(get_registry_client),
):
    """일괄 검증 (항목별 독립 처리)"""
    with internal_error_guard("일괄 검증"):
        result = batch.validate_batch(payload.nationalIds)

        if not result.accepted:
            message = BATCH_MISSING_MESSAGE if result.error == ErrorCode.MISSING_INPUT else None
            raise ApiError(400, result.error.value, message=message)

        results = []
        for verdict in result.items:
            entry = verdict.to_dict()
            results.append({
                "nationalId": entry["nationalId"],
                "isValid": entry["isValid"],
                "errors": entry["errors"],
                "extractedInfo": entry["extractedInfo"],
            })

        valid_ids = [v.normalized_id for v in result.items if v.overall_valid]

        if valid_ids and registry is not None:
            if payload.options.checkDuplicates:
                duplicates = _best_effort("일괄 중복 확인", lambda: registry.lookup_many(valid_ids))
                _attach(results, "duplicateCheck", duplicates)

            if payload.options.verifyExternal:
                verifications = _best_effort("일괄 진위확인", lambda: registry.verify_many(valid_ids))
                _attach(results, "externalVerification", verifications)

        logger.info(f"일괄 검증 완료: {result.summary()}")
        return success_response({
            "results": results,
            "summary": result.summary(),
        })


def _attach(results, key: str, by_id: Optional[Dict[str, Any]]):
    """유효 항목에만 등록부 조회 결과 추가"""
    if by_id is None:
        return
    for entry in results:
        if entry["isValid"] and entry["nationalId"] in by_id:
            entry[key] = by_id[entry["nationalId"]]
