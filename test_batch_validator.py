"""
일괄 검증 테스트
- 0건 / 100건 / 101건 경계
- 항목별 오류 격리
"""
import unittest
from unittest.mock import Mock

from validators import BatchValidator, ErrorCode, ThaiNationalIdValidator


VALID_ID = "1905151012347"
OTHER_VALID_ID = "3901011000012"


class TestBatchValidator(unittest.TestCase):

    def setUp(self):
        self.batch = BatchValidator()

    def test_empty_batch_rejected(self):
        """빈 목록 거부 테스트"""
        for values in ([], None):
            result = self.batch.validate_batch(values)
            self.assertFalse(result.accepted)
            self.assertEqual(result.error, ErrorCode.MISSING_INPUT)
            self.assertEqual(result.items, [])

    def test_exactly_100_accepted(self):
        """100건 허용 테스트"""
        result = self.batch.validate_batch([VALID_ID] * 100)
        self.assertTrue(result.accepted)
        self.assertEqual(result.valid_count, 100)
        self.assertEqual(result.invalid_count, 0)

    def test_101_rejected_before_processing(self):
        """101건 처리 전 거부 테스트"""
        validator = Mock(spec=ThaiNationalIdValidator)
        batch = BatchValidator(validator)

        result = batch.validate_batch([VALID_ID] * 101)

        self.assertEqual(result.error, ErrorCode.TOO_MANY_ITEMS)
        self.assertEqual(result.items, [])
        validator.validate.assert_not_called()

    def test_rejection_logged_through_service_logger(self):
        """거부 로그가 서비스 로거로 전달되는지 테스트"""
        with self.assertLogs('NationalIdService', level='WARNING') as logs:
            self.batch.validate_batch([VALID_ID] * 101)

        self.assertEqual(logs.records[0].name, 'NationalIdService.validators.batch_validator')
        self.assertIn('101', logs.output[0])

    def test_one_malformed_among_100(self):
        """100건 중 형식 오류 1건 테스트"""
        values = [VALID_ID] * 99 + ["12345"]
        result = self.batch.validate_batch(values)

        self.assertTrue(result.accepted)
        self.assertEqual(result.valid_count, 99)
        self.assertEqual(result.invalid_count, 1)
        self.assertEqual(result.items[-1].errors, (ErrorCode.INVALID_FORMAT,))

    def test_input_order_preserved(self):
        """입력 순서 유지 테스트"""
        values = [OTHER_VALID_ID, "12345", "1905151012348", VALID_ID]
        result = self.batch.validate_batch(values)

        self.assertEqual(
            [item.normalized_id for item in result.items],
            [OTHER_VALID_ID, "12345", "1905151012348", VALID_ID],
        )
        self.assertEqual(
            [item.errors for item in result.items],
            [(), (ErrorCode.INVALID_FORMAT,), (ErrorCode.INVALID_CHECKSUM,), ()],
        )
        self.assertEqual(result.summary(), {"total": 4, "valid": 2, "invalid": 2})

    def test_non_text_item_isolated(self):
        """문자열이 아닌 항목 격리 테스트"""
        result = self.batch.validate_batch([VALID_ID, 1905151012347, None, OTHER_VALID_ID])

        self.assertEqual(len(result.items), 4)
        self.assertEqual(result.items[1].errors, (ErrorCode.UNKNOWN_ERROR,))
        self.assertIsNone(result.items[1].normalized_id)
        # None 은 빈 입력과 같이 형식 오류
        self.assertEqual(result.items[2].errors, (ErrorCode.INVALID_FORMAT,))
        self.assertEqual(result.valid_count, 2)

    def test_unexpected_fault_isolated(self):
        """항목 예외 격리 테스트"""
        real = ThaiNationalIdValidator()

        def flaky(value, **options):
            if value == "boom":
                raise RuntimeError("internal fault")
            return real.validate(value, **options)

        validator = Mock(spec=ThaiNationalIdValidator)
        validator.validate.side_effect = flaky
        batch = BatchValidator(validator)

        result = batch.validate_batch([VALID_ID, "boom", OTHER_VALID_ID])

        self.assertEqual(result.valid_count, 2)
        self.assertEqual(result.invalid_count, 1)
        self.assertFalse(result.items[1].overall_valid)
        self.assertEqual(result.items[1].errors, (ErrorCode.UNKNOWN_ERROR,))

    def test_no_birth_date_cross_check(self):
        """일괄 검증 생년월일 미비교 테스트"""
        validator = Mock(spec=ThaiNationalIdValidator)
        validator.validate.return_value = ThaiNationalIdValidator().validate(VALID_ID)
        BatchValidator(validator).validate_batch([VALID_ID])

        validator.validate.assert_called_once_with(VALID_ID, check_checksum=True, extract_info=True)


if __name__ == "__main__":
    unittest.main()
