"""
설정 로드 테스트
"""
import json
import os
import tempfile
import unittest
from unittest.mock import patch

from core.config import DEFAULT_REGISTRY_URL, Config


class TestConfig(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, 'config.json')

    def tearDown(self):
        self.tmpdir.cleanup()

    def _write(self, content: str):
        with open(self.path, 'w', encoding='utf-8') as f:
            f.write(content)

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults_without_file(self):
        """설정 파일 없을 때 기본값 테스트"""
        config = Config(self.path)
        self.assertEqual(config.get_registry_url(), DEFAULT_REGISTRY_URL)
        self.assertEqual(config.get_registry_timeout(), 10.0)
        self.assertTrue(config.is_registry_configured())
        self.assertEqual(config.get_port(), 8000)

    @patch.dict(os.environ, {}, clear=True)
    def test_file_values(self):
        """설정 파일 값 로드 테스트"""
        self._write(json.dumps({
            'registry_url': 'https://registry.example/data.json',
            'registry_timeout': 3,
            'unknown_key': 'ignored',
        }))
        config = Config(self.path)
        self.assertEqual(config.get_registry_url(), 'https://registry.example/data.json')
        self.assertEqual(config.get_registry_timeout(), 3.0)
        self.assertNotIn('unknown_key', config.values)

    def test_env_overrides_file(self):
        """환경 변수 우선 적용 테스트"""
        self._write(json.dumps({'registry_url': 'https://file.example', 'port': 9000}))
        env = {'TIMEBANK_REGISTRY_URL': 'https://env.example', 'TIMEBANK_PORT': '9100'}
        with patch.dict(os.environ, env, clear=True):
            config = Config(self.path)
        self.assertEqual(config.get_registry_url(), 'https://env.example')
        self.assertEqual(config.get_port(), 9100)

    def test_empty_registry_url_disables_registry(self):
        """빈 등록부 URL 비활성화 테스트"""
        with patch.dict(os.environ, {'TIMEBANK_REGISTRY_URL': ''}, clear=True):
            config = Config(self.path)
        self.assertIsNone(config.get_registry_url())
        self.assertFalse(config.is_registry_configured())

    @patch.dict(os.environ, {}, clear=True)
    def test_broken_file_uses_defaults(self):
        """손상된 설정 파일 기본값 사용 테스트"""
        self._write('{not json')
        config = Config(self.path)
        self.assertEqual(config.get_registry_url(), DEFAULT_REGISTRY_URL)

    def test_invalid_number_uses_default(self):
        """잘못된 숫자 설정 기본값 테스트"""
        with patch.dict(os.environ, {'TIMEBANK_REGISTRY_TIMEOUT': 'soon'}, clear=True):
            config = Config(self.path)
        self.assertEqual(config.get_registry_timeout(), 10)


if __name__ == "__main__":
    unittest.main()
