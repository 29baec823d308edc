import json
import tempfile
import unittest
from pathlib import Path

from pdfsalvage.config import DEFAULT_CONFIG, BaseConfig


class TestConfig(unittest.TestCase):
    def setUp(self) -> None:
        self.temp_dir = tempfile.TemporaryDirectory()
        self.path = Path(self.temp_dir.name) / 'pdfsalvage' / 'config.json'

    def tearDown(self) -> None:
        self.temp_dir.cleanup()

    def test_defaults(self) -> None:
        config = BaseConfig(self.path, DEFAULT_CONFIG)
        self.assertEqual(config['min_length'], 100)
        self.assertEqual(config['max_size'], 10 * 1024 * 1024)
        self.assertFalse(config['inflate_streams'])
        self.assertIsNone(config.get('missing'))

    def test_file_overrides_defaults(self) -> None:
        self.path.parent.mkdir(parents=True)
        self.path.write_text(json.dumps({'min_length': 250}))
        config = BaseConfig(self.path, DEFAULT_CONFIG)
        self.assertEqual(config['min_length'], 250)
        self.assertEqual(config['max_size'], DEFAULT_CONFIG['max_size'])

    def test_set_persists(self) -> None:
        config = BaseConfig(self.path, DEFAULT_CONFIG)
        config['inflate_streams'] = True
        self.assertTrue(json.loads(self.path.read_text())['inflate_streams'])
        self.assertTrue(BaseConfig(self.path, DEFAULT_CONFIG)['inflate_streams'])
        self.assertFalse(DEFAULT_CONFIG['inflate_streams'])
