# tests/test_config.py
import os
import tempfile
import unittest

from termhost import Config, get_config
from termhost.config import DEFAULT_CONFIG_FILE


class TestConfig(unittest.TestCase):
    def tearDown(self):
        get_config().reload(DEFAULT_CONFIG_FILE)

    def _write(self, text):
        handle, path = tempfile.mkstemp(suffix=".yaml")
        with os.fdopen(handle, "w", encoding="utf-8") as fh:
            fh.write(text)
        self.addCleanup(os.remove, path)
        return path

    def test_singleton(self):
        self.assertIs(Config(), get_config())

    def test_builtin_defaults(self):
        config = get_config()
        config.reload("does-not-exist.yaml")
        self.assertEqual(config.source, "defaults")
        self.assertIsNone(config.resolved_config_path)
        self.assertEqual(config.get("log_level"), "WARNING")
        self.assertEqual(config.get_nested("defaults.box.width"), 20)
        self.assertEqual(config.get_nested("defaults.nothing.here", "fallback"), "fallback")
        self.assertEqual(config.get_nested("", "fallback"), "fallback")

    def test_file_is_merged_over_defaults(self):
        path = self._write("log_level: DEBUG\ndefaults:\n  input:\n    width: 40\n")
        config = get_config()
        config.reload(path)
        self.assertEqual(config.source, "file")
        self.assertEqual(config.get("log_level"), "DEBUG")
        self.assertEqual(config.get_nested("defaults.input.width"), 40)
        self.assertEqual(config.get_nested("defaults.input.height"), 3)
        self.assertEqual(config.get_nested("defaults.box.width"), 20)

    def test_as_dict_is_a_copy(self):
        config = get_config()
        snapshot = config.as_dict()
        snapshot["defaults"]["box"]["width"] = 999
        self.assertEqual(config.get_nested("defaults.box.width"), 20)

    def test_non_mapping_file_is_rejected(self):
        path = self._write("- just\n- a list\n")
        with self.assertRaises(ValueError):
            get_config().reload(path)


if __name__ == "__main__":
    unittest.main()
