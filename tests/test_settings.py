"""
Tests para la configuración basada en entorno.
"""
import unittest
from unittest.mock import patch

from diffsplice.config.settings import AppSettings


class TestAppSettings(unittest.TestCase):
    """Pruebas de AppSettings."""

    def test_defaults(self):
        """Sin variables de entorno se usan los valores por defecto."""
        with patch.dict("os.environ", {}, clear=True):
            s = AppSettings(_env_file=None)
        self.assertEqual(s.environment, "development")
        self.assertEqual(s.log_level, "INFO")
        self.assertFalse(s.validate_hunk_counts)
        self.assertEqual(s.port, 8000)

    def test_env_overrides(self):
        """Las variables DIFFSPLICE_* sobreescriben la configuración."""
        env = {
            "DIFFSPLICE_ENV": "production",
            "DIFFSPLICE_LOG_LEVEL": "DEBUG",
            "DIFFSPLICE_VALIDATE_HUNK_COUNTS": "true",
            "DIFFSPLICE_PORT": "9000",
        }
        with patch.dict("os.environ", env, clear=True):
            s = AppSettings(_env_file=None)
        self.assertEqual(s.environment, "production")
        self.assertEqual(s.log_level, "DEBUG")
        self.assertTrue(s.validate_hunk_counts)
        self.assertEqual(s.port, 9000)

    def test_environment_by_field_name(self):
        """environment también se acepta como argumento del constructor."""
        with patch.dict("os.environ", {}, clear=True):
            s = AppSettings(_env_file=None, environment="staging")
        self.assertEqual(s.environment, "staging")

    def test_env_file(self):
        """Un archivo .env también se lee."""
        import tempfile
        from pathlib import Path

        with tempfile.TemporaryDirectory() as d:
            env_file = Path(d) / ".env"
            env_file.write_text("DIFFSPLICE_HOST=0.0.0.0\n", encoding="utf-8")
            with patch.dict("os.environ", {}, clear=True):
                s = AppSettings(_env_file=str(env_file))
        self.assertEqual(s.host, "0.0.0.0")


if __name__ == "__main__":
    unittest.main()
