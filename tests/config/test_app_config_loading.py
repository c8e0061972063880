import os
import tempfile
import textwrap
import unittest
from pathlib import Path
from unittest.mock import patch

from app_config import (
    AppConfigurationError,
    apply_environment_overrides,
    load_app_config,
    load_environment_overrides,
    resolve_config_path,
)
from app_config_schema import AppConfig


def _write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


class AppConfigLoadingTests(unittest.TestCase):
    def test_load_app_config_resolves_relative_paths(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            root = Path(temp_dir)
            config_path = root / "config.toml"
            _write_text(
                config_path,
                textwrap.dedent(
                    """
                    [auth]
                    client_secret_file = "secrets/client.json"
                    token_dir = "cache/tokens"
                    loopback_port = 9999
                    consent_timeout_seconds = 60

                    [api]
                    application_name = "my-calendar"

                    [output]
                    indent = 4

                    [logging]
                    level = "debug"
                    """
                ).strip(),
            )

            app_config = load_app_config(str(config_path))

            self.assertEqual(str(config_path), app_config.source_file)
            self.assertEqual(
                str((root / "secrets/client.json").resolve()),
                app_config.auth.client_secret_file,
            )
            self.assertEqual(
                str((root / "cache/tokens").resolve()),
                app_config.auth.token_dir,
            )
            self.assertEqual(9999, app_config.auth.loopback_port)
            self.assertEqual(60.0, app_config.auth.consent_timeout)
            self.assertEqual("my-calendar", app_config.api.application_name)
            self.assertEqual("calendar-cli-mock", app_config.api.mock_application_name)
            self.assertEqual(4, app_config.output.indent)
            self.assertEqual("DEBUG", app_config.logging.level)

    def test_missing_default_config_yields_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            cwd = Path(temp_dir)
            with patch("app_config.Path.cwd", return_value=cwd):
                app_config = load_app_config(environ={})

            self.assertEqual("", app_config.source_file)
            self.assertEqual(str((cwd / "credentials.json").resolve()), app_config.auth.client_secret_file)
            self.assertEqual(str((cwd / "tokens").resolve()), app_config.auth.token_dir)
            self.assertEqual(8888, app_config.auth.loopback_port)
            self.assertEqual(2, app_config.output.indent)

    def test_missing_explicit_config_is_an_error(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            missing = Path(temp_dir) / "nope.toml"
            with self.assertRaises(AppConfigurationError):
                load_app_config(str(missing))

    def test_load_app_config_rejects_secret_fields(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.toml"
            _write_text(config_path, '[auth]\nclient_secret = "shh"\n')

            with self.assertRaises(AppConfigurationError) as context:
                load_app_config(str(config_path))

            self.assertIn("auth.client_secret", str(context.exception))

    def test_load_app_config_rejects_invalid_values(self) -> None:
        for content in (
            "[auth]\nloopback_port = 70000\n",
            "[auth]\nconsent_timeout_seconds = -1\n",
            "[output]\nindent = true\n",
            "[logging]\nlevel = \"chatty\"\n",
            "auth = 3\n",
            "[auth\n",
        ):
            with self.subTest(content=content):
                with tempfile.TemporaryDirectory() as temp_dir:
                    config_path = Path(temp_dir) / "config.toml"
                    _write_text(config_path, content)
                    with self.assertRaises(AppConfigurationError):
                        load_app_config(str(config_path))

    def test_load_environment_overrides_normalizes_optional_values(self) -> None:
        overrides = load_environment_overrides(
            environ={
                "CALENDAR_CLI_CLIENT_SECRET_FILE": "  ",
                "CALENDAR_CLI_LOG_LEVEL": " info ",
            }
        )

        self.assertIsNone(overrides.client_secret_file)
        self.assertEqual("INFO", overrides.log_level)

    def test_apply_environment_overrides_overrides_client_secret(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            secret_path = Path(temp_dir) / "client.json"
            overrides = load_environment_overrides(
                environ={"CALENDAR_CLI_CLIENT_SECRET_FILE": str(secret_path)}
            )

            app_config = apply_environment_overrides(AppConfig(), overrides)

            self.assertEqual(str(secret_path.resolve()), app_config.auth.client_secret_file)
            self.assertEqual("WARNING", app_config.logging.level)

    def test_resolve_config_path_prefers_environment(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "custom.toml"
            with patch.dict(os.environ, {"CALENDAR_CLI_CONFIG_FILE": str(config_path)}):
                resolved, explicit = resolve_config_path()

            self.assertEqual(config_path, resolved)
            self.assertTrue(explicit)


if __name__ == "__main__":
    unittest.main()
