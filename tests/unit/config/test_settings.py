"""
Тесты для конфигурации PCM Explorer.
"""

from pcm_explorer.config.settings import EXPLORER_CONFIG, get_explorer_config, validate_config


class TestExplorerConfig:
    """Тесты для get_explorer_config и validate_config."""

    def test_defaults(self):
        config = get_explorer_config(env={})

        assert config == EXPLORER_CONFIG
        assert config is not EXPLORER_CONFIG
        assert validate_config(config) == []

    def test_environment_overrides(self):
        """Тест переопределения переменными окружения."""
        config = get_explorer_config(env={
            "PCM_CATALOG_PATH": "data/other.csv",
            "PCM_DEFAULT_PROPERTY": "thermal-conductivity",
            "PCM_LOG_LEVEL": "debug",
            "PCM_HTTP_TIMEOUT": "2.5",
        })

        assert config["pcm_catalog_path"] == "data/other.csv"
        assert config["default_property"] == "thermal-conductivity"
        assert config["log_level"] == "DEBUG"
        assert config["http_timeout_s"] == 2.5
        assert config["property_data_path"] == EXPLORER_CONFIG["property_data_path"]

    def test_empty_variables_are_ignored(self):
        config = get_explorer_config(env={"PCM_CATALOG_PATH": ""})

        assert config["pcm_catalog_path"] == EXPLORER_CONFIG["pcm_catalog_path"]

    def test_validate_config_errors(self):
        """Тест обнаружения некорректных значений."""
        config = get_explorer_config(env={})
        config.update(delimiter=";;", log_level="LOUD", http_timeout_s=0, pcm_catalog_path="")

        errors = validate_config(config)

        assert len(errors) == 4

    def test_unparseable_timeout_reported_by_validation(self):
        """Тест: нечисловой PCM_HTTP_TIMEOUT не падает, а попадает в список ошибок."""
        config = get_explorer_config(env={"PCM_HTTP_TIMEOUT": "abc"})

        assert config["http_timeout_s"] == "abc"
        assert validate_config(config) == ["http_timeout_s должен быть положительным числом"]
