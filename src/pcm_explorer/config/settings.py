"""
Конфигурация PCM Explorer.

Содержит пути к исходным таблицам, свойство по умолчанию и параметры
логирования. Значения можно переопределить переменными окружения
(в том числе из файла .env).
"""

import os
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

EXPLORER_CONFIG: Dict[str, Any] = {
    # Исходные таблицы
    "pcm_catalog_path": "rawdata/pcms.csv",
    "property_data_path": "documentation/property_data.csv",
    "delimiter": ",",

    # Свойство, выбранное в интерфейсе по умолчанию
    "default_property": "solid-specific-heat",

    # Логирование
    "logs_dir": "logs/sessions",
    "log_level": "INFO",

    # Таймаут загрузки таблиц по HTTP, секунды
    "http_timeout_s": 10.0,
}

# Переменная окружения -> ключ конфигурации
ENV_OVERRIDES: Dict[str, str] = {
    "PCM_CATALOG_PATH": "pcm_catalog_path",
    "PROPERTY_DATA_PATH": "property_data_path",
    "PCM_DEFAULT_PROPERTY": "default_property",
    "PCM_LOGS_DIR": "logs_dir",
    "PCM_LOG_LEVEL": "log_level",
    "PCM_HTTP_TIMEOUT": "http_timeout_s",
}

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}

DEFAULT_PROPERTY: str = EXPLORER_CONFIG["default_property"]


def get_explorer_config(
    env: Optional[Dict[str, str]] = None, use_dotenv: bool = True
) -> Dict[str, Any]:
    """
    Получить копию конфигурации с учётом переменных окружения.

    Args:
        env: Словарь переменных окружения (по умолчанию os.environ)
        use_dotenv: Загрузить .env перед чтением окружения

    Returns:
        Словарь конфигурации
    """
    if env is None:
        if use_dotenv:
            load_dotenv()
        env = dict(os.environ)

    config = EXPLORER_CONFIG.copy()
    for variable, key in ENV_OVERRIDES.items():
        value = env.get(variable)
        if not value:
            continue
        if key == "http_timeout_s":
            try:
                config[key] = float(value)
            except ValueError:
                config[key] = value
        elif key == "log_level":
            config[key] = value.upper()
        else:
            config[key] = value

    return config


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Валидировать конфигурацию.

    Returns:
        Список ошибок (пустой если конфигурация корректна)
    """
    errors = []

    for key in ("pcm_catalog_path", "property_data_path", "default_property"):
        if not isinstance(config.get(key), str) or not config.get(key):
            errors.append(f"{key} должен быть непустой строкой")

    if not isinstance(config.get("delimiter"), str) or len(config.get("delimiter", "")) != 1:
        errors.append("delimiter должен быть одним символом")

    if config.get("log_level") not in VALID_LOG_LEVELS:
        errors.append(f"log_level должен быть одним из {sorted(VALID_LOG_LEVELS)}")

    timeout = config.get("http_timeout_s")
    if not isinstance(timeout, (int, float)) or timeout <= 0:
        errors.append("http_timeout_s должен быть положительным числом")

    return errors
